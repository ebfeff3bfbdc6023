"""Unit tests for the layer import boundary checker.

Verifies the layering rules of the ballotbox package:
- domain/ and config/ import nothing from other ballotbox layers
- application/ imports from domain/ only
- infrastructure/ imports from domain/ and application/
- bootstrap/ may import from every layer
"""

import ast
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))

from check_imports import (  # noqa: E402
    ALLOWED_IMPORTS,
    check_file_imports,
    check_import_boundaries,
    get_import_modules,
    main,
)


@pytest.fixture
def package_dir(tmp_path: Path) -> Iterator[Path]:
    """Create a temporary ballotbox package with every layer."""
    package = tmp_path / "ballotbox"
    package.mkdir()
    (package / "__init__.py").write_text("")
    for layer in ALLOWED_IMPORTS:
        (package / layer).mkdir()
        (package / layer / "__init__.py").write_text("")
    yield package


def _write(package_dir: Path, relative: str, source: str) -> Path:
    path = package_dir / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source)
    return path


class TestAllowedImports:
    """The rules table matches the documented layering."""

    def test_domain_imports_nothing(self) -> None:
        """Domain is the innermost layer."""
        assert ALLOWED_IMPORTS["domain"] == set()

    def test_application_imports_domain_only(self) -> None:
        """Application sees only domain."""
        assert ALLOWED_IMPORTS["application"] == {"domain"}

    def test_infrastructure_imports_inner_layers(self) -> None:
        """Infrastructure implements application ports."""
        assert ALLOWED_IMPORTS["infrastructure"] == {"domain", "application"}

    def test_bootstrap_imports_everything(self) -> None:
        """The composition root wires every layer."""
        assert ALLOWED_IMPORTS["bootstrap"] == {
            "domain",
            "application",
            "infrastructure",
            "config",
        }


class TestGetImportModules:
    """Tests for get_import_modules."""

    def test_from_import(self) -> None:
        """'from x import y' yields x."""
        node = ast.parse("from ballotbox.domain.models import Voter").body[0]
        assert isinstance(node, ast.ImportFrom)
        assert get_import_modules(node) == ["ballotbox.domain.models"]

    def test_import_with_several_names(self) -> None:
        """Every name of a plain import is checked."""
        node = ast.parse("import os, ballotbox.infrastructure").body[0]
        assert isinstance(node, ast.Import)
        assert get_import_modules(node) == ["os", "ballotbox.infrastructure"]

    def test_relative_import_skipped(self) -> None:
        """Relative imports stay inside their package."""
        node = ast.parse("from . import models").body[0]
        assert isinstance(node, ast.ImportFrom)
        assert get_import_modules(node) == []


class TestCheckFileImports:
    """Tests for check_file_imports."""

    def test_application_may_import_domain(self, package_dir: Path) -> None:
        """Inner imports are allowed."""
        path = _write(
            package_dir,
            "application/services/svc.py",
            "from ballotbox.domain.models import Voter\nimport structlog\n",
        )

        assert check_file_imports(path, package_dir) == []

    def test_application_may_not_import_infrastructure(self, package_dir: Path) -> None:
        """Outward imports are violations with their line number."""
        path = _write(
            package_dir,
            "application/services/svc.py",
            "import os\nfrom ballotbox.infrastructure.stubs import X\n",
        )

        violations = check_file_imports(path, package_dir)

        assert len(violations) == 1
        assert violations[0].line_number == 2
        assert violations[0].message == (
            "application layer cannot import from infrastructure"
        )

    def test_domain_may_not_import_config(self, package_dir: Path) -> None:
        """Domain does not read configuration."""
        path = _write(
            package_dir, "domain/models.py", "from ballotbox.config import SessionConfig\n"
        )

        assert len(check_file_imports(path, package_dir)) == 1

    def test_same_layer_allowed(self, package_dir: Path) -> None:
        """A layer may import itself."""
        path = _write(
            package_dir, "domain/models.py", "from ballotbox.domain.errors import X\n"
        )

        assert check_file_imports(path, package_dir) == []

    def test_bootstrap_allowed_everything(self, package_dir: Path) -> None:
        """The composition root is unrestricted."""
        path = _write(
            package_dir,
            "bootstrap/session.py",
            "from ballotbox.infrastructure.adapters import A\n"
            "from ballotbox.config import SessionConfig\n",
        )

        assert check_file_imports(path, package_dir) == []

    def test_other_packages_ignored(self, package_dir: Path) -> None:
        """Only ballotbox imports are checked."""
        path = _write(package_dir, "domain/models.py", "from src.infrastructure import X\n")

        assert check_file_imports(path, package_dir) == []


class TestCheckImportBoundaries:
    """Tests for the whole-package scan."""

    def test_nested_violation_found(self, package_dir: Path) -> None:
        """Files are scanned recursively."""
        _write(
            package_dir,
            "domain/models/deep/nested.py",
            "from ballotbox.application.ports import X\n",
        )

        violations = check_import_boundaries(package_dir)

        assert len(violations) == 1
        assert "nested.py" in violations[0].file_path

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A missing package yields no violations."""
        assert check_import_boundaries(tmp_path / "missing") == []

    def test_main_exit_codes(self, package_dir: Path) -> None:
        """main returns 0 when clean and 1 with violations."""
        assert main([str(package_dir)]) == 0

        _write(package_dir, "config/cfg.py", "import ballotbox.domain\n")

        assert main([str(package_dir)]) == 1

    def test_real_package_is_clean(self) -> None:
        """The shipped package respects its own layering."""
        assert check_import_boundaries(PROJECT_ROOT / "ballotbox") == []
