#!/usr/bin/env python3
"""Check ballotbox layer import boundaries.

Layering rules enforced over the ballotbox package:
- domain/: Voting rules and records, NO imports from other ballotbox layers
- application/: Ports and services, may import from domain/ only
- infrastructure/: Adapters and stubs, may import from domain/ and application/
- config/: Configuration dataclasses, NO imports from other ballotbox layers
- bootstrap/: Composition root, may import from every layer

Usage:
    python scripts/check_imports.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""
import ast
import sys
from pathlib import Path
from typing import NamedTuple

PACKAGE_NAME = "ballotbox"

# What each layer CAN import from (same-layer imports are always allowed)
ALLOWED_IMPORTS: dict[str, set[str]] = {
    "domain": set(),
    "application": {"domain"},
    "infrastructure": {"domain", "application"},
    "config": set(),
    "bootstrap": {"domain", "application", "infrastructure", "config"},
}


class Violation(NamedTuple):
    """One forbidden import."""

    file_path: str
    line_number: int
    message: str


def get_import_modules(node: ast.Import | ast.ImportFrom) -> list[str]:
    """Extract the absolute module names an import statement refers to.

    Relative imports are skipped; they cannot leave the importing package.
    """
    if isinstance(node, ast.ImportFrom):
        if node.level or node.module is None:
            return []
        return [node.module]
    return [alias.name for alias in node.names]


def get_file_layer(py_file: Path, package_dir: Path) -> str | None:
    """Determine the layer of a file inside the package.

    Args:
        py_file: Path to the Python file
        package_dir: Path to the ballotbox package directory

    Returns:
        The layer name, or None for files outside any layer
        (such as the package's own __init__.py)
    """
    try:
        parts = py_file.relative_to(package_dir).parts
    except ValueError:
        return None

    if len(parts) < 2:
        return None
    return parts[0] if parts[0] in ALLOWED_IMPORTS else None


def check_import(module: str, file_layer: str) -> str | None:
    """Check one imported module against the importing file's layer.

    Args:
        module: The imported module (e.g., "ballotbox.domain.models")
        file_layer: The layer the importing file belongs to

    Returns:
        Error message if the import crosses a forbidden boundary
    """
    module_parts = module.split(".")
    if module_parts[0] != PACKAGE_NAME or len(module_parts) < 2:
        return None

    target_layer = module_parts[1]
    if target_layer not in ALLOWED_IMPORTS or target_layer == file_layer:
        return None

    if target_layer not in ALLOWED_IMPORTS[file_layer]:
        return f"{file_layer} layer cannot import from {target_layer}"
    return None


def check_file_imports(py_file: Path, package_dir: Path) -> list[Violation]:
    """Check a single file for import boundary violations.

    Args:
        py_file: Path to the Python file to check
        package_dir: Path to the ballotbox package directory

    Returns:
        Every violation found in the file
    """
    file_layer = get_file_layer(py_file, package_dir)
    if file_layer is None:
        return []

    try:
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    except (SyntaxError, UnicodeDecodeError) as e:
        print(f"Warning: Could not parse {py_file}: {e}", file=sys.stderr)
        return []

    violations: list[Violation] = []
    for node in ast.walk(tree):
        if not isinstance(node, (ast.Import, ast.ImportFrom)):
            continue
        for module in get_import_modules(node):
            error_msg = check_import(module, file_layer)
            if error_msg:
                violations.append(Violation(str(py_file), node.lineno, error_msg))
    return violations


def check_import_boundaries(package_dir: Path) -> list[Violation]:
    """Check every Python file of the package for boundary violations."""
    if not package_dir.exists():
        print(
            f"Error: Package directory '{package_dir}' does not exist",
            file=sys.stderr,
        )
        return []

    violations: list[Violation] = []
    for py_file in sorted(package_dir.rglob("*.py")):
        violations.extend(check_file_imports(py_file, package_dir))
    return violations


def format_violations(violations: list[Violation]) -> str:
    """Format violations for human-readable output."""
    if not violations:
        return ""

    lines = ["Import boundary violations found:", ""]
    for violation in sorted(violations):
        lines.append(
            f"  {violation.file_path}:{violation.line_number}: {violation.message}"
        )
    lines.append("")
    lines.append(f"Total: {len(violations)} violation(s)")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        0 if no violations, 1 if violations found
    """
    args = sys.argv[1:] if argv is None else argv
    if args:
        package_dir = Path(args[0])
    else:
        package_dir = Path(__file__).parent.parent / PACKAGE_NAME

    violations = check_import_boundaries(package_dir)
    if violations:
        print(format_violations(violations))
        return 1

    print("No import boundary violations found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
