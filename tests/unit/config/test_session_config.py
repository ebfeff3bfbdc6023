"""Unit tests for SessionConfig.

Tests defaults, validation and environment overrides.
"""

from __future__ import annotations

import os
from dataclasses import FrozenInstanceError
from unittest.mock import patch

import pytest

from ballotbox.config.session_config import (
    DEFAULT_MAX_DESCRIPTION_LENGTH,
    DEFAULT_SESSION_CONFIG,
    TEST_SESSION_CONFIG,
    SessionConfig,
)


class TestSessionConfig:
    """Tests for SessionConfig dataclass."""

    def test_default_seeds_three_voters(self) -> None:
        """A default session starts with three registered voters."""
        assert len(DEFAULT_SESSION_CONFIG.seed_voters) == 3
        assert DEFAULT_SESSION_CONFIG.administrator_ids == ("owner",)

    def test_default_description_limit(self) -> None:
        """Descriptions are limited to 1000 characters by default."""
        assert SessionConfig().max_description_length == DEFAULT_MAX_DESCRIPTION_LENGTH
        assert DEFAULT_MAX_DESCRIPTION_LENGTH == 1_000

    def test_test_config_has_no_seeds(self) -> None:
        """The test config starts with an empty whitelist."""
        assert TEST_SESSION_CONFIG.seed_voters == ()

    def test_duplicate_seed_rejected(self) -> None:
        """Seeded identities must be unique."""
        with pytest.raises(ValueError, match="unique"):
            SessionConfig(seed_voters=("alice", "alice"))

    def test_blank_seed_rejected(self) -> None:
        """Seeded identities cannot be blank."""
        with pytest.raises(ValueError, match="blank"):
            SessionConfig(seed_voters=("alice", " "))

    def test_administrator_required(self) -> None:
        """A session needs at least one administrator."""
        with pytest.raises(ValueError, match="at least one administrator"):
            SessionConfig(administrator_ids=())

    @pytest.mark.parametrize("length", [0, -5])
    def test_non_positive_description_limit_rejected(self, length: int) -> None:
        """The description limit must be positive."""
        with pytest.raises(ValueError, match="max_description_length"):
            SessionConfig(max_description_length=length)

    def test_config_is_frozen(self) -> None:
        """Configuration cannot change after creation."""
        with pytest.raises(FrozenInstanceError):
            DEFAULT_SESSION_CONFIG.max_description_length = 5  # type: ignore[misc]


class TestFromEnvironment:
    """Tests for SessionConfig.from_environment."""

    def test_defaults_without_env_vars(self) -> None:
        """Unset variables fall back to the defaults."""
        with patch.dict(os.environ, {}, clear=True):
            config = SessionConfig.from_environment()

        assert config == SessionConfig()

    def test_reads_comma_separated_lists(self) -> None:
        """Identity lists are comma-separated with blanks dropped."""
        env = {
            "BALLOTBOX_SEED_VOTERS": "alice, bob,,carol ",
            "BALLOTBOX_ADMINISTRATORS": "owner,deputy",
        }
        with patch.dict(os.environ, env, clear=True):
            config = SessionConfig.from_environment()

        assert config.seed_voters == ("alice", "bob", "carol")
        assert config.administrator_ids == ("owner", "deputy")

    def test_empty_seed_list(self) -> None:
        """An empty value seeds no voters."""
        with patch.dict(os.environ, {"BALLOTBOX_SEED_VOTERS": ""}, clear=True):
            config = SessionConfig.from_environment()

        assert config.seed_voters == ()

    def test_reads_description_limit(self) -> None:
        """The description limit is read as an integer."""
        with patch.dict(
            os.environ, {"BALLOTBOX_MAX_DESCRIPTION_LENGTH": "280"}, clear=True
        ):
            config = SessionConfig.from_environment()

        assert config.max_description_length == 280

    def test_invalid_integer_uses_default(self) -> None:
        """Unparseable integers fall back to the default."""
        with patch.dict(
            os.environ, {"BALLOTBOX_MAX_DESCRIPTION_LENGTH": "lots"}, clear=True
        ):
            config = SessionConfig.from_environment()

        assert config.max_description_length == DEFAULT_MAX_DESCRIPTION_LENGTH

    def test_invalid_values_rejected(self) -> None:
        """Parsed values are still validated."""
        with patch.dict(os.environ, {"BALLOTBOX_ADMINISTRATORS": ","}, clear=True):
            with pytest.raises(ValueError):
                SessionConfig.from_environment()
