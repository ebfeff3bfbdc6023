"""Voting session configuration.

This module defines how a session is seeded and who administers it, with
environment variable overrides for hosts.

Environment Variables:
- BALLOTBOX_SEED_VOTERS: Comma-separated voters whitelisted at creation
  (default: voter-1,voter-2,voter-3)
- BALLOTBOX_ADMINISTRATORS: Comma-separated administrator identities
  (default: owner)
- BALLOTBOX_MAX_DESCRIPTION_LENGTH: Longest accepted proposal description
  (default: 1000)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_SEED_VOTERS: tuple[str, ...] = ("voter-1", "voter-2", "voter-3")
DEFAULT_ADMINISTRATORS: tuple[str, ...] = ("owner",)
DEFAULT_MAX_DESCRIPTION_LENGTH = 1_000


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_list_env(key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Get a comma-separated environment variable with default.

    Blank items are dropped, so "a,,b" reads as ("a", "b") and an empty
    value reads as an empty tuple.

    Args:
        key: Environment variable name.
        default: Default value if not set.

    Returns:
        Parsed identities or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class SessionConfig:
    """Configuration for one voting session.

    Attributes:
        seed_voters: Identities whitelisted and registered when the
            session is created. Default: three voters.
        administrator_ids: Identities allowed to run administrative
            operations. Default: a single "owner".
        max_description_length: Longest accepted proposal description.
            Default: 1000 characters.
    """

    seed_voters: tuple[str, ...] = DEFAULT_SEED_VOTERS
    administrator_ids: tuple[str, ...] = DEFAULT_ADMINISTRATORS
    max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if any(not voter_id.strip() for voter_id in self.seed_voters):
            raise ValueError("seed_voters must not contain blank identities")
        if len(set(self.seed_voters)) != len(self.seed_voters):
            raise ValueError(f"seed_voters must be unique, got {self.seed_voters}")
        if not self.administrator_ids:
            raise ValueError("administrator_ids must name at least one administrator")
        if any(not admin_id.strip() for admin_id in self.administrator_ids):
            raise ValueError("administrator_ids must not contain blank identities")
        if self.max_description_length < 1:
            raise ValueError(
                "max_description_length must be positive, "
                f"got {self.max_description_length}"
            )

    @classmethod
    def from_environment(cls) -> SessionConfig:
        """Create config from environment variables with defaults.

        Environment Variables:
            BALLOTBOX_SEED_VOTERS: Seeded voters (default: three voters)
            BALLOTBOX_ADMINISTRATORS: Administrators (default: owner)
            BALLOTBOX_MAX_DESCRIPTION_LENGTH: Description limit (default: 1000)

        Returns:
            SessionConfig with values from environment or defaults.

        Raises:
            ValueError: If the resulting values are invalid.
        """
        return cls(
            seed_voters=_get_list_env("BALLOTBOX_SEED_VOTERS", DEFAULT_SEED_VOTERS),
            administrator_ids=_get_list_env(
                "BALLOTBOX_ADMINISTRATORS", DEFAULT_ADMINISTRATORS
            ),
            max_description_length=_get_int_env(
                "BALLOTBOX_MAX_DESCRIPTION_LENGTH", DEFAULT_MAX_DESCRIPTION_LENGTH
            ),
        )


# Default config: three seeded voters, one administrator
DEFAULT_SESSION_CONFIG = SessionConfig()

# Testing config: empty whitelist so tests add exactly the voters they need
TEST_SESSION_CONFIG = SessionConfig(
    seed_voters=(),
    administrator_ids=("owner",),
    max_description_length=100,
)
