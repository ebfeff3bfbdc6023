"""Configuration for ballotbox sessions."""

from ballotbox.config.session_config import (
    DEFAULT_SESSION_CONFIG,
    TEST_SESSION_CONFIG,
    SessionConfig,
)

__all__: list[str] = [
    "DEFAULT_SESSION_CONFIG",
    "TEST_SESSION_CONFIG",
    "SessionConfig",
]
