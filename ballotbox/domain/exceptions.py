"""Base exception classes for the ballotbox domain layer."""


class BallotBoxError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This lets a host process catch every caller-correctable failure
    of the voting core with a single except clause.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
