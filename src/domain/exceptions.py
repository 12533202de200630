"""Base exception classes for the affiliation domain layer."""


class AffiliationError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    Validation failures are NOT exceptions - they are returned as
    ValidationErrors maps by the step validation engine.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
