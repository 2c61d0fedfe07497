"""Error types and error codes for the power strip.

Classes:
    - OutletErrorCode: Enum of error codes for categorizing outlet errors
    - OutletError: Base exception for all outlet-related errors
"""

from enum import Enum


class OutletErrorCode(str, Enum):
    """Error codes for outlet operations.

    INVALID_CHOICE and UNKNOWN_OUTLET come from user input and are
    recoverable. The others indicate a wiring or configuration mistake.
    """

    # Input errors
    INVALID_CHOICE = "INVALID_CHOICE"
    UNKNOWN_OUTLET = "UNKNOWN_OUTLET"

    # Wiring errors
    DUPLICATE_CHOICE = "DUPLICATE_CHOICE"
    CONFIG_INVALID = "CONFIG_INVALID"


class OutletError(Exception):
    """Base exception for outlet errors.

    Attributes:
        code: The error code categorizing this error.
        message: Human-readable error message.
        choice: The menu choice involved (if applicable).
        cause: The underlying exception that caused this error (if any).

    Example:
        raise OutletError(
            code=OutletErrorCode.UNKNOWN_OUTLET,
            message="No outlet registered",
            choice=7,
        )
    """

    def __init__(
        self,
        code: OutletErrorCode,
        message: str,
        choice: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.choice = choice
        self.cause = cause

        full_message = f"[{code.value}] {message}"
        if choice is not None:
            full_message = f"[choice {choice}] {full_message}"

        super().__init__(full_message)

    @property
    def recoverable(self) -> bool:
        """Whether the console can report this error and re-prompt."""
        return self.code in (
            OutletErrorCode.INVALID_CHOICE,
            OutletErrorCode.UNKNOWN_OUTLET,
        )
