"""
MsoTriState Exception Hierarchy

Every failure raised by the package carries a deterministic error code
so callers can log or report it without parsing messages.

Error Codes:
- MSO_UNSUPPORTED_CONVERSION: A sentinel state was narrowed to bool
- MSO_INVALID_CODE: A legacy numeric code does not name any state
- MSO_INPUT_INVALID: An argument has the wrong type
- MSO_INTERNAL_ERROR: Lookup tables do not cover the enum (catch-all)
"""

from typing import Any, Dict, Optional
import json

__all__ = [
    'TriStateError',
    'UnsupportedConversionError',
    'InvalidCodeError',
    'InvalidInputError',
    'InternalError',
]


class TriStateError(Exception):
    """
    Base exception for all MsoTriState errors.

    Provides a consistent interface for error handling with:
    - code: A deterministic error code (MSO_*)
    - message: Human-readable error description
    - details: Additional context as a dictionary
    """

    code: str = "MSO_INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error to a dictionary with code, message and details."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """
        Serialize error to a JSON string.

        Args:
            indent: Optional indentation level for pretty-printing

        Returns:
            JSON string representation of the error
        """
        return json.dumps(self.to_dict(), indent=indent)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r})"
        )


class UnsupportedConversionError(TriStateError, ValueError):
    """
    A sentinel state was converted to bool.

    Raised when msoCTrue, msoTriStateMixed or msoTriStateToggle is
    narrowed to a native boolean. This signals a caller bug: check
    ``state.is_boolean()`` first instead of catching this error.
    """

    code: str = "MSO_UNSUPPORTED_CONVERSION"


class InvalidCodeError(TriStateError, ValueError):
    """Legacy numeric code does not correspond to any state."""

    code: str = "MSO_INVALID_CODE"


class InvalidInputError(TriStateError, TypeError):
    """Argument is not of the accepted type (e.g. a non-bool to from_bool)."""

    code: str = "MSO_INPUT_INVALID"


class InternalError(TriStateError):
    """
    Unexpected internal error.

    Raised when the conversion tables and the enum disagree, for
    example a member with no display name or no boolean classification.
    """

    code: str = "MSO_INTERNAL_ERROR"
