"""
Tri-State Boolean (MsoTriState): legacy Office constant set.

Five named constants with fixed legacy codes. Only two of them carry a
definite boolean meaning; the other three are sentinels that must never
be coerced to True/False.

Conversion Table:
    Member              | Code | bool
    --------------------|------|-------------------------------
    msoCTrue            |   1  | unsupported
    msoFalse            |   0  | False
    msoTriStateMixed    |  -2  | unsupported
    msoTriStateToggle   |  -3  | unsupported
    msoTrue             |  -1  | True

Members are spelled with the legacy names, so ``str(state)`` yields the
exact string legacy consumers expect (e.g. "msoTriStateMixed").
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, FrozenSet

from mso_tri_state.exceptions import (
    InternalError,
    InvalidCodeError,
    InvalidInputError,
    UnsupportedConversionError,
)

logger = logging.getLogger(__name__)


class MsoTriState(Enum):
    """
    Specifies a tri-state Boolean value.

    A plain Enum (not IntEnum): the legacy code is available through
    ``.code`` but members never compare equal to, or do arithmetic with,
    integers.

    Conversions:
    - MsoTriState.from_bool(True) -> msoTrue
    - state.to_bool() / bool(state) -> True/False, or
      UnsupportedConversionError for the three sentinels
    - state.display() / str(state) -> legacy name
    """
    msoCTrue = 1            # Not supported.
    msoFalse = 0
    msoTriStateMixed = -2   # Not supported.
    msoTriStateToggle = -3  # Not supported.
    msoTrue = -1

    @classmethod
    def from_bool(cls, value: bool) -> MsoTriState:
        """Convert a Python bool to msoTrue/msoFalse."""
        if not isinstance(value, bool):
            logger.warning("from_bool rejected %s input %r", type(value).__name__, value)
            raise InvalidInputError(
                f"from_bool expects a bool, got {type(value).__name__}",
                details={"type": type(value).__name__},
            )
        return cls.msoTrue if value else cls.msoFalse

    @classmethod
    def from_code(cls, code: int) -> MsoTriState:
        """
        Look up a member by its legacy numeric code.

        bool is rejected even though it subclasses int, since True == 1
        would otherwise resolve to msoCTrue.

        Raises:
            InvalidCodeError: code is not an int or names no member
        """
        if isinstance(code, bool) or not isinstance(code, int):
            logger.warning("from_code rejected %s input %r", type(code).__name__, code)
            raise InvalidCodeError(
                f"Legacy code must be an int, got {type(code).__name__}",
                details={"type": type(code).__name__},
            )
        try:
            return cls(code)
        except ValueError as e:
            logger.warning("from_code rejected unknown code %d", code)
            raise InvalidCodeError(
                f"No MsoTriState has code {code}",
                details={"code": code, "valid_codes": sorted(m.value for m in cls)},
            ) from e

    @property
    def code(self) -> int:
        """Legacy numeric code."""
        return self.value

    def to_bool(self) -> bool:
        """
        Narrow to a Python bool.

        Raises UnsupportedConversionError for the sentinels (msoCTrue,
        msoTriStateMixed, msoTriStateToggle). Guard with is_boolean()
        instead of catching it.
        """
        if self.name in _BOOLEAN_MEANINGS:
            return _BOOLEAN_MEANINGS[self.name]
        if self.name in _SENTINELS:
            logger.error("Refusing to convert %s (code %d) to bool", self.name, self.value)
            raise UnsupportedConversionError(
                f"Not supported: {self.name} has no boolean meaning",
                details={"state": self.name, "code": self.value},
            )
        # Unreachable once verify_coverage() has passed at import.
        raise InternalError(
            f"{self.name} is neither boolean nor sentinel",
            details={"state": self.name},
        )

    def display(self) -> str:
        """Canonical legacy name, e.g. "msoTrue"."""
        return _DISPLAY_NAMES[self.name]

    def is_boolean(self) -> bool:
        """Check if to_bool() is defined for this member."""
        return self.name in _BOOLEAN_MEANINGS

    def is_sentinel(self) -> bool:
        """Check if this member is a reserved non-boolean sentinel."""
        return self.name in _SENTINELS

    def __bool__(self) -> bool:
        """
        Convert to bool for Python if statements.

        Raises UnsupportedConversionError for sentinels to force explicit
        handling.
        """
        return self.to_bool()

    def __str__(self) -> str:
        return self.display()


# Tables are keyed by member name so verify_coverage() can check any
# enum against them, including one with members MsoTriState lacks.
_DISPLAY_NAMES: Dict[str, str] = {
    "msoCTrue": "msoCTrue",
    "msoFalse": "msoFalse",
    "msoTriStateMixed": "msoTriStateMixed",
    "msoTriStateToggle": "msoTriStateToggle",
    "msoTrue": "msoTrue",
}

_BOOLEAN_MEANINGS: Dict[str, bool] = {
    "msoFalse": False,
    "msoTrue": True,
}

_SENTINELS: FrozenSet[str] = frozenset({
    "msoCTrue",
    "msoTriStateMixed",
    "msoTriStateToggle",
})


def verify_coverage(enum_cls: type = MsoTriState) -> None:
    """
    Check that the conversion tables handle every member of enum_cls.

    Every member needs a display name and must be exactly one of
    boolean or sentinel; tables must not name members the enum lacks.

    Raises:
        InternalError: listing every gap found
    """
    names = {member.name for member in enum_cls}
    classified = set(_BOOLEAN_MEANINGS) | _SENTINELS
    problems = {
        "missing_display": sorted(names - set(_DISPLAY_NAMES)),
        "unknown_display": sorted(set(_DISPLAY_NAMES) - names),
        "unclassified": sorted(names - classified),
        "unknown_classified": sorted(classified - names),
        "boolean_and_sentinel": sorted(set(_BOOLEAN_MEANINGS) & _SENTINELS),
    }
    problems = {key: value for key, value in problems.items() if value}
    if problems:
        raise InternalError(
            f"Conversion tables do not cover {enum_cls.__name__}",
            details=problems,
        )


verify_coverage(MsoTriState)

BOOLEAN_STATES: FrozenSet[MsoTriState] = frozenset(
    m for m in MsoTriState if m.is_boolean()
)
SENTINEL_STATES: FrozenSet[MsoTriState] = frozenset(
    m for m in MsoTriState if m.is_sentinel()
)


def from_bool(value: bool) -> MsoTriState:
    """Module-level alias for MsoTriState.from_bool."""
    return MsoTriState.from_bool(value)


def to_bool(state: MsoTriState) -> bool:
    """Narrow state to bool; see MsoTriState.to_bool."""
    if not isinstance(state, MsoTriState):
        raise InvalidInputError(
            f"to_bool expects an MsoTriState, got {type(state).__name__}",
            details={"type": type(state).__name__},
        )
    return state.to_bool()


def display(state: MsoTriState) -> str:
    """Legacy name string for state."""
    if not isinstance(state, MsoTriState):
        raise InvalidInputError(
            f"display expects an MsoTriState, got {type(state).__name__}",
            details={"type": type(state).__name__},
        )
    return state.display()


__all__ = [
    "MsoTriState",
    "BOOLEAN_STATES",
    "SENTINEL_STATES",
    "from_bool",
    "to_bool",
    "display",
    "verify_coverage",
]
