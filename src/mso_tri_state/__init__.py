"""
mso-tri-state - Tri-state booleans with the legacy Office spelling

Wraps the five MsoTriState constants (msoTrue, msoFalse, msoCTrue,
msoTriStateMixed, msoTriStateToggle) in a closed enum with checked
conversions to and from Python bool.

Quick Start:
    from mso_tri_state import MsoTriState

    state = MsoTriState.from_bool(3 in [1, 2, 4, 5])
    print(f"Has a 3: {state}")  # Has a 3: msoFalse

    if MsoTriState.msoTrue:
        ...

    bool(MsoTriState.msoTriStateMixed)  # raises UnsupportedConversionError

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

from .tri_state import (
    MsoTriState,
    BOOLEAN_STATES,
    SENTINEL_STATES,
    from_bool,
    to_bool,
    display,
    verify_coverage,
)
from .exceptions import (
    TriStateError,
    UnsupportedConversionError,
    InvalidCodeError,
    InvalidInputError,
    InternalError,
)

__all__ = [
    "__version__",
    # Type
    "MsoTriState",
    "BOOLEAN_STATES",
    "SENTINEL_STATES",
    # Operations
    "from_bool",
    "to_bool",
    "display",
    "verify_coverage",
    # Exceptions
    "TriStateError",
    "UnsupportedConversionError",
    "InvalidCodeError",
    "InvalidInputError",
    "InternalError",
]
