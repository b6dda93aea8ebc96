"""Shared pytest configuration: path setup and state fixtures."""

import sys
from pathlib import Path

import pytest

# Root of the repository
_ROOT = Path(__file__).resolve().parent.parent

# Allow ``from mso_tri_state import ...`` without installing (src is the package root)
sys.path.insert(0, str(_ROOT / "src"))

from mso_tri_state import MsoTriState  # noqa: E402


SENTINELS = [
    MsoTriState.msoCTrue,
    MsoTriState.msoTriStateMixed,
    MsoTriState.msoTriStateToggle,
]


@pytest.fixture(params=SENTINELS, ids=lambda s: s.name)
def sentinel(request) -> MsoTriState:
    """Each of the three states that have no boolean meaning."""
    return request.param
