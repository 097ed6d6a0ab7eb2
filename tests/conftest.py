"""
Pytest configuration and shared fixtures.
"""

import pytest

from mozzart import ConstantsCatalog, Pitch, get_catalog


@pytest.fixture
def c4() -> Pitch:
    """Middle C (MIDI 60)."""
    return Pitch(60)


@pytest.fixture
def e4() -> Pitch:
    return Pitch(64)


@pytest.fixture
def g4() -> Pitch:
    return Pitch(67)


@pytest.fixture
def c_major_triad(c4: Pitch, e4: Pitch, g4: Pitch) -> list[Pitch]:
    """C4-E4-G4."""
    return [c4, e4, g4]


@pytest.fixture
def catalog() -> ConstantsCatalog:
    """The process-wide default catalog."""
    return get_catalog()
