"""Shared test fixtures for Solaropoly board tests."""

import pytest
from solaropoly import Area, BlankSquare, Board, Group, StartSquare
from solaropoly.settings import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Boards built without a config read settings; keep them at defaults."""
    monkeypatch.delenv("SOLAROPOLY_LEGACY_CLAMP", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def eight_squares():
    """Eight squares: GO, blanks, and areas at indices 1, 3, 4, 6."""
    return [
        StartSquare(),
        Area("Mercury", 60),
        BlankSquare("Solar Flare"),
        Area("Venus", 60),
        Area("Earth", 100),
        BlankSquare("Asteroid Belt"),
        Area("Mars", 120),
        BlankSquare("Black Hole"),
    ]

@pytest.fixture
def two_groups(eight_squares):
    """Two groups built from the areas of ``eight_squares``."""
    return {
        Group("Inner", [eight_squares[1], eight_squares[3]]),
        Group("Outer", [eight_squares[4], eight_squares[6]]),
    }

@pytest.fixture
def board(eight_squares, two_groups):
    """Valid board with eight squares and two groups."""
    return Board(eight_squares, two_groups)
