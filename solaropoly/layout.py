"""
Standard Solaropoly board layout.
"""

from typing import Optional

from .board import Board
from .config import BoardConfig
from .groups import Group
from .squares import Area, BlankSquare, StartSquare


def create_standard_board(config: Optional[BoardConfig] = None) -> Board:
    """Create the standard 12-square board with its four systems."""
    mercury = Area("Mercury", 60)
    venus = Area("Venus", 60)
    earth = Area("Earth", 100)
    mars = Area("Mars", 120)
    jupiter = Area("Jupiter", 180)
    saturn = Area("Saturn", 200)
    uranus = Area("Uranus", 260)
    neptune = Area("Neptune", 300)

    squares = [
        StartSquare(),
        mercury,
        venus,
        BlankSquare("Solar Flare"),
        earth,
        mars,
        BlankSquare("Asteroid Belt"),
        jupiter,
        saturn,
        BlankSquare("Black Hole"),
        uranus,
        neptune,
    ]
    groups = {
        Group("Inner Planets", [mercury, venus]),
        Group("Terrestrial", [earth, mars]),
        Group("Gas Giants", [jupiter, saturn]),
        Group("Ice Giants", [uranus, neptune]),
    }
    return Board(squares, groups, config=config)
