"""
Board square definitions and types.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SquareType(Enum):
    """Types of squares on the board."""

    START = "start"
    AREA = "area"
    BLANK = "blank"


@dataclass(eq=False)
class Square:
    """
    Base class for a board square.

    Squares compare and hash by identity: the board keeps the exact objects
    it was given, and two squares sharing a name are still two locations.
    """

    name: str
    square_type: SquareType

    @property
    def is_area(self) -> bool:
        """Whether this square may be a member of a group."""
        return self.square_type is SquareType.AREA

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"


@dataclass(eq=False, repr=False)
class StartSquare(Square):
    """The starting square, placed at index 0 of a standard board."""

    def __init__(self, name: str = "GO"):
        super().__init__(name, SquareType.START)


@dataclass(eq=False, repr=False)
class BlankSquare(Square):
    """A square that cannot be owned (events, visits, rest stops)."""

    def __init__(self, name: str):
        super().__init__(name, SquareType.BLANK)


@dataclass(eq=False, repr=False)
class Area(Square):
    """A square that can be grouped, owned and improved."""

    price: Optional[int] = None

    def __init__(self, name: str, price: Optional[int] = None):
        super().__init__(name, SquareType.AREA)
        self.price = price
