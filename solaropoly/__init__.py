"""
Solaropoly Board Engine

Board structure, group validation and position resolution for Solaropoly.
"""

from .board import Board, BoardPosition
from .config import BoardConfig
from .exceptions import (
    BoardError,
    EmptyBoardError,
    EmptyGroupSetError,
    InvalidBoardSizeError,
    InvalidGroupMemberError,
    InvalidGroupReferenceError,
    SolaropolyError,
)
from .groups import Group
from .layout import create_standard_board
from .squares import Area, BlankSquare, Square, SquareType, StartSquare

__all__ = [
    "Board",
    "BoardPosition",
    "BoardConfig",
    "Group",
    "Square",
    "SquareType",
    "Area",
    "StartSquare",
    "BlankSquare",
    "create_standard_board",
    "SolaropolyError",
    "BoardError",
    "InvalidBoardSizeError",
    "InvalidGroupReferenceError",
    "InvalidGroupMemberError",
    "EmptyBoardError",
    "EmptyGroupSetError",
]
