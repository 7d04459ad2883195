"""
Custom exception hierarchy for the Solaropoly board.

Provides typed errors that callers can handle consistently. The board
errors also derive from the matching builtin (ValueError / IndexError) so
generic handlers keep working.
"""


class SolaropolyError(Exception):
    """Base exception for all Solaropoly errors."""


class BoardError(SolaropolyError):
    """Board structure or query failed."""


class InvalidBoardSizeError(BoardError, ValueError):
    """Squares or groups would fall outside the allowed bounds."""


class InvalidGroupReferenceError(BoardError, ValueError):
    """A group references areas that are not on the board."""


class EmptyBoardError(BoardError, IndexError):
    """The board has no squares yet."""


class EmptyGroupSetError(BoardError, IndexError):
    """The board has no groups yet."""


class InvalidGroupMemberError(SolaropolyError, TypeError):
    """Only area squares can be members of a group."""
