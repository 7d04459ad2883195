"""
The Solaropoly game board: a closed loop of squares plus the groups of
areas that can be bought and improved.
"""

import logging
from typing import FrozenSet, Iterable, List, NamedTuple, Optional, Sequence, Set, Tuple

from .config import BoardConfig
from .exceptions import (
    EmptyBoardError,
    EmptyGroupSetError,
    InvalidBoardSizeError,
    InvalidGroupReferenceError,
)
from .groups import Group
from .squares import Area, Square, SquareType

logger = logging.getLogger(__name__)


class BoardPosition(NamedTuple):
    """Result of a move: the square landed on and how many times start was passed."""

    square: Square
    laps_completed: int


class Board:
    """
    The game board.

    Squares form an ordered loop where index 0 is the start square. Groups
    are a set of area collections whose members must all be on the board.
    Both collections only grow: every mutation appends, and the size bounds
    of the config are checked against the resulting totals.
    """

    def __init__(
        self,
        squares: Optional[Sequence[Square]] = None,
        groups: Optional[Iterable[Group]] = None,
        config: Optional[BoardConfig] = None,
    ):
        self.config = config or BoardConfig.from_settings()
        self._squares: List[Square] = []
        self._groups: Set[Group] = set()

        if squares is not None:
            self.append_squares(squares)
        if groups is not None:
            self.append_groups(groups)

    @property
    def squares(self) -> Tuple[Square, ...]:
        """Squares in board order."""
        return tuple(self._squares)

    @property
    def groups(self) -> FrozenSet[Group]:
        """Groups on the board."""
        return frozenset(self._groups)

    # Mutation

    def append_squares(self, squares: Sequence[Square]) -> None:
        """
        Append squares to the end of the loop.

        Args:
            squares: Squares in the order they should follow the current ones

        Raises:
            InvalidBoardSizeError: If the board would have fewer than
                ``min_squares`` squares. The board is left unchanged.

        A total above ``max_squares`` does not fail: the combined list is cut
        down to its first ``max_squares`` squares and a warning is logged.
        """
        batch = list(squares)
        total = self.size() + len(batch)
        min_squares, max_squares = self.config.min_squares, self.config.max_squares

        if total < min_squares:
            raise InvalidBoardSizeError(
                f"A board needs at least {min_squares} squares, "
                f"but only {total} would be present."
            )

        combined = self._squares + batch
        if total > max_squares:
            logger.warning(
                "%d is the maximum number of squares allowed, but %d were provided. "
                "%d squares were truncated from the end of the board.",
                max_squares,
                total,
                total - max_squares,
            )
            combined = combined[:max_squares]

        self._squares = combined
        logger.debug("Board now has %d squares", len(self._squares))

    def append_groups(self, groups: Iterable[Group]) -> None:
        """
        Add groups to the board. Duplicates are ignored.

        Args:
            groups: Groups to add

        Raises:
            InvalidGroupReferenceError: If any group has an area that is not
                on the board.
            InvalidBoardSizeError: If the resulting number of groups is
                outside ``min_groups``..``max_groups``.

        Nothing is committed when an error is raised.
        """
        batch = set(groups)

        on_board = set(self._squares)
        missing = [
            area for group in batch for area in group.areas if area not in on_board
        ]
        if missing:
            raise InvalidGroupReferenceError(
                "Groups reference areas that are not present on the board: "
                + ", ".join(sorted({area.name for area in missing}))
            )

        combined = self._groups | batch
        total = len(self._groups) + len(batch)
        min_groups, max_groups = self.config.min_groups, self.config.max_groups

        if total > max_groups:
            raise InvalidBoardSizeError(
                f"{max_groups} is the maximum number of groups allowed, "
                f"but {total} groups were provided."
            )
        if total < min_groups:
            raise InvalidBoardSizeError(
                f"A board needs at least {min_groups} groups, "
                f"but only {total} would be present."
            )

        self._groups = combined
        logger.debug("Board now has %d groups", len(self._groups))

    # Queries

    def size(self) -> int:
        """Number of squares on the board."""
        return len(self._squares)

    def __len__(self) -> int:
        return self.size()

    def resolve_position(self, start_index: int, steps: Optional[int] = None) -> BoardPosition:
        """
        Move from a position by a number of steps.

        Called with a single argument, that argument is the number of steps
        taken from the start square.

        Args:
            start_index: Current position on the board
            steps: Dice roll or any amount to add to the position

        Returns:
            The square landed on and the number of laps completed

        Raises:
            EmptyBoardError: If the board has no squares
        """
        if steps is None:
            start_index, steps = 0, start_index
        self._check_squares()

        start_index = self._clamp(start_index)
        steps = self._clamp(steps)

        overrun = start_index + steps
        # Floor semantics: the index always wraps into [0, size).
        laps_completed, index = divmod(overrun, self.size())
        return BoardPosition(self._squares[index], laps_completed)

    def _clamp(self, value: int) -> int:
        if self.config.legacy_clamp:
            # Historical rule, kept as is: negatives pass, the rest is zeroed.
            # Whether this inversion was intended is still an open question.
            return value if value < 0 else 0
        return value if value > 0 else 0

    def position_of(self, square: Square) -> int:
        """
        Index of a square on the board.

        Returns:
            The first index of the square, or -1 if it is not on the board

        Raises:
            EmptyBoardError: If the board has no squares
        """
        self._check_squares()
        for index, candidate in enumerate(self._squares):
            if candidate == square:
                return index
        return -1

    def group_of(self, area: Square) -> Optional[Group]:
        """
        Find the group an area belongs to.

        Returns:
            The first group containing the area, or None

        Raises:
            EmptyGroupSetError: If the board has no groups
        """
        self._check_groups()
        for group in self._groups:
            if group.contains(area):
                return group
        return None

    def squares_of_type(self, square_type: SquareType) -> List[Square]:
        """Get all squares of the given type, in board order."""
        return [s for s in self._squares if s.square_type is square_type]

    def areas(self) -> List[Area]:
        """Get all area squares, in board order."""
        return [s for s in self._squares if s.is_area]

    def summary(self) -> str:
        return f"Board [squares={self.size()}, groups={len(self._groups)}]"

    def __str__(self) -> str:
        return self.summary()

    def __repr__(self) -> str:
        return f"Board(squares={self.size()}, groups={len(self._groups)})"

    # Business rules

    def _check_squares(self) -> None:
        if not self._squares:
            raise EmptyBoardError(
                "The board has no squares. Fill the board with squares first."
            )

    def _check_groups(self) -> None:
        if not self._groups:
            raise EmptyGroupSetError(
                "The board has no groups. Add groups to the board first."
            )
