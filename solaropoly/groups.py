"""
Area groups.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator

from .exceptions import InvalidGroupMemberError
from .squares import Area, Square


@dataclass(frozen=True)
class Group:
    """
    A named collection of areas, the unit of property-set bonuses.

    Groups compare by value, so adding an equal group twice to a set keeps
    a single copy.
    """

    name: str
    areas: FrozenSet[Area] = field(default_factory=frozenset)

    def __init__(self, name: str, areas: Iterable[Square] = ()):
        members = frozenset(areas)
        rejected = [square for square in members if not square.is_area]
        if rejected:
            raise InvalidGroupMemberError(
                f"Group '{name}' can only contain areas, got: "
                + ", ".join(square.name for square in rejected)
            )
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "areas", members)

    def contains(self, area: Square) -> bool:
        """Check whether the given square belongs to this group."""
        return area in self.areas

    def __len__(self) -> int:
        return len(self.areas)

    def __iter__(self) -> Iterator[Area]:
        return iter(self.areas)

    def __repr__(self) -> str:
        return f"Group(name='{self.name}', areas={len(self.areas)})"
