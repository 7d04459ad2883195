"""
Board configuration settings.
"""

from dataclasses import dataclass
from typing import Optional

from .settings import BoardSettings, get_settings

MIN_SQUARES = 6
MAX_SQUARES = 20
MIN_GROUPS = 2
MAX_GROUPS = 4


@dataclass(frozen=True)
class BoardConfig:
    """Size bounds and position rules for a board."""

    min_squares: int = MIN_SQUARES
    max_squares: int = MAX_SQUARES
    min_groups: int = MIN_GROUPS
    max_groups: int = MAX_GROUPS

    # Historical clamp: negative inputs pass through, non-negative become 0.
    legacy_clamp: bool = False

    def __post_init__(self) -> None:
        if not 0 < self.min_squares <= self.max_squares:
            raise ValueError(
                f"Invalid square bounds: {self.min_squares}..{self.max_squares}"
            )
        if not 0 < self.min_groups <= self.max_groups:
            raise ValueError(
                f"Invalid group bounds: {self.min_groups}..{self.max_groups}"
            )

    @classmethod
    def from_settings(cls, settings: Optional[BoardSettings] = None) -> "BoardConfig":
        """Build a config from environment-backed settings."""
        settings = settings or get_settings()
        return cls(legacy_clamp=settings.legacy_clamp)
