"""Constants and tunables shared by the routing core."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from antflow.errors import ConfigError


NO_EDGE = -1
MAX_NEIGHBORS = 6


class Side(IntEnum):
    """Owner of a unit count. The value indexes `Cell.owned_units`."""
    ALLIED = 0
    ENEMY = 1

    @classmethod
    def parse(cls, name: str) -> "Side":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ConfigError(f"unknown side '{name}', expected one of: allied, enemy") from None


NUM_SIDES = len(Side)

SIZING_MODES = ("min", "max")


@dataclass(frozen=True)
class AllocatorConfig:
    """
    Tunables for FlowAllocator.

    Attributes:
        sizing: "min" sizes an assignment by the smaller of the sink's remaining
            demand and the source's remaining units. "max" takes the larger
            of the two and keeps assigning out of a source after it reaches zero,
            so it can overdraw a source.
        max_passes: upper bound on straggler passes before the remaining units
            are drained onto each source's nearest beacon.
    """
    sizing: str = "min"
    max_passes: int = 64

    def __post_init__(self):
        if self.sizing not in SIZING_MODES:
            raise ConfigError(f"sizing must be one of {SIZING_MODES}, got '{self.sizing}'")
        if self.max_passes < 1:
            raise ConfigError("max_passes must be positive")


@dataclass(frozen=True)
class StrategyConfig:
    """Tunables for the harvesting strategy that picks each turn's intent."""
    egg_radius: int = 5
    line_strength: int = 100

    def __post_init__(self):
        if self.egg_radius < 0:
            raise ConfigError("egg_radius cannot be negative")
        if self.line_strength <= 0:
            raise ConfigError("line_strength must be positive")
