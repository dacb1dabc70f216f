"""
Cell graph for the ants contest.

The graph is an arena: cells live in a list and refer to each other by index,
so cycles are fine and no cell owns another. Unit counts are kept per side in
`Cell.owned_units`, indexed by `Side`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from antflow.config import MAX_NEIGHBORS, NUM_SIDES, Side
from antflow.errors import InvalidCellKind, MalformedGraph


class CellKind(IntEnum):
    EMPTY = 0
    EGGS = 1
    CRYSTALS = 2

    @classmethod
    def from_code(cls, code: int) -> "CellKind":
        try:
            return cls(code)
        except ValueError:
            raise InvalidCellKind(code) from None


@dataclass
class Cell:
    """
    One node of the graph.

    Attributes:
        kind: resource type held by the cell
        resources: harvestable quantity left, zero once depleted
        neighbors: adjacent cell indices; the order decides BFS tie-breaks
        owned_units: unit count per side, indexed by `Side`
    """
    kind: CellKind
    resources: int
    neighbors: Tuple[int, ...]
    owned_units: List[int] = field(default_factory=lambda: [0] * NUM_SIDES)


class Graph:
    """
    Ordered sequence of cells plus the two base lists.

    Construction validates every index; after that the graph only changes
    through `apply_update` (per-turn snapshot) and the StepEngine, which
    writes `owned_units` directly.
    """

    def __init__(self, cells: Sequence[Cell], allied_bases: Iterable[int], enemy_bases: Iterable[int]):
        self.cells: List[Cell] = list(cells)
        self._bases: Tuple[Tuple[int, ...], ...] = (tuple(allied_bases), tuple(enemy_bases))
        self._validate()

    def _validate(self) -> None:
        size = len(self.cells)
        for index, cell in enumerate(self.cells):
            if len(cell.neighbors) > MAX_NEIGHBORS:
                raise MalformedGraph(
                    f"cell {index} has {len(cell.neighbors)} neighbors, at most {MAX_NEIGHBORS} allowed"
                )
            for neighbor in cell.neighbors:
                if not 0 <= neighbor < size:
                    raise MalformedGraph(f"cell {index} lists neighbor {neighbor} outside 0..{size - 1}")
            if cell.resources < 0:
                raise MalformedGraph(f"cell {index} has negative resources {cell.resources}")
            if len(cell.owned_units) != NUM_SIDES:
                raise MalformedGraph(f"cell {index} must carry exactly {NUM_SIDES} unit counts")
            if any(count < 0 for count in cell.owned_units):
                raise MalformedGraph(f"cell {index} has a negative unit count {cell.owned_units}")

        for side in Side:
            for base in self._bases[side]:
                if not 0 <= base < size:
                    raise MalformedGraph(f"{side.name.lower()} base {base} outside 0..{size - 1}")
        if set(self._bases[Side.ALLIED]) & set(self._bases[Side.ENEMY]):
            raise MalformedGraph("allied and enemy bases overlap")

    def __len__(self) -> int:
        return len(self.cells)

    def cell(self, index: int) -> Cell:
        return self.cells[index]

    def kind(self, index: int) -> CellKind:
        return self.cells[index].kind

    def resources(self, index: int) -> int:
        return self.cells[index].resources

    def neighbors(self, index: int) -> Tuple[int, ...]:
        return self.cells[index].neighbors

    def units_at(self, index: int, side: Side) -> int:
        return self.cells[index].owned_units[side]

    def bases(self, side: Side) -> Tuple[int, ...]:
        return self._bases[side]

    @property
    def allied_bases(self) -> Tuple[int, ...]:
        return self._bases[Side.ALLIED]

    @property
    def enemy_bases(self) -> Tuple[int, ...]:
        return self._bases[Side.ENEMY]

    def units(self, side: Side) -> np.ndarray:
        """Unit count of `side` for every cell, as an int64 vector of length N."""
        return np.fromiter((cell.owned_units[side] for cell in self.cells), dtype=np.int64, count=len(self.cells))

    def total_units(self, side: Side) -> int:
        return int(self.units(side).sum())

    def apply_update(self, rows: Sequence[Tuple[int, int, int]]) -> None:
        """
        Overwrite resources and unit counts from a per-turn update.

        Args:
            rows: one (resources, allied_units, enemy_units) triple per cell

        Raises:
            MalformedGraph: row count mismatch or a negative value
        """
        if len(rows) != len(self.cells):
            raise MalformedGraph(f"update has {len(rows)} rows for {len(self.cells)} cells")
        for index, (resources, allied, enemy) in enumerate(rows):
            if resources < 0 or allied < 0 or enemy < 0:
                raise MalformedGraph(f"update row {index} has a negative value: {resources} {allied} {enemy}")
        for cell, (resources, allied, enemy) in zip(self.cells, rows):
            cell.resources = resources
            cell.owned_units[Side.ALLIED] = allied
            cell.owned_units[Side.ENEMY] = enemy

    def __repr__(self) -> str:
        return (
            f"Graph(cells={len(self.cells)}, allied_units={self.total_units(Side.ALLIED)}, "
            f"enemy_units={self.total_units(Side.ENEMY)})"
        )
