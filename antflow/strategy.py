"""Harvesting strategy: picks the turn's intent from the first base."""
from __future__ import annotations

import logging
from typing import Optional

from antflow.actions import Action, Line, Wait
from antflow.config import Side, StrategyConfig
from antflow.graph import CellKind, Graph
from antflow.pathfinding import PathFinder


logger = logging.getLogger(__name__)


class HarvestStrategy:
    """
    Draw a line from our first base to nearby eggs, or else to the closest
    crystals. Waits when neither is reachable.
    """

    def __init__(self, graph: Graph, side: Side = Side.ALLIED, config: Optional[StrategyConfig] = None,
                 pathfinder: Optional[PathFinder] = None):
        self.graph = graph
        self.side = side
        self.config = config or StrategyConfig()
        self.pathfinder = pathfinder or PathFinder(graph)

    def choose_action(self) -> Action:
        bases = self.graph.bases(self.side)
        if not bases:
            return Wait()
        base = bases[0]

        eggs = self.pathfinder.closest_cell(base, CellKind.EGGS)
        if eggs is not None:
            distance, index = eggs
            if distance < self.config.egg_radius:
                logger.debug("eggs at cell %d, %d away from base %d", index, distance, base)
                return Line(base, index, self.config.line_strength)

        crystals = self.pathfinder.closest_cell(base, CellKind.CRYSTALS)
        if crystals is not None:
            _, index = crystals
            return Line(base, index, self.config.line_strength)

        return Wait()
