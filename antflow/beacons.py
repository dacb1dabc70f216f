"""Expansion of turn actions into the beacons the allocator targets."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from antflow.actions import Action, Beacon, Line
from antflow.errors import InvalidAction
from antflow.graph import Graph
from antflow.pathfinding import PathFinder


logger = logging.getLogger(__name__)


class BeaconExpander:

    def __init__(self, graph: Graph, pathfinder: Optional[PathFinder] = None):
        self.graph = graph
        self.pathfinder = pathfinder or PathFinder(graph)

    def _check_cell(self, action: Action, index: int) -> None:
        if not 0 <= index < len(self.graph):
            raise InvalidAction(f"'{action}' refers to cell {index} outside 0..{len(self.graph) - 1}")

    def expand_line(self, line: Line) -> List[Beacon]:
        """One beacon per cell of the shortest path, endpoints included, each with the line's strength."""
        path = self.pathfinder.shortest_path(line.source, line.destination)
        return [Beacon(location, line.strength) for location in path]

    def expand(self, actions: Sequence[Action]) -> List[Beacon]:
        """
        Beacons for a whole turn. Lines are expanded along their path, beacons
        pass through as they are, WAIT and MESSAGE contribute nothing.
        """
        beacons: List[Beacon] = []
        for action in actions:
            if isinstance(action, Line):
                self._check_cell(action, action.source)
                self._check_cell(action, action.destination)
                beacons.extend(self.expand_line(action))
            elif isinstance(action, Beacon):
                self._check_cell(action, action.location)
                beacons.append(action)
        logger.debug("expanded %d actions into %d beacons", len(actions), len(beacons))
        return beacons
