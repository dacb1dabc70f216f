"""Runs one turn: actions -> beacons -> assignments -> moved units."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from antflow.actions import Action, Beacon
from antflow.allocation import FlowAllocator, MoveAssignment
from antflow.beacons import BeaconExpander
from antflow.config import AllocatorConfig, Side
from antflow.graph import Graph
from antflow.pathfinding import PathFinder
from antflow.stepping import StepEngine


logger = logging.getLogger(__name__)


class TurnEngine:
    """
    Wires the expander, allocator and step engine around one graph.

    The components share a single PathFinder. The graph is mutated in place by
    `play_turn` and should be refreshed from the next snapshot afterwards.
    """

    def __init__(self, graph: Graph, config: Optional[AllocatorConfig] = None):
        self.graph = graph
        self.pathfinder = PathFinder(graph)
        self.expander = BeaconExpander(graph, self.pathfinder)
        self.allocator = FlowAllocator(graph, config, self.pathfinder)
        self.stepper = StepEngine(graph, self.pathfinder)

    def plan_turn(self, actions: Sequence[Action], side: Side = Side.ALLIED) -> Tuple[List[Beacon], List[MoveAssignment]]:
        """Beacons and assignments for `actions`, without touching the graph."""
        beacons = self.expander.expand(actions)
        if not beacons:
            return beacons, []
        return beacons, self.allocator.allocate(beacons, side)

    def play_turn(self, actions: Sequence[Action], side: Side = Side.ALLIED) -> Graph:
        beacons, assignments = self.plan_turn(actions, side)
        if not assignments:
            logger.debug("%s waits", side.name.lower())
            return self.graph
        return self.stepper.apply(assignments, side)
