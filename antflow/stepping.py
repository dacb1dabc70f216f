"""Applies move assignments: every moved unit advances exactly one edge."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from antflow.allocation import MoveAssignment
from antflow.config import Side
from antflow.errors import InvalidAction, NegativeUnitCount
from antflow.graph import Graph
from antflow.pathfinding import PathFinder


logger = logging.getLogger(__name__)

# (source cell, first hop cell, amount)
Hop = Tuple[int, int, int]


class StepEngine:
    """
    One discrete tick of movement.

    All assignments are checked against the current counts before the graph
    is touched, so a failing turn leaves the graph exactly as it was.
    """

    def __init__(self, graph: Graph, pathfinder: Optional[PathFinder] = None):
        self.graph = graph
        self.pathfinder = pathfinder or PathFinder(graph)

    def check_cells(self, assignments: Sequence[MoveAssignment]) -> None:
        """
        Raises:
            InvalidAction: an assignment names a source or destination outside the graph
        """
        size = len(self.graph)
        for assignment in assignments:
            for index in (assignment.source, assignment.destination):
                if not 0 <= index < size:
                    raise InvalidAction(f"{assignment} refers to cell {index} outside 0..{size - 1}")

    def hops(self, assignments: Sequence[MoveAssignment]) -> List[Hop]:
        """First hop of each assignment; assignments already on their beacon are dropped."""
        self.check_cells(assignments)
        hops = []
        for assignment in assignments:
            path = self.pathfinder.shortest_path(assignment.source, assignment.destination)
            if len(path) > 1:
                hops.append((assignment.source, path[1], assignment.amount))
        return hops

    def validate(self, hops: Sequence[Hop], side: Side) -> None:
        """
        Raises:
            NegativeUnitCount: the hops leaving some cell add up to more units than it holds
        """
        units = self.graph.units(side)
        draws = np.zeros_like(units)
        for source, _, amount in hops:
            if amount < 0:
                raise NegativeUnitCount(source, int(units[source]), amount)
            draws[source] += amount

        overdrawn = np.flatnonzero(draws > units)
        if overdrawn.size:
            cell = int(overdrawn[0])
            raise NegativeUnitCount(cell, int(units[cell]), int(draws[cell]))

    def apply(self, assignments: Sequence[MoveAssignment], side: Side = Side.ALLIED) -> Graph:
        """Move units one hop toward their beacons, in place. Returns the graph."""
        hops = self.hops(assignments)
        self.validate(hops, side)

        for source, next_step, amount in hops:
            self.graph.cell(source).owned_units[side] -= amount
            self.graph.cell(next_step).owned_units[side] += amount

        logger.debug("%s moved %d units over %d hops", side.name.lower(), sum(h[2] for h in hops), len(hops))
        return self.graph
