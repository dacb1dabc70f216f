"""
Nearest-first greedy allocation of units to beacons.

Every cell holding units for the side is a source, every beacon is a sink.
Beacon strengths are turned into unit demands with one global scaling factor,
then (source, sink) pairs are walked nearest first:

1. primary pass: fill each sink's baseline demand;
2. straggler passes: repeat the walk on the pairs whose source still holds
   units, letting each sink take its wiggle room once;
3. drain: if the straggler passes stop making progress, whatever a source
   still holds goes to its nearest sink in one piece.

This is a rationing heuristic, not an optimal transport solve.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from antflow.actions import Beacon
from antflow.config import AllocatorConfig, Side
from antflow.errors import InvalidAction, Unreachable, ZeroTotalUnits
from antflow.graph import Graph
from antflow.pathfinding import UNREACHED, PathFinder


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveAssignment:
    """
    Move `amount` units out of cell `source` toward cell `destination`.

    Attributes:
        source: cell index the units leave from
        destination: cell index of the targeted beacon
        amount: number of units, always positive
        beacon: index of the targeted beacon in the allocator's input
    """
    source: int
    destination: int
    amount: int
    beacon: int


@dataclass
class _Source:
    location: int
    units: int


@dataclass
class _Sink:
    location: int
    demand: int
    wiggle_room: int


@dataclass(frozen=True)
class _Pair:
    distance: int
    source: int
    sink: int


class FlowAllocator:

    def __init__(self, graph: Graph, config: Optional[AllocatorConfig] = None,
                 pathfinder: Optional[PathFinder] = None):
        self.graph = graph
        self.config = config or AllocatorConfig()
        self.pathfinder = pathfinder or PathFinder(graph)

    def allocate(self, beacons: Sequence[Beacon], side: Side = Side.ALLIED) -> List[MoveAssignment]:
        """
        Turn weighted beacons into concrete moves for `side`.

        Raises:
            ZeroTotalUnits: the side has no units anywhere
            Unreachable: a beacon cannot be reached from some source
            InvalidAction: a beacon lies outside the graph
        """
        units = self.graph.units(side)
        total_units = int(units.sum())
        if total_units == 0:
            raise ZeroTotalUnits(side)
        if not beacons:
            logger.debug("no beacons for %s, nothing to allocate", side.name.lower())
            return []

        sources = self._sources(units)
        sinks = self._sinks(beacons, total_units)
        pairs = self._pairs(sources, sinks)

        assignments: List[MoveAssignment] = []
        self._walk(pairs, sources, sinks, assignments, stragglers=False)
        pairs = self._live_pairs(pairs, sources)

        passes = 0
        while pairs and passes < self.config.max_passes:
            made = self._walk(pairs, sources, sinks, assignments, stragglers=True)
            pairs = self._live_pairs(pairs, sources)
            passes += 1
            if not made:
                break

        if pairs:
            self._drain(pairs, sources, sinks, assignments)

        logger.debug(
            "allocated %d units of %s over %d beacons in %d assignments (%d straggler passes)",
            total_units, side.name.lower(), len(beacons), len(assignments), passes,
        )
        return assignments

    def _sources(self, units: np.ndarray) -> List[_Source]:
        return [_Source(int(location), int(units[location])) for location in np.flatnonzero(units)]

    def _sinks(self, beacons: Sequence[Beacon], total_units: int) -> List[_Sink]:
        total_strength = sum(beacon.strength for beacon in beacons)
        scaling_factor = total_strength / total_units
        logger.debug("scaling factor %.3f (strength %d / units %d)", scaling_factor, total_strength, total_units)

        sinks = []
        for beacon in beacons:
            if not 0 <= beacon.location < len(self.graph):
                raise InvalidAction(f"'{beacon}' refers to cell {beacon.location} outside 0..{len(self.graph) - 1}")
            scaled = beacon.strength * scaling_factor
            # wiggle room compares the scaled ceiling with the raw strength
            sinks.append(_Sink(
                location=beacon.location,
                demand=max(math.floor(scaled), 1),
                wiggle_room=math.ceil(scaled) - beacon.strength,
            ))
        return sinks

    def _pairs(self, sources: List[_Source], sinks: List[_Sink]) -> List[_Pair]:
        """Every (source, sink) pair, nearest first; ties keep source-major insertion order."""
        sink_locations = np.fromiter((sink.location for sink in sinks), dtype=np.int64, count=len(sinks))
        pairs = []
        for source_index, source in enumerate(sources):
            distances = self.pathfinder.distances_from(source.location)[sink_locations]
            for sink_index, distance in enumerate(distances):
                if distance == UNREACHED:
                    raise Unreachable(source.location, sinks[sink_index].location)
                pairs.append(_Pair(int(distance), source_index, sink_index))
        pairs.sort(key=lambda pair: pair.distance)
        return pairs

    def _size(self, sink_size: int, source_units: int) -> int:
        if self.config.sizing == "max":
            return max(sink_size, source_units)
        return min(sink_size, source_units)

    def _walk(self, pairs: List[_Pair], sources: List[_Source], sinks: List[_Sink],
              assignments: List[MoveAssignment], stragglers: bool) -> int:
        """One pass over `pairs`. Returns the number of assignments it added."""
        made = 0
        for pair in pairs:
            source = sources[pair.source]
            sink = sinks[pair.sink]
            if source.units <= 0 and self.config.sizing == "min":
                continue

            wiggle = sink.wiggle_room if stragglers else 0
            # max sizing keeps assigning out of a source that is already at or below zero
            size = self._size(max(sink.demand + wiggle, 0), source.units)
            if size <= 0:
                continue
            if size > source.units:
                logger.warning(
                    "max sizing overdraws cell %d: %d units assigned, %d available",
                    source.location, size, source.units,
                )

            assignments.append(MoveAssignment(source.location, sink.location, size, pair.sink))
            source.units -= size
            sink.demand -= size - wiggle
            sink.wiggle_room -= wiggle
            made += 1
        return made

    @staticmethod
    def _live_pairs(pairs: List[_Pair], sources: List[_Source]) -> List[_Pair]:
        return [pair for pair in pairs if sources[pair.source].units > 0]

    def _drain(self, pairs: List[_Pair], sources: List[_Source], sinks: List[_Sink],
               assignments: List[MoveAssignment]) -> None:
        """Send each leftover source, whole, to its nearest sink."""
        for pair in pairs:
            source = sources[pair.source]
            if source.units <= 0:
                continue
            logger.warning(
                "draining %d leftover units from cell %d onto beacon at cell %d",
                source.units, source.location, sinks[pair.sink].location,
            )
            assignments.append(MoveAssignment(source.location, sinks[pair.sink].location, source.units, pair.sink))
            source.units = 0
