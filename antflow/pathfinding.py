"""Breadth-first path and distance queries over a Graph."""
from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Tuple

import numpy as np

from antflow.errors import Unreachable
from antflow.graph import CellKind, Graph


UNREACHED = -1


class PathFinder:
    """
    Shortest paths on the unweighted cell graph.

    Neighbors are expanded in their stored order, so when several shortest
    paths exist the one returned is the first discovered in that order.
    Every query raises `Unreachable` instead of looping when the queue runs dry.
    """

    def __init__(self, graph: Graph):
        self.graph = graph

    def shortest_path(self, source: int, destination: int) -> List[int]:
        """Cells from `source` to `destination`, both included."""
        previous: Dict[int, int] = {}
        seen = {source}
        queue = deque([source])
        while queue:
            state = queue.popleft()
            if state == destination:
                path = [state]
                while state in previous:
                    state = previous[state]
                    path.append(state)
                path.reverse()
                return path

            for neighbor in self.graph.neighbors(state):
                if neighbor in seen:
                    continue
                seen.add(neighbor)
                previous[neighbor] = state
                queue.append(neighbor)
        raise Unreachable(source, destination)

    def distance(self, source: int, destination: int) -> int:
        """Number of edges on the shortest path; zero when source == destination."""
        visited = set()
        queue = deque([(0, source)])
        while queue:
            distance, state = queue.popleft()
            if state in visited:
                continue
            visited.add(state)

            if state == destination:
                return distance

            for neighbor in self.graph.neighbors(state):
                if neighbor not in visited:
                    queue.append((distance + 1, neighbor))
        raise Unreachable(source, destination)

    def distances_from(self, source: int) -> np.ndarray:
        """BFS distance from `source` to every cell, `UNREACHED` where there is no path."""
        distances = np.full(len(self.graph), UNREACHED, dtype=np.int64)
        distances[source] = 0
        queue = deque([source])
        while queue:
            state = queue.popleft()
            for neighbor in self.graph.neighbors(state):
                if distances[neighbor] == UNREACHED:
                    distances[neighbor] = distances[state] + 1
                    queue.append(neighbor)
        return distances

    def closest_cell(self, source: int, kind: CellKind) -> Optional[Tuple[int, int]]:
        """
        Nearest cell of `kind` that still holds resources.

        Returns:
            (distance, index) of the first match in BFS order, or None if no
            such cell is reachable from `source`.
        """
        visited = set()
        queue = deque([(0, source)])
        while queue:
            distance, state = queue.popleft()
            if state in visited:
                continue
            visited.add(state)

            cell = self.graph.cell(state)
            if cell.kind == kind and cell.resources != 0:
                return distance, state

            for neighbor in cell.neighbors:
                if neighbor not in visited:
                    queue.append((distance + 1, neighbor))
        return None
