"""Pytest configuration and graph fixtures."""

import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))
from antflow.config import NUM_SIDES
from antflow.graph import Cell, CellKind, Graph


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--graph-seed",
        action="store",
        default="2023",
        help="Seed for the random graphs used by the property tests (default: 2023)"
    )


@pytest.fixture
def graph_seed(request):
    return int(request.config.getoption("--graph-seed"))


def make_graph(adjacency, units=None, kinds=None, resources=None, allied_bases=(), enemy_bases=()):
    """
    Build a Graph from a neighbor list per cell.

    `units` maps cell index -> (allied, enemy); `kinds` and `resources` map
    cell index -> value. Unlisted cells are empty with no units.
    """
    units = units or {}
    kinds = kinds or {}
    resources = resources or {}
    cells = []
    for index, neighbors in enumerate(adjacency):
        cells.append(Cell(
            kind=kinds.get(index, CellKind.EMPTY),
            resources=resources.get(index, 0),
            neighbors=tuple(neighbors),
            owned_units=list(units.get(index, (0,) * NUM_SIDES)),
        ))
    return Graph(cells, allied_bases, enemy_bases)


def random_adjacency(rng, size, extra_edges):
    """Connected, symmetric adjacency with at most six neighbors per cell."""
    adjacency = [[] for _ in range(size)]

    def link(a, b):
        if a == b or b in adjacency[a] or len(adjacency[a]) >= 6 or len(adjacency[b]) >= 6:
            return False
        adjacency[a].append(b)
        adjacency[b].append(a)
        return True

    order = list(range(size))
    rng.shuffle(order)
    for position in range(1, size):
        # attach to an earlier cell that still has room
        candidates = [c for c in order[:position] if len(adjacency[c]) < 6]
        link(order[position], rng.choice(candidates))
    for _ in range(extra_edges):
        link(rng.randrange(size), rng.randrange(size))
    return adjacency


@pytest.fixture
def build_graph():
    return make_graph


@pytest.fixture
def chain_graph():
    """0 - 1 - 2 with five allied ants on cell 0."""
    return make_graph([[1], [0, 2], [1]], units={0: (5, 0)})


@pytest.fixture
def random_graphs(graph_seed):
    rng = random.Random(graph_seed)
    graphs = []
    for _ in range(8):
        size = rng.randint(2, 30)
        adjacency = random_adjacency(rng, size, extra_edges=size)
        units = {}
        for index in rng.sample(range(size), k=rng.randint(1, size)):
            units[index] = (rng.randint(0, 12), rng.randint(0, 12))
        units[rng.randrange(size)] = (rng.randint(1, 12), rng.randint(1, 12))
        graphs.append(make_graph(adjacency, units=units))
    return graphs
