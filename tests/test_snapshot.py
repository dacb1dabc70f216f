"""Snapshot text: parsing, formatting and per-turn updates."""

import pytest

from antflow.config import Side
from antflow.errors import InvalidCellKind, MalformedGraph, NotAnInteger, WrongNumberOfElements
from antflow.graph import CellKind
from antflow.helpers.snapshot import (
    format_cell,
    format_snapshot,
    format_update,
    parse_cell,
    parse_snapshot,
    parse_update,
)

SNAPSHOT = [
    "4",
    "0 0 1 2 -1 -1 -1 -1",
    "1 25 0 3 -1 -1 -1 -1",
    "2 60 3 0 -1 -1 -1 -1",
    "0 0 -1 2 -1 1 -1 -1",
    "1",
    "0",
    "3",
]


def test_parse_snapshot():
    graph = parse_snapshot(SNAPSHOT)
    assert len(graph) == 4
    assert graph.kind(1) == CellKind.EGGS
    assert graph.resources(2) == 60
    assert graph.neighbors(0) == (1, 2)
    # gaps in the neighbor columns are skipped, order kept
    assert graph.neighbors(3) == (2, 1)
    assert graph.allied_bases == (0,)
    assert graph.enemy_bases == (3,)
    assert graph.total_units(Side.ALLIED) == 0


def test_round_trip():
    graph = parse_snapshot(SNAPSHOT)
    again = parse_snapshot(format_snapshot(graph))
    for original, parsed in zip(graph.cells, again.cells):
        assert parsed.kind == original.kind
        assert parsed.resources == original.resources
        assert parsed.neighbors == original.neighbors
    assert again.allied_bases == graph.allied_bases
    assert again.enemy_bases == graph.enemy_bases


def test_format_pads_neighbors():
    cell = parse_cell("2 9 5 -1 -1 -1 -1 -1")
    assert format_cell(cell) == "2 9 5 -1 -1 -1 -1 -1"
    assert format_snapshot(parse_snapshot(SNAPSHOT))[4] == "0 0 2 1 -1 -1 -1 -1"


def test_no_bases():
    graph = parse_snapshot(["1", "0 0 -1 -1 -1 -1 -1 -1", "0", "", ""])
    assert graph.allied_bases == ()
    assert format_snapshot(graph) == ["1", "0 0 -1 -1 -1 -1 -1 -1", "0", "", ""]


@pytest.mark.parametrize("line, error", [
    ("0 0 1 2 -1 -1 -1", WrongNumberOfElements),
    ("0 0 1 2 -1 -1 -1 -1 -1", WrongNumberOfElements),
    ("0 a 1 2 -1 -1 -1 -1", NotAnInteger),
    ("3 0 1 2 -1 -1 -1 -1", InvalidCellKind),
])
def test_bad_cell_lines(line, error):
    with pytest.raises(error):
        parse_cell(line)


def test_bad_snapshots():
    with pytest.raises(MalformedGraph):
        parse_snapshot([])
    with pytest.raises(MalformedGraph):
        parse_snapshot(SNAPSHOT[:-2])
    with pytest.raises(WrongNumberOfElements):
        parse_snapshot(SNAPSHOT[:-1] + ["3 1"])
    bad_neighbor = list(SNAPSHOT)
    bad_neighbor[1] = "0 0 1 9 -1 -1 -1 -1"
    with pytest.raises(MalformedGraph):
        parse_snapshot(bad_neighbor)


def test_update_round_trip():
    graph = parse_snapshot(SNAPSHOT)
    rows = ["0 10 0", "25 0 0", "48 0 2", "0 0 10"]
    parse_update(graph, rows)
    assert graph.resources(2) == 48
    assert graph.units_at(0, Side.ALLIED) == 10
    assert graph.units_at(3, Side.ENEMY) == 10
    assert format_update(graph) == rows


def test_update_errors():
    graph = parse_snapshot(SNAPSHOT)
    with pytest.raises(MalformedGraph):
        parse_update(graph, ["0 1 0"])
    with pytest.raises(WrongNumberOfElements):
        parse_update(graph, ["0 1", "0 0 0", "0 0 0", "0 0 0"])
