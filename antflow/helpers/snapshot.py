"""Reading and writing the line-oriented integer snapshot of a game."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from antflow.config import MAX_NEIGHBORS, NO_EDGE, Side
from antflow.errors import MalformedGraph, NotAnInteger, WrongNumberOfElements
from antflow.graph import Cell, CellKind, Graph


CELL_FIELDS = 2 + MAX_NEIGHBORS
UPDATE_FIELDS = 3


def _parse_ints(line: str, expected: int = -1) -> List[int]:
    values: List[int] = []
    for token in line.split():
        try:
            values.append(int(token))
        except ValueError:
            raise NotAnInteger(token) from None
    if expected >= 0 and len(values) != expected:
        raise WrongNumberOfElements(line.strip(), len(values), expected)
    return values


def _parse_count(line: str) -> int:
    (count,) = _parse_ints(line, 1)
    if count < 0:
        raise MalformedGraph(f"negative count {count}")
    return count


def parse_cell(line: str) -> Cell:
    """`kind resources n0 n1 n2 n3 n4 n5`, where `-1` marks a missing edge."""
    values = _parse_ints(line, CELL_FIELDS)
    kind = CellKind.from_code(values[0])
    neighbors = tuple(value for value in values[2:] if value != NO_EDGE)
    return Cell(kind=kind, resources=values[1], neighbors=neighbors)


def parse_snapshot(raw_lines: Sequence[str]) -> Graph:
    """
    Build a Graph from the initial game description.

    Layout: cell count N, N cell lines, base count B, one line with B allied
    bases, one line with B enemy bases.

    Raises:
        WrongNumberOfElements, NotAnInteger, InvalidCellKind: bad line content
        MalformedGraph: truncated input or indices out of range
    """
    lines = [line.rstrip("\r\n") for line in raw_lines]
    if not lines:
        raise MalformedGraph("snapshot is empty")

    number_of_cells = _parse_count(lines[0])
    cell_end = 1 + number_of_cells
    if cell_end + 3 > len(lines):
        raise MalformedGraph("snapshot truncated before the base lists")
    cells = [parse_cell(line) for line in lines[1:cell_end]]

    number_of_bases = _parse_count(lines[cell_end])
    allied_bases = _parse_ints(lines[cell_end + 1], number_of_bases)
    enemy_bases = _parse_ints(lines[cell_end + 2], number_of_bases)

    return Graph(cells, allied_bases, enemy_bases)


def format_cell(cell: Cell) -> str:
    neighbors = list(cell.neighbors) + [NO_EDGE] * (MAX_NEIGHBORS - len(cell.neighbors))
    return " ".join(str(value) for value in [int(cell.kind), cell.resources] + neighbors)


def format_snapshot(graph: Graph) -> List[str]:
    lines = [str(len(graph))]
    lines.extend(format_cell(cell) for cell in graph.cells)
    lines.append(str(len(graph.allied_bases)))
    lines.append(" ".join(str(base) for base in graph.allied_bases))
    lines.append(" ".join(str(base) for base in graph.enemy_bases))
    return lines


def parse_update(graph: Graph, raw_lines: Sequence[str]) -> Graph:
    """Apply one `resources allied enemy` line per cell to `graph`, in place."""
    lines = [line for line in raw_lines if line.strip()]
    rows: List[Tuple[int, int, int]] = []
    for line in lines:
        resources, allied, enemy = _parse_ints(line, UPDATE_FIELDS)
        rows.append((resources, allied, enemy))
    graph.apply_update(rows)
    return graph


def format_update(graph: Graph) -> List[str]:
    return [
        f"{cell.resources} {cell.owned_units[Side.ALLIED]} {cell.owned_units[Side.ENEMY]}"
        for cell in graph.cells
    ]
