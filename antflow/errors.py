"""Exception types raised by the routing core."""
from __future__ import annotations


class AntflowError(Exception):
    """Base class for every error raised by antflow."""
    pass


class ConfigError(AntflowError):
    """Invalid configuration value."""
    pass


class MalformedGraph(AntflowError):
    """The graph snapshot breaks an index or count invariant."""
    pass


class Unreachable(AntflowError):
    """Breadth-first search exhausted the graph without reaching the destination."""

    def __init__(self, source: int, destination: int):
        super().__init__(f"cell {destination} is not reachable from cell {source}")
        self.source = source
        self.destination = destination


class ZeroTotalUnits(AntflowError):
    """The allocator was asked to distribute units for a side that has none."""

    def __init__(self, side):
        super().__init__(f"side {side.name.lower()} has no units to distribute")
        self.side = side


class NegativeUnitCount(AntflowError):
    """Applying the assignments would drive a cell's unit count below zero."""

    def __init__(self, cell: int, available: int, requested: int):
        super().__init__(
            f"cell {cell} holds {available} units but assignments move {requested} out of it"
        )
        self.cell = cell
        self.available = available
        self.requested = requested


class ParsingError(AntflowError):
    """Snapshot or action text could not be read."""
    pass


class WrongNumberOfElements(ParsingError):

    def __init__(self, line: str, found: int, expected: int):
        super().__init__(f"expected {expected} values, found {found}: '{line}'")
        self.line = line
        self.found = found
        self.expected = expected


class NotAnInteger(ParsingError):

    def __init__(self, token: str):
        super().__init__(f"'{token}' is not an integer")
        self.token = token


class InvalidCellKind(ParsingError):

    def __init__(self, code: int):
        super().__init__(f"unknown cell kind code {code}")
        self.code = code


class InvalidAction(AntflowError):
    """An action names a cell that is not in the graph."""
    pass
