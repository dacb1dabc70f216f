"""Per-turn routing and unit allocation for the ants resource-collection contest."""

from antflow.actions import Beacon, Line, Message, Wait
from antflow.allocation import FlowAllocator, MoveAssignment
from antflow.beacons import BeaconExpander
from antflow.config import AllocatorConfig, Side, StrategyConfig
from antflow.errors import (
    AntflowError,
    MalformedGraph,
    NegativeUnitCount,
    Unreachable,
    ZeroTotalUnits,
)
from antflow.graph import Cell, CellKind, Graph
from antflow.pathfinding import PathFinder
from antflow.stepping import StepEngine
from antflow.turn import TurnEngine

__all__ = [
    "AllocatorConfig",
    "AntflowError",
    "Beacon",
    "BeaconExpander",
    "Cell",
    "CellKind",
    "FlowAllocator",
    "Graph",
    "Line",
    "MalformedGraph",
    "Message",
    "MoveAssignment",
    "NegativeUnitCount",
    "PathFinder",
    "Side",
    "StepEngine",
    "StrategyConfig",
    "TurnEngine",
    "Unreachable",
    "Wait",
    "ZeroTotalUnits",
]
