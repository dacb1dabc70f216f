#!/usr/bin/env python3
"""Simulate one turn offline and print the result as JSON.

Loads a game snapshot (and optionally a per-turn update), applies the given
actions for one side, and prints the beacons, the assignments and the
updated `resources allied enemy` rows.

Example:
    python ./run_turn.py --snapshot map.txt --update turn_12.txt \
        --side allied --action "LINE 4 17 100" --action "BEACON 9 2"
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from antflow.actions import Action, format_actions, parse_actions
from antflow.config import AllocatorConfig, Side, StrategyConfig
from antflow.helpers.snapshot import format_update, parse_snapshot, parse_update
from antflow.strategy import HarvestStrategy
from antflow.turn import TurnEngine


def _read_lines(path: str) -> List[str]:
    return Path(path).read_text(encoding="utf-8").splitlines()


def main(argv: Optional[Sequence[str]] = None) -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--snapshot", type=str, required=True, help="Initial game description")
    ap.add_argument("--update", type=str, default="", help="Per-turn resources/units file")
    ap.add_argument("--side", type=str, default="allied", choices=["allied", "enemy"])

    g = ap.add_mutually_exclusive_group(required=True)
    g.add_argument("--action", type=str, action="append", default=[], help="Action text, repeatable")
    g.add_argument("--auto", action="store_true", help="Let the harvesting strategy pick the action")

    ap.add_argument("--sizing", type=str, default="min", choices=["min", "max"])
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    graph = parse_snapshot(_read_lines(args.snapshot))
    if args.update:
        parse_update(graph, _read_lines(args.update))

    side = Side.parse(args.side)
    if args.auto:
        actions: List[Action] = [HarvestStrategy(graph, side, StrategyConfig()).choose_action()]
    else:
        actions = []
        for text in args.action:
            actions.extend(parse_actions(text))

    engine = TurnEngine(graph, AllocatorConfig(sizing=args.sizing))
    beacons, assignments = engine.plan_turn(actions, side)
    if assignments:
        engine.stepper.apply(assignments, side)

    print(json.dumps({
        "actions": format_actions(actions),
        "beacons": [[b.location, b.strength] for b in beacons],
        "assignments": [[a.source, a.destination, a.amount] for a in assignments],
        "update": format_update(graph),
    }))


if __name__ == "__main__":
    main()
