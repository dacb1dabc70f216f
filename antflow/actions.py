"""Turn actions: the intents a bot emits and their one-line text form."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Union

from antflow.errors import NotAnInteger, ParsingError, WrongNumberOfElements


ACTION_SEPARATOR = ";"


@dataclass(frozen=True)
class Wait:
    def __str__(self) -> str:
        return "WAIT"


@dataclass(frozen=True)
class Line:
    """Move `strength` along the shortest path from `source` toward `destination`."""
    source: int
    destination: int
    strength: int

    def __str__(self) -> str:
        return f"LINE {self.source} {self.destination} {self.strength}"


@dataclass(frozen=True)
class Beacon:
    """A weighted waypoint. `strength` is a relative demand, not a unit count."""
    location: int
    strength: int

    def __str__(self) -> str:
        return f"BEACON {self.location} {self.strength}"


@dataclass(frozen=True)
class Message:
    text: str

    def __str__(self) -> str:
        return f"MESSAGE {self.text}"


Action = Union[Wait, Line, Beacon, Message]


def format_actions(actions: Sequence[Action]) -> str:
    if not actions:
        return str(Wait())
    return ACTION_SEPARATOR.join(str(action) for action in actions)


def _ints(command: str, args: List[str], expected: int) -> List[int]:
    if len(args) != expected:
        raise WrongNumberOfElements(command, len(args), expected)
    values = []
    for token in args:
        try:
            values.append(int(token))
        except ValueError:
            raise NotAnInteger(token) from None
    return values


def parse_action(text: str) -> Action:
    text = text.strip()
    verb, _, rest = text.partition(" ")
    verb = verb.upper()
    if verb == "WAIT":
        return Wait()
    if verb == "MESSAGE":
        return Message(rest.strip())
    if verb == "LINE":
        source, destination, strength = _ints(text, rest.split(), 3)
        return Line(source, destination, strength)
    if verb == "BEACON":
        location, strength = _ints(text, rest.split(), 2)
        return Beacon(location, strength)
    raise ParsingError(f"unknown action '{text}'")


def parse_actions(text: str) -> List[Action]:
    """Split a `;`-separated turn output into actions, ignoring empty segments."""
    return [parse_action(part) for part in text.split(ACTION_SEPARATOR) if part.strip()]
