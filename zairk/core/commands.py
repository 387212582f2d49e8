"""Command line parsing for the CLI.

Turns a raw input line into a ``Command(verb, argument)`` for the command
surface consumed by the actions: move, take, drop, examine, look, inventory,
plus the CLI-only help, map and quit.
"""
from __future__ import annotations
from dataclasses import dataclass
from .world import Direction

VERB_ALIASES = {
    "go": "move", "move": "move", "walk": "move",
    "take": "take", "get": "take", "pick": "take",
    "drop": "drop",
    "examine": "examine", "x": "examine", "inspect": "examine",
    "look": "look", "l": "look",
    "inventory": "inventory", "inv": "inventory", "i": "inventory",
    "help": "help", "h": "help", "?": "help",
    "map": "map", "m": "map",
    "quit": "quit", "q": "quit", "exit": "quit",
}

# Verbi che richiedono un argomento
NEEDS_ARGUMENT = frozenset({"move", "take", "drop", "examine"})


@dataclass(frozen=True)
class Command:
    verb: str
    argument: str = ""


def parse_command(line: str) -> Command:
    parts = line.strip().split()
    if not parts:
        return Command("empty")
    head = parts[0].lower()
    rest = " ".join(parts[1:])
    # Scorciatoie di movimento: n, s, e, w, u, d, north...
    if len(parts) == 1 and Direction.parse(head) is not None:
        return Command("move", Direction.parse(head).value)
    verb = VERB_ALIASES.get(head)
    if verb is None:
        return Command("unknown", line.strip())
    if verb == "take" and head == "pick" and rest.lower().startswith("up "):
        rest = rest[3:]
    return Command(verb, rest.strip())
