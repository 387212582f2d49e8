"""Core player actions over a GameSession.

Returns ActionResult dicts with keys:
- lines: List[str] narrative lines to display
- hints: List[str] exits summary of the current room
- changes: dict summarizing state changes
"""
from __future__ import annotations
from typing import Dict, List
import textwrap
from .session import (
    GameSession,
    REFUSAL_ABSENT,
    REFUSAL_FIXED,
    REFUSAL_TOO_LARGE,
)
from .world import Direction

# Bersagli che indicano la stanza stessa in examine
ROOM_TARGETS = frozenset({"room", "here", "around"})


class ActionError(Exception):
    pass


def _wrap(text: str, width: int = 78) -> list[str]:
    blocks = []
    for paragraph in text.split("\n"):
        if not paragraph.strip():
            blocks.append("")
            continue
        blocks.extend(textwrap.wrap(paragraph, width=width))
    return blocks


def _result(lines: List[str], hints: List[str] | None = None, changes: Dict[str, object] | None = None) -> Dict[str, object]:
    return {"lines": lines, "hints": hints or [], "changes": changes or {}}


def _exit_labels(session: GameSession) -> List[str]:
    labels = []
    room = session.current_room
    for direction in session.get_available_exits():
        target = session.world.rooms.get(room.exits[direction])
        target_name = target.name if target else room.exits[direction]
        # Nome della destinazione solo se già visitata
        if target is not None and target.is_visited:
            labels.append(f"{direction.value} ({target_name})")
        else:
            labels.append(direction.value)
    return labels


def look(session: GameSession) -> Dict[str, object]:
    room = session.current_room
    if room is None:
        raise ActionError(f"Location not found: {session.world.current_room_id}")
    lines: List[str] = [f"=== {room.name} ==="]
    lines.extend(_wrap(room.description))
    lines.append("")
    exits = _exit_labels(session)
    if exits:
        lines.append("Exits: " + ", ".join(exits))
    else:
        lines.append("There are no obvious exits.")
    items = session.get_items_in_room()
    if items:
        lines.append("You can see: " + ", ".join(i.name for i in items))
    return _result(lines, hints=exits)


def go(session: GameSession, direction: str | Direction) -> Dict[str, object]:
    parsed = direction if isinstance(direction, Direction) else Direction.parse(direction)
    if parsed is None:
        return _result([f"'{direction}' is not a direction I know."])
    if session.current_room is None:
        raise ActionError(f"Current room missing: {session.world.current_room_id}")
    if not session.move(parsed):
        return _result([f"You can't go {parsed.value} from here."])
    res = look(session)
    res["changes"] = {"location": session.world.current_room_id}
    return res


def take(session: GameSession, item_name: str) -> Dict[str, object]:
    item_name = item_name.strip()
    reason = session.take_refusal(item_name)
    if reason is None:
        session.take_item(item_name)
        return _result([f"You take the {item_name}."], changes={"taken_item": item_name})
    if reason == REFUSAL_ABSENT:
        line = f"You don't see a {item_name} here."
    elif reason == REFUSAL_TOO_LARGE:
        line = f"The {item_name} is far too big to carry."
    elif reason == REFUSAL_FIXED:
        line = f"The {item_name} won't budge."
    else:
        line = f"Your hands are full. Drop something before taking the {item_name}."
    return _result([line])


def drop(session: GameSession, item_name: str) -> Dict[str, object]:
    item_name = item_name.strip()
    if session.drop_item(item_name):
        return _result([f"You drop the {item_name}."], changes={"dropped_item": item_name})
    return _result([f"You don't have a {item_name} to drop."])


def examine(session: GameSession, target: str) -> Dict[str, object]:
    """Inventory first, then the room's items, then the room itself."""
    target = target.strip()
    item = session.get_item_from_inventory(target) or session.get_item_from_room(target)
    if item is not None:
        return _result(_wrap(item.best_description() or f"It's just a {item.name}."))
    if target.lower() in ROOM_TARGETS:
        room = session.current_room
        if room is not None:
            return _result(_wrap(room.best_description()))
    return _result([f"You don't see a {target} here."])


def inventory(session: GameSession) -> Dict[str, object]:
    items = session.get_inventory()
    lines = [f"Inventory ({len(items)}/{session.world.max_inventory_size}):"]
    if not items:
        lines.append("  Your inventory is empty.")
    for item in items:
        lines.append(f"  {item.name}")
    return _result(lines)
