"""Human-readable map export of a generated world.

Pure read-only serialization: one section per room with its description,
exits (direction -> connected room name) and items.
"""
from __future__ import annotations
from pathlib import Path
from typing import List
from .world import GameWorld


def _room_sort_key(room_id: str):
    # room_2 prima di room_10
    prefix, _, suffix = room_id.rpartition("_")
    return (prefix, int(suffix)) if suffix.isdigit() else (room_id, -1)


def _flat(text: str) -> str:
    return " ".join(text.split())


def render_map(world: GameWorld) -> str:
    title = f"zAIrk map: {world.theme}" if world.theme else "zAIrk map"
    lines: List[str] = [title, "=" * len(title), ""]
    lines.append(f"Rooms: {len(world.rooms)}")
    start = world.starting_room
    if start is not None:
        lines.append(f"Start: {start.name} ({start.id})")
    lines.append("")
    for room_id in sorted(world.rooms, key=_room_sort_key):
        room = world.rooms[room_id]
        marker = " [start]" if room_id == world.starting_room_id else ""
        lines.append(f"{room.name} ({room.id}){marker}")
        lines.append(f"  Description: {_flat(room.description)}")
        lines.append("  Exits:")
        if not room.exits:
            lines.append("    (none)")
        for direction, target_id in room.exits.items():
            target = world.rooms.get(target_id)
            target_name = target.name if target else f"<missing {target_id}>"
            lines.append(f"    {direction.value} -> {target_name}")
        lines.append("  Items:")
        if not room.items:
            lines.append("    (none)")
        for item in room.items:
            pick = "pickable" if item.is_pickable else "fixed"
            lines.append(f"    {item.name} ({item.size.label}, {pick}): {_flat(item.description)}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


def export_map(world: GameWorld, path: str | Path) -> Path:
    target = Path(path)
    if target.parent and not target.parent.exists():
        target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as f:
        f.write(render_map(world))
    return target
