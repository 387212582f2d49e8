"""World loading and validation utilities.

Builds model dataclasses from raw dicts (fixtures) and checks graph invariants.
No I/O performed here.
"""
from __future__ import annotations
from typing import Dict, Any, List, Set
from ..model.base import (
    Direction,
    GameWorld,
    Item,
    Room,
    Size,
    SIZE_WEIGHTS,
)

__all__ = ["build_world_from_dict", "validate_world", "reachable_rooms"]


def _build_item(i: Dict[str, Any]) -> Item:
    size = i.get("size", Size.SMALL)
    if isinstance(size, str):
        size = Size[size.upper()]
    else:
        size = Size(size)
    return Item(
        id=i["id"],
        name=i["name"],
        description=i.get("description", ""),
        detailed_description=i.get("detailed_description"),
        is_pickable=i.get("is_pickable", True),
        weight=i.get("weight", SIZE_WEIGHTS[size]),
        size=size,
        purpose=i.get("purpose", ""),
    )


def build_world_from_dict(data: Dict[str, Any]) -> GameWorld:
    rooms: Dict[str, Room] = {}
    for r in data.get("rooms", []):
        exits: Dict[Direction, str] = {}
        for raw_dir, target in r.get("exits", {}).items():
            direction = Direction.parse(raw_dir)
            if direction is None:
                raise ValueError(f"Room '{r['id']}' has invalid exit direction '{raw_dir}'")
            exits[direction] = target
        room = Room(
            id=r["id"],
            name=r["name"],
            description=r.get("description", ""),
            detailed_description=r.get("detailed_description"),
            items=[_build_item(i) for i in r.get("items", [])],
            exits=exits,
            is_visited=r.get("is_visited", False),
        )
        rooms[room.id] = room
    first_id = next(iter(rooms), "")
    starting = data.get("starting_room_id", first_id)
    world = GameWorld(
        rooms=rooms,
        starting_room_id=starting,
        current_room_id=data.get("current_room_id", starting),
        inventory=[_build_item(i) for i in data.get("inventory", [])],
        max_inventory_size=data.get("max_inventory_size", 10),
        theme=data.get("theme", ""),
    )
    return world


def reachable_rooms(world: GameWorld, start_id: str, undirected: bool = False) -> List[str]:
    """Room ids reachable from ``start_id``, in discovery order.

    Iterative depth-first traversal with an explicit stack. With
    ``undirected=True`` exits are followed in both directions.
    """
    if start_id not in world.rooms:
        return []
    neighbours: Dict[str, Set[str]] = {rid: set() for rid in world.rooms}
    for room in world.rooms.values():
        for target in room.exits.values():
            if target not in world.rooms:
                continue
            neighbours[room.id].add(target)
            if undirected:
                neighbours[target].add(room.id)
    order: List[str] = []
    seen: Set[str] = set()
    stack = [start_id]
    while stack:
        rid = stack.pop()
        if rid in seen:
            continue
        seen.add(rid)
        order.append(rid)
        # sorted per ordine deterministico
        for nxt in sorted(neighbours[rid], reverse=True):
            if nxt not in seen:
                stack.append(nxt)
    return order


def validate_world(world: GameWorld) -> List[str]:
    issues: List[str] = []
    if world.starting_room_id not in world.rooms:
        issues.append(f"Starting room '{world.starting_room_id}' does not exist")
    if world.current_room_id not in world.rooms:
        issues.append(f"Current room '{world.current_room_id}' does not exist")
    seen_items: Dict[str, str] = {}
    for room in world.rooms.values():
        for item in room.items:
            if item.id in seen_items:
                issues.append(
                    f"Duplicate item id '{item.id}' in room '{room.id}' (already in '{seen_items[item.id]}')"
                )
            else:
                seen_items[item.id] = room.id
        for direction, target in room.exits.items():
            if target not in world.rooms:
                issues.append(f"Exit {direction.value} from '{room.id}' points to missing room '{target}'")
                continue
            back = world.rooms[target].exits.get(direction.opposite)
            if back != room.id:
                issues.append(
                    f"Exit {direction.value} from '{room.id}' to '{target}' has no mirrored {direction.opposite.value} exit"
                )
    if world.starting_room_id in world.rooms:
        reached = set(reachable_rooms(world, world.starting_room_id, undirected=True))
        for rid in world.rooms:
            if rid not in reached:
                issues.append(f"Room '{rid}' is unreachable from '{world.starting_room_id}'")
    return issues
