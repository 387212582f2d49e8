"""Data model definitions for the generated world (zAIrk).

This module only contains the dataclasses and enums. Unlike static content
worlds, a generated world is mutated in place during play (current room,
visited flags, item membership), so the classes are not frozen.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Optional

__all__ = [
    "Direction",
    "Size",
    "SIZE_WEIGHTS",
    "Item",
    "Room",
    "GameWorld",
]


class Direction(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def abbreviation(self) -> str:
        return self.value[0]

    @classmethod
    def parse(cls, token: str | None) -> Optional["Direction"]:
        """Full name or single-letter abbreviation, case-insensitive."""
        if not token:
            return None
        return _DIRECTION_ALIASES.get(token.strip().lower())

    def __str__(self) -> str:
        return self.value


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

_DIRECTION_ALIASES: Dict[str, Direction] = {}
for _d in Direction:
    _DIRECTION_ALIASES[_d.value] = _d
    _DIRECTION_ALIASES[_d.abbreviation] = _d
del _d


class Size(IntEnum):
    """Physical size class; Large and Huge items cannot be carried."""
    SMALL = 0
    MEDIUM = 1
    LARGE = 2
    HUGE = 3

    @property
    def label(self) -> str:
        return self.name.title()


# Peso indicativo per classe di taglia
SIZE_WEIGHTS: Dict[Size, int] = {
    Size.SMALL: 1,
    Size.MEDIUM: 3,
    Size.LARGE: 10,
    Size.HUGE: 50,
}


@dataclass(eq=False)
class Item:
    id: str
    name: str
    description: str = ""
    detailed_description: Optional[str] = None
    is_pickable: bool = True
    weight: int = 1
    size: Size = Size.SMALL
    purpose: str = ""

    def matches(self, name: str) -> bool:
        return self.name.strip().lower() == name.strip().lower()

    def best_description(self) -> str:
        return self.detailed_description or self.description


@dataclass(eq=False)
class Room:
    id: str
    name: str
    description: str = ""
    detailed_description: Optional[str] = None
    items: List[Item] = field(default_factory=list)
    exits: Dict[Direction, str] = field(default_factory=dict)
    is_visited: bool = False

    def find_item(self, name: str) -> Optional[Item]:
        for item in self.items:
            if item.matches(name):
                return item
        return None

    def best_description(self) -> str:
        return self.detailed_description or self.description


@dataclass
class GameWorld:
    rooms: Dict[str, Room] = field(default_factory=dict)
    starting_room_id: str = ""
    current_room_id: str = ""
    inventory: List[Item] = field(default_factory=list)
    max_inventory_size: int = 10
    theme: str = ""

    @property
    def current_room(self) -> Optional[Room]:
        return self.rooms.get(self.current_room_id)

    @property
    def starting_room(self) -> Optional[Room]:
        return self.rooms.get(self.starting_room_id)

    def all_items(self) -> List[Item]:
        items: List[Item] = []
        for room in self.rooms.values():
            items.extend(room.items)
        items.extend(self.inventory)
        return items

    def connect(self, from_id: str, direction: Direction, to_id: str) -> None:
        """Create the mirrored exit pair from_id -> to_id (last write wins)."""
        self.rooms[from_id].exits[direction] = to_id
        self.rooms[to_id].exits[direction.opposite] = from_id
