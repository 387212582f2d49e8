"""Session state machine over a generated world.

Holds the player position and inventory and exposes the primitive operations
(move, take, drop and read projections). Every operation is synchronous and
works purely on in-memory data: once the world is built no oracle call is made.
Rejections are ordinary ``False`` results, never exceptions.
"""
from __future__ import annotations
from typing import List, Optional
from .world import Direction, GameWorld, Item, Room, Size

# Motivi di rifiuto per take_refusal()
REFUSAL_ABSENT = "absent"
REFUSAL_FIXED = "fixed"
REFUSAL_TOO_LARGE = "too_large"
REFUSAL_INVENTORY_FULL = "inventory_full"


class GameSession:
    def __init__(self, world: GameWorld):
        self.world = world
        start = world.current_room
        if start is not None:
            start.is_visited = True

    @property
    def current_room(self) -> Optional[Room]:
        return self.world.current_room

    def move(self, direction: Direction) -> bool:
        """Move through the exit in ``direction``; False when there is none."""
        room = self.current_room
        if room is None:
            return False
        destination_id = room.exits.get(direction)
        if destination_id is None or destination_id not in self.world.rooms:
            return False
        self.world.current_room_id = destination_id
        self.world.rooms[destination_id].is_visited = True
        return True

    def get_item_from_room(self, name: str) -> Optional[Item]:
        room = self.current_room
        if room is None:
            return None
        return room.find_item(name)

    def get_item_from_inventory(self, name: str) -> Optional[Item]:
        for item in self.world.inventory:
            if item.matches(name):
                return item
        return None

    def is_inventory_full(self) -> bool:
        return len(self.world.inventory) >= self.world.max_inventory_size

    def take_refusal(self, name: str) -> Optional[str]:
        """Reason why ``name`` cannot be taken right now, or None if it can.

        Checked in order: presence, pickable flag, size class (Large and Huge
        always refuse, whatever the flag says), inventory capacity.
        """
        item = self.get_item_from_room(name)
        if item is None:
            return REFUSAL_ABSENT
        if not item.is_pickable:
            return REFUSAL_FIXED
        if item.size >= Size.LARGE:
            return REFUSAL_TOO_LARGE
        if self.is_inventory_full():
            return REFUSAL_INVENTORY_FULL
        return None

    def take_item(self, name: str) -> bool:
        if self.take_refusal(name) is not None:
            return False
        room = self.current_room
        item = room.find_item(name)
        room.items.remove(item)
        self.world.inventory.append(item)
        return True

    def drop_item(self, name: str) -> bool:
        item = self.get_item_from_inventory(name)
        room = self.current_room
        if item is None or room is None:
            return False
        self.world.inventory.remove(item)
        room.items.append(item)
        return True

    def get_available_exits(self) -> List[Direction]:
        room = self.current_room
        if room is None:
            return []
        return list(room.exits.keys())

    def get_items_in_room(self) -> List[Item]:
        room = self.current_room
        if room is None:
            return []
        return list(room.items)

    def get_inventory(self) -> List[Item]:
        return list(self.world.inventory)
