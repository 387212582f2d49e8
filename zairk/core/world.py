"""Facade for world model & loader.

Re-exports dataclasses and utility build/validate functions from the
internal modules to provide a stable import surface.
"""
from .model.base import (
    Direction,
    Size,
    SIZE_WEIGHTS,
    Item,
    Room,
    GameWorld,
)
from .loader.world_loader import (
    build_world_from_dict,
    validate_world,
    reachable_rooms,
)

__all__ = [
    "Direction",
    "Size",
    "SIZE_WEIGHTS",
    "Item",
    "Room",
    "GameWorld",
    "build_world_from_dict",
    "validate_world",
    "reachable_rooms",
]
