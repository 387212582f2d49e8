"""Item placement over a built room graph.

Two passes:

- purposeful placement: 3-5 entries of the theme catalog, one per room for
  the first rooms in id order (the last room never gets one);
- filler placement: every room still empty gets at most one generic item,
  with probability ``filler_chance``.

Every candidate name goes through the near-duplicate gate of the shared
``UsedNames`` before it is admitted. A rejected or empty candidate is simply
skipped: placement continues with the next room.
"""
from __future__ import annotations
import logging
import random
from typing import List
from ..core.world import GameWorld, Item, Room
from . import prompts
from .catalog import catalog_for
from .dedup import UsedNames
from .items import ItemFactory, PURPOSE_DECORATION, clean_item_name

MIN_PURPOSEFUL = 3
MAX_PURPOSEFUL = 5


class ItemPlacementPlanner:
    def __init__(
        self,
        llm_call,
        theme: str,
        rng: random.Random,
        used_names: UsedNames,
        factory: ItemFactory,
        filler_chance: float = 0.25,
        pickable_chance: float = 0.8,
    ):
        self.llm_call = llm_call
        self.theme = theme
        self.rng = rng
        self.used_names = used_names
        self.factory = factory
        self.filler_chance = filler_chance
        self.pickable_chance = pickable_chance

    def _admit(self, room: Room, item: Item | None) -> bool:
        if item is None:
            return False
        self.used_names.add(item.name)
        room.items.append(item)
        return True

    def place_purposeful(self, world: GameWorld) -> List[Item]:
        rooms = list(world.rooms.values())[:-1]
        catalog = catalog_for(self.theme)
        count = min(self.rng.randint(MIN_PURPOSEFUL, MAX_PURPOSEFUL), len(catalog), len(rooms))
        if count <= 0:
            return []
        entries = self.rng.sample(list(catalog), count)
        placed: List[Item] = []
        for room, (item_type, purpose) in zip(rooms, entries):
            raw = prompts.ask(
                self.llm_call,
                prompts.ITEM_NAME_SYSTEM,
                prompts.purposeful_item_name_prompt(item_type, room.name, self.theme),
                prompts.ITEM_NAME_TUNING,
            )
            name = clean_item_name(raw) or item_type
            if name in self.used_names:
                logging.debug(f"Skipping purposeful item '{name}' in {room.id}: near-duplicate")
                continue
            item = self.factory.create(room, name, purpose, is_pickable=True)
            if self._admit(room, item):
                placed.append(item)
        logging.info(f"Placed {len(placed)} purposeful items")
        return placed

    def place_filler(self, world: GameWorld) -> List[Item]:
        placed: List[Item] = []
        for room in world.rooms.values():
            if room.items:
                continue
            if self.rng.random() >= self.filler_chance:
                continue
            raw = prompts.ask(
                self.llm_call,
                prompts.ITEM_NAME_SYSTEM,
                prompts.item_name_prompt(room.name, self.theme),
                prompts.ITEM_NAME_TUNING,
            )
            name = clean_item_name(raw)
            if not name:
                continue
            if name in self.used_names:
                logging.debug(f"Skipping filler item '{name}' in {room.id}: near-duplicate")
                continue
            pickable = self.rng.random() < self.pickable_chance
            item = self.factory.create(room, name, PURPOSE_DECORATION, is_pickable=pickable)
            if self._admit(room, item):
                placed.append(item)
        logging.info(f"Placed {len(placed)} filler items")
        return placed

    def plan(self, world: GameWorld) -> List[Item]:
        return self.place_purposeful(world) + self.place_filler(world)
