"""Description mining: turn objects mentioned in room text into real items.

For every room below the per-room cap the oracle lists the portable objects
its description mentions. Candidates pass the near-duplicate gate, the cap,
and optionally a second low-temperature YES/NO check before being inserted
with purpose ``"found in room"``.
"""
from __future__ import annotations
import logging
import random
import re
from typing import List
from ..core.world import GameWorld, Item, Room
from . import prompts
from .dedup import UsedNames
from .items import ItemFactory, PURPOSE_FOUND_IN_ROOM, clean_item_name
from .sanitizer import clean

_SPLIT_RE = re.compile(r"[,\n;]")


def parse_candidates(text: str) -> List[str]:
    cleaned = clean(text).strip()
    if not cleaned or cleaned.strip(" .").lower() == "none":
        return []
    candidates = []
    for chunk in _SPLIT_RE.split(cleaned):
        chunk = re.sub(r"^\s*(?:\d+[.)]\s*|and\s+)", "", chunk, flags=re.IGNORECASE)
        name = clean_item_name(chunk)
        if name and name.lower() != "none":
            candidates.append(name)
    return candidates


class DescriptionMiner:
    def __init__(
        self,
        llm_call,
        rng: random.Random,
        used_names: UsedNames,
        factory: ItemFactory,
        max_items_per_room: int = 2,
        pickable_chance: float = 0.7,
        validate: bool = True,
    ):
        self.llm_call = llm_call
        self.rng = rng
        self.used_names = used_names
        self.factory = factory
        self.max_items_per_room = max_items_per_room
        self.pickable_chance = pickable_chance
        self.validate = validate

    def _confirm(self, candidate: str, room: Room) -> bool:
        raw = prompts.ask(
            self.llm_call,
            prompts.VALIDATION_SYSTEM,
            prompts.validation_prompt(candidate, room.name),
            prompts.VALIDATION_TUNING,
        )
        return clean(raw).strip().lower().startswith("yes")

    def mine_room(self, room: Room) -> List[Item]:
        if len(room.items) >= self.max_items_per_room or not room.description.strip():
            return []
        raw = prompts.ask(
            self.llm_call,
            prompts.EXTRACTION_SYSTEM,
            prompts.extraction_prompt(room.name, room.description),
            prompts.EXTRACTION_TUNING,
        )
        found: List[Item] = []
        for candidate in parse_candidates(raw):
            if len(room.items) >= self.max_items_per_room:
                break
            if candidate in self.used_names:
                logging.debug(f"Skipping extracted '{candidate}' in {room.id}: near-duplicate")
                continue
            if self.validate and not self._confirm(candidate, room):
                logging.debug(f"Rejected extracted '{candidate}' in {room.id}: not an object")
                continue
            pickable = self.rng.random() < self.pickable_chance
            item = self.factory.create(room, candidate, PURPOSE_FOUND_IN_ROOM, is_pickable=pickable)
            if item is None:
                continue
            self.used_names.add(item.name)
            room.items.append(item)
            found.append(item)
        return found

    def mine(self, world: GameWorld) -> List[Item]:
        found: List[Item] = []
        for room in world.rooms.values():
            found.extend(self.mine_room(room))
        logging.info(f"Extracted {len(found)} items from room descriptions")
        return found
