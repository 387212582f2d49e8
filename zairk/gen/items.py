"""Item construction shared by the placement and extraction passes."""
from __future__ import annotations
import logging
from typing import Dict, Optional
from ..core.world import Item, Room, SIZE_WEIGHTS
from . import prompts
from .classifier import classify_size
from .sanitizer import clean, first_line

# Purpose degli oggetti non funzionali
PURPOSE_DECORATION = "decoration"
PURPOSE_FOUND_IN_ROOM = "found in room"

_NAME_STRIP = " .,;:!?*_\"'"


def clean_item_name(raw: str) -> str:
    """Normalize an oracle-proposed name; empty string means no usable name."""
    name = first_line(raw)
    name = name.strip(_NAME_STRIP)
    for article in ("a ", "an ", "the "):
        if name.lower().startswith(article):
            name = name[len(article):]
            break
    return " ".join(name.split())


class ItemFactory:
    """Allocates item ids and asks the oracle for item descriptions."""

    def __init__(self, llm_call, theme: str):
        self.llm_call = llm_call
        self.theme = theme
        self._counters: Dict[str, int] = {}

    def next_id(self, room: Room) -> str:
        n = self._counters.get(room.id, 0)
        self._counters[room.id] = n + 1
        return f"item_{room.id}_{n}"

    def describe(self, name: str, purpose: Optional[str] = None) -> str:
        raw = prompts.ask(
            self.llm_call,
            prompts.ITEM_DESCRIPTION_SYSTEM,
            prompts.item_description_prompt(name, self.theme, purpose),
            prompts.ITEM_DESCRIPTION_TUNING,
        )
        return clean(raw).strip()

    def create(self, room: Room, name: str, purpose: str, is_pickable: bool) -> Optional[Item]:
        """Describe and build an item for ``room``; None when the description is empty."""
        hint = purpose if purpose not in (PURPOSE_DECORATION, PURPOSE_FOUND_IN_ROOM) else None
        description = self.describe(name, hint)
        if not description:
            logging.info(f"No description for '{name}' in {room.id}, item dropped")
            return None
        size = classify_size(name)
        return Item(
            id=self.next_id(room),
            name=name,
            description=description,
            is_pickable=is_pickable,
            weight=SIZE_WEIGHTS[size],
            size=size,
            purpose=purpose,
        )
