"""Prompt templates and sampling parameters for each generation step.

Creative steps (names, descriptions) run hotter than the yes/no validation
call. Every system prompt is a module constant so callers and tests can tell
the steps apart.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Tuning:
    temperature: float
    max_tokens: int


ROOM_NAMES_TUNING = Tuning(0.8, 500)
ROOM_DESCRIPTION_TUNING = Tuning(0.7, 400)
CONNECTIONS_TUNING = Tuning(0.7, 1000)
ITEM_NAME_TUNING = Tuning(0.8, 100)
ITEM_DESCRIPTION_TUNING = Tuning(0.7, 300)
EXTRACTION_TUNING = Tuning(0.5, 100)
VALIDATION_TUNING = Tuning(0.3, 50)


ROOM_NAMES_SYSTEM = (
    "You are a text adventure game designer creating room names for a Zork-like game. "
    "Return only a numbered list with no additional text."
)

ROOM_DESCRIPTION_SYSTEM = (
    "You are a text adventure game designer. Create vivid, concise room descriptions "
    "similar to those in the classic game Zork. Keep descriptions under 120 words. "
    "Return only the description, with no headings or commentary."
)

CONNECTIONS_SYSTEM = (
    "You are a text adventure game designer creating the layout for a Zork-like game. "
    "Create connections between rooms using north, south, east, west, up, and down directions. "
    "Return only a list of connections in the format 'RoomID Direction RoomID', one per line."
)

ITEM_NAME_SYSTEM = (
    "You are a text adventure game designer creating item names for a Zork-like game. "
    "Return only the item name with no additional text."
)

ITEM_DESCRIPTION_SYSTEM = (
    "You are a text adventure game designer. Create vivid, concise object descriptions "
    "similar to those in the classic game Zork. Keep descriptions under 60 words. "
    "Return only the description."
)

EXTRACTION_SYSTEM = (
    "You extract objects from text adventure room descriptions. "
    "List only concrete, inanimate objects a player could pick up and carry. "
    "Never list walls, floors, doors, windows, furniture fixed in place, architecture, "
    "landscape features, light or weather, and never list people or creatures. "
    "Answer with a comma-separated list of at most three short nouns, or the single word 'none'."
)

VALIDATION_SYSTEM = (
    "You are checking objects for a text adventure game. "
    "Answer YES if the thing is an inanimate object a player could interact with and carry. "
    "Answer NO if it is scenery, part of the building, a landscape feature or a living creature. "
    "Answer with YES or NO only."
)


def room_names_prompt(theme: str, count: int) -> str:
    return (
        f"Create {count} unique and interesting room names for a {theme}-themed text adventure. "
        "Each name should be brief (1-4 words) and evocative. Format as a numbered list."
    )


def room_description_prompt(room_name: str, theme: str) -> str:
    return (
        f"Create a description for a room called '{room_name}' in a {theme}-themed text adventure. "
        "Describe the room's appearance, atmosphere, and notable features."
    )


def connections_prompt(theme: str, rooms: Iterable[Tuple[str, str]]) -> str:
    listing = "\n".join(f"{room_id}: {name}" for room_id, name in rooms)
    return (
        f"Create connections between these rooms for a {theme}-themed text adventure:\n\n"
        f"{listing}\n\n"
        "Each room should have 1-3 connections. Ensure all rooms are reachable from room_0. "
        "Format each connection as 'RoomID Direction RoomID' (e.g., 'room_0 north room_1')."
    )


def item_name_prompt(room_name: str, theme: str) -> str:
    return (
        f"Create a name for an item that might be found in a room called '{room_name}' "
        f"in a {theme}-themed text adventure. The name should be 1-3 words."
    )


def purposeful_item_name_prompt(item_type: str, room_name: str, theme: str) -> str:
    return (
        f"Give a short, evocative name (1-3 words) for a {item_type} found in a room called "
        f"'{room_name}' in a {theme}-themed text adventure. The name must still make clear it is a {item_type}."
    )


def item_description_prompt(item_name: str, theme: str, purpose: str | None = None) -> str:
    prompt = (
        f"Create a description for an item called '{item_name}' in a {theme}-themed text adventure. "
        "Describe its appearance, material, and any notable features."
    )
    if purpose:
        # Indizio sottile, senza spiegare al giocatore a cosa serve
        prompt += (
            f" Subtly hint that it could be used to {purpose}, "
            "without stating its use outright."
        )
    return prompt


def extraction_prompt(room_name: str, description: str) -> str:
    return (
        f"Room: {room_name}\n"
        f"Description: {description}\n\n"
        "Which portable objects are mentioned in this description?"
    )


def validation_prompt(candidate: str, room_name: str) -> str:
    return f"In a room called '{room_name}', is '{candidate}' a portable inanimate object?"


def ask(llm_call, system: str, user: str, tuning: Tuning) -> str:
    """Single oracle round trip with the step's sampling parameters."""
    return llm_call(system, user, tuning.temperature, tuning.max_tokens)
