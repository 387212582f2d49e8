"""Theme catalogs of purposeful items.

Each theme maps to (item type, purpose) pairs. The purpose is a free-text hint
of what the item is for; it is stored on the item and woven into the
description prompt. Unknown themes use ``DEFAULT_CATALOG``.
"""
from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Tuple

PurposeEntry = Tuple[str, str]

DEFAULT_CATALOG: Tuple[PurposeEntry, ...] = (
    ("key", "unlock doors"),
    ("lantern", "provide light in dark areas"),
    ("map", "reveal the layout of the area"),
    ("rope", "climb or descend steep places"),
    ("journal", "reveal clues about the past"),
    ("knife", "cut through obstacles"),
    ("coin pouch", "pay for passage or favours"),
)

THEME_CATALOGS: Mapping[str, Tuple[PurposeEntry, ...]] = MappingProxyType({
    "fantasy": (
        ("key", "unlock doors"),
        ("lantern", "provide light in dark areas"),
        ("scroll", "cast a forgotten spell"),
        ("amulet", "ward off dark magic"),
        ("potion", "heal wounds"),
        ("map", "reveal hidden passages"),
        ("sword", "defend against creatures"),
        ("rope", "climb to high places"),
    ),
    "sci-fi": (
        ("keycard", "open security doors"),
        ("flashlight", "provide light in dark areas"),
        ("data chip", "store access codes"),
        ("medkit", "heal wounds"),
        ("scanner", "detect hidden signals"),
        ("power cell", "restore power to machinery"),
        ("oxygen canister", "survive in airless sections"),
    ),
    "horror": (
        ("rusty key", "unlock doors"),
        ("candle", "provide light in dark areas"),
        ("crucifix", "ward off evil presences"),
        ("diary", "reveal what happened here"),
        ("matches", "light fires"),
        ("photograph", "identify a missing person"),
        ("bandage", "treat injuries"),
    ),
    "mystery": (
        ("key", "unlock doors"),
        ("magnifying glass", "examine small clues"),
        ("letter", "reveal a hidden motive"),
        ("notebook", "record clues"),
        ("pocket watch", "establish the time of the crime"),
        ("torn ticket", "place a suspect at the scene"),
    ),
    "pirate": (
        ("treasure map", "locate buried treasure"),
        ("spyglass", "see distant ships and shores"),
        ("brass key", "unlock treasure chests"),
        ("compass", "find the way at sea"),
        ("cutlass", "fight off boarders"),
        ("rum flask", "bribe a thirsty sailor"),
    ),
    "post-apocalyptic": (
        ("gas mask", "breathe in toxic areas"),
        ("geiger counter", "detect radiation"),
        ("crowbar", "pry open sealed doors"),
        ("water canteen", "survive the wasteland"),
        ("flashlight", "provide light in dark areas"),
        ("fuel can", "power an old generator"),
    ),
})

THEME_ALIASES: Mapping[str, str] = MappingProxyType({
    "scifi": "sci-fi",
    "sci fi": "sci-fi",
    "science fiction": "sci-fi",
    "space": "sci-fi",
    "cyberpunk": "sci-fi",
    "medieval": "fantasy",
    "magic": "fantasy",
    "gothic": "horror",
    "haunted": "horror",
    "detective": "mystery",
    "noir": "mystery",
    "pirates": "pirate",
    "nautical": "pirate",
    "post apocalyptic": "post-apocalyptic",
    "postapocalyptic": "post-apocalyptic",
    "apocalypse": "post-apocalyptic",
    "wasteland": "post-apocalyptic",
})


def resolve_theme(theme: str) -> str | None:
    """Catalog key for ``theme`` or None when it has no dedicated catalog."""
    key = " ".join(theme.strip().lower().replace("_", " ").split())
    if key in THEME_CATALOGS:
        return key
    return THEME_ALIASES.get(key)


def catalog_for(theme: str) -> Tuple[PurposeEntry, ...]:
    key = resolve_theme(theme)
    if key is None:
        return DEFAULT_CATALOG
    return THEME_CATALOGS[key]
