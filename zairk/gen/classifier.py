"""Size classification of item names.

Pure keyword lookup: the first list (Huge, Large, Medium) with a keyword that
occurs in the lowercased name wins, otherwise the item is Small. The lists
avoid short words that hide inside unrelated names (``rat`` in ``crate``,
``ox`` in ``box``).
"""
from __future__ import annotations
from typing import Tuple
from ..core.world import Size

# Strutture, architettura e creature viventi
HUGE_KEYWORDS: Tuple[str, ...] = (
    "bridge", "statue", "tower", "gate", "door", "pillar", "column", "archway",
    "staircase", "stairway", "fountain", "monolith", "obelisk", "building",
    "house", "castle", "altar", "boulder", "tree", "wagon", "carriage", "rowboat",
    "galleon", "machine", "reactor", "generator", "furnace",
    "dragon", "giant", "troll", "ogre", "golem", "creature", "beast", "monster",
    "stallion", "elephant", "whale", "serpent",
)

# Mobilio
LARGE_KEYWORDS: Tuple[str, ...] = (
    "chest", "table", "chair", "bed", "desk", "wardrobe", "cabinet",
    "bookcase", "bookshelf", "shelf", "shelves", "throne", "bench", "sofa",
    "couch", "piano", "barrel", "crate", "trunk", "anvil", "cauldron",
    "dresser", "armoire", "coffin", "sarcophagus", "console", "locker",
    "cupboard", "pipe organ",
)

# Oggetti portatili ma ingombranti
MEDIUM_KEYWORDS: Tuple[str, ...] = (
    "lantern", "lamp", "book", "tome", "sword", "shield", "axe", "spear",
    "staff", "helmet", "bottle", "jug", "kettle", "bag", "backpack", "satchel",
    "box", "candelabra", "rope", "shovel", "pickaxe", "hammer", "crossbow",
    "rifle", "toolkit", "drum", "lute", "mirror", "painting", "globe",
    "telescope", "bucket", "basket", "skull",
)


def classify_size(name: str) -> Size:
    lowered = name.lower()
    for size, keywords in (
        (Size.HUGE, HUGE_KEYWORDS),
        (Size.LARGE, LARGE_KEYWORDS),
        (Size.MEDIUM, MEDIUM_KEYWORDS),
    ):
        if any(k in lowered for k in keywords):
            return size
    return Size.SMALL
