"""Near-duplicate detection for generated names.

Two names are near-duplicates when they are equal after case-insensitive
trimming, or when one is the regular English plural of the other. Only the
suffix rules below are applied: no stemming, no synonyms.
"""
from __future__ import annotations
from typing import Iterable, Iterator, List, Set

_VOWELS = frozenset("aeiou")
_ES_ENDINGS = ("s", "ss", "sh", "ch", "x", "z")


def normalize(name: str) -> str:
    return name.strip().lower()


def plural_forms(singular: str) -> Set[str]:
    """Plural spellings of an already normalized singular."""
    if not singular:
        return set()
    forms = {singular + "s"}
    if singular.endswith(_ES_ENDINGS):
        forms.add(singular + "es")
    if len(singular) >= 2 and singular.endswith("y") and singular[-2] not in _VOWELS:
        forms.add(singular[:-1] + "ies")
    if singular.endswith("fe"):
        forms.add(singular[:-2] + "ves")
    elif singular.endswith("f"):
        forms.add(singular[:-1] + "ves")
    if len(singular) >= 2 and singular.endswith("o") and singular[-2] not in _VOWELS:
        forms.add(singular + "es")
    return forms


def is_near_duplicate(name_a: str, name_b: str) -> bool:
    a = normalize(name_a)
    b = normalize(name_b)
    if a == b:
        return True
    return b in plural_forms(a) or a in plural_forms(b)


def has_near_duplicate(name: str, existing: Iterable[str]) -> bool:
    return any(is_near_duplicate(name, other) for other in existing)


class UsedNames:
    """Set of names already in the world.

    Membership is case-insensitive and plural aware, so a lookup scans the
    whole collection instead of hashing.
    """

    def __init__(self, names: Iterable[str] = ()):
        self._names: List[str] = []
        for name in names:
            self.add(name)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return has_near_duplicate(name, self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def add(self, name: str) -> bool:
        """Insert ``name``; False (and no insert) when a near-duplicate exists."""
        if not name.strip() or name in self:
            return False
        self._names.append(name.strip())
        return True
