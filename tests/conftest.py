"""Shared fixtures: a scripted oracle and small hand-built worlds."""

import pytest

from zairk.core.world import build_world_from_dict
from zairk.gen import prompts


class ScriptedOracle:
    """Fake oracle answering by system prompt.

    ``script`` maps a system prompt constant to either a string (always
    returned), a list of strings (returned in order, the last one repeated) or
    a callable receiving the user prompt. Unscripted steps answer "".
    """

    def __init__(self, script=None):
        self.script = dict(script or {})
        self.calls = []

    def __call__(self, system, user, temperature, max_tokens):
        self.calls.append((system, user, temperature, max_tokens))
        answer = self.script.get(system, "")
        if callable(answer):
            return answer(user)
        if isinstance(answer, list):
            if len(answer) > 1:
                return answer.pop(0)
            return answer[0] if answer else ""
        return answer

    def calls_for(self, system):
        return [c for c in self.calls if c[0] == system]


def _item_name_from_prompt(user):
    # "... for a lantern found in a room called ..." -> "old lantern"
    if " for a " in user and " found in " in user:
        item_type = user.split(" for a ", 1)[1].split(" found in ", 1)[0]
        return f"old {item_type}"
    # Nome generico per gli oggetti di riempimento
    return "wooden spoon"


@pytest.fixture
def oracle():
    return ScriptedOracle()


@pytest.fixture
def full_script():
    """Answers for every generation step of a 4-room world."""
    return {
        prompts.ROOM_NAMES_SYSTEM: "Here are your rooms:\n1. Great Hall\n2. Armory\n3. Crypt\n4. Tower Top",
        prompts.ROOM_DESCRIPTION_SYSTEM: "A dusty chamber. A silver coin glints on the floor.",
        prompts.CONNECTIONS_SYSTEM: "room_0 north room_1\nroom_1 east room_2\n",
        prompts.ITEM_NAME_SYSTEM: _item_name_from_prompt,
        prompts.ITEM_DESCRIPTION_SYSTEM: "It looks well used.",
        prompts.EXTRACTION_SYSTEM: "silver coin",
        prompts.VALIDATION_SYSTEM: "YES",
    }


@pytest.fixture
def two_room_world():
    """room_0 (start) and room_1 connected north/south, a key in room_1."""
    return build_world_from_dict({
        "theme": "test",
        "starting_room_id": "room_0",
        "max_inventory_size": 10,
        "rooms": [
            {
                "id": "room_0",
                "name": "Cellar",
                "description": "A damp cellar.",
                "exits": {"north": "room_1"},
            },
            {
                "id": "room_1",
                "name": "Pantry",
                "description": "Shelves of jars.",
                "detailed_description": "Rows of dusty jars, one of them cracked.",
                "exits": {"south": "room_0"},
                "items": [
                    {"id": "item_room_1_0", "name": "key", "description": "A small iron key.", "size": "small"},
                ],
            },
        ],
    })
