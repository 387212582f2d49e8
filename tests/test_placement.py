"""Tests for purposeful and filler item placement."""

import itertools
import random

import pytest

from zairk.core.world import Item, build_world_from_dict
from zairk.gen import prompts
from zairk.gen.catalog import catalog_for
from zairk.gen.dedup import UsedNames
from zairk.gen.items import ItemFactory, PURPOSE_DECORATION
from zairk.gen.placement import ItemPlacementPlanner

from conftest import ScriptedOracle, _item_name_from_prompt


def _empty_world(n):
    return build_world_from_dict({
        "theme": "fantasy",
        "rooms": [{"id": f"room_{i}", "name": f"Room {i}", "description": "Bare stone."} for i in range(n)],
    })


def _planner(script, seed=3, **kwargs):
    oracle = ScriptedOracle(script)
    used = UsedNames()
    factory = ItemFactory(oracle, "fantasy")
    planner = ItemPlacementPlanner(oracle, "fantasy", random.Random(seed), used, factory, **kwargs)
    return planner, oracle, used


@pytest.fixture
def item_script():
    return {
        prompts.ITEM_NAME_SYSTEM: _item_name_from_prompt,
        prompts.ITEM_DESCRIPTION_SYSTEM: "It looks well used.",
    }


class TestPurposefulPlacement:
    """Catalog items in the first rooms."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4, 5, 6, 7])
    def test_count_and_rooms(self, item_script, seed):
        world = _empty_world(8)
        planner, _, used = _planner(item_script, seed=seed)
        placed = planner.place_purposeful(world)
        assert 3 <= len(placed) <= 5
        assert world.rooms["room_7"].items == []
        holders = [rid for rid, r in world.rooms.items() if r.items]
        assert holders == [f"room_{i}" for i in range(len(placed))]
        assert all(len(world.rooms[rid].items) == 1 for rid in holders)
        assert len(used) == len(placed)

    def test_items_are_pickable_with_catalog_purpose(self, item_script):
        world = _empty_world(6)
        planner, _, _ = _planner(item_script)
        placed = planner.place_purposeful(world)
        purposes = {purpose for _, purpose in catalog_for("fantasy")}
        for item in placed:
            assert item.is_pickable
            assert item.purpose in purposes
            assert item.name.startswith("old ")
            assert item.description == "It looks well used."

    def test_purpose_hint_in_description_prompt(self, item_script):
        world = _empty_world(6)
        planner, oracle, _ = _planner(item_script)
        placed = planner.place_purposeful(world)
        desc_prompts = [c[1] for c in oracle.calls_for(prompts.ITEM_DESCRIPTION_SYSTEM)]
        assert len(desc_prompts) == len(placed)
        for item, prompt in zip(placed, desc_prompts):
            assert f"could be used to {item.purpose}" in prompt

    def test_count_limited_by_rooms(self, item_script):
        world = _empty_world(3)
        planner, _, _ = _planner(item_script)
        placed = planner.place_purposeful(world)
        assert len(placed) == 2
        assert world.rooms["room_2"].items == []

    def test_single_room_gets_nothing(self, item_script):
        world = _empty_world(1)
        planner, oracle, _ = _planner(item_script)
        assert planner.place_purposeful(world) == []
        assert oracle.calls == []

    def test_near_duplicates_skipped(self):
        script = {
            prompts.ITEM_NAME_SYSTEM: "Brass Lantern",
            prompts.ITEM_DESCRIPTION_SYSTEM: "Dented but working.",
        }
        world = _empty_world(8)
        planner, _, used = _planner(script)
        placed = planner.place_purposeful(world)
        assert [i.name for i in placed] == ["Brass Lantern"]
        assert list(used) == ["Brass Lantern"]

    def test_empty_name_falls_back_to_item_type(self):
        script = {prompts.ITEM_NAME_SYSTEM: "", prompts.ITEM_DESCRIPTION_SYSTEM: "Plain."}
        world = _empty_world(6)
        planner, _, _ = _planner(script)
        placed = planner.place_purposeful(world)
        types = {t for t, _ in catalog_for("fantasy")}
        assert placed
        assert all(i.name in types for i in placed)

    def test_empty_description_drops_item(self, item_script):
        item_script[prompts.ITEM_DESCRIPTION_SYSTEM] = ""
        world = _empty_world(6)
        planner, _, used = _planner(item_script)
        assert planner.place_purposeful(world) == []
        assert len(used) == 0
        assert all(r.items == [] for r in world.rooms.values())

    def test_item_ids_per_room(self, item_script):
        world = _empty_world(6)
        planner, _, _ = _planner(item_script)
        for item in planner.place_purposeful(world):
            room_id = next(rid for rid, r in world.rooms.items() if item in r.items)
            assert item.id == f"item_{room_id}_0"


class TestFillerPlacement:
    """Generic items in empty rooms."""

    @staticmethod
    def _distinct_names():
        counter = itertools.count()
        return lambda user: f"trinket number {next(counter)}"

    def test_every_empty_room_with_certain_chance(self):
        script = {
            prompts.ITEM_NAME_SYSTEM: self._distinct_names(),
            prompts.ITEM_DESCRIPTION_SYSTEM: "A trinket.",
        }
        world = _empty_world(4)
        world.rooms["room_1"].items.append(Item(id="item_room_1_0", name="bell"))
        planner, oracle, _ = _planner(script, filler_chance=1.0)
        placed = planner.place_filler(world)
        assert len(placed) == 3
        assert [i.name for i in world.rooms["room_1"].items] == ["bell"]
        for rid in ("room_0", "room_2", "room_3"):
            assert len(world.rooms[rid].items) == 1
            assert world.rooms[rid].items[0].purpose == PURPOSE_DECORATION
        assert len(oracle.calls_for(prompts.ITEM_NAME_SYSTEM)) == 3

    def test_fenced_name_is_kept(self):
        script = {prompts.ITEM_NAME_SYSTEM: "```Rusty Key```", prompts.ITEM_DESCRIPTION_SYSTEM: "Pitted iron."}
        world = _empty_world(1)
        planner, _, _ = _planner(script, filler_chance=1.0)
        placed = planner.place_filler(world)
        assert [i.name for i in placed] == ["Rusty Key"]

    def test_zero_chance_places_nothing(self):
        script = {prompts.ITEM_NAME_SYSTEM: "cup", prompts.ITEM_DESCRIPTION_SYSTEM: "A cup."}
        world = _empty_world(4)
        planner, oracle, _ = _planner(script, filler_chance=0.0)
        assert planner.place_filler(world) == []
        assert oracle.calls == []

    def test_duplicate_filler_names_skipped(self):
        script = {prompts.ITEM_NAME_SYSTEM: "cups", prompts.ITEM_DESCRIPTION_SYSTEM: "Cups."}
        world = _empty_world(3)
        planner, _, used = _planner(script, filler_chance=1.0)
        used.add("cup")
        assert planner.place_filler(world) == []

    @pytest.mark.parametrize("chance,expected", [(1.0, True), (0.0, False)])
    def test_pickable_chance(self, chance, expected):
        script = {
            prompts.ITEM_NAME_SYSTEM: self._distinct_names(),
            prompts.ITEM_DESCRIPTION_SYSTEM: "A trinket.",
        }
        world = _empty_world(3)
        planner, _, _ = _planner(script, filler_chance=1.0, pickable_chance=chance)
        placed = planner.place_filler(world)
        assert placed
        assert all(i.is_pickable is expected for i in placed)

    def test_no_purpose_hint_for_filler(self):
        script = {
            prompts.ITEM_NAME_SYSTEM: self._distinct_names(),
            prompts.ITEM_DESCRIPTION_SYSTEM: "A trinket.",
        }
        world = _empty_world(2)
        planner, oracle, _ = _planner(script, filler_chance=1.0)
        planner.place_filler(world)
        for _, user, _, _ in oracle.calls_for(prompts.ITEM_DESCRIPTION_SYSTEM):
            assert "could be used to" not in user


def test_plan_runs_both_passes():
    script = {
        prompts.ITEM_NAME_SYSTEM: _item_name_from_prompt,
        prompts.ITEM_DESCRIPTION_SYSTEM: "Worn.",
    }
    world = _empty_world(8)
    planner, _, _ = _planner(script, filler_chance=1.0)
    placed = planner.plan(world)
    purposeful = [i for i in placed if i.purpose != PURPOSE_DECORATION]
    filler = [i for i in placed if i.purpose == PURPOSE_DECORATION]
    assert 3 <= len(purposeful) <= 5
    # "wooden spoon" entra una sola volta
    assert [i.name for i in filler] == ["wooden spoon"]
