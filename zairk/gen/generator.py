"""World generation pipeline.

Runs the graph builder, the item placement planner and the description
mining pass in order over one shared name set and one random source, then
validates the result. Generation is deterministic for a given seed and a
given sequence of oracle answers.
"""
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Optional
from ..core.world import GameWorld, validate_world
from ..oracle.errors import OracleError
from .builder import WorldGraphBuilder
from .dedup import UsedNames
from .errors import WorldGenerationError
from .extraction import DescriptionMiner
from .items import ItemFactory
from .placement import ItemPlacementPlanner


@dataclass
class GenerationSettings:
    theme: str = "fantasy"
    room_count: int = 10
    max_inventory_size: int = 10
    max_items_per_room: int = 2
    filler_chance: float = 0.25
    pickable_chance: float = 0.8
    extracted_pickable_chance: float = 0.7
    validate_extracted: bool = True
    seed: Optional[int] = None

    @classmethod
    def from_config(cls, **overrides) -> "GenerationSettings":
        from config import (
            get_theme,
            get_room_count,
            get_max_inventory_size,
            get_max_items_per_room,
            get_filler_chance,
            get_pickable_chance,
            get_extracted_pickable_chance,
            get_validate_extracted,
            get_seed,
        )
        values = dict(
            theme=get_theme(),
            room_count=get_room_count(),
            max_inventory_size=get_max_inventory_size(),
            max_items_per_room=get_max_items_per_room(),
            filler_chance=get_filler_chance(),
            pickable_chance=get_pickable_chance(),
            extracted_pickable_chance=get_extracted_pickable_chance(),
            validate_extracted=get_validate_extracted(),
            seed=get_seed(),
        )
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def generate_world(llm_call, settings: Optional[GenerationSettings] = None, rng: Optional[random.Random] = None) -> GameWorld:
    """Generate a complete, connected world.

    Args:
        llm_call: oracle call ``(system, user, temperature, max_tokens) -> str``
        settings: generation parameters (defaults if omitted)
        rng: random source; when omitted one is seeded from ``settings.seed``

    Returns:
        The generated GameWorld, current room set to the starting room

    Raises:
        WorldGenerationError: when an oracle call fails
    """
    settings = settings or GenerationSettings()
    if rng is None:
        rng = random.Random(settings.seed)
    used_names = UsedNames()
    factory = ItemFactory(llm_call, settings.theme)
    try:
        builder = WorldGraphBuilder(
            llm_call,
            settings.theme,
            rng,
            room_count=settings.room_count,
            max_inventory_size=settings.max_inventory_size,
        )
        world = builder.build()
        planner = ItemPlacementPlanner(
            llm_call,
            settings.theme,
            rng,
            used_names,
            factory,
            filler_chance=settings.filler_chance,
            pickable_chance=settings.pickable_chance,
        )
        planner.plan(world)
        miner = DescriptionMiner(
            llm_call,
            rng,
            used_names,
            factory,
            max_items_per_room=settings.max_items_per_room,
            pickable_chance=settings.extracted_pickable_chance,
            validate=settings.validate_extracted,
        )
        miner.mine(world)
    except OracleError as e:
        logging.error(f"World generation aborted: {e}")
        raise WorldGenerationError(f"Failed to generate game world: {e}") from e
    issues = validate_world(world)
    for issue in issues:
        logging.warning(f"[WORLD WARNING] {issue}")
    logging.info(
        f"Generated world '{settings.theme}': {len(world.rooms)} rooms, {len(world.all_items())} items"
    )
    return world
