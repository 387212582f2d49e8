"""World graph construction.

Three strictly sequential phases, each run once:

1. room materialization: names (and descriptions) from the oracle, ids
   ``room_0 .. room_{N-1}``, ``room_0`` as start;
2. connection proposal: ``"roomId direction roomId"`` lines from the oracle,
   each accepted triple becomes a mirrored exit pair;
3. connectivity repair: every room not reachable from the start gets a
   mirrored exit pair that links it back.

Malformed oracle output never aborts the build; oracle failures propagate.
"""
from __future__ import annotations
import logging
import random
from typing import List, Sequence, Tuple
from ..core.world import Direction, GameWorld, Room, reachable_rooms
from . import prompts
from .sanitizer import clean

Connection = Tuple[str, Direction, str]

_PHASES = ("new", "rooms", "connections", "repaired")
_TOKEN_PUNCTUATION = ",.;:()[]'\""


def parse_room_names(text: str, count: int, theme: str) -> List[str]:
    """Names from a numbered list, padded with ``"{theme} Room {k}"``."""
    names: List[str] = []
    seen = set()
    for line in clean(text).split("\n"):
        line = line.strip()
        # Righe introduttive tipo "Here are the names:"
        if not line or line.endswith(":"):
            continue
        number, sep, rest = line.partition(".")
        name = rest if sep and number.strip().isdigit() else line
        name = name.strip(" *_\"'").strip()
        if not name or name.lower() in seen:
            continue
        seen.add(name.lower())
        names.append(name)
        if len(names) >= count:
            break
    while len(names) < count:
        names.append(f"{theme} Room {len(names) + 1}")
    return names


def parse_connections(text: str, room_ids: Sequence[str]) -> List[Connection]:
    """Accepted (from, direction, to) triples; anything else is dropped."""
    known = set(room_ids)
    accepted: List[Connection] = []
    for line in clean(text).split("\n"):
        parts = [p.strip(_TOKEN_PUNCTUATION) for p in line.split()]
        if len(parts) < 3:
            logging.debug(f"Discarding connection line (too short): {line!r}")
            continue
        from_id, raw_dir, to_id = parts[0], parts[1], parts[2]
        direction = Direction.parse(raw_dir)
        if from_id not in known or to_id not in known or direction is None or from_id == to_id:
            logging.debug(f"Discarding connection line: {line!r}")
            continue
        accepted.append((from_id, direction, to_id))
    return accepted


class WorldGraphBuilder:
    """Builds the room graph of a new world.

    Args:
        llm_call: oracle call ``(system, user, temperature, max_tokens) -> str``
        theme: world theme, woven into every prompt
        rng: random source for repair directions
        room_count: number of rooms (at least 1)
        max_inventory_size: inventory capacity stored on the world
    """

    def __init__(self, llm_call, theme: str, rng: random.Random, room_count: int = 10, max_inventory_size: int = 10):
        if room_count < 1:
            raise ValueError("room_count must be >= 1")
        self.llm_call = llm_call
        self.theme = theme
        self.rng = rng
        self.room_count = room_count
        self.world = GameWorld(theme=theme, max_inventory_size=max_inventory_size)
        self.phase = "new"

    def _enter(self, phase: str):
        expected = _PHASES[_PHASES.index(phase) - 1]
        if self.phase != expected:
            raise RuntimeError(f"Cannot run phase '{phase}' after '{self.phase}'")
        self.phase = phase

    # ------------------------------------------------------------------
    # Phase 1
    # ------------------------------------------------------------------
    def materialize_rooms(self) -> GameWorld:
        self._enter("rooms")
        raw = prompts.ask(
            self.llm_call,
            prompts.ROOM_NAMES_SYSTEM,
            prompts.room_names_prompt(self.theme, self.room_count),
            prompts.ROOM_NAMES_TUNING,
        )
        names = parse_room_names(raw, self.room_count, self.theme)
        for i, name in enumerate(names):
            room = Room(id=f"room_{i}", name=name, description=self._describe_room(name))
            self.world.rooms[room.id] = room
        self.world.starting_room_id = "room_0"
        self.world.current_room_id = "room_0"
        logging.info(f"Materialized {len(names)} rooms for theme '{self.theme}'")
        return self.world

    def _describe_room(self, name: str) -> str:
        raw = prompts.ask(
            self.llm_call,
            prompts.ROOM_DESCRIPTION_SYSTEM,
            prompts.room_description_prompt(name, self.theme),
            prompts.ROOM_DESCRIPTION_TUNING,
        )
        description = clean(raw).strip()
        if not description:
            logging.warning(f"Empty description for room '{name}', using fallback")
            return f"You are in the {name}."
        return description

    # ------------------------------------------------------------------
    # Phase 2
    # ------------------------------------------------------------------
    def propose_connections(self) -> List[Connection]:
        self._enter("connections")
        rooms = [(r.id, r.name) for r in self.world.rooms.values()]
        raw = prompts.ask(
            self.llm_call,
            prompts.CONNECTIONS_SYSTEM,
            prompts.connections_prompt(self.theme, rooms),
            prompts.CONNECTIONS_TUNING,
        )
        accepted = parse_connections(raw, list(self.world.rooms))
        for from_id, direction, to_id in accepted:
            self.world.connect(from_id, direction, to_id)
        logging.info(f"Accepted {len(accepted)} proposed connections")
        return accepted

    # ------------------------------------------------------------------
    # Phase 3
    # ------------------------------------------------------------------
    def repair_connectivity(self) -> List[str]:
        """Link every unreachable room back to the start; returns patched ids."""
        self._enter("repaired")
        start_id = self.world.starting_room_id
        reached = reachable_rooms(self.world, start_id)
        reached_set = set(reached)
        patched: List[str] = []
        for room_id in self.world.rooms:
            if room_id in reached_set:
                continue
            anchor_id, direction = self._pick_anchor(reached, room_id)
            self.world.connect(anchor_id, direction, room_id)
            patched.append(room_id)
            logging.info(f"Connected unreachable room {room_id} to {anchor_id} going {direction.value}")
            # La stanza collegata può rendere raggiungibili altre stanze
            for rid in reachable_rooms(self.world, room_id):
                if rid not in reached_set:
                    reached_set.add(rid)
                    reached.append(rid)
        return patched

    def _free_directions(self, anchor: Room, target: Room) -> List[Direction]:
        return [d for d in Direction if d not in anchor.exits and d.opposite not in target.exits]

    def _pick_anchor(self, reached: List[str], room_id: str) -> Tuple[str, Direction]:
        target = self.world.rooms[room_id]
        # Prima la stanza iniziale, poi le altre raggiunte in ordine di visita
        for anchor_id in reached:
            free = self._free_directions(self.world.rooms[anchor_id], target)
            if free:
                return anchor_id, self.rng.choice(free)
        return self.world.starting_room_id, self.rng.choice(list(Direction))

    def build(self) -> GameWorld:
        self.materialize_rooms()
        self.propose_connections()
        self.repair_connectivity()
        return self.world
