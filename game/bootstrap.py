"""Bootstrap utilities: generate the world and create the GameSession."""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Tuple
from zairk.core.map_export import export_map
from zairk.core.session import GameSession
from zairk.gen.generator import GenerationSettings, generate_world
from zairk.oracle.llm_adapter import OllamaClient
from config import get_map_file


def start_session(
    theme: Optional[str] = None,
    llm_call=None,
    seed: Optional[int] = None,
    map_file: Optional[str] = None,
) -> Tuple[GameSession, Optional[Path]]:
    """Generate a world and wrap it in a session.

    Raises WorldGenerationError if the oracle fails; no session is created.
    Returns the session and the path of the exported map (None if disabled).
    """
    settings = GenerationSettings.from_config(theme=theme, seed=seed)
    if llm_call is None:
        client = OllamaClient.from_config()
        if not client.is_available():
            # Non blocchiamo: la prima chiamata fallirà con un errore esplicito
            logging.warning(f"Ollama not reachable at {client.base_url}")
        llm_call = client.complete
    world = generate_world(llm_call, settings)
    session = GameSession(world)
    map_path = None
    target = get_map_file() if map_file is None else map_file
    if target:
        try:
            map_path = export_map(world, target)
        except OSError as e:
            logging.warning(f"Could not write map file {target}: {e}")
    return session, map_path
