"""Exceptions raised by world generation."""


class WorldGenerationError(Exception):
    """World building aborted; no partial world is returned."""
    pass
