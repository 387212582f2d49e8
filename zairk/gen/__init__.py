"""World generation pipeline: graph building, item placement, description mining."""

from .builder import WorldGraphBuilder, parse_room_names, parse_connections
from .catalog import catalog_for, resolve_theme
from .classifier import classify_size
from .dedup import UsedNames, is_near_duplicate, has_near_duplicate
from .errors import WorldGenerationError
from .extraction import DescriptionMiner
from .generator import GenerationSettings, generate_world
from .placement import ItemPlacementPlanner
from .sanitizer import clean

__all__ = [
    'WorldGraphBuilder', 'parse_room_names', 'parse_connections',
    'catalog_for', 'resolve_theme',
    'classify_size',
    'UsedNames', 'is_near_duplicate', 'has_near_duplicate',
    'WorldGenerationError',
    'DescriptionMiner',
    'GenerationSettings', 'generate_world',
    'ItemPlacementPlanner',
    'clean',
]
