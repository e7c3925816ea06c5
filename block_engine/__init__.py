"""
Block engine — sections sémantiques → block markup Gutenberg + theme.json.

    >>> from block_engine import create_pattern, serialize_block
    >>> node = create_pattern("hero", {"heading": "Bonjour"})
    >>> markup = serialize_block(node)
"""
from .core.schemas import BlockNode
from .errors import BlockEngineError
from .patterns import create_pattern, create_pattern_from_section
from .renderer.serializer import serialize_block, serialize_blocks
from .theme.generator import generate_theme_json, theme_to_json
from .manifest import SiteManifest, SiteOutput, build_blocks, render_manifest

__version__ = "0.3.0"

__all__ = [
    "BlockNode",
    "BlockEngineError",
    "create_pattern",
    "create_pattern_from_section",
    "serialize_block",
    "serialize_blocks",
    "generate_theme_json",
    "theme_to_json",
    "SiteManifest",
    "SiteOutput",
    "build_blocks",
    "render_manifest",
]
