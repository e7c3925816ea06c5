"""Renderers block_engine — sérialisation block grammar + export JSON."""
from .serializer import (
    BLOCK_RENDERERS,
    serialize_block,
    serialize_blocks,
    encode_attributes,
)
from .base import Renderer, BlockGrammarRenderer, JSONTreeRenderer, get_renderer

__all__ = [
    "BLOCK_RENDERERS", "serialize_block", "serialize_blocks", "encode_attributes",
    "Renderer", "BlockGrammarRenderer", "JSONTreeRenderer", "get_renderer",
]
