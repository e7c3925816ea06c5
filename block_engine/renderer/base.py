"""
Protocol Renderer — interface pluggable pour les sorties (block grammar, JSON…).
"""
import json
from typing import Iterable, Protocol, runtime_checkable

from ..config import JSON_INDENT
from ..core.schemas import BlockNode
from .serializer import serialize_block, serialize_blocks


@runtime_checkable
class Renderer(Protocol):
    def render_block(self, block: BlockNode) -> str: ...
    def render_blocks(self, blocks: Iterable[BlockNode]) -> str: ...


class BlockGrammarRenderer:
    """Markup Gutenberg (commentaires wp:)."""

    def render_block(self, block: BlockNode) -> str:
        return serialize_block(block)

    def render_blocks(self, blocks: Iterable[BlockNode]) -> str:
        return serialize_blocks(blocks)


class JSONTreeRenderer:
    """Arbre BlockNode brut en JSON (debug, échange avec d'autres outils)."""

    def __init__(self, indent: int = JSON_INDENT):
        self.indent = indent

    def render_block(self, block: BlockNode) -> str:
        return json.dumps(block.to_dict(), indent=self.indent, ensure_ascii=False)

    def render_blocks(self, blocks: Iterable[BlockNode]) -> str:
        return json.dumps([b.to_dict() for b in blocks], indent=self.indent, ensure_ascii=False)


RENDERERS = {
    "markup": BlockGrammarRenderer,
    "json":   JSONTreeRenderer,
}


def get_renderer(fmt: str = "markup") -> Renderer:
    """Instancie le renderer demandé (markup par défaut)."""
    return RENDERERS.get(fmt, BlockGrammarRenderer)()
