"""Pattern FAQ — accordéon (details), liste, deux colonnes."""
from typing import List, Literal, Optional

from pydantic import Field

from ..core.schemas import BlockNode
from .base import (
    ConfigItem, SectionConfig, resolve_layout,
    column, columns, container, heading, paragraph, section_group, section_header, separator,
)

FAQLayout = Literal["accordion", "list", "two-column"]
DEFAULT_LAYOUT = "accordion"


class FAQItem(ConfigItem):
    question: str = ""
    answer: str = ""


class FAQConfig(SectionConfig):
    title: str = ""
    subtitle: Optional[str] = None
    items: List[FAQItem] = Field(default_factory=list)


def _qa_blocks(item: FAQItem) -> List[BlockNode]:
    return [heading(item.question, level=3, fontSize="medium"), paragraph(item.answer)]


# ── Stratégies ───────────────────────────────────────────────────────────────

def accordion_faq(cfg: FAQConfig) -> BlockNode:
    entries = [
        container("core/details", {"summary": item.question}, [paragraph(item.answer)])
        for item in cfg.items
    ]
    blocks = section_header(cfg.title, cfg.subtitle, "30px")
    return section_group(blocks + entries, layout={"type": "constrained", "contentSize": "800px"})


def list_faq(cfg: FAQConfig) -> BlockNode:
    blocks = section_header(cfg.title, cfg.subtitle, "30px")
    for index, item in enumerate(cfg.items):
        if index > 0:
            blocks.append(separator(className="is-style-wide"))
        blocks.extend(_qa_blocks(item))
    return section_group(blocks, layout={"type": "constrained", "contentSize": "800px"})


def two_column_faq(cfg: FAQConfig) -> BlockNode:
    # Index pair → colonne de gauche
    left = [b for item in cfg.items[0::2] for b in _qa_blocks(item)]
    right = [b for item in cfg.items[1::2] for b in _qa_blocks(item)]
    blocks = section_header(cfg.title, cfg.subtitle, "40px")
    blocks.append(columns([column(left), column(right)], isStackedOnMobile=True))
    return section_group(blocks)


LAYOUTS = {
    "accordion":  accordion_faq,
    "list":       list_faq,
    "two-column": two_column_faq,
}


def create_faq_pattern(config, layout: Optional[FAQLayout] = None) -> BlockNode:
    """Section FAQ. Layout par défaut : accordéon."""
    cfg = FAQConfig.coerce(config)
    strategy = resolve_layout(LAYOUTS, layout or cfg.layout, DEFAULT_LAYOUT, "faq")
    return strategy(cfg)
