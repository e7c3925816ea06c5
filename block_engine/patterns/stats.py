"""Pattern Stats — ligne unique, grille 2 colonnes, bannière colorée."""
from typing import List, Literal, Optional

from pydantic import Field

from ..core.schemas import BlockNode
from .base import (
    ConfigItem, SectionConfig, resolve_layout, chunked,
    column, columns, group, padding, paragraph, section_group, section_header,
)

StatsLayout = Literal["row", "grid", "banner"]
DEFAULT_LAYOUT = "row"


class StatItem(ConfigItem):
    value: str = ""
    label: str = ""
    description: Optional[str] = None


class StatsConfig(SectionConfig):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    stats: List[StatItem] = Field(default_factory=list)
    background_color: Optional[str] = None


def _stat_blocks(stat: StatItem, **text_style) -> List[BlockNode]:
    blocks = [
        paragraph(f"<strong>{stat.value}</strong>", align="center", fontSize="xx-large", **text_style),
        paragraph(stat.label, align="center", **text_style),
    ]
    if stat.description:
        blocks.append(paragraph(stat.description, align="center", fontSize="small", **text_style))
    return blocks


# ── Stratégies ───────────────────────────────────────────────────────────────

def row_stats(cfg: StatsConfig) -> BlockNode:
    blocks = section_header(cfg.title, cfg.subtitle, "30px")
    blocks.append(columns([column(_stat_blocks(s)) for s in cfg.stats], isStackedOnMobile=True))
    return section_group(blocks)


def grid_stats(cfg: StatsConfig) -> BlockNode:
    rows = [
        columns([column(_stat_blocks(s)) for s in row], isStackedOnMobile=True)
        for row in chunked(cfg.stats, 2)
    ]
    blocks = section_header(cfg.title, cfg.subtitle, "30px")
    return section_group(blocks + rows, layout={"type": "constrained", "contentSize": "800px"})


def banner_stats(cfg: StatsConfig) -> BlockNode:
    white = {"style": {"color": {"text": "#ffffff"}}}
    blocks = []
    if cfg.title:
        blocks.append(paragraph(cfg.title, align="center", fontSize="large", **white))
    blocks.append(columns(
        [column(_stat_blocks(s, **white)) for s in cfg.stats],
        verticalAlignment="center", isStackedOnMobile=True,
    ))
    return group(
        blocks,
        layout={"type": "constrained"},
        align="full",
        style=padding("40px", "40px"),
        backgroundColor=cfg.background_color or "primary",
    )


LAYOUTS = {
    "row":    row_stats,
    "grid":   grid_stats,
    "banner": banner_stats,
}


def create_stats_pattern(config, layout: Optional[StatsLayout] = None) -> BlockNode:
    """Section statistiques. Layout par défaut : une ligne."""
    cfg = StatsConfig.coerce(config)
    strategy = resolve_layout(LAYOUTS, layout or cfg.layout, DEFAULT_LAYOUT, "stats")
    return strategy(cfg)
