"""Pattern Logos — nuage de logos (ligne de 6, grille de 4, texte)."""
from typing import List, Literal, Optional

from pydantic import Field

from ..core.schemas import BlockNode
from .base import (
    ConfigItem, SectionConfig, resolve_layout, chunked,
    column, columns, image, paragraph, section_group, section_header,
)

LogosLayout = Literal["row", "grid", "text"]
DEFAULT_LAYOUT = "row"

LOGO_SEPARATOR = " · "


class LogoItem(ConfigItem):
    name: str = ""
    image: Optional[str] = None


class LogosConfig(SectionConfig):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    logos: List[LogoItem] = Field(default_factory=list)


def _logo_block(logo: LogoItem) -> BlockNode:
    """Image si disponible, sinon le nom en texte."""
    if logo.image:
        return image(logo.image, alt=logo.name, sizeSlug="medium", align="center", className="is-style-logo")
    return paragraph(f"<strong>{logo.name}</strong>", align="center")


def _logo_rows(cfg: LogosConfig, per_row: int) -> List[BlockNode]:
    return [
        columns([column([_logo_block(l)], verticalAlignment="center") for l in row],
                verticalAlignment="center", isStackedOnMobile=False)
        for row in chunked(cfg.logos, per_row)
    ]


# ── Stratégies ───────────────────────────────────────────────────────────────

def row_logos(cfg: LogosConfig) -> BlockNode:
    blocks = section_header(cfg.title, cfg.subtitle, "20px")
    return section_group(blocks + _logo_rows(cfg, 6), top="40px", bottom="40px")


def grid_logos(cfg: LogosConfig) -> BlockNode:
    blocks = section_header(cfg.title, cfg.subtitle, "40px", subtitle_size="medium")
    return section_group(blocks + _logo_rows(cfg, 4), layout={"type": "constrained", "contentSize": "900px"})


def text_logos(cfg: LogosConfig) -> BlockNode:
    blocks = section_header(cfg.title, cfg.subtitle, "20px")
    if cfg.logos:
        names = LOGO_SEPARATOR.join(l.name for l in cfg.logos)
        blocks.append(paragraph(names, align="center", fontSize="large"))
    return section_group(blocks, top="40px", bottom="40px")


LAYOUTS = {
    "row":  row_logos,
    "grid": grid_logos,
    "text": text_logos,
}


def create_logos_pattern(config, layout: Optional[LogosLayout] = None) -> BlockNode:
    """Section logos clients/partenaires. Layout par défaut : ligne de 6."""
    cfg = LogosConfig.coerce(config)
    strategy = resolve_layout(LAYOUTS, layout or cfg.layout, DEFAULT_LAYOUT, "logos")
    return strategy(cfg)
