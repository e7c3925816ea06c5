"""Pattern Hero — centré, split gauche/droite, minimal, plein écran."""
from typing import List, Literal, Optional

from ..core.schemas import BlockNode
from .base import (
    SectionConfig, resolve_layout,
    button, buttons, column, columns, container, group, heading, image, padding, paragraph, spacer,
)

HeroLayout = Literal["centered", "split-left", "split-right", "minimal", "fullscreen"]
DEFAULT_LAYOUT = "centered"


class HeroConfig(SectionConfig):
    heading: str = ""
    subheading: str = ""
    button_text: Optional[str] = None
    button_url: Optional[str] = None
    secondary_button_text: Optional[str] = None
    secondary_button_url: Optional[str] = None
    background_image: Optional[str] = None
    background_overlay: Optional[int] = None
    alignment: Literal["left", "center", "right"] = "center"


def _hero_buttons(cfg: HeroConfig, primary_style: Optional[str] = "is-style-fill") -> List[BlockNode]:
    """Boutons complets uniquement (texte ET url)."""
    items = []
    if cfg.button_text and cfg.button_url:
        extra = {"className": primary_style} if primary_style else {}
        items.append(button(cfg.button_text, cfg.button_url, **extra))
    if cfg.secondary_button_text and cfg.secondary_button_url:
        items.append(button(cfg.secondary_button_text, cfg.secondary_button_url, className="is-style-outline"))
    return items


# ── Stratégies ───────────────────────────────────────────────────────────────

def centered_hero(cfg: HeroConfig) -> BlockNode:
    align = cfg.alignment
    blocks = [
        heading(cfg.heading, level=1, textAlign=align),
        paragraph(cfg.subheading, align=align, fontSize="large"),
    ]
    btns = _hero_buttons(cfg)
    if btns:
        blocks.append(buttons(btns, justify=align))

    if cfg.background_image:
        return container("core/cover", {
            "url": cfg.background_image,
            "dimRatio": cfg.background_overlay or 50,
            "minHeight": 600,
            "align": "full",
            "contentPosition": "center center",
        }, blocks)

    return group(blocks, layout={"type": "constrained"}, align="full", style=padding("100px", "100px"))


def _split_hero(cfg: HeroConfig, content_side: str) -> BlockNode:
    text_blocks = [
        heading(cfg.heading, level=1, textAlign="left"),
        paragraph(cfg.subheading, align="left", fontSize="large"),
    ]
    # Le bouton principal sans style : rendu "fill" natif du thème
    btns = _hero_buttons(cfg, primary_style=None)
    if btns:
        text_blocks.append(buttons(btns, justify="left"))

    content_col = column(text_blocks, width="50%", verticalAlignment="center")
    media = [image(cfg.background_image, alt=cfg.heading, sizeSlug="large", className="is-style-rounded")] \
        if cfg.background_image else []
    media_col = column(media, width="50%")

    cols = [content_col, media_col] if content_side == "left" else [media_col, content_col]
    return group(
        [columns(cols, verticalAlignment="center", isStackedOnMobile=True)],
        align="full",
        layout={"type": "constrained"},
        style=padding("80px", "80px"),
    )


def split_left_hero(cfg: HeroConfig) -> BlockNode:
    return _split_hero(cfg, "left")


def split_right_hero(cfg: HeroConfig) -> BlockNode:
    return _split_hero(cfg, "right")


def minimal_hero(cfg: HeroConfig) -> BlockNode:
    blocks = [
        spacer("60px"),
        heading(cfg.heading, level=1, textAlign="center", fontSize="x-large"),
        paragraph(cfg.subheading, align="center", fontSize="medium"),
    ]
    if cfg.button_text and cfg.button_url:
        blocks.append(buttons([button(cfg.button_text, cfg.button_url, className="is-style-outline")], justify="center"))
    blocks.append(spacer("60px"))
    return group(blocks, layout={"type": "constrained", "contentSize": "800px"}, align="full")


def fullscreen_hero(cfg: HeroConfig) -> BlockNode:
    blocks = [
        heading(cfg.heading, level=1, textAlign="center", fontSize="x-large"),
        paragraph(cfg.subheading, align="center", fontSize="large"),
    ]
    btns = _hero_buttons(cfg)
    if btns:
        blocks.append(buttons(btns, justify="center"))

    return container("core/cover", {
        "url": cfg.background_image or "",
        "dimRatio": cfg.background_overlay or 60,
        "minHeightUnit": "vh",
        "minHeight": 100,
        "align": "full",
        "contentPosition": "center center",
    }, blocks)


LAYOUTS = {
    "centered":    centered_hero,
    "split-left":  split_left_hero,
    "split-right": split_right_hero,
    "minimal":     minimal_hero,
    "fullscreen":  fullscreen_hero,
}


def create_hero_pattern(config, layout: Optional[HeroLayout] = None) -> BlockNode:
    """Section hero. Layout : argument > config.layout > "centered"."""
    cfg = HeroConfig.coerce(config)
    strategy = resolve_layout(LAYOUTS, layout or cfg.layout, DEFAULT_LAYOUT, "hero")
    return strategy(cfg)
