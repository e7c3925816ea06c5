"""Pattern CTA — centré, split, bannière, carte."""
from typing import Literal, Optional

from ..core.schemas import BlockNode
from .base import (
    SectionConfig, resolve_layout,
    button, buttons, column, columns, container, group, heading, padding, paragraph,
)

CtaLayout = Literal["centered", "split", "banner", "card"]
DEFAULT_LAYOUT = "centered"


class CtaConfig(SectionConfig):
    heading: str = ""
    description: str = ""
    button_text: str = ""
    button_url: str = ""
    secondary_button_text: Optional[str] = None
    secondary_button_url: Optional[str] = None
    background_color: Optional[str] = None
    background_image: Optional[str] = None


# ── Stratégies ───────────────────────────────────────────────────────────────

def centered_cta(cfg: CtaConfig) -> BlockNode:
    # Bouton principal toujours émis : sans url le rendu retombe sur href="#"
    btns = [button(cfg.button_text, cfg.button_url, className="is-style-fill")]
    if cfg.secondary_button_text and cfg.secondary_button_url:
        btns.append(button(cfg.secondary_button_text, cfg.secondary_button_url, className="is-style-outline"))

    blocks = [
        heading(cfg.heading, level=2, textAlign="center"),
        paragraph(cfg.description, align="center", fontSize="medium"),
        buttons(btns, justify="center"),
    ]

    if cfg.background_image:
        return container("core/cover", {"url": cfg.background_image, "dimRatio": 70, "align": "full"}, blocks)

    attrs = {"layout": {"type": "constrained"}, "align": "full", "style": padding("80px", "80px")}
    if cfg.background_color:
        attrs["backgroundColor"] = cfg.background_color
    return group(blocks, **attrs)


def split_cta(cfg: CtaConfig) -> BlockNode:
    text_col = column(
        [heading(cfg.heading, level=2), paragraph(cfg.description, fontSize="medium")],
        width="66.66%",
    )
    action_col = column(
        [buttons([button(cfg.button_text, cfg.button_url)], justify="right")],
        width="33.33%", verticalAlignment="center",
    )
    return group(
        [columns([text_col, action_col], verticalAlignment="center", isStackedOnMobile=True)],
        layout={"type": "constrained"},
        align="full",
        style=padding("60px", "60px"),
    )


def banner_cta(cfg: CtaConfig) -> BlockNode:
    white_text = {"color": {"text": "#ffffff"}}
    return group(
        [
            paragraph(cfg.heading, fontSize="medium", style=white_text),
            buttons([button(cfg.button_text, cfg.button_url, className="is-style-outline", style=white_text)]),
        ],
        layout={"type": "flex", "flexWrap": "wrap", "justifyContent": "space-between"},
        align="full",
        style={
            **padding("20px", "20px", "40px", "40px"),
            "color": {"background": cfg.background_color or "#1e40af"},
        },
    )


def card_cta(cfg: CtaConfig) -> BlockNode:
    card = group(
        [
            heading(cfg.heading, level=3, textAlign="center"),
            paragraph(cfg.description, align="center"),
            buttons([button(cfg.button_text, cfg.button_url)], justify="center"),
        ],
        layout={"type": "constrained", "contentSize": "600px"},
        style={
            **padding("40px", "40px", "40px", "40px"),
            "border": {"radius": "12px"},
            "color": {"background": cfg.background_color or "#f3f4f6"},
        },
    )
    return group([card], layout={"type": "constrained"}, style=padding("40px", "40px"))


LAYOUTS = {
    "centered": centered_cta,
    "split":    split_cta,
    "banner":   banner_cta,
    "card":     card_cta,
}


def create_cta_pattern(config, layout: Optional[CtaLayout] = None) -> BlockNode:
    """Section call-to-action. Layout par défaut : centré."""
    cfg = CtaConfig.coerce(config)
    strategy = resolve_layout(LAYOUTS, layout or cfg.layout, DEFAULT_LAYOUT, "cta")
    return strategy(cfg)
