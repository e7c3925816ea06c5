"""Pattern Footer — colonnes, minimal, centré, mega (newsletter)."""
from typing import List, Literal, Optional

from pydantic import Field

from ..core.schemas import BlockNode
from .base import (
    ConfigItem, SectionConfig, resolve_layout, anchor,
    button, buttons, column, columns, heading, link_list, padding, paragraph, section_group, separator,
)

FooterLayout = Literal["columns", "minimal", "centered", "mega"]
DEFAULT_LAYOUT = "columns"

LINK_SEPARATOR = " · "


class FooterLink(ConfigItem):
    text: str = ""
    url: str = "#"


class FooterColumn(ConfigItem):
    title: str = ""
    links: List[FooterLink] = Field(default_factory=list)


class SocialLink(ConfigItem):
    platform: str = ""
    url: str = "#"


class FooterConfig(SectionConfig):
    columns: List[FooterColumn] = Field(default_factory=list)
    copyright: str = ""
    social_links: List[SocialLink] = Field(default_factory=list)
    show_newsletter: bool = False
    newsletter_heading: str = "Stay Updated"
    newsletter_text: str = "Subscribe to our newsletter for the latest updates."
    newsletter_button_text: str = "Subscribe"
    newsletter_url: str = "#newsletter"


def _link_columns(cfg: FooterConfig, **list_attrs) -> BlockNode:
    return columns(
        [column([heading(col.title, level=4), link_list(col.links, **list_attrs)]) for col in cfg.columns],
        isStackedOnMobile=True,
    )


def _social_line(cfg: FooterConfig) -> str:
    return LINK_SEPARATOR.join(anchor(s.url, s.platform) for s in cfg.social_links)


def _social_buttons(cfg: FooterConfig, **extra) -> BlockNode:
    return buttons(
        [button(s.platform, s.url, className="is-style-outline", **extra) for s in cfg.social_links],
        justify="center",
    )


def _copyright(cfg: FooterConfig, **attrs) -> BlockNode:
    return paragraph(cfg.copyright, **attrs)


# ── Stratégies ───────────────────────────────────────────────────────────────

def columns_footer(cfg: FooterConfig) -> BlockNode:
    blocks = []
    if cfg.columns:
        blocks.append(_link_columns(cfg))
    if cfg.social_links:
        blocks.append(_social_buttons(cfg))
    blocks.append(separator())
    blocks.append(_copyright(cfg, align="center", fontSize="small"))
    return section_group(blocks, bottom="40px")


def minimal_footer(cfg: FooterConfig) -> BlockNode:
    blocks = []
    if cfg.social_links:
        blocks.append(paragraph(_social_line(cfg), align="center"))
    blocks.append(_copyright(cfg, align="center", fontSize="small"))
    return section_group(blocks, top="30px", bottom="30px")


def centered_footer(cfg: FooterConfig) -> BlockNode:
    blocks = []
    links = [link for col in cfg.columns for link in col.links]
    if links:
        blocks.append(paragraph(LINK_SEPARATOR.join(anchor(l.url, l.text) for l in links), align="center"))
    if cfg.social_links:
        blocks.append(_social_buttons(cfg, style={"border": {"radius": "50%"}}))
    blocks.append(_copyright(cfg, align="center", fontSize="small"))
    return section_group(blocks, top="40px", bottom="40px")


def mega_footer(cfg: FooterConfig) -> BlockNode:
    blocks = []

    if cfg.show_newsletter:
        blocks.append(columns([
            column([heading(cfg.newsletter_heading, level=3), paragraph(cfg.newsletter_text)], width="40%"),
            column(
                [buttons([button(cfg.newsletter_button_text, cfg.newsletter_url)], justify="right")],
                width="60%", verticalAlignment="center",
            ),
        ], isStackedOnMobile=True))
        blocks.append(separator(style={"spacing": {"margin": {"top": "40px", "bottom": "40px"}}}))

    if cfg.columns:
        blocks.append(_link_columns(cfg, style={"typography": {"lineHeight": "2"}}))

    blocks.append(separator(style={"spacing": {"margin": {"top": "40px", "bottom": "20px"}}}))

    social = [paragraph(_social_line(cfg), align="right", fontSize="small")] if cfg.social_links else []
    blocks.append(columns([
        column([_copyright(cfg, fontSize="small")]),
        column(social),
    ], verticalAlignment="center", isStackedOnMobile=True))

    return section_group(blocks, bottom="40px", backgroundColor="tertiary")


LAYOUTS = {
    "columns":  columns_footer,
    "minimal":  minimal_footer,
    "centered": centered_footer,
    "mega":     mega_footer,
}


def create_footer_pattern(config, layout: Optional[FooterLayout] = None) -> BlockNode:
    """Section footer. Layout par défaut : colonnes de liens."""
    cfg = FooterConfig.coerce(config)
    strategy = resolve_layout(LAYOUTS, layout or cfg.layout, DEFAULT_LAYOUT, "footer")
    return strategy(cfg)
