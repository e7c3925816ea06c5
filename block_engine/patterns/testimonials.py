"""Pattern Testimonials — cartes, grand format, mur de citations, centré."""
from typing import List, Literal, Optional

from pydantic import Field

from ..core.schemas import BlockNode
from .base import (
    ConfigItem, SectionConfig, resolve_layout,
    column, columns, container, group, image, padding, paragraph, section_group,
    section_header,
)

TestimonialsLayout = Literal["cards", "single-large", "quote-wall", "centered"]
DEFAULT_LAYOUT = "cards"

ITALIC = {"typography": {"fontStyle": "italic"}}


class TestimonialItem(ConfigItem):
    quote: str = ""
    author: str = ""
    role: Optional[str] = None
    image: Optional[str] = None


class TestimonialsConfig(SectionConfig):
    title: str = ""
    subtitle: Optional[str] = None
    testimonials: List[TestimonialItem] = Field(default_factory=list)


def _signature(t: TestimonialItem) -> str:
    """— Auteur, Rôle"""
    return f"— {t.author}, {t.role}" if t.role else f"— {t.author}"


# ── Stratégies ───────────────────────────────────────────────────────────────

def card_testimonials(cfg: TestimonialsConfig) -> BlockNode:
    cards = []
    for t in cfg.testimonials:
        blocks = []
        if t.image:
            blocks.append(image(t.image, alt=t.author, align="center", width=80, height=80,
                                className="is-style-rounded"))
        blocks.append(paragraph(f'"{t.quote}"', align="center", style=ITALIC))
        role = f"<br/><em>{t.role}</em>" if t.role else ""
        blocks.append(paragraph(f"<strong>{t.author}</strong>{role}", align="center"))
        cards.append(column(blocks, style=padding("30px", "30px", "20px", "20px")))

    blocks = section_header(cfg.title, cfg.subtitle, "30px")
    blocks.append(columns(cards, isStackedOnMobile=True))
    return section_group(blocks)


def single_large_testimonial(cfg: TestimonialsConfig) -> BlockNode:
    if not cfg.testimonials:
        return card_testimonials(cfg)
    t = cfg.testimonials[0]

    blocks = section_header(cfg.title, None, "40px") + [
        container("core/quote", {"align": "center", "className": "is-style-large"},
                  [paragraph(t.quote, fontSize="large")]),
        paragraph(_signature(t), align="center", fontSize="medium"),
    ]
    return group(blocks, layout={"type": "constrained", "contentSize": "800px"}, style=padding("80px", "80px"))


def quote_wall_testimonials(cfg: TestimonialsConfig) -> BlockNode:
    quotes = [
        group(
            [
                paragraph(f'"{t.quote}"', style=ITALIC),
                paragraph(_signature(t), fontSize="small"),
            ],
            style={
                **padding("20px", "20px", "20px", "20px"),
                "border": {"left": {"width": "4px", "color": "#3b82f6"}},
            },
        )
        for t in cfg.testimonials
    ]
    # Index pair → colonne de gauche
    wall = columns([column(quotes[0::2]), column(quotes[1::2])], isStackedOnMobile=True)
    return section_group(section_header(cfg.title, None, "40px") + [wall])


def centered_testimonials(cfg: TestimonialsConfig) -> BlockNode:
    blocks = section_header(cfg.title, None, None)
    for t in cfg.testimonials:
        role = f"<br/>{t.role}" if t.role else ""
        blocks.append(group(
            [
                paragraph(f'"{t.quote}"', align="center", fontSize="large", style=ITALIC),
                paragraph(f"<strong>{t.author}</strong>{role}", align="center"),
            ],
            layout={"type": "constrained", "contentSize": "700px"},
            style=padding("40px", "40px"),
        ))
    return section_group(blocks)


LAYOUTS = {
    "cards":        card_testimonials,
    "single-large": single_large_testimonial,
    "quote-wall":   quote_wall_testimonials,
    "centered":     centered_testimonials,
}


def create_testimonials_pattern(config, layout: Optional[TestimonialsLayout] = None) -> BlockNode:
    """Section témoignages. Layout par défaut : cartes."""
    cfg = TestimonialsConfig.coerce(config)
    strategy = resolve_layout(LAYOUTS, layout or cfg.layout, DEFAULT_LAYOUT, "testimonials")
    return strategy(cfg)
