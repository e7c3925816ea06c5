"""Pattern Pricing — colonnes (3 par ligne), cartes, empilé."""
from typing import List, Literal, Optional

from pydantic import Field

from ..core.schemas import BlockNode
from .base import (
    ConfigItem, SectionConfig, resolve_layout, chunked,
    button, buttons, column, columns, container, group, heading, leaf, padding, paragraph,
    section_group, section_header,
)

PricingLayout = Literal["columns", "cards", "stacked"]
DEFAULT_LAYOUT = "columns"
PLANS_PER_ROW = 3

FEATURED_CLASS = "is-featured"


class PricingPlan(ConfigItem):
    name: str = ""
    price: str = ""
    period: Optional[str] = None
    description: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    button_text: Optional[str] = None
    button_url: str = "#"
    highlighted: bool = False


class PricingConfig(SectionConfig):
    title: str = ""
    subtitle: Optional[str] = None
    plans: List[PricingPlan] = Field(default_factory=list)


def _price_line(plan: PricingPlan) -> str:
    """<strong>29€</strong> / mois"""
    period = f" / {plan.period}" if plan.period else ""
    return f"<strong>{plan.price}</strong>{period}"


def _feature_list(plan: PricingPlan) -> BlockNode:
    items = [leaf("core/list-item", {}, feature) for feature in plan.features]
    return container("core/list", {"className": "is-style-checkmark"}, items)


def _plan_details(plan: PricingPlan, align: Optional[str] = "center") -> List[BlockNode]:
    """Nom, prix, description optionnelle, liste optionnelle."""
    p_align = {"align": align} if align else {}
    blocks = [
        heading(plan.name, level=3, **({"textAlign": align} if align else {})),
        paragraph(_price_line(plan), fontSize="x-large", **p_align),
    ]
    if plan.description:
        blocks.append(paragraph(plan.description, **p_align))
    if plan.features:
        blocks.append(_feature_list(plan))
    return blocks


def _plan_button(plan: PricingPlan, justify: str = "center") -> List[BlockNode]:
    if not plan.button_text:
        return []
    style = "is-style-fill" if plan.highlighted else "is-style-outline"
    return [buttons([button(plan.button_text, plan.button_url, className=style)], justify=justify)]


def _plan_attrs(plan: PricingPlan, **attrs) -> dict:
    if plan.highlighted:
        attrs["backgroundColor"] = "tertiary"
        attrs["className"] = FEATURED_CLASS
    return attrs


# ── Stratégies ───────────────────────────────────────────────────────────────

def column_pricing(cfg: PricingConfig) -> BlockNode:
    rows = [
        columns(
            [column(_plan_details(p) + _plan_button(p), **_plan_attrs(p)) for p in row],
            isStackedOnMobile=True,
        )
        for row in chunked(cfg.plans, PLANS_PER_ROW)
    ]
    return section_group(section_header(cfg.title, cfg.subtitle, "40px", subtitle_size="medium") + rows)


def card_pricing(cfg: PricingConfig) -> BlockNode:
    cards = [
        column(
            _plan_details(p) + _plan_button(p),
            **_plan_attrs(p, style={
                "border": {"radius": "12px", "width": "1px", "color": "#e5e7eb"},
                **padding("40px", "40px", "30px", "30px"),
            }),
        )
        for p in cfg.plans
    ]
    blocks = section_header(cfg.title, cfg.subtitle, "40px")
    blocks.append(columns(cards, isStackedOnMobile=True))
    return section_group(blocks, top="80px", bottom="80px")


def stacked_pricing(cfg: PricingConfig) -> BlockNode:
    rows = [
        group(
            [columns([
                column(_plan_details(p, align=None), width="66.66%"),
                column(_plan_button(p, justify="right"), width="33.33%", verticalAlignment="center"),
            ], verticalAlignment="center", isStackedOnMobile=True)],
            **_plan_attrs(p, style={
                **padding("30px", "30px", "30px", "30px"),
                "border": {"bottom": {"width": "1px", "color": "#e5e7eb"}},
            }),
        )
        for p in cfg.plans
    ]
    blocks = section_header(cfg.title, cfg.subtitle, "30px")
    return section_group(blocks + rows, layout={"type": "constrained", "contentSize": "900px"})


LAYOUTS = {
    "columns": column_pricing,
    "cards":   card_pricing,
    "stacked": stacked_pricing,
}


def create_pricing_pattern(config, layout: Optional[PricingLayout] = None) -> BlockNode:
    """Section tarifs. Layout par défaut : colonnes de 3 plans."""
    cfg = PricingConfig.coerce(config)
    strategy = resolve_layout(LAYOUTS, layout or cfg.layout, DEFAULT_LAYOUT, "pricing")
    return strategy(cfg)
