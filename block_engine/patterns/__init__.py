"""
Patterns de sections — section type + config (+ layout) → BlockNode racine.

Registry section → fonction de composition. Types déclarés mais pas encore
composés (gallery, contact) → placeholder "coming soon". Type inconnu → None.
"""
import logging
from typing import Any, Callable, Dict, Optional

from ..core.schemas import BlockNode
from .base import paragraph, section_group
from .hero import create_hero_pattern, HeroConfig
from .features import create_features_pattern, FeaturesConfig, FeatureItem
from .cta import create_cta_pattern, CtaConfig
from .testimonials import create_testimonials_pattern
from .footer import create_footer_pattern, FooterConfig
from .pricing import create_pricing_pattern, PricingConfig, PricingPlan
from .team import create_team_pattern, TeamConfig, TeamMember
from .stats import create_stats_pattern, StatsConfig, StatItem
from .logos import create_logos_pattern, LogosConfig, LogoItem
from .faq import create_faq_pattern, FAQConfig, FAQItem
from . import hero, features, cta, testimonials, footer, pricing, team, stats, logos, faq

log = logging.getLogger(__name__)

PatternFactory = Callable[[Any, Optional[str]], BlockNode]

# ── Registry ─────────────────────────────────────────────────────────────────
SECTION_PATTERNS: Dict[str, PatternFactory] = {
    "hero":         create_hero_pattern,
    "features":     create_features_pattern,
    "cta":          create_cta_pattern,
    "testimonials": create_testimonials_pattern,
    "footer":       create_footer_pattern,
    "pricing":      create_pricing_pattern,
    "team":         create_team_pattern,
    "stats":        create_stats_pattern,
    "logos":        create_logos_pattern,
    "faq":          create_faq_pattern,
}

SECTION_LAYOUTS: Dict[str, tuple] = {
    name: tuple(module.LAYOUTS)
    for name, module in {
        "hero": hero, "features": features, "cta": cta, "testimonials": testimonials,
        "footer": footer, "pricing": pricing, "team": team, "stats": stats,
        "logos": logos, "faq": faq,
    }.items()
}

PLACEHOLDER_SECTIONS = ("gallery", "contact")

SECTION_ALIASES = {
    "call-to-action": "cta",
    "statistics":     "stats",
    "logo-cloud":     "logos",
    "logo_cloud":     "logos",
}


def normalize_section_type(section_type: Optional[str]) -> str:
    """' Call-To-Action ' → 'cta'. Les types inconnus sont renvoyés normalisés tels quels."""
    key = (section_type or "").strip().lower()
    return SECTION_ALIASES.get(key, key)


def is_known_section(section_type: Optional[str]) -> bool:
    key = normalize_section_type(section_type)
    return key in SECTION_PATTERNS or key in PLACEHOLDER_SECTIONS


def create_placeholder_pattern(section_type: str) -> BlockNode:
    """Groupe contraint avec un paragraphe centré "{Type} section coming soon"."""
    label = section_type[:1].upper() + section_type[1:]
    return section_group([paragraph(f"{label} section coming soon", align="center")])


def create_pattern(section_type: str, config: Any = None, layout: Optional[str] = None) -> Optional[BlockNode]:
    """
    Point d'entrée unique du générateur.

    - type composé → arbre de la stratégie (layout explicite > layout de la config > défaut)
    - type déclaré non composé → placeholder
    - type inconnu → None (à tester par l'appelant)
    """
    key = normalize_section_type(section_type)
    factory = SECTION_PATTERNS.get(key)
    if factory is not None:
        return factory(config, layout)
    if key in PLACEHOLDER_SECTIONS:
        log.info("Section %r pas encore composée → placeholder", key)
        return create_placeholder_pattern(key)
    log.warning("Type de section inconnu : %r", section_type)
    return None


def create_pattern_from_section(section: Any) -> Optional[BlockNode]:
    """Section dict {type, config, layout?} ou objet équivalent → BlockNode | None."""
    if isinstance(section, dict):
        return create_pattern(section.get("type", ""), section.get("config"), section.get("layout"))
    return create_pattern(section.type, getattr(section, "config", None), getattr(section, "layout", None))


__all__ = [
    "SECTION_PATTERNS", "SECTION_LAYOUTS", "PLACEHOLDER_SECTIONS", "SECTION_ALIASES",
    "create_pattern", "create_pattern_from_section", "create_placeholder_pattern",
    "normalize_section_type", "is_known_section",
    "create_hero_pattern", "create_features_pattern", "create_cta_pattern",
    "create_testimonials_pattern", "create_footer_pattern", "create_pricing_pattern",
    "create_team_pattern", "create_stats_pattern", "create_logos_pattern", "create_faq_pattern",
    "HeroConfig", "FeaturesConfig", "FeatureItem", "CtaConfig", "FooterConfig",
    "PricingConfig", "PricingPlan", "TeamConfig", "TeamMember",
    "StatsConfig", "StatItem", "LogosConfig", "LogoItem", "FAQConfig", "FAQItem",
]
