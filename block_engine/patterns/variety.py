"""
Variété de layouts — pondérations par secteur d'activité.

Chaque preset donne, pour hero / features / testimonials / cta / footer,
le poids de chaque layout. Tirage cumulatif avec un générateur congruentiel
linéaire : même seed → même page.
"""
import logging
import random
from typing import Callable, Dict, Optional

from . import SECTION_LAYOUTS

log = logging.getLogger(__name__)

LayoutWeights = Dict[str, Dict[str, float]]

VARIED_SECTIONS = ("hero", "features", "testimonials", "cta", "footer")

SEED_RANGE = 1_000_000
_LCG_MULTIPLIER = 1103515245
_LCG_INCREMENT = 12345
_LCG_MASK = 0x7FFFFFFF
_WORD = 2 ** 32


def _weights(hero_w, features_w, testimonials_w, cta_w, footer_w) -> LayoutWeights:
    """Poids positionnels → dicts ordonnés (l'ordre fixe le tirage cumulatif)."""
    return {
        "hero":         dict(zip(("centered", "split-left", "split-right", "minimal", "fullscreen"), hero_w)),
        "features":     dict(zip(("grid-3", "grid-4", "grid-2", "cards", "alternating", "icon-left"), features_w)),
        "testimonials": dict(zip(("cards", "single-large", "quote-wall", "centered"), testimonials_w)),
        "cta":          dict(zip(("centered", "split", "banner", "card"), cta_w)),
        "footer":       dict(zip(("columns", "minimal", "centered", "mega"), footer_w)),
    }


# ── Presets ──────────────────────────────────────────────────────────────────
INDUSTRY_PRESETS: Dict[str, LayoutWeights] = {
    "restaurant": _weights(
        (0.2, 0.15, 0.15, 0.1, 0.4),
        (0.35, 0.05, 0.15, 0.3, 0.1, 0.05),
        (0.35, 0.25, 0.15, 0.25),
        (0.4, 0.2, 0.25, 0.15),
        (0.4, 0.2, 0.25, 0.15),
    ),
    "saas": _weights(
        (0.25, 0.15, 0.35, 0.15, 0.1),
        (0.25, 0.25, 0.1, 0.25, 0.1, 0.05),
        (0.4, 0.2, 0.25, 0.15),
        (0.35, 0.25, 0.15, 0.25),
        (0.35, 0.15, 0.15, 0.35),
    ),
    "creative": _weights(
        (0.15, 0.15, 0.15, 0.25, 0.3),
        (0.2, 0.15, 0.25, 0.15, 0.2, 0.05),
        (0.25, 0.35, 0.2, 0.2),
        (0.3, 0.3, 0.15, 0.25),
        (0.25, 0.35, 0.3, 0.1),
    ),
    "professional": _weights(
        (0.35, 0.25, 0.2, 0.15, 0.05),
        (0.35, 0.15, 0.2, 0.15, 0.1, 0.05),
        (0.35, 0.3, 0.15, 0.2),
        (0.4, 0.3, 0.15, 0.15),
        (0.5, 0.15, 0.15, 0.2),
    ),
    "health": _weights(
        (0.3, 0.2, 0.25, 0.15, 0.1),
        (0.35, 0.1, 0.15, 0.25, 0.1, 0.05),
        (0.35, 0.25, 0.15, 0.25),
        (0.4, 0.2, 0.15, 0.25),
        (0.4, 0.2, 0.25, 0.15),
    ),
    "general": _weights(
        (0.3, 0.15, 0.2, 0.15, 0.2),
        (0.35, 0.15, 0.15, 0.2, 0.1, 0.05),
        (0.35, 0.2, 0.2, 0.25),
        (0.35, 0.25, 0.2, 0.2),
        (0.4, 0.2, 0.2, 0.2),
    ),
}

INDUSTRY_TO_PRESET = {
    "restaurant":   "restaurant",
    "cafe":         "restaurant",
    "food":         "restaurant",
    "saas":         "saas",
    "tech":         "saas",
    "software":     "saas",
    "creative":     "creative",
    "portfolio":    "creative",
    "design":       "creative",
    "professional": "professional",
    "legal":        "professional",
    "finance":      "professional",
    "consulting":   "professional",
    "health":       "health",
    "wellness":     "health",
    "medical":      "health",
    "spa":          "health",
    "general":      "general",
}


# ── Tirage ───────────────────────────────────────────────────────────────────

def seeded_random(seed: int) -> Callable[[], float]:
    """
    Générateur congruentiel linéaire → flottants dans [0, 1].

    Produit en double précision, réduit modulo 2**32 puis masqué (sémantique
    d'un `&` JavaScript) : les seeds déjà stockés redonnent les mêmes pages.
    """
    state = int(seed)

    def _next() -> float:
        nonlocal state
        state = int(float(state) * _LCG_MULTIPLIER + _LCG_INCREMENT) % _WORD & _LCG_MASK
        return state / _LCG_MASK

    return _next


def _random_seed() -> int:
    return random.randrange(SEED_RANGE)


def preset_for(industry: Optional[str]) -> str:
    """Secteur → clé de preset ; inconnu ou absent → general."""
    return INDUSTRY_TO_PRESET.get((industry or "").strip().lower(), "general")


def get_layout_weights(industry: Optional[str]) -> LayoutWeights:
    return INDUSTRY_PRESETS[preset_for(industry)]


def select_layout(industry: Optional[str], section: str, seed: Optional[int] = None) -> str:
    """
    Choisit un layout pour `section` selon les poids du secteur.

    Section sans pondération → son layout par défaut (ou "" si inconnue).
    """
    section_weights = get_layout_weights(industry).get(section)
    if not section_weights:
        layouts = SECTION_LAYOUTS.get(section, ())
        return layouts[0] if layouts else ""

    roll = seeded_random(_random_seed() if seed is None else seed)()
    cumulative = 0.0
    for layout, weight in section_weights.items():
        cumulative += weight
        if roll <= cumulative:
            return layout
    # Arrondis flottants : premier layout
    return next(iter(section_weights))


def select_page_layouts(industry: Optional[str], seed: Optional[int] = None) -> Dict[str, str]:
    """Un layout par section variée, seeds dérivés du seed maître dans un ordre fixe."""
    master = seeded_random(_random_seed() if seed is None else seed)
    layouts = {
        section: select_layout(industry, section, int(master() * SEED_RANGE))
        for section in VARIED_SECTIONS
    }
    log.debug("Layouts %s (seed=%s) : %s", preset_for(industry), seed, layouts)
    return layouts
