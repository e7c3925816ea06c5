"""
Générateur theme.json — config partielle + défauts → descripteur complet.

Fusion par catégorie (palette, dégradés, familles, tailles, unités,
espacements) : une catégorie fournie et non vide remplace le défaut en bloc,
jamais de fusion élément par élément. Les largeurs de layout retombent
champ par champ sur le défaut.
"""
import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel

from ..config import JSON_INDENT, THEME_SCHEMA_URL, THEME_VERSION
from .defaults import (
    DEFAULT_COLORS, DEFAULT_CONTENT_SIZE, DEFAULT_FONT_SIZES,
    DEFAULT_SPACING_SIZES, DEFAULT_UNITS, DEFAULT_WIDE_SIZE,
)
from .schemas import ColorConfig, ColorEntry, ColorPalette, ThemeConfig

log = logging.getLogger(__name__)

STYLE_CATEGORIES = ("color", "typography", "spacing", "elements", "blocks")


def slug_to_name(slug: str) -> str:
    """'brand-blue' → 'Brand Blue'."""
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def build_color_palette(colors: Optional[ColorConfig] = None) -> List[ColorPalette]:
    """Chaîne brute → nom dérivé du slug ; {color, name} → nom tel quel."""
    palette = []
    for slug, value in (colors or DEFAULT_COLORS).items():
        if isinstance(value, ColorEntry):
            palette.append(ColorPalette(slug=slug, name=value.name, color=value.color))
        elif isinstance(value, dict):
            entry = ColorEntry.model_validate(value)
            palette.append(ColorPalette(slug=slug, name=entry.name, color=entry.color))
        else:
            palette.append(ColorPalette(slug=slug, name=slug_to_name(slug), color=value))
    return palette


def _dump(items: Sequence[BaseModel]) -> List[dict]:
    return [item.model_dump(by_alias=True, exclude_none=True) for item in items]


def _or_default(value: Optional[Sequence[Any]], default: Sequence[Any], category: str) -> Sequence[Any]:
    if value:
        return value
    log.debug("Thème : %s par défaut", category)
    return default


def strip_none(obj: Any) -> Any:
    """Retire récursivement les valeurs None des dicts (et des dicts dans les listes)."""
    if isinstance(obj, dict):
        return {k: strip_none(v) for k, v in obj.items() if v is not None}
    if isinstance(obj, list):
        return [strip_none(v) for v in obj]
    return obj


# ── Sections ─────────────────────────────────────────────────────────────────

def build_settings(cfg: ThemeConfig) -> Dict[str, Any]:
    typography = cfg.typography
    spacing = cfg.spacing
    layout = cfg.layout

    color: Dict[str, Any] = {
        "palette": _dump(build_color_palette(_or_default(cfg.colors, DEFAULT_COLORS, "palette"))),
        "defaultPalette": False,
        "defaultGradients": False,
    }
    if cfg.gradients:
        color["gradients"] = _dump(cfg.gradients)

    typo: Dict[str, Any] = {
        "fluid": bool(typography and typography.fluid),
        "fontSizes": _dump(_or_default(typography and typography.font_sizes, DEFAULT_FONT_SIZES, "fontSizes")),
    }
    if typography and typography.font_families:
        typo["fontFamilies"] = _dump(typography.font_families)

    return {
        "appearanceTools": True,
        "color": color,
        "typography": typo,
        "spacing": {
            "units": list(DEFAULT_UNITS if spacing is None or spacing.units is None else spacing.units),
            "spacingSizes": _dump(_or_default(spacing and spacing.spacing_sizes, DEFAULT_SPACING_SIZES, "spacingSizes")),
        },
        "layout": {
            "contentSize": (layout and layout.content_size) or DEFAULT_CONTENT_SIZE,
            "wideSize": (layout and layout.wide_size) or DEFAULT_WIDE_SIZE,
        },
    }


def build_styles(cfg: ThemeConfig) -> Dict[str, Any]:
    """Surcharges copiées telles quelles ; aucune surcharge → {}."""
    if cfg.styles is None:
        return {}
    return {
        category: getattr(cfg.styles, category)
        for category in STYLE_CATEGORIES
        if getattr(cfg.styles, category) is not None
    }


# ── API ──────────────────────────────────────────────────────────────────────

def generate_theme_json(config: Any = None) -> Dict[str, Any]:
    """
    Config (ThemeConfig, dict ou None) → descripteur theme.json.

    Ne lève pas sur des valeurs de couleur invalides : elles passent telles quelles.
    """
    cfg = config if isinstance(config, ThemeConfig) else ThemeConfig.model_validate(config or {})
    log.debug("Génération theme.json %s", cfg.name or "(sans nom)")
    theme = {
        "$schema": THEME_SCHEMA_URL,
        "version": THEME_VERSION,
        "settings": build_settings(cfg),
        "styles": build_styles(cfg),
    }
    return strip_none(theme)


def theme_to_json(theme: Dict[str, Any], indent: Optional[int] = JSON_INDENT) -> str:
    return json.dumps(theme, indent=indent, ensure_ascii=False)
