"""
Config du thème — entrée partielle du générateur theme.json.

Toutes les catégories sont optionnelles : absente ou vide → défaut.
Noms snake_case, alias camelCase du format theme.json acceptés.
Les surcharges de styles sont transmises telles quelles (pas de validation).
"""
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ThemeModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class PresetModel(ThemeModel):
    """Entrée de preset fournie par l'appelant : clés theme.json non modélisées conservées."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


# ── Couleurs ─────────────────────────────────────────────────────────────────

class ColorEntry(ThemeModel):
    """Couleur avec nom explicite (utilisé tel quel)."""
    color: str
    name: str


class ColorPalette(ThemeModel):
    slug: str
    name: str
    color: str


class GradientPreset(PresetModel):
    slug: str
    name: str
    gradient: str


ColorConfig = Dict[str, Union[str, ColorEntry]]


# ── Typographie ──────────────────────────────────────────────────────────────

class FontFace(PresetModel):
    font_family: str
    font_weight: Optional[Union[str, int]] = None
    font_style: Optional[str] = None
    src: Optional[Union[str, List[str]]] = None


class FontFamily(PresetModel):
    slug: str
    name: str
    font_family: str
    font_face: Optional[List[FontFace]] = None


class FluidSize(PresetModel):
    min: Optional[str] = None
    max: Optional[str] = None


class FontSize(PresetModel):
    slug: str
    size: str
    name: Optional[str] = None
    fluid: Optional[Union[bool, FluidSize]] = None


class TypographyConfig(ThemeModel):
    fluid: Optional[bool] = None
    font_families: Optional[List[FontFamily]] = None
    font_sizes: Optional[List[FontSize]] = None


# ── Espacement / layout ──────────────────────────────────────────────────────

class SpacingSize(PresetModel):
    slug: str
    size: str
    name: str


class SpacingConfig(ThemeModel):
    units: Optional[List[str]] = None
    spacing_sizes: Optional[List[SpacingSize]] = None


class LayoutConfig(ThemeModel):
    content_size: Optional[str] = None
    wide_size: Optional[str] = None
    allow_editing: Optional[bool] = None


# ── Styles ───────────────────────────────────────────────────────────────────

class StylesConfig(ThemeModel):
    """Surcharges globales / éléments / blocs (dicts bruts theme.json)."""
    color: Optional[Dict[str, Any]] = None
    typography: Optional[Dict[str, Any]] = None
    spacing: Optional[Dict[str, Any]] = None
    elements: Optional[Dict[str, Any]] = None
    blocks: Optional[Dict[str, Any]] = None


class ThemeConfig(ThemeModel):
    name: Optional[str] = None
    colors: Optional[ColorConfig] = None
    gradients: Optional[List[GradientPreset]] = None
    typography: Optional[TypographyConfig] = None
    spacing: Optional[SpacingConfig] = None
    layout: Optional[LayoutConfig] = None
    styles: Optional[StylesConfig] = None
