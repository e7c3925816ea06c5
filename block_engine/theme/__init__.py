"""Thème — config partielle → theme.json."""
from .schemas import (
    ThemeConfig, ColorEntry, ColorPalette, GradientPreset,
    TypographyConfig, FontFamily, FontFace, FontSize, FluidSize,
    SpacingConfig, SpacingSize, LayoutConfig, StylesConfig,
)
from .generator import generate_theme_json, theme_to_json, slug_to_name, build_color_palette

__all__ = [
    "ThemeConfig", "ColorEntry", "ColorPalette", "GradientPreset",
    "TypographyConfig", "FontFamily", "FontFace", "FontSize", "FluidSize",
    "SpacingConfig", "SpacingSize", "LayoutConfig", "StylesConfig",
    "generate_theme_json", "theme_to_json", "slug_to_name", "build_color_palette",
]
