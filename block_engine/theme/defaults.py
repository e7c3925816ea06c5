"""Valeurs par défaut du thème (palette, échelles typo/espacement, largeurs)."""
from .schemas import FontSize, SpacingSize

DEFAULT_COLORS = {
    "primary":    "#0073aa",
    "secondary":  "#23282d",
    "background": "#ffffff",
    "foreground": "#1e1e1e",
    "accent":     "#cd2653",
}

DEFAULT_FONT_SIZES = [
    FontSize(slug="small",    size="0.875rem", name="Small"),
    FontSize(slug="medium",   size="1rem",     name="Medium"),
    FontSize(slug="large",    size="1.25rem",  name="Large"),
    FontSize(slug="x-large",  size="1.5rem",   name="Extra Large"),
    FontSize(slug="xx-large", size="2rem",     name="Huge"),
]

DEFAULT_SPACING_SIZES = [
    SpacingSize(slug="10", size="0.625rem", name="Extra Small"),
    SpacingSize(slug="20", size="1rem",     name="Small"),
    SpacingSize(slug="30", size="1.5rem",   name="Medium"),
    SpacingSize(slug="40", size="2rem",     name="Large"),
    SpacingSize(slug="50", size="3rem",     name="Extra Large"),
]

DEFAULT_UNITS = ["px", "rem", "%"]

DEFAULT_CONTENT_SIZE = "650px"
DEFAULT_WIDE_SIZE = "1200px"
