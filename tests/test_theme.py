"""Tests theme.json — défauts, surcharge par catégorie, normalisation des couleurs."""
import json

import pytest

from block_engine.theme import ThemeConfig, generate_theme_json, slug_to_name, theme_to_json


# ── Structure / défauts ──────────────────────────────────────────────────────

def test_empty_config_structure():
    theme = generate_theme_json({})
    assert theme["$schema"] == "https://schemas.wp.org/trunk/theme.json"
    assert theme["version"] == 3
    assert theme["styles"] == {}
    assert theme["settings"]["appearanceTools"] is True


def test_none_config_equals_empty_config():
    assert generate_theme_json(None) == generate_theme_json({}) == generate_theme_json(ThemeConfig())


def test_default_palette():
    palette = generate_theme_json()["settings"]["color"]["palette"]
    assert len(palette) == 5
    assert palette[0] == {"slug": "primary", "name": "Primary", "color": "#0073aa"}
    assert [p["slug"] for p in palette] == ["primary", "secondary", "background", "foreground", "accent"]


def test_default_color_flags_and_no_gradients():
    color = generate_theme_json()["settings"]["color"]
    assert color["defaultPalette"] is False
    assert color["defaultGradients"] is False
    assert "gradients" not in color


def test_default_typography():
    typo = generate_theme_json()["settings"]["typography"]
    assert typo["fluid"] is False
    assert "fontFamilies" not in typo
    assert [s["slug"] for s in typo["fontSizes"]] == ["small", "medium", "large", "x-large", "xx-large"]
    assert typo["fontSizes"][4] == {"slug": "xx-large", "size": "2rem", "name": "Huge"}


def test_default_spacing_and_layout():
    settings = generate_theme_json()["settings"]
    assert settings["spacing"]["units"] == ["px", "rem", "%"]
    assert len(settings["spacing"]["spacingSizes"]) == 5
    assert settings["spacing"]["spacingSizes"][0] == {"slug": "10", "size": "0.625rem", "name": "Extra Small"}
    assert settings["layout"] == {"contentSize": "650px", "wideSize": "1200px"}


# ── Couleurs ─────────────────────────────────────────────────────────────────

def test_single_color_replaces_palette_only():
    theme = generate_theme_json({"colors": {"brand-blue": "#123456"}})
    assert theme["settings"]["color"]["palette"] == [{"slug": "brand-blue", "name": "Brand Blue", "color": "#123456"}]
    assert theme["settings"]["layout"] == generate_theme_json()["settings"]["layout"]
    assert theme["settings"]["typography"] == generate_theme_json()["settings"]["typography"]


def test_explicit_color_name_is_kept():
    theme = generate_theme_json({"colors": {"primary": {"color": "#111111", "name": "Encre"}, "accent": "#ff0"}})
    assert theme["settings"]["color"]["palette"] == [
        {"slug": "primary", "name": "Encre", "color": "#111111"},
        {"slug": "accent", "name": "Accent", "color": "#ff0"},
    ]


def test_empty_colors_use_default():
    assert generate_theme_json({"colors": {}})["settings"]["color"]["palette"] == \
        generate_theme_json()["settings"]["color"]["palette"]


def test_invalid_color_passes_through():
    palette = generate_theme_json({"colors": {"primary": "pas-une-couleur"}})["settings"]["color"]["palette"]
    assert palette[0]["color"] == "pas-une-couleur"


def test_gradients_only_when_supplied():
    gradient = {"slug": "sunset", "name": "Sunset", "gradient": "linear-gradient(#f00, #00f)"}
    assert generate_theme_json({"gradients": [gradient]})["settings"]["color"]["gradients"] == [gradient]
    assert "gradients" not in generate_theme_json({"gradients": []})["settings"]["color"]


@pytest.mark.parametrize("slug,name", [
    ("primary", "Primary"),
    ("brand-blue", "Brand Blue"),
    ("x-large", "X Large"),
])
def test_slug_to_name(slug, name):
    assert slug_to_name(slug) == name


# ── Typographie / espacement / layout ────────────────────────────────────────

def test_font_families_with_font_face():
    families = [
        {"slug": "inter", "name": "Inter", "fontFamily": "Inter, sans-serif",
         "fontFace": [{"fontFamily": "Inter", "fontWeight": "400", "fontStyle": "normal",
                       "src": ["file:./fonts/inter.woff2"]}]},
        {"slug": "serif", "name": "Serif", "fontFamily": "Georgia, serif"},
    ]
    typo = generate_theme_json({"typography": {"fontFamilies": families}})["settings"]["typography"]
    assert typo["fontFamilies"] == families


def test_font_sizes_override_and_fluid():
    sizes = [
        {"slug": "s", "size": "14px"},
        {"slug": "m", "size": "16px", "name": "Moyen", "fluid": {"min": "15px", "max": "18px"}},
        {"slug": "l", "size": "20px"},
        {"slug": "xl", "size": "28px"},
    ]
    typo = generate_theme_json({"typography": {"fluid": True, "fontSizes": sizes}})["settings"]["typography"]
    assert typo["fluid"] is True
    assert len(typo["fontSizes"]) == 4
    assert typo["fontSizes"][0] == {"slug": "s", "size": "14px"}
    assert typo["fontSizes"][1]["fluid"] == {"min": "15px", "max": "18px"}


def test_typography_entries_passed_through_unchanged():
    families = [
        {"slug": "inter", "name": "Inter", "fontFamily": "Inter, sans-serif",
         "fontFace": [{"fontFamily": "Inter", "src": ["file:./fonts/inter.woff2"], "fontDisplay": "swap"},
                      {"fontFamily": "Inter", "fontWeight": 700, "src": "file:./fonts/inter-bold.woff2"}]},
    ]
    sizes = [
        {"slug": "s", "size": "14px", "fluid": False},
        {"slug": "m", "size": "16px", "fluid": {"min": "15px"}},
    ]
    typo = generate_theme_json(
        {"typography": {"fontFamilies": families, "fontSizes": sizes}}
    )["settings"]["typography"]
    assert typo["fontFamilies"] == families
    assert typo["fontSizes"] == sizes


def test_preset_entries_keep_extra_keys():
    gradients = [{"slug": "sunset", "name": "Sunset", "gradient": "linear-gradient(#f00,#00f)", "custom": 1}]
    sizes = [{"slug": "1", "size": "4px", "name": "Un", "extra": "x"}]
    settings = generate_theme_json({"gradients": gradients, "spacing": {"spacingSizes": sizes}})["settings"]
    assert settings["color"]["gradients"] == gradients
    assert settings["spacing"]["spacingSizes"] == sizes


def test_explicit_empty_units_kept():
    spacing = generate_theme_json({"spacing": {"units": []}})["settings"]["spacing"]
    assert spacing["units"] == []
    assert generate_theme_json({"spacing": {"units": None}})["settings"]["spacing"]["units"] == ["px", "rem", "%"]


def test_snake_case_keys_accepted():
    typo = generate_theme_json({"typography": {"font_sizes": [{"slug": "s", "size": "1rem"}]}})["settings"]["typography"]
    assert typo["fontSizes"] == [{"slug": "s", "size": "1rem"}]


def test_spacing_overrides():
    spacing = generate_theme_json({"spacing": {"units": ["px", "rem", "%", "vw"]}})["settings"]["spacing"]
    assert spacing["units"] == ["px", "rem", "%", "vw"]
    assert len(spacing["spacingSizes"]) == 5
    sizes = [{"slug": "1", "size": "4px", "name": "Un"}]
    assert generate_theme_json({"spacing": {"spacingSizes": sizes}})["settings"]["spacing"]["spacingSizes"] == sizes


def test_layout_falls_back_field_by_field():
    layout = generate_theme_json({"layout": {"contentSize": "800px"}})["settings"]["layout"]
    assert layout == {"contentSize": "800px", "wideSize": "1200px"}


# ── Styles ───────────────────────────────────────────────────────────────────

def test_styles_passed_through():
    styles = {
        "color": {"background": "var(--wp--preset--color--background)"},
        "elements": {"link": {"color": {"text": "var(--wp--preset--color--primary)"}},
                     "h1": {"typography": {"fontSize": "3rem"}}},
        "blocks": {"core/button": {"border": {"radius": "4px"}}},
    }
    assert generate_theme_json({"styles": styles})["styles"] == styles


# ── Sortie JSON ──────────────────────────────────────────────────────────────

def test_output_has_no_none():
    theme = generate_theme_json({"typography": {"fontSizes": [{"slug": "s", "size": "1rem"}]}, "layout": {}})
    assert "null" not in json.dumps(theme)


def test_theme_to_json_round_trip():
    theme = generate_theme_json({"colors": {"primary": "#000"}})
    text = theme_to_json(theme)
    assert json.loads(text) == theme
    assert "\n" not in theme_to_json(theme, indent=None)
