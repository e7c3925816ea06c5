"""Tests patterns — pricing, team, stats, logos, FAQ."""
from block_engine.patterns import (
    create_faq_pattern, create_logos_pattern, create_pricing_pattern,
    create_stats_pattern, create_team_pattern,
)
from block_engine.renderer import serialize_block


def names(b):
    return [c.name for c in b.children]


def texts(b):
    return [c.inner_content[0] for c in b.children if c.inner_content and c.inner_content[0] is not None]


def rows(root):
    return [c for c in root.children if c.name == "core/columns"]


PLANS = [
    {"name": "Solo", "price": "9€", "period": "mois", "features": ["1 site"], "buttonText": "Choisir"},
    {"name": "Pro", "price": "29€", "description": "Populaire", "highlighted": True,
     "features": ["5 sites", "SSL"], "buttonText": "Essayer", "buttonUrl": "/pro"},
    {"name": "Agence", "price": "99€"},
    {"name": "Entreprise", "price": "Sur devis"},
]

MEMBERS = [
    {"name": "Léa", "role": "CTO", "bio": "Aime Python", "image": "/lea.jpg"},
    {"name": "Tom"},
    {"name": "Zoé", "role": "Design"},
    {"name": "Max"},
    {"name": "Ana", "image": "/ana.jpg"},
]

STATS = [
    {"value": "98%", "label": "Clients satisfaits", "description": "Enquête 2026"},
    {"value": "12", "label": "Pays"},
    {"value": "3k", "label": "Sites"},
    {"value": "24/7", "label": "Support"},
    {"value": "5", "label": "Bureaux"},
]

FAQ = [{"question": f"Q{i}?", "answer": f"R{i}"} for i in range(3)]


# ── Pricing ──────────────────────────────────────────────────────────────────

def test_pricing_columns_rows_of_three():
    root = create_pricing_pattern({"title": "Tarifs", "plans": PLANS})
    assert names(root)[:2] == ["core/heading", "core/spacer"]
    assert [len(r.children) for r in rows(root)] == [3, 1]


def test_pricing_plan_column_contents():
    solo, pro, agence = rows(create_pricing_pattern({"plans": PLANS}))[0].children
    assert names(solo) == ["core/heading", "core/paragraph", "core/list", "core/buttons"]
    assert texts(solo)[:2] == ["Solo", "<strong>9€</strong> / mois"]
    assert names(pro) == ["core/heading", "core/paragraph", "core/paragraph", "core/list", "core/buttons"]
    assert len(pro.children[3].children) == 2
    assert names(agence) == ["core/heading", "core/paragraph"]
    assert texts(agence) == ["Agence", "<strong>99€</strong>"]


def test_pricing_highlighted_plan():
    solo, pro, _ = rows(create_pricing_pattern({"plans": PLANS}))[0].children
    assert pro.attributes["backgroundColor"] == "tertiary"
    assert pro.attributes["className"] == "is-featured"
    assert "backgroundColor" not in solo.attributes
    assert pro.children[-1].children[0].attributes["className"] == "is-style-fill"
    assert solo.children[-1].children[0].attributes["className"] == "is-style-outline"


def test_pricing_feature_list_markup():
    out = serialize_block(create_pricing_pattern({"plans": PLANS[1:2]}))
    assert '<!-- wp:list {"className":"is-style-checkmark"} -->' in out
    assert "<li>SSL</li>" in out
    assert 'href="/pro">Essayer</a>' in out


def test_pricing_cards_single_row():
    root = create_pricing_pattern({"title": "Tarifs", "plans": PLANS}, "cards")
    assert len(rows(root)) == 1
    cards = rows(root)[0].children
    assert len(cards) == 4
    assert cards[0].attributes["style"]["border"]["radius"] == "12px"
    assert cards[1].attributes["className"] == "is-featured"


def test_pricing_stacked_one_group_per_plan():
    root = create_pricing_pattern({"title": "Tarifs", "plans": PLANS}, "stacked")
    groups = [c for c in root.children if c.name == "core/group"]
    assert len(groups) == 4
    details, action = groups[0].children[0].children
    assert details.attributes["width"] == "66.66%"
    assert "textAlign" not in details.children[0].attributes
    assert action.children[0].attributes["layout"]["justifyContent"] == "right"
    assert groups[2].children[0].children[1].children == []


# ── Team ─────────────────────────────────────────────────────────────────────

def test_team_grid_rows_of_four():
    root = create_team_pattern({"title": "Équipe", "members": MEMBERS})
    assert [len(r.children) for r in rows(root)] == [4, 1]


def test_team_member_optional_fields():
    lea, tom, zoe, _ = rows(create_team_pattern({"members": MEMBERS}))[0].children
    assert names(lea) == ["core/image", "core/heading", "core/paragraph", "core/paragraph"]
    assert lea.children[0].attributes["className"] == "is-style-rounded"
    assert names(tom) == ["core/heading"]
    assert texts(zoe) == ["Zoé", "<em>Design</em>"]


def test_team_cards_rows_of_three():
    root = create_team_pattern({"members": MEMBERS}, "cards")
    assert root.attributes["backgroundColor"] == "tertiary"
    assert [len(r.children) for r in rows(root)] == [3, 2]
    assert rows(root)[0].children[0].attributes["style"]["border"]["width"] == "1px"


def test_team_list_photo_and_text_columns():
    root = create_team_pattern({"members": MEMBERS[:2]}, "list")
    assert names(root) == ["core/columns", "core/spacer", "core/columns"]
    photo, text = rows(root)[0].children
    assert photo.attributes["width"] == "140px"
    assert photo.children[0].name == "core/image"
    assert text.children[0].name == "core/heading"
    assert "textAlign" not in text.children[0].attributes
    assert rows(root)[1].children[0].children == []


# ── Stats ────────────────────────────────────────────────────────────────────

def test_stats_row():
    root = create_stats_pattern({"title": "Chiffres", "stats": STATS[:3]})
    assert names(root) == ["core/heading", "core/spacer", "core/columns"]
    first = rows(root)[0].children[0]
    assert texts(first) == ["<strong>98%</strong>", "Clients satisfaits", "Enquête 2026"]
    assert first.children[0].attributes["fontSize"] == "xx-large"
    assert len(rows(root)[0].children[1].children) == 2


def test_stats_title_optional():
    root = create_stats_pattern({"stats": STATS[:2]})
    assert names(root) == ["core/columns"]


def test_stats_grid_rows_of_two():
    root = create_stats_pattern({"stats": STATS}, "grid")
    assert [len(r.children) for r in rows(root)] == [2, 2, 1]
    assert root.attributes["layout"]["contentSize"] == "800px"


def test_stats_banner_colour():
    root = create_stats_pattern({"title": "Chiffres", "stats": STATS[:2]}, "banner")
    assert root.attributes["backgroundColor"] == "primary"
    assert 'class="wp-block-group has-primary-background-color"' in serialize_block(root)
    custom = create_stats_pattern({"stats": STATS[:2], "backgroundColor": "secondary"}, "banner")
    assert custom.attributes["backgroundColor"] == "secondary"
    assert names(custom) == ["core/columns"]


def test_statistics_alias():
    from block_engine.patterns import create_pattern
    assert create_pattern("statistics", {"stats": STATS}, "grid") == create_stats_pattern({"stats": STATS}, "grid")


# ── Logos ────────────────────────────────────────────────────────────────────

LOGOS = [{"name": f"L{i}", "image": f"/l{i}.svg"} for i in range(8)]


def test_logos_row_of_six():
    root = create_logos_pattern({"title": "Ils nous font confiance", "logos": LOGOS})
    assert [len(r.children) for r in rows(root)] == [6, 2]
    img = rows(root)[0].children[0].children[0]
    assert img.name == "core/image"
    assert img.attributes["url"] == "/l0.svg"
    assert img.attributes["alt"] == "L0"


def test_logos_grid_of_four():
    root = create_logos_pattern({"logos": LOGOS}, "grid")
    assert [len(r.children) for r in rows(root)] == [4, 4]


def test_logo_without_image_renders_name():
    root = create_logos_pattern({"logos": [{"name": "Acme"}]})
    logo = rows(root)[0].children[0].children[0]
    assert logo.name == "core/paragraph"
    assert logo.inner_content == ["<strong>Acme</strong>"]


def test_logos_text_layout():
    root = create_logos_pattern({"logos": [{"name": "Acme"}, {"name": "Globex"}, {"name": "Initech"}]}, "text")
    assert texts(root) == ["Acme · Globex · Initech"]


def test_logos_text_layout_empty():
    assert create_logos_pattern({}, "text").children == []


# ── FAQ ──────────────────────────────────────────────────────────────────────

def test_faq_accordion_details():
    root = create_faq_pattern({"title": "FAQ", "items": FAQ})
    details = [c for c in root.children if c.name == "core/details"]
    assert len(details) == 3
    assert details[0].attributes == {"summary": "Q0?"}
    assert texts(details[0]) == ["R0"]
    assert '<details class="wp-block-details"><summary>Q1?</summary>' in serialize_block(root)


def test_faq_list_separators_between_items():
    root = create_faq_pattern({"items": FAQ}, "list")
    assert names(root) == [
        "core/heading", "core/paragraph", "core/separator",
        "core/heading", "core/paragraph", "core/separator",
        "core/heading", "core/paragraph",
    ]
    assert root.children[0].attributes["level"] == 3


def test_faq_two_column_parity():
    root = create_faq_pattern({"items": FAQ}, "two-column")
    left, right = rows(root)[0].children
    assert texts(left) == ["Q0?", "R0", "Q2?", "R2"]
    assert texts(right) == ["Q1?", "R1"]
