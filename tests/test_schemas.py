"""Tests BlockNode — construction, alias camelCase, immuabilité, export."""
import pytest
from pydantic import ValidationError

from block_engine.core.schemas import BlockNode


TREE = {
    "name": "core/group",
    "attributes": {"layout": {"type": "constrained"}},
    "innerContent": [None, None],
    "innerBlocks": [
        {"name": "core/heading", "attributes": {"level": 3}, "innerContent": ["Titre"]},
        {"name": "core/paragraph", "attributes": {}, "innerContent": ["Texte"]},
    ],
}


# ── Construction ─────────────────────────────────────────────────────────────

def test_block_node_defaults():
    b = BlockNode(name="core/spacer")
    assert b.attributes == {}
    assert b.inner_content == []
    assert b.inner_blocks is None
    assert b.children == []


def test_block_node_from_camel_case_json():
    b = BlockNode.model_validate(TREE)
    assert b.name == "core/group"
    assert len(b.children) == 2
    assert b.children[0].attributes["level"] == 3
    assert b.children[1].inner_content == ["Texte"]


def test_block_node_accepts_snake_case_fields():
    b = BlockNode(name="core/paragraph", inner_content=["x"])
    assert b.inner_content == ["x"]


def test_block_node_name_required():
    with pytest.raises(ValidationError):
        BlockNode()


# ── Comportement ─────────────────────────────────────────────────────────────

def test_placeholder_count():
    b = BlockNode.model_validate(TREE)
    assert b.placeholder_count() == 2
    assert b.children[0].placeholder_count() == 0


def test_short_name_strips_core_namespace_only():
    assert BlockNode(name="core/heading").short_name == "heading"
    assert BlockNode(name="acme/widget").short_name == "acme/widget"


def test_block_node_is_frozen():
    b = BlockNode(name="core/paragraph", inner_content=["x"])
    with pytest.raises(ValidationError):
        b.name = "core/heading"


def test_structural_equality():
    assert BlockNode.model_validate(TREE) == BlockNode.model_validate(TREE)
    other = dict(TREE, attributes={"layout": {"type": "flex"}})
    assert BlockNode.model_validate(TREE) != BlockNode.model_validate(other)


# ── Export ───────────────────────────────────────────────────────────────────

def test_to_dict_round_trip_shape():
    assert BlockNode.model_validate(TREE).to_dict() == TREE


def test_to_dict_omits_inner_blocks_on_leaf():
    data = BlockNode(name="core/paragraph", inner_content=["x"]).to_dict()
    assert "innerBlocks" not in data
    assert data["innerContent"] == ["x"]
