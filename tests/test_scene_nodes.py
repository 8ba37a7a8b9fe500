"""
Tests for scene tree ingestion.

This module tests:
- Variant selection (text / shape / container)
- Depth re-assignment during traversal
- Tolerance to malformed payloads
- Hex conversion of colors
"""

import json

import pytest

from design_codegen.scene import (
    ContainerNode,
    NodeKind,
    SceneDocumentSchema,
    ShapeNode,
    TextNode,
    parse_scene_tree,
    rgb_to_hex,
)
from design_codegen.scene.nodes import walk


# ---------------------------------------------------------------------------
# VARIANTS
# ---------------------------------------------------------------------------

class TestNodeVariants:
    """Tests for type-driven variant selection."""

    def test_text_node(self):
        """TEXT nodes carry text and font facts."""
        roots = parse_scene_tree({"name": "Title", "type": "TEXT", "text": "Hi", "fontSize": 24})
        node = roots[0]
        assert isinstance(node, TextNode)
        assert node.kind is NodeKind.TEXT
        assert node.text == "Hi"
        assert node.font_size == 24

    def test_frame_without_children_is_container(self):
        """Container types stay containers even when empty."""
        node = parse_scene_tree({"name": "wrap", "type": "FRAME", "children": []})[0]
        assert isinstance(node, ContainerNode)
        assert node.children == ()

    def test_shape_node(self):
        """Leaf shapes keep their paint."""
        node = parse_scene_tree({
            "name": "bg",
            "type": "RECTANGLE",
            "backgroundColor": {"r": 255, "g": 0, "b": 0},
        })[0]
        assert isinstance(node, ShapeNode)
        assert node.kind is NodeKind.SHAPE
        assert node.background_color.to_hex() == "#ff0000"

    def test_any_type_with_children_is_container(self):
        """A non-container type that has children is treated as a container."""
        node = parse_scene_tree({
            "name": "icon",
            "type": "VECTOR",
            "children": [{"name": "path", "type": "VECTOR"}],
        })[0]
        assert node.kind is NodeKind.CONTAINER


# ---------------------------------------------------------------------------
# INGESTION
# ---------------------------------------------------------------------------

class TestParseSceneTree:
    """Tests for parse_scene_tree()."""

    def test_document_selection(self, sample_document):
        """The selection list becomes the root forest in order."""
        roots = parse_scene_tree(sample_document)
        assert [r.name for r in roots] == ["header-wrap", "main-content", "footer"]

    def test_list_payload(self):
        roots = parse_scene_tree([{"name": "a", "type": "FRAME"}, {"name": "b", "type": "TEXT"}])
        assert [r.name for r in roots] == ["a", "b"]

    def test_validated_document(self, sample_document):
        """An already validated SceneDocumentSchema is accepted."""
        schema = SceneDocumentSchema.model_validate(sample_document)
        assert len(parse_scene_tree(schema)) == 3

    def test_depth_is_reassigned(self):
        """Exported depth values are ignored in favor of tree position."""
        roots = parse_scene_tree({
            "name": "root",
            "type": "FRAME",
            "depth": 5,
            "children": [{"name": "child", "type": "TEXT", "text": "x", "depth": 9}],
        })
        depths = [node.depth for node in walk(roots)]
        assert depths == [0, 1]

    def test_walk_is_preorder(self, sample_document):
        names = [node.name for node in walk(parse_scene_tree(sample_document))]
        assert names[:3] == ["header-wrap", "Page Title", "btn-primary"]
        assert names[-2:] == ["footer", "Copyright"]

    @pytest.mark.parametrize("payload", [None, 42, "not a tree", {"selection": None}])
    def test_unusable_payload_gives_empty_forest(self, payload):
        """Unsupported payloads never raise."""
        assert parse_scene_tree(payload) == []

    def test_invalid_root_is_skipped(self):
        """A root that fails validation is dropped; the rest survive."""
        roots = parse_scene_tree([
            {"name": "bad", "type": "FRAME", "children": "nope"},
            {"name": "good", "type": "FRAME"},
        ])
        assert [r.name for r in roots] == ["good"]

    def test_missing_fields_default(self):
        """Null names and types become empty strings."""
        node = parse_scene_tree({"name": None, "type": None})[0]
        assert node.name == ""
        assert node.type == ""

    def test_null_visible_defaults(self):
        node = parse_scene_tree({"name": "x", "type": "RECTANGLE", "visible": None})[0]
        assert node.visible is True

    def test_invalid_child_is_skipped(self):
        """Only the bad child is dropped; the parent and siblings survive."""
        roots = parse_scene_tree({
            "name": "header-wrap",
            "type": "FRAME",
            "children": [
                {"name": "ok-1", "type": "TEXT", "text": "a"},
                {"name": "bad", "type": "FRAME", "children": "nope"},
                "not a node",
                {"name": "ok-2", "type": "RECTANGLE"},
            ],
        })
        assert [r.name for r in roots] == ["header-wrap"]
        assert [c.name for c in roots[0].children] == ["ok-1", "ok-2"]

    def test_non_finite_color_node_is_skipped(self):
        """Infinite channels fail validation instead of reaching hex conversion."""
        roots = parse_scene_tree({
            "name": "wrap",
            "type": "FRAME",
            "children": [
                {"name": "hot", "type": "RECTANGLE", "backgroundColor": {"r": float("inf"), "g": 0, "b": 0}},
                {"name": "cool", "type": "RECTANGLE", "backgroundColor": {"r": 0, "g": 0, "b": 255}},
            ],
        })
        assert [c.name for c in roots[0].children] == ["cool"]

    def test_deep_tree(self):
        """Nesting far beyond a few hundred levels is still parsed."""
        node = {"name": "leaf", "type": "TEXT", "text": "x"}
        for _ in range(400):
            node = {"name": "group", "type": "FRAME", "children": [node]}

        nodes = list(walk(parse_scene_tree(node)))

        assert len(nodes) == 401
        assert nodes[-1].name == "leaf"
        assert nodes[-1].depth == 400


# ---------------------------------------------------------------------------
# SCHEMAS / COLORS
# ---------------------------------------------------------------------------

class TestSchemasAndColors:
    """Tests for document serialization and hex conversion."""

    def test_document_to_json_uses_aliases(self, sample_document):
        """Re-serialized documents keep the exporter's camelCase keys."""
        text = SceneDocumentSchema.model_validate(sample_document).to_json()
        data = json.loads(text)
        assert "figmaFile" in data
        assert data["selection"][0]["backgroundColor"]["r"] == 59

    @pytest.mark.parametrize("rgb,expected", [
        ((59, 130, 246), "#3b82f6"),
        ((59.4, 130.5, 246), "#3b83f6"),
        ((300, -5, 0), "#ff0000"),
        ((0, 0, 0), "#000000"),
        ((float("inf"), float("-inf"), float("nan")), "#ff0000"),
    ])
    def test_rgb_to_hex(self, rgb, expected):
        """Channels are rounded half-up and clamped."""
        assert rgb_to_hex(*rgb) == expected
