"""
Scene Nodes - Immutable tagged-union tree built from the exported JSON.

Node variants are decided once, at ingestion, from the node's `type`:

    TEXT                      -> TextNode
    FRAME / GROUP / ... or
    any node with children    -> ContainerNode
    everything else           -> ShapeNode

Analyzers dispatch on `node.kind` instead of probing for optional fields.

Usage:
    from design_codegen.scene.nodes import parse_scene_tree

    roots = parse_scene_tree(payload)   # list of SceneNode, depth re-assigned
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Iterator, List, Optional, Tuple

from pydantic import ValidationError

from ..monitoring.logger import codegen_logger
from .schemas import ColorSchema, SceneDocumentSchema, SceneNodeSchema

logger = logging.getLogger(__name__)

# Errors malformed scene input can still raise after validation
SCENE_ERRORS = (ArithmeticError, RecursionError, TypeError, ValueError)


class NodeKind(str, Enum):
    """Structural variant of a scene node."""
    TEXT = "text"
    SHAPE = "shape"
    CONTAINER = "container"


# Raw design-tool types that own children
CONTAINER_TYPES = frozenset({
    "FRAME",
    "GROUP",
    "COMPONENT",
    "COMPONENT_SET",
    "INSTANCE",
    "SECTION",
    "BOOLEAN_OPERATION",
    "PAGE",
    "DOCUMENT",
})


# ---------------------------------------------------------------------------
# VALUE TYPES
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class RGBAColor:
    """Solid color with r/g/b in 0-255 and alpha in 0-1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_hex(self) -> str:
        """6-digit lowercase hex; alpha is dropped."""
        return rgb_to_hex(self.r, self.g, self.b)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Convert channel values to `#rrggbb`.

    Each channel is rounded half-up to the nearest integer and clamped
    to 0-255 before formatting. NaN reads as 0, infinities clamp.
    """
    def channel(value: float) -> str:
        if math.isnan(value):
            return "00"
        if math.isinf(value):
            return "ff" if value > 0 else "00"
        rounded = int(value + 0.5) if value >= 0 else 0
        return f"{min(rounded, 255):02x}"

    return f"#{channel(r)}{channel(g)}{channel(b)}"


# ---------------------------------------------------------------------------
# NODE VARIANTS
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SceneNode:
    """Fields shared by every node variant."""

    kind: ClassVar[NodeKind]

    id: str = ""
    name: str = ""
    type: str = ""
    visible: bool = True
    depth: int = 0
    position: Optional[Point] = None
    size: Optional[Size] = None

    @property
    def lower_name(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class TextNode(SceneNode):
    kind: ClassVar[NodeKind] = NodeKind.TEXT

    text: str = ""
    font_size: Optional[float] = None
    font_family: Optional[str] = None
    font_weight: Optional[str] = None


@dataclass(frozen=True)
class ShapeNode(SceneNode):
    kind: ClassVar[NodeKind] = NodeKind.SHAPE

    background_color: Optional[RGBAColor] = None
    border_color: Optional[RGBAColor] = None
    border_width: Optional[float] = None
    border_radius: Optional[float] = None


@dataclass(frozen=True)
class ContainerNode(ShapeNode):
    kind: ClassVar[NodeKind] = NodeKind.CONTAINER

    children: Tuple[SceneNode, ...] = ()


def child_nodes(node: SceneNode) -> Tuple[SceneNode, ...]:
    """Children of a container, empty for leaf variants."""
    if node.kind is NodeKind.CONTAINER:
        return node.children
    return ()


def walk(nodes: Optional[List[SceneNode]]) -> Iterator[SceneNode]:
    """Depth-first, pre-order iteration over a forest."""
    stack = list(reversed(nodes or ()))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(child_nodes(node)))


# ---------------------------------------------------------------------------
# INGESTION
# ---------------------------------------------------------------------------

def _color(schema: Optional[ColorSchema]) -> Optional[RGBAColor]:
    if schema is None:
        return None
    return RGBAColor(r=schema.r, g=schema.g, b=schema.b, a=schema.a)


def _validate_node(raw: Any, label: str) -> Optional[SceneNodeSchema]:
    """Validate one node's own fields; None (and a warning) if it is unusable."""
    if isinstance(raw, SceneNodeSchema):
        return raw
    try:
        return SceneNodeSchema.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Skipping invalid {label}: {e.error_count()} error(s)")
        return None


def build_node(schema: SceneNodeSchema, depth: int = 0) -> SceneNode:
    """
    Convert a validated schema node (and its subtree) into a SceneNode.

    Children are validated one by one; an invalid child is skipped and
    its siblings are kept.

    Args:
        schema: Validated node
        depth: Depth assigned to this node; children get depth + 1

    Returns:
        TextNode, ShapeNode or ContainerNode
    """
    common = dict(
        id="" if schema.id is None else str(schema.id),
        name=schema.name,
        type=schema.type,
        visible=schema.visible,
        depth=depth,
        position=Point(schema.position.x, schema.position.y) if schema.position else None,
        size=Size(schema.size.width, schema.size.height) if schema.size else None,
    )

    node_type = schema.type.upper()

    if node_type == "TEXT":
        return TextNode(
            **common,
            text=schema.text or "",
            font_size=schema.font_size,
            font_family=schema.font_family,
            font_weight=None if schema.font_weight is None else str(schema.font_weight),
        )

    paint = dict(
        background_color=_color(schema.background_color),
        border_color=_color(schema.border_color),
        border_width=schema.border_width,
        border_radius=schema.border_radius,
    )

    if node_type in CONTAINER_TYPES or schema.children:
        children = []
        for index, raw_child in enumerate(schema.children):
            child = _validate_node(raw_child, f"child #{index} of \"{schema.name}\"")
            if child is not None:
                children.append(build_node(child, depth + 1))
        return ContainerNode(**common, **paint, children=tuple(children))

    return ShapeNode(**common, **paint)


def _selection_of(payload: Any) -> List[Any]:
    """Root node payloads from a document object or a bare list."""
    if payload is None:
        return []
    if isinstance(payload, SceneDocumentSchema):
        return list(payload.selection)
    if isinstance(payload, dict):
        if "selection" in payload:
            return list(payload.get("selection") or [])
        return [payload]
    if isinstance(payload, (list, tuple)):
        return list(payload)
    raise TypeError(f"Unsupported scene payload: {type(payload).__name__}")


def parse_scene_tree(payload: Any) -> List[SceneNode]:
    """
    Build the SceneNode forest from an exported payload.

    Accepts a `{"selection": [...]}` document, a single node object, a
    list of node objects, or an already validated SceneDocumentSchema.
    Nodes that fail validation are skipped with a warning (only that
    node and its subtree); an unusable payload yields an empty forest.

    Returns:
        Root nodes in selection order, depths starting at 0
    """
    try:
        raw_roots = _selection_of(payload)
    except TypeError as e:
        logger.warning(f"Ignoring scene payload: {e}")
        return []

    roots: List[SceneNode] = []
    for index, raw in enumerate(raw_roots):
        schema = _validate_node(raw, f"root node #{index}")
        if schema is None:
            continue
        try:
            roots.append(build_node(schema, depth=0))
        except SCENE_ERRORS as e:
            codegen_logger.log_error(f"building root node #{index}", e)

    logger.debug(f"Parsed scene tree with {len(roots)} root node(s)")
    return roots
