"""
Scene - Analysis of exported design selections.

Provides:
- parse_scene_tree: JSON payload -> immutable SceneNode forest
- SceneTreeAnalyzer: Semantic layout recommendation
- StyleInfoExtractor: Colors, fonts, sizes, positions
"""

from .analyzer import SceneTreeAnalyzer, format_recommended_structure
from .contracts import (
    AnalysisResult,
    ButtonElement,
    ImageElement,
    ListStructure,
    StyleInfo,
    TextElement,
)
from .nodes import (
    ContainerNode,
    NodeKind,
    RGBAColor,
    SceneNode,
    ShapeNode,
    TextNode,
    parse_scene_tree,
    rgb_to_hex,
)
from .schemas import SceneDocumentSchema, SceneNodeSchema
from .style_extractor import StyleInfoExtractor

__all__ = [
    "SceneTreeAnalyzer",
    "format_recommended_structure",
    "StyleInfoExtractor",
    "AnalysisResult",
    "ButtonElement",
    "ImageElement",
    "ListStructure",
    "StyleInfo",
    "TextElement",
    "ContainerNode",
    "NodeKind",
    "RGBAColor",
    "SceneNode",
    "ShapeNode",
    "TextNode",
    "parse_scene_tree",
    "rgb_to_hex",
    "SceneDocumentSchema",
    "SceneNodeSchema",
]
