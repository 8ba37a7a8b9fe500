"""
Scene Tree Analyzer - Infer semantic layout hints from a scene tree.

Walks the selection depth-first and records:
- Text nodes with a heading/paragraph recommendation
- Containers whose children repeat (list candidates)
- Semantic region tags for root containers
- Component categories (buttons, inputs, tabs, tables)
- Image candidates

Usage:
    from design_codegen.scene import SceneTreeAnalyzer, parse_scene_tree

    analyzer = SceneTreeAnalyzer()
    result = analyzer.analyze(parse_scene_tree(payload))
    print(result.recommended_structure)
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from ..monitoring.logger import codegen_logger
from .contracts import (
    AnalysisResult,
    ButtonElement,
    ImageElement,
    ListStructure,
    TextElement,
)
from .nodes import SCENE_ERRORS, NodeKind, SceneNode, child_nodes, parse_scene_tree

logger = logging.getLogger(__name__)


EMPTY_STRUCTURE_MESSAGE = "No layout structure detected in the selection."


class SceneTreeAnalyzer:
    """
    Heuristic classifier for scene trees.

    All rules match on lowercase substrings of the node name; order
    inside each table is significant (first match wins).
    """

    TITLE_KEYWORDS = ("title", "heading", "header")
    TITLE_MAX_LENGTH = 50
    TITLE_MIN_FONT_SIZE = 20
    MAX_HEADING_LEVEL = 6

    # (keywords, semantic tag) checked in order for root containers
    SEMANTIC_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
        (("header", "top"), "header"),
        (("nav", "menu"), "nav"),
        (("main", "content"), "main"),
        (("footer", "bottom"), "footer"),
        (("sidebar", "aside"), "aside"),
    )
    DEFAULT_SEMANTIC_TAG = "section"

    # (keywords, component category) checked in order for every container
    COMPONENT_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
        (("button", "btn"), "component-btns"),
        (("input", "form"), "component-input"),
        (("tab",), "component-tab"),
        (("table",), "component-table"),
    )
    BUTTON_COMPONENT = "component-btns"

    IMAGE_TYPES = frozenset({"RECTANGLE", "ELLIPSE"})
    IMAGE_KEYWORDS = ("image", "img", "photo", "picture")

    # =========================================================================
    # MAIN ANALYSIS
    # =========================================================================

    def analyze(self, nodes: Optional[Sequence[SceneNode]]) -> AnalysisResult:
        """
        Analyze a forest of scene nodes.

        Args:
            nodes: Root SceneNodes, or raw JSON node payloads which are
                parsed first; None or empty is allowed

        Returns:
            AnalysisResult with recommended_structure filled in; the
            empty result if the input cannot be analyzed
        """
        try:
            result = self._collect(nodes)
        except SCENE_ERRORS as e:
            codegen_logger.log_error("scene analysis", e)
            result = AnalysisResult()

        result.recommended_structure = format_recommended_structure(result)
        logger.debug(
            f"Analysis: {len(result.semantic_tags)} semantic tags, "
            f"{len(result.list_structures)} lists, "
            f"{len(result.text_elements)} texts"
        )
        return result

    def analyze_document(self, payload: Any) -> AnalysisResult:
        """Parse an exported JSON payload and analyze it."""
        return self.analyze(parse_scene_tree(payload))

    # =========================================================================
    # TRAVERSAL
    # =========================================================================

    def _collect(self, nodes: Optional[Sequence[SceneNode]]) -> AnalysisResult:
        if isinstance(nodes, dict):
            roots = parse_scene_tree(nodes)
        else:
            roots = list(nodes or ())
            if not all(isinstance(node, SceneNode) for node in roots):
                roots = parse_scene_tree(roots)

        result = AnalysisResult()
        for node in roots:
            self._analyze_node(node, result)
        return result

    def _analyze_node(self, node: SceneNode, result: AnalysisResult) -> None:
        if node.kind is NodeKind.TEXT and node.text:
            result.text_elements.append(self.classify_text(node))

        if node.kind is NodeKind.CONTAINER:
            children = child_nodes(node)
            if self.is_repeating(children):
                result.list_structures.append(
                    ListStructure(parent_name=node.name, item_count=len(children))
                )

            if node.depth == 0:
                result.semantic_tags.append(self.semantic_tag_for(node.name))

            component = self.component_for(node.name)
            if component:
                result.component_types.append(component)
                if component == self.BUTTON_COMPONENT:
                    result.button_elements.append(ButtonElement(name=node.name))

            for child in children:
                self._analyze_node(child, result)

        if self.is_image(node):
            result.image_elements.append(ImageElement(name=node.name, size=node.size))

    # =========================================================================
    # CLASSIFIERS
    # =========================================================================

    def classify_text(self, node: SceneNode) -> TextElement:
        """Heading vs paragraph recommendation for a text node."""
        name = node.lower_name
        is_title = len(node.text) < self.TITLE_MAX_LENGTH and (
            any(keyword in name for keyword in self.TITLE_KEYWORDS)
            or (node.font_size is not None and node.font_size > self.TITLE_MIN_FONT_SIZE)
        )
        level = min(node.depth + 1, self.MAX_HEADING_LEVEL)
        return TextElement(
            text=node.text,
            is_title=is_title,
            font_size=node.font_size,
            recommended_tag=f"h{level}" if is_title else "p",
        )

    @staticmethod
    def is_repeating(children: Sequence[SceneNode]) -> bool:
        """More than two children, all with the first child's node type."""
        if len(children) <= 2:
            return False
        first_type = children[0].type
        return all(child.type == first_type for child in children[1:])

    def semantic_tag_for(self, name: str) -> str:
        lowered = (name or "").lower()
        for keywords, tag in self.SEMANTIC_RULES:
            if any(keyword in lowered for keyword in keywords):
                return tag
        return self.DEFAULT_SEMANTIC_TAG

    def component_for(self, name: str) -> Optional[str]:
        lowered = (name or "").lower()
        for keywords, component in self.COMPONENT_RULES:
            if any(keyword in lowered for keyword in keywords):
                return component
        return None

    def is_image(self, node: SceneNode) -> bool:
        if node.type.upper() in self.IMAGE_TYPES:
            return True
        name = node.lower_name
        return any(keyword in name for keyword in self.IMAGE_KEYWORDS)


# =============================================================================
# RECOMMENDATION TEXT
# =============================================================================

def format_recommended_structure(result: AnalysisResult) -> str:
    """
    Render the advisory summary for an analysis result.

    One line per present feature; `main` falls back to `section` when no
    root container was classified as main.
    """
    if result.is_empty:
        return EMPTY_STRUCTURE_MESSAGE

    tags = result.semantic_tags
    lines: List[str] = ["Recommended HTML structure:"]

    if "header" in tags:
        lines.append("- Use a <header> element for the top area")
    if "nav" in tags:
        lines.append("- Use a <nav> element for navigation")
    if "main" in tags:
        lines.append("- Use a <main> element for the primary content")
    else:
        lines.append("- Use <section> elements for content sections")

    titles = result.title_tags
    if titles:
        lines.append(f"- Heading elements: {', '.join(titles)}")

    if result.list_structures:
        lines.append(f"- Lists: {len(result.list_structures)} ul/li structure(s)")

    if result.component_types:
        lines.append(f"- Components: {', '.join(result.distinct_components)}")

    if result.image_elements:
        lines.append(f"- Images: {len(result.image_elements)} figure/img structure(s)")

    if "footer" in tags:
        lines.append("- Use a <footer> element for the bottom area")

    return "\n".join(lines) + "\n"
