"""
Contracts - Data structures produced by the scene analyzers.

1. AnalysisResult: Structural recommendation for HTML generation
2. StyleInfo: Color/font/size facts for SCSS generation

Both are fresh values per call; `to_dict()` emits the camelCase shape
used by the prompt builders and the HTTP layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .nodes import Point, Size


SEMANTIC_TAGS = ("header", "nav", "main", "section", "aside", "footer")


@dataclass
class TextElement:
    """A text node with its recommended heading/paragraph tag."""

    text: str
    is_title: bool
    font_size: Optional[float]
    recommended_tag: str
    """`h1`..`h6` for titles, `p` otherwise."""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "isTitle": self.is_title,
            "fontSize": self.font_size,
            "recommendedTag": self.recommended_tag,
        }


@dataclass
class ListStructure:
    """A container whose children repeat the same node type."""

    parent_name: str
    item_count: int
    recommended_tag: str = "ul/li"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "parentName": self.parent_name,
            "itemCount": self.item_count,
            "recommendedTag": self.recommended_tag,
        }


@dataclass
class ButtonElement:
    name: str
    recommended_tag: str = "button"

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "recommendedTag": self.recommended_tag}


@dataclass
class ImageElement:
    name: str
    size: Optional[Size] = None
    recommended_tag: str = "figure/img"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "size": self.size.to_dict() if self.size else None,
            "recommendedTag": self.recommended_tag,
        }


@dataclass
class AnalysisResult:
    """
    Structural recommendation derived from a scene tree.

    `recommended_structure` is a pure function of the other fields
    (see `format_recommended_structure`).
    """

    semantic_tags: List[str] = field(default_factory=list)
    """One of SEMANTIC_TAGS per classified root container."""

    component_types: List[str] = field(default_factory=list)
    """Component categories (multiset, e.g. "component-btns")."""

    list_structures: List[ListStructure] = field(default_factory=list)
    text_elements: List[TextElement] = field(default_factory=list)
    button_elements: List[ButtonElement] = field(default_factory=list)
    image_elements: List[ImageElement] = field(default_factory=list)
    recommended_structure: str = ""

    @property
    def is_empty(self) -> bool:
        """True when no feature of any category was found."""
        return not (
            self.semantic_tags
            or self.component_types
            or self.list_structures
            or self.text_elements
            or self.button_elements
            or self.image_elements
        )

    @property
    def title_tags(self) -> List[str]:
        return [t.recommended_tag for t in self.text_elements if t.is_title]

    @property
    def distinct_components(self) -> List[str]:
        """Component categories in first-seen order, without repeats."""
        return list(dict.fromkeys(self.component_types))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "semanticTags": list(self.semantic_tags),
            "componentTypes": list(self.component_types),
            "listStructures": [s.to_dict() for s in self.list_structures],
            "textElements": [t.to_dict() for t in self.text_elements],
            "buttonElements": [b.to_dict() for b in self.button_elements],
            "imageElements": [i.to_dict() for i in self.image_elements],
            "recommendedStructure": self.recommended_structure,
        }


@dataclass
class StyleInfo:
    """Style facts collected from a scene tree."""

    colors: List[str] = field(default_factory=list)
    """Distinct `#rrggbb` strings in first-seen order."""

    fonts: List[str] = field(default_factory=list)
    """Distinct font families in first-seen order."""

    sizes: List[Size] = field(default_factory=list)
    positions: List[Point] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "colors": list(self.colors),
            "fonts": list(self.fonts),
            "sizes": [s.to_dict() for s in self.sizes],
            "positions": [p.to_dict() for p in self.positions],
        }
