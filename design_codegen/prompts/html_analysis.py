"""
HTML Structure Analyzer - Summarize generated markup for the SCSS prompt.

The stylesheet prompt tells the model which wrapper class, semantic
tags, components, interactive elements, lists and icons the markup
contains, so the generated SCSS mirrors the HTML it will style.

Usage:
    from design_codegen.prompts.html_analysis import (
        HtmlStructureAnalyzer,
        format_scss_analysis,
    )

    analysis = HtmlStructureAnalyzer().analyze(html)
    text = format_scss_analysis(analysis, style_info)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from ..normalizer.class_names import ClassNameExtractor
from ..scene.contracts import StyleInfo

MARKUP_SEMANTIC_TAGS = (
    "header", "nav", "main", "section", "article", "aside", "footer", "figure",
)
COMPONENT_PREFIX = "component-"
ICON_PREFIX = "ico-"
MAX_LISTED_COLORS = 3


@dataclass
class InteractiveElement:
    """A button or link that carries classes."""

    kind: str
    """"button" or "link"."""

    classes: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "classes": list(self.classes)}


@dataclass
class HtmlAnalysis:
    """Facts about a generated HTML fragment."""

    wrapper_class: str = ""
    """First class of the first element that has one."""

    all_classes: List[str] = field(default_factory=list)
    """Sorted distinct class names."""

    semantic_tags: List[str] = field(default_factory=list)
    """Distinct semantic tag names in document order."""

    component_classes: List[str] = field(default_factory=list)
    interactive_elements: List[InteractiveElement] = field(default_factory=list)
    list_structures: List[List[str]] = field(default_factory=list)
    """Class lists of `<ul>` elements that have a class."""

    icon_elements: List[List[str]] = field(default_factory=list)
    """Class lists of `<i>` elements with an ico-* class."""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "wrapperClass": self.wrapper_class,
            "allClasses": list(self.all_classes),
            "semanticTags": list(self.semantic_tags),
            "componentClasses": list(self.component_classes),
            "interactiveElements": [e.to_dict() for e in self.interactive_elements],
            "listStructures": [{"classes": c} for c in self.list_structures],
            "iconElements": [{"classes": c} for c in self.icon_elements],
        }


class HtmlStructureAnalyzer:
    """BeautifulSoup-based markup summarizer."""

    def analyze(self, html: Optional[str]) -> HtmlAnalysis:
        analysis = HtmlAnalysis()
        if not html:
            return analysis

        soup = BeautifulSoup(html, "html.parser")
        analysis.all_classes = ClassNameExtractor.from_markup(html)

        first = soup.find(self._has_class)
        if first is not None:
            analysis.wrapper_class = self._classes(first)[0]

        for tag in soup.find_all(list(MARKUP_SEMANTIC_TAGS)):
            if tag.name not in analysis.semantic_tags:
                analysis.semantic_tags.append(tag.name)

        analysis.component_classes = [
            c for c in analysis.all_classes if c.startswith(COMPONENT_PREFIX)
        ]

        for name, kind in (("button", "button"), ("a", "link")):
            for tag in soup.find_all(name):
                if self._has_class(tag):
                    analysis.interactive_elements.append(
                        InteractiveElement(kind=kind, classes=self._classes(tag))
                    )

        analysis.list_structures = [
            self._classes(tag) for tag in soup.find_all("ul") if self._has_class(tag)
        ]

        for tag in soup.find_all("i"):
            classes = self._classes(tag)
            if any(ICON_PREFIX in c for c in classes):
                analysis.icon_elements.append(classes)

        return analysis

    @staticmethod
    def _classes(tag: Tag) -> List[str]:
        value = tag.get("class") or []
        if isinstance(value, str):
            value = value.split()
        return [c for c in value if c]

    @classmethod
    def _has_class(cls, tag: Tag) -> bool:
        return bool(cls._classes(tag))


def format_scss_analysis(html_analysis: HtmlAnalysis, style_info: Optional[StyleInfo]) -> str:
    """
    Render the markup/style summary embedded in the SCSS prompt.

    Only present facts get a line; the class total is always printed.
    """
    lines: List[str] = []

    if html_analysis.wrapper_class:
        lines.append(f"Top-level wrapper class: .{html_analysis.wrapper_class}")
    if html_analysis.semantic_tags:
        lines.append(f"Semantic tags: {', '.join(html_analysis.semantic_tags)}")
    if html_analysis.component_classes:
        lines.append(f"Component classes: {', '.join(html_analysis.component_classes)}")
    if html_analysis.interactive_elements:
        lines.append(
            f"Interactive elements: {len(html_analysis.interactive_elements)} (buttons, links)"
        )
    if html_analysis.list_structures:
        lines.append(f"List structures: {len(html_analysis.list_structures)} ul/li")
    if html_analysis.icon_elements:
        lines.append(f"Icon elements: {len(html_analysis.icon_elements)}")

    if style_info is not None:
        if style_info.colors:
            listed = ", ".join(style_info.colors[:MAX_LISTED_COLORS])
            more = " and more" if len(style_info.colors) > MAX_LISTED_COLORS else ""
            lines.append(f"Design colors: {listed}{more}")
        if style_info.fonts:
            lines.append(f"Design fonts: {', '.join(style_info.fonts)}")

    lines.append(f"Total classes: {len(html_analysis.all_classes)}")
    return "\n".join(lines) + "\n"
