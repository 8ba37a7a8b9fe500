"""
Prompts Module - Prompt assembly and model-response post-processing.

Prompts embed the scene selection between [MCP_SELECTION_JSON] markers,
class lists between [CLASS_LIST] and markup between [HTML_CODE].
"""

from .helpers import (
    ensure_wrapper_class,
    extract_code_block,
    pick_wrapper_class,
    serialize_document,
)
from .html_analysis import HtmlAnalysis, HtmlStructureAnalyzer, format_scss_analysis
from .html_prompts import build_html_prompt, build_html_prompt_with_class_list
from .scss_prompts import build_scss_prompt, build_scss_prompt_from_html

__all__ = [
    "ensure_wrapper_class",
    "extract_code_block",
    "pick_wrapper_class",
    "serialize_document",
    "HtmlAnalysis",
    "HtmlStructureAnalyzer",
    "format_scss_analysis",
    "build_html_prompt",
    "build_html_prompt_with_class_list",
    "build_scss_prompt",
    "build_scss_prompt_from_html",
]
