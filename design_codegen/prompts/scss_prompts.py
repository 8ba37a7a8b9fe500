"""
SCSS Generation Prompts - Templates for stylesheet generation.

1. build_scss_prompt(): Stylesheet from the scene selection alone
2. build_scss_prompt_from_html(): Stylesheet for already generated markup,
   with a summary of that markup and the design's colors/fonts

Usage:
======
    from design_codegen.prompts import build_scss_prompt_from_html

    prompt = build_scss_prompt_from_html(session.html_code, scene_json, "")
"""

from typing import Any, Optional

from ..scene.style_extractor import StyleInfoExtractor
from .helpers import serialize_document, with_user_prompt, wrap_section
from .html_analysis import HtmlStructureAnalyzer, format_scss_analysis
from .html_prompts import SCENE_MARKER

HTML_MARKER = "HTML_CODE"


# ---------------------------------------------------------------------------
# SCENE-ONLY PROMPT
# ---------------------------------------------------------------------------

SCSS_PROMPT = """You generate SCSS that strictly follows the SCSS coding guideline, based on the design selection JSON below.
Return plain SCSS only. No code fences (```), no markdown, no explanations.

== SCSS CODING GUIDELINE (MANDATORY) ==

1. Mixins (highest priority):
   - Every numeric property uses the @include rem() mixin
   - @include rem(margin, 20), @include rem(padding, 10 20 15)
   - @include rem(font-size, 16), @include rem(border, 1px solid #333333)

2. Colors (highest priority):
   - Without a variable defined in _variables.scss, use hex values directly
   - background-color: #3b82f6, color: #ffffff, border: 1px solid #cccccc

3. Wrapper-class centered:
   - Pick one top-level wrapper class and nest everything inside it
   - Every child element is defined inside its parent class

4. Nesting limit:
   - At most {max_depth} levels of SCSS nesting
   - Compiled CSS must not exceed {max_depth} levels either

5. Using the design data:
   - Colors -> background-color, color, border-color
   - Sizes -> width, height, padding, margin
   - Fonts -> font-family, font-size, font-weight

6. Components:
   - Structure component- classes appropriately
   - Nest component children inside their component"""


def build_scss_prompt(
    document: Any,
    user_prompt: Optional[str] = None,
    max_depth: int = 4,
    indent: int = 2,
) -> str:
    """Build a stylesheet prompt from the scene selection alone."""
    body = SCSS_PROMPT.format(max_depth=max_depth)
    body += "\n\n" + wrap_section(SCENE_MARKER, serialize_document(document, indent))
    return with_user_prompt(user_prompt, body)


# ---------------------------------------------------------------------------
# HTML-AWARE PROMPT
# ---------------------------------------------------------------------------

SCSS_FROM_HTML_PROMPT = """You analyze the HTML structure and the design selection JSON and generate SCSS that strictly follows the SCSS coding guideline.
Return plain SCSS only. No code fences (```), no markdown, no explanations.

== SCSS CODING GUIDELINE (MANDATORY) ==

1. Mixins (absolute rule):
   Wrong:
      width: rem(24px);
      margin: 20px;
      padding: 10px 20px;

   Right:
      @include rem(width, 24);
      @include rem(margin, 20);
      @include rem(padding, 10 20);

   - Every numeric property uses the @include rem() mixin
   - Drop the px unit and use bare numbers: @include rem(font-size, 16)
   - Multiple values: @include rem(margin, 10 20 15)
   - calc() expressions are the only exception: top: calc(50% - 10px)

2. Colors (absolute rule):
   Wrong:
      color: $color-primary;
      background: $white;

   Right:
      color: #3b82f6;
      background: #ffffff;

   - Use hex values directly, no variables

3. Wrapper-class centered:
   - All SCSS is nested inside the top-level class
   - Do not define element styles on their own

4. Nesting limit ({max_depth} levels):
   - At most {max_depth} levels of SCSS nesting
   - Prefer class selectors over deep nesting

5. Match the HTML exactly:
   - A rule for every class in the HTML
   - SCSS nesting mirrors the HTML nesting
   - Suitable styles for semantic tags (header, nav, main, section, ...)

6. State classes:
   - .on, .off (buttons, checkboxes, tabs)
   - .show, .hide (modals, tooltips, dropdowns)
   - .current, .complete (progress)
   - .input-valid, .input-invalid (form validation)"""


def build_scss_prompt_from_html(
    html: Optional[str],
    document: Any,
    user_prompt: Optional[str] = None,
    max_depth: int = 4,
    indent: int = 2,
) -> str:
    """
    Build a stylesheet prompt for already generated markup.

    Args:
        html: Markup the stylesheet must style
        document: Exported scene payload (embedded as JSON)
        user_prompt: Optional free-form request placed on top
        max_depth: Nesting limit stated in the guideline
        indent: JSON indentation of the embedded payload

    Returns:
        Prompt with analysis summary, [HTML_CODE] and [MCP_SELECTION_JSON]
    """
    html_analysis = HtmlStructureAnalyzer().analyze(html)
    style_info = StyleInfoExtractor().extract_document(document)
    html_text = str(html or "").strip()

    sections = [
        SCSS_FROM_HTML_PROMPT.format(max_depth=max_depth),
        "== HTML STRUCTURE ANALYSIS ==\n" + format_scss_analysis(html_analysis, style_info),
        wrap_section(HTML_MARKER, html_text),
        wrap_section(SCENE_MARKER, serialize_document(document, indent)),
    ]
    return with_user_prompt(user_prompt, "\n\n".join(sections))
