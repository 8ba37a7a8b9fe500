"""
HTML Generation Prompts - Templates for turning a scene selection into markup.

Two flavors:
1. build_html_prompt(): First pass, guided by the scene analyzer summary
2. build_html_prompt_with_class_list(): Markup for an existing stylesheet,
   restricted to the classes that stylesheet defines

Usage:
======
    from design_codegen.prompts import build_html_prompt

    prompt = build_html_prompt(scene_json, "Landing page hero")
    response = await provider.generate(prompt)
"""

from typing import Any, List, Optional

from ..scene.analyzer import SceneTreeAnalyzer
from ..scene.contracts import AnalysisResult
from .helpers import serialize_document, with_user_prompt, wrap_section

SCENE_MARKER = "MCP_SELECTION_JSON"
CLASS_LIST_MARKER = "CLASS_LIST"


# ---------------------------------------------------------------------------
# SHARED INSTRUCTIONS
# ---------------------------------------------------------------------------

HTML_ROLE = """You generate HTML that strictly follows the HTML coding guideline, based on the design selection JSON below.
Return plain HTML only. No code fences (```), no markdown, no explanations."""


# ---------------------------------------------------------------------------
# ANALYZER-GUIDED PROMPT
# ---------------------------------------------------------------------------

HTML_GUIDELINES = """== HTML CODING GUIDELINE (MANDATORY) ==

1. Semantic tags:
   - <header>: page/section header
   - <nav>: navigation menu
   - <main>: primary page content (only one)
   - <section>: standalone section
   - <article>: self-contained content
   - <aside>: sidebar
   - <footer>: footer

2. Class naming (kebab-case required):
   - main-container, benefit-item, content-section

3. Hierarchical headings:
   - h1: top-level page title (only one)
   - h2, h3, h4, h5, h6: in sequence

4. Lists (repeating items):
   - Always use <ul><li>

5. Links and buttons:
   - Link: <a href="">
   - Button: <button type="button">

6. Icons:
   - <i class="ico-name ico-normal" aria-hidden="true"></i>

7. Components:
{components}

8. Accessibility:
   - aria-label, aria-hidden and role attributes
   - Structure comments: <!-- section name start -->"""


def _components_hint(analysis: AnalysisResult) -> str:
    if analysis.component_types:
        return f"   - Detected components: {', '.join(analysis.distinct_components)}"
    return "   - Use suitable component- classes"


def build_html_prompt(
    document: Any,
    user_prompt: Optional[str] = None,
    analysis: Optional[AnalysisResult] = None,
    indent: int = 2,
) -> str:
    """
    Build the first-pass HTML prompt.

    Args:
        document: Exported scene payload (embedded as JSON)
        user_prompt: Optional free-form request placed on top
        analysis: Precomputed analysis; computed from `document` if omitted
        indent: JSON indentation of the embedded payload

    Returns:
        Prompt text ending with the [MCP_SELECTION_JSON] section
    """
    if analysis is None:
        analysis = SceneTreeAnalyzer().analyze_document(document)

    body = "\n".join([
        HTML_ROLE,
        "",
        "== ANALYZED STRUCTURE ==",
        analysis.recommended_structure,
        "",
        HTML_GUIDELINES.format(components=_components_hint(analysis)),
    ])
    body += "\n\n" + wrap_section(SCENE_MARKER, serialize_document(document, indent))
    return with_user_prompt(user_prompt, body)


# ---------------------------------------------------------------------------
# CLASS-LIST PROMPT
# ---------------------------------------------------------------------------

CLASS_LIST_GUIDELINES = """Use only the classes from CLASS_LIST below in class attributes. Do not invent new class names.

== HTML CODING GUIDELINE (MANDATORY) ==

1. Prefer semantic tags:
   - header, nav, main, section, article, aside, footer
   - Use the first class as the top-level wrapper on a suitable semantic tag

2. Class naming (kebab-case):
   - Only classes from CLASS_LIST
   - Treat component- prefixed classes as components and structure them accordingly

3. Structure:
   - Repeating items -> <ul>, <li> required
   - Text -> h1-h6 (hierarchical) or p
   - Buttons -> <button type="button"> or <a href="">
   - Images -> <figure>, <img>

4. Icons:
   - <i class="ico-name ico-normal" aria-hidden="true"></i>
   - Meaningful icons add role="img" aria-label="description"

5. Accessibility:
   - Appropriate ARIA attributes
   - Structure comments between sections"""


def build_html_prompt_with_class_list(
    document: Any,
    user_prompt: Optional[str],
    class_names: Optional[List[str]],
    indent: int = 2,
) -> str:
    """Build an HTML prompt restricted to an existing stylesheet's classes."""
    classes_text = ", ".join(class_names) if class_names else ""
    body = "\n".join([HTML_ROLE, CLASS_LIST_GUIDELINES])
    body += "\n\n" + wrap_section(CLASS_LIST_MARKER, classes_text)
    body += "\n\n" + wrap_section(SCENE_MARKER, serialize_document(document, indent))
    return with_user_prompt(user_prompt, body)
