"""
Shared Prompt Helpers - Embedding and response post-processing.

Functions:
- serialize_document(): Scene payload -> indented JSON for embedding
- wrap_section(): Surround a body with [MARKER] ... [/MARKER] lines
- extract_code_block(): Pull code out of a fenced model response
- pick_wrapper_class(): First class of a stylesheet's class list
- ensure_wrapper_class(): Force a class onto the first opening tag
"""

import json
import logging
import re
from typing import Any, List, Optional

from ..scene.schemas import SceneDocumentSchema

logger = logging.getLogger(__name__)

CODE_FENCE = "```"

FIRST_TAG_PATTERN = re.compile(r"<([a-zA-Z][a-zA-Z0-9-]*)\b([^>]*)>")
CLASS_VALUE_PATTERN = re.compile(r"""class\s*=\s*(["'])((?:(?!\1)[^>])*)\1""")


def serialize_document(document: Any, indent: int = 2) -> str:
    """
    Serialize a scene payload for embedding in a prompt.

    Returns an empty string when the payload is not JSON serializable.
    """
    if isinstance(document, SceneDocumentSchema):
        return document.to_json(indent=indent)
    try:
        return json.dumps(document, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.warning(f"Scene payload is not serializable: {e}")
        return ""


def wrap_section(marker: str, body: str) -> str:
    return f"[{marker}]\n{body}\n[/{marker}]"


def with_user_prompt(user_prompt: Optional[str], body: str) -> str:
    """Prefix the user's free-form request, if any, separated by a blank line."""
    header = str(user_prompt).strip() if user_prompt else ""
    return f"{header}\n\n{body}" if header else body


def extract_code_block(text: Optional[str]) -> str:
    """
    Return the body of the first fenced code block in a model response.

    The line holding the opening fence (language hint included) is
    dropped. Text without a complete fence is returned stripped.

    Example:
        >>> extract_code_block("Here:\\n```html\\n<div></div>\\n```")
        '<div></div>'
    """
    if not text:
        return ""

    stripped = str(text).strip()
    start = stripped.find(CODE_FENCE)
    if start == -1:
        return stripped

    body_start = stripped.find("\n", start + len(CODE_FENCE))
    body_start = start + len(CODE_FENCE) if body_start == -1 else body_start + 1
    end = stripped.find(CODE_FENCE, body_start)
    if end == -1:
        return stripped
    return stripped[body_start:end].strip()


def pick_wrapper_class(class_names: Optional[List[str]]) -> str:
    """The wrapper candidate is the first class of the list, or ""."""
    if class_names:
        return class_names[0]
    return ""


def ensure_wrapper_class(html: Optional[str], wrapper_class: Optional[str]) -> Optional[str]:
    """
    Make sure the first opening tag carries `wrapper_class`.

    A leading "." on the class is ignored. The class is appended to an
    existing class attribute or a new double-quoted attribute is
    inserted after the tag name. Markup without any tag, empty input
    and markup whose first tag already has the class come back unchanged.
    """
    if not html or not wrapper_class:
        return html

    cls = str(wrapper_class).lstrip(".")
    if not cls:
        return html

    match = FIRST_TAG_PATTERN.search(html)
    if not match:
        return html

    tag = match.group(0)
    class_match = CLASS_VALUE_PATTERN.search(tag)
    if class_match:
        existing = class_match.group(2)
        if cls in existing.split():
            return html
        value = f"{existing} {cls}" if existing else cls
        quote = class_match.group(1)
        updated = (
            tag[:class_match.start()]
            + f"class={quote}{value}{quote}"
            + tag[class_match.end():]
        )
    else:
        name_end = 1 + len(match.group(1))
        updated = f'{tag[:name_end]} class="{cls}"{tag[name_end:]}'

    return html[:match.start()] + updated + html[match.end():]
