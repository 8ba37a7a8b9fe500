"""
Shared markup patterns for the HTML rules.

All rules work on raw text with regular expressions; fragments that do
not match are passed through untouched.
"""

import re
from typing import List

# class="a b" / class='a b'; group 1 = quote, group 2 = attribute value
CLASS_ATTRIBUTE = re.compile(r"""class\s*=\s*(["'])((?:(?!\1)[^>])+)\1""")

# Any opening <i ...> tag (not <img>, <input>, <iframe>)
ICON_TAG = re.compile(r"<i\b[^>]*>", re.IGNORECASE)

# class attribute inside a single tag; group 1 = value
TAG_CLASS = re.compile(r"""\bclass\s*=\s*(["'])([^"']*)\1""", re.IGNORECASE)


def split_classes(value: str) -> List[str]:
    return [token for token in value.split() if token]


def tag_classes(tag: str) -> List[str]:
    """Class tokens of a single opening tag (empty if no class attribute)."""
    match = TAG_CLASS.search(tag)
    return split_classes(match.group(2)) if match else []


def insert_attribute(tag: str, attribute: str) -> str:
    """Append an attribute before the closing `>` or `/>` of an opening tag."""
    if tag.endswith("/>"):
        return f"{tag[:-2].rstrip()} {attribute} />"
    return f"{tag[:-1].rstrip()} {attribute}>"
