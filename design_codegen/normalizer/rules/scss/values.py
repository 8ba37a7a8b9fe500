"""
Value helpers for the rem() mixin rules.

Each converter returns the mixin argument string, or None when the value
does not have a shape it understands (the declaration is then left alone).
"""

import re
from typing import Optional

# Declarations are matched only where a property name can start
PROPERTY_START = r"(?<![\w$@.#-])"

# 24 / 24px / 1.5 / -8px / .5px ; group 1 = bare number
NUMBER = r"(-?(?:\d+(?:\.\d+)?|\.\d+))(?:px)?"
NUMERIC_TOKEN = re.compile(rf"^{NUMBER}$", re.IGNORECASE)

KEYWORD_VALUE = re.compile(
    r"^(auto|inherit|initial|unset|none|normal|baseline|center|flex-start|"
    r"flex-end|space-between|space-around|space-evenly|stretch|start|end|"
    r"left|right|top|bottom|middle|text-top|text-bottom|sub|super|0)$",
    re.IGNORECASE,
)
VIEWPORT_UNIT = re.compile(r"\d+(vw|vh|vmin|vmax)", re.IGNORECASE)
RELATIVE_UNIT = re.compile(r"\d+(em|rem)", re.IGNORECASE)

BORDER_STYLES = "solid|dashed|dotted|double|groove|ridge|inset|outset"
BORDER_VALUE = re.compile(
    rf"^{NUMBER}\s+({BORDER_STYLES})\s+"
    r"(#[0-9a-fA-F]{3,8}|\$[\w-]+|[a-zA-Z]+|rgba?\([^)]+\))$",
    re.IGNORECASE,
)

SHADOW_FOUR = re.compile(rf"^{NUMBER}\s+{NUMBER}\s+{NUMBER}\s+{NUMBER}\s+(.+)$", re.IGNORECASE)
SHADOW_THREE = re.compile(rf"^{NUMBER}\s+{NUMBER}\s+{NUMBER}\s+(.+)$", re.IGNORECASE)


def is_exempt_value(value: str) -> bool:
    """
    Values the guideline keeps as written.

    calc() expressions, bare keywords, percentages, viewport units and
    em/rem units are not converted to the mixin.
    """
    stripped = value.strip()
    if "calc(" in stripped:
        return True
    if KEYWORD_VALUE.match(stripped):
        return True
    if "%" in stripped:
        return True
    if VIEWPORT_UNIT.search(stripped):
        return True
    if RELATIVE_UNIT.search(stripped):
        return True
    return False


def strip_px(token: str) -> str:
    """`24px` -> `24`; non-numeric tokens are returned unchanged."""
    match = NUMERIC_TOKEN.match(token)
    return match.group(1) if match else token


def convert_numeric_value(value: str) -> Optional[str]:
    """
    Mixin argument for a plain numeric value.

        "24px"          -> "24"
        "10px 20px"     -> "10 20"
        "0 auto"        -> "0 auto"
        "$gap"          -> None
    """
    tokens = value.split()
    if not tokens:
        return None
    if len(tokens) == 1:
        match = NUMERIC_TOKEN.match(tokens[0])
        return match.group(1) if match else None
    if not any(NUMERIC_TOKEN.match(token) for token in tokens):
        return None
    return " ".join(strip_px(token) for token in tokens)


def convert_border_value(value: str) -> Optional[str]:
    """
    Mixin argument for a border shorthand.

        "1px solid #333"  -> "1 solid #333"
        "2px"             -> "2"
        "thin solid red"  -> None
    """
    stripped = value.strip()
    match = BORDER_VALUE.match(stripped)
    if match:
        return f"{match.group(1)} {match.group(2)} {match.group(3)}"
    width = NUMERIC_TOKEN.match(stripped)
    if width:
        return width.group(1)
    return None


def convert_shadow_value(value: str) -> Optional[str]:
    """
    Mixin argument for a box/text shadow.

        "0 4px 8px 0 rgba(0, 0, 0, 0.25)"  -> "0 4 8 0 rgba(0, 0, 0, 0.25)"
        "1px 1px 2px #000"                 -> "1 1 2 #000"
        "inset 0 1px 2px #000"             -> None
    """
    stripped = value.strip()
    match = SHADOW_FOUR.match(stripped) or SHADOW_THREE.match(stripped)
    if not match:
        return None
    return " ".join(match.groups())
