"""
rem() mixin rules - Route every length through `@include rem(...)`.

    width: rem(24px);        -> @include rem(width, 24);
    margin: 10px 20px;       -> @include rem(margin, 10 20);
    border: 1px solid #333;  -> @include rem(border, 1 solid #333);
    box-shadow: 0 4px 8px 0 rgba(0,0,0,.25);
                             -> @include rem(box-shadow, 0 4 8 0 rgba(0,0,0,.25));

Declarations are matched on a single line and must end with `;`.
Anything the converters do not understand is left as written.
"""

import re
from abc import abstractmethod
from typing import Optional, Tuple

from ...contracts.targets import RuleTarget

from ..base_rule import RewriteRule
from .values import (
    PROPERTY_START,
    convert_border_value,
    convert_numeric_value,
    convert_shadow_value,
    is_exempt_value,
)


def _mixin(prop: str, argument: str) -> str:
    return f"@include rem({prop}, {argument});"


class _DeclarationRule(RewriteRule):
    """Shared machinery: match `prop: value;` and convert the value."""

    PATTERN: re.Pattern

    @property
    def target(self) -> RuleTarget:
        return RuleTarget.SCSS

    @abstractmethod
    def convert(self, prop: str, value: str) -> Optional[str]:
        """
        Mixin argument for a declaration value.

        Returns:
            Converted argument, or None to leave the declaration as written
        """
        pass

    def applies(self, text: str) -> bool:
        return any(self._replacement(m) is not None for m in self.PATTERN.finditer(text))

    def rewrite(self, text: str) -> str:
        def fix(match: re.Match) -> str:
            replacement = self._replacement(match)
            return match.group(0) if replacement is None else replacement

        return self.PATTERN.sub(fix, text)

    def _replacement(self, match: re.Match) -> Optional[str]:
        prop, value = match.group("prop"), match.group("value")
        argument = self.convert(prop, value)
        if argument is None:
            return None
        return _mixin(prop, argument)


class RemFunctionRule(_DeclarationRule):
    """`prop: rem(24px);` -> `@include rem(prop, 24);` for any property."""

    PATTERN = re.compile(
        PROPERTY_START
        + r"(?P<prop>[a-zA-Z-]+)\s*:\s*rem\((?P<value>[^)]+)\)\s*;"
    )
    PX_SUFFIX = re.compile(r"(?<=\d)px\b", re.IGNORECASE)

    @property
    def priority(self) -> int:
        return 10

    def convert(self, prop: str, value: str) -> Optional[str]:
        argument = self.PX_SUFFIX.sub("", value).strip()
        return argument or None


class RemPropertyRule(_DeclarationRule):
    """Numeric values of box-model, sizing and typography properties."""

    PROPERTIES: Tuple[str, ...] = (
        "margin",
        "margin-top",
        "margin-right",
        "margin-bottom",
        "margin-left",
        "padding",
        "padding-top",
        "padding-right",
        "padding-bottom",
        "padding-left",
        "width",
        "height",
        "max-width",
        "min-width",
        "max-height",
        "min-height",
        "top",
        "right",
        "bottom",
        "left",
        "font-size",
        "line-height",
        "border-width",
        "border-top-width",
        "border-right-width",
        "border-bottom-width",
        "border-left-width",
        "border-radius",
        "border-top-left-radius",
        "border-top-right-radius",
        "border-bottom-left-radius",
        "border-bottom-right-radius",
        "gap",
        "row-gap",
        "column-gap",
        "outline-width",
        "outline-offset",
        "text-indent",
        "letter-spacing",
        "word-spacing",
        "transform-origin",
        "perspective",
        "perspective-origin",
    )

    # Longest names first so "margin-top" is not cut short by "margin"
    PATTERN = re.compile(
        PROPERTY_START
        + r"(?P<prop>"
        + "|".join(re.escape(p) for p in sorted(PROPERTIES, key=len, reverse=True))
        + r")\s*:\s*(?P<value>[^;{}\n]+);"
    )

    @property
    def priority(self) -> int:
        return 20

    def convert(self, prop: str, value: str) -> Optional[str]:
        if is_exempt_value(value):
            return None
        return convert_numeric_value(value.strip())


class BorderRule(_DeclarationRule):
    """`border` and `border-{side}` shorthands."""

    PATTERN = re.compile(
        PROPERTY_START
        + r"(?P<prop>border(?:-(?:top|right|bottom|left))?)\s*:\s*(?P<value>[^;{}\n]+);"
    )
    SKIP_VALUE = re.compile(r"^(none|0)$", re.IGNORECASE)

    @property
    def priority(self) -> int:
        return 30

    def convert(self, prop: str, value: str) -> Optional[str]:
        if "calc(" in value or self.SKIP_VALUE.match(value.strip()):
            return None
        return convert_border_value(value)


class ShadowRule(_DeclarationRule):
    """`box-shadow` / `text-shadow` with three or four lengths and a color."""

    PATTERN = re.compile(
        PROPERTY_START
        + r"(?P<prop>box-shadow|text-shadow)\s*:\s*(?P<value>[^;{}\n]+);"
    )

    @property
    def priority(self) -> int:
        return 40

    def convert(self, prop: str, value: str) -> Optional[str]:
        if "calc(" in value or value.strip().lower() == "none":
            return None
        return convert_shadow_value(value)
