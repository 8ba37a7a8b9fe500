"""
IconClassRule - Standardize icon classes to the `ico-<name> ico-normal` pair.

    <i class="icon-search">          -> <i class="ico-search ico-normal">
    <i class="ico-close">            -> unchanged (no "icon" token)
    <i class="icon ico-close">       -> <i class="icon ico-close ico-normal">
    <i class="icon">                 -> <i class="ico-default ico-normal">

Any `<i>` whose class has a token containing "icon" is treated as an icon.
"""

import re
from typing import List

from ...contracts.targets import RuleTarget

from ..base_rule import RewriteRule
from .patterns import ICON_TAG, TAG_CLASS, split_classes


class IconClassRule(RewriteRule):
    """Rewrite icon class tokens on `<i>` elements."""

    PREFIX = "ico-"
    NORMAL = "ico-normal"
    DEFAULT_NAME = "default"

    @property
    def target(self) -> RuleTarget:
        return RuleTarget.HTML

    @property
    def priority(self) -> int:
        return 30

    def applies(self, text: str) -> bool:
        for tag in ICON_TAG.finditer(text):
            match = TAG_CLASS.search(tag.group(0))
            if match and self.standardize(split_classes(match.group(2))) != split_classes(match.group(2)):
                return True
        return False

    def rewrite(self, text: str) -> str:
        return ICON_TAG.sub(self._fix_tag, text)

    def _fix_tag(self, tag_match: re.Match) -> str:
        tag = tag_match.group(0)
        match = TAG_CLASS.search(tag)
        if not match:
            return tag
        tokens = split_classes(match.group(2))
        fixed = self.standardize(tokens)
        if fixed == tokens:
            return tag
        quote = match.group(1)
        return f"{tag[:match.start()]}class={quote}{' '.join(fixed)}{quote}{tag[match.end():]}"

    # =========================================================================
    # CLASS TOKEN LOGIC
    # =========================================================================

    def standardize(self, tokens: List[str]) -> List[str]:
        """
        Standardized token list for an element's classes.

        Returns the input list unchanged when no token contains "icon"
        or when the `ico-*` pair is already present.
        """
        if not any("icon" in token.lower() for token in tokens):
            return tokens

        has_named_ico = any(
            token.startswith(self.PREFIX) and token != self.NORMAL for token in tokens
        )
        if has_named_ico:
            if self.NORMAL in tokens:
                return tokens
            return tokens + [self.NORMAL]

        icon_tokens = [t for t in tokens if "icon" in t.lower()]
        others = [t for t in tokens if "icon" not in t.lower() and t != self.NORMAL]
        return others + [f"{self.PREFIX}{self.icon_name(icon_tokens[0])}", self.NORMAL]

    def icon_name(self, token: str) -> str:
        """`icon-search` -> `search`; bare `icon` -> `default`."""
        name = token.lower()
        while "icon" in name:
            name = re.sub(r"icons?", "", name)
        name = re.sub(r"-{2,}", "-", name).strip("-_ ")
        return name or self.DEFAULT_NAME
