"""
AnchorHrefRule - Force anchor hrefs to the empty string.

The guideline writes links as `<a href="">`; real targets are wired up
later by hand.
"""

import re

from ...contracts.targets import RuleTarget

from ..base_rule import RewriteRule


class AnchorHrefRule(RewriteRule):
    """Replace the href value of every `<a>` with `""`."""

    # group 1 = attributes before href, group 2 = quote, group 3 = current value
    ANCHOR_HREF = re.compile(
        r"""<a\s+([^>]*?)(?<![\w-])href\s*=\s*(["'])((?:(?!\2)[^>])*)\2""",
        re.IGNORECASE,
    )

    @property
    def target(self) -> RuleTarget:
        return RuleTarget.HTML

    @property
    def priority(self) -> int:
        return 20

    def applies(self, text: str) -> bool:
        return any(not self._is_empty(m) for m in self.ANCHOR_HREF.finditer(text))

    def rewrite(self, text: str) -> str:
        return self.ANCHOR_HREF.sub(self._fix_anchor, text)

    @staticmethod
    def _is_empty(match: re.Match) -> bool:
        return match.group(2) == "\"" and match.group(3) == ""

    def _fix_anchor(self, match: re.Match) -> str:
        if self._is_empty(match):
            return match.group(0)
        return f'<a {match.group(1)}href=""'
