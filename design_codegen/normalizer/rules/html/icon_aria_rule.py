"""
IconAriaRule - Hide decorative icons from assistive technology.

    <i class="ico-close ico-normal"></i>
        -> <i class="ico-close ico-normal" aria-hidden="true"></i>
"""

import re

from ...contracts.targets import RuleTarget

from ..base_rule import RewriteRule
from .patterns import ICON_TAG, insert_attribute, tag_classes


class IconAriaRule(RewriteRule):
    """Add `aria-hidden="true"` to `<i>` icons that have no aria-hidden."""

    ARIA_HIDDEN = re.compile(r"(?<![\w-])aria-hidden\b", re.IGNORECASE)

    @property
    def target(self) -> RuleTarget:
        return RuleTarget.HTML

    @property
    def priority(self) -> int:
        return 50

    def needs_fix(self, tag: str) -> bool:
        if self.ARIA_HIDDEN.search(tag):
            return False
        return any("ico-" in token for token in tag_classes(tag))

    def applies(self, text: str) -> bool:
        return any(self.needs_fix(m.group(0)) for m in ICON_TAG.finditer(text))

    def rewrite(self, text: str) -> str:
        return ICON_TAG.sub(self._fix_tag, text)

    def _fix_tag(self, match: re.Match) -> str:
        tag = match.group(0)
        if not self.needs_fix(tag):
            return tag
        return insert_attribute(tag, 'aria-hidden="true"')
