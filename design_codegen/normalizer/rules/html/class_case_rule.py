"""
ClassCaseRule - Rewrite class attribute tokens to kebab-case.

    class="mainContainer hero_title" -> class="main-container hero-title"

The attribute is always re-emitted with double quotes.
"""

import re

from ...contracts.targets import RuleTarget
from ...naming import to_kebab_case

from ..base_rule import RewriteRule
from .patterns import CLASS_ATTRIBUTE, split_classes


class ClassCaseRule(RewriteRule):
    """Kebab-case every class token. Runs first so later rules see clean names."""

    @property
    def target(self) -> RuleTarget:
        return RuleTarget.HTML

    @property
    def priority(self) -> int:
        return 10

    def applies(self, text: str) -> bool:
        return CLASS_ATTRIBUTE.search(text) is not None

    def rewrite(self, text: str) -> str:
        return CLASS_ATTRIBUTE.sub(self._fix_attribute, text)

    @staticmethod
    def _fix_attribute(match: re.Match) -> str:
        tokens = [to_kebab_case(token) for token in split_classes(match.group(2))]
        return f'class="{" ".join(token for token in tokens if token)}"'
