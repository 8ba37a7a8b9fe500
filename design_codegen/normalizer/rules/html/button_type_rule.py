"""
ButtonTypeRule - Give every `<button>` an explicit type.

    <button class="btn">  -> <button type="button" class="btn">
"""

import re

from ...contracts.targets import RuleTarget

from ..base_rule import RewriteRule


class ButtonTypeRule(RewriteRule):
    """Insert `type="button"` on buttons lacking a type attribute."""

    UNTYPED_BUTTON = re.compile(
        r"<button\b(?![^>]*(?<![\w-])type\s*=)", re.IGNORECASE
    )

    @property
    def target(self) -> RuleTarget:
        return RuleTarget.HTML

    @property
    def priority(self) -> int:
        return 40

    def applies(self, text: str) -> bool:
        return self.UNTYPED_BUTTON.search(text) is not None

    def rewrite(self, text: str) -> str:
        return self.UNTYPED_BUTTON.sub('<button type="button"', text)
