"""
ColorVariableRule - Replace `$variable` references with hex literals.

    color: $color-primary;   -> color: #3b82f6;
    background: $brand-x;    -> background: #cccccc;

Declarations (`$name: value;`) are definitions, not references, and are
kept as written.
"""

import re

from ...contracts.targets import RuleTarget
from ...scss_palette import ScssPalette

from ..base_rule import RewriteRule


class ColorVariableRule(RewriteRule):
    """Resolve variable references through ScssPalette."""

    # Full variable name, not followed by a declaration colon
    VARIABLE_REFERENCE = re.compile(r"\$[a-zA-Z][\w-]*(?![\w-])(?!\s*:)")

    @property
    def target(self) -> RuleTarget:
        return RuleTarget.SCSS

    @property
    def priority(self) -> int:
        return 50

    def applies(self, text: str) -> bool:
        return self.VARIABLE_REFERENCE.search(text) is not None

    def rewrite(self, text: str) -> str:
        return self.VARIABLE_REFERENCE.sub(
            lambda match: ScssPalette.resolve(match.group(0)), text
        )
