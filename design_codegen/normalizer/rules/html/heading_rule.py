"""
HeadingHierarchyRule - Keep a single top-level heading.

The first `<h1>` in document order is kept; every later `<h1>...</h1>`
becomes `<h2>...</h2>` (attributes preserved).
"""

import re

from ...contracts.targets import RuleTarget

from ..base_rule import RewriteRule


class HeadingHierarchyRule(RewriteRule):
    """Demote every h1 after the first one to h2."""

    H1_OPEN = re.compile(r"<h1\b", re.IGNORECASE)
    H1_TAG = re.compile(r"<(/?)h1\b([^>]*)>", re.IGNORECASE)

    @property
    def target(self) -> RuleTarget:
        return RuleTarget.HTML

    @property
    def priority(self) -> int:
        return 70

    def applies(self, text: str) -> bool:
        return len(self.H1_OPEN.findall(text)) > 1

    def rewrite(self, text: str) -> str:
        seen_first = False
        open_demoted = 0

        def fix(match: re.Match) -> str:
            nonlocal seen_first, open_demoted
            closing, attrs = match.group(1), match.group(2)
            if closing:
                if open_demoted:
                    open_demoted -= 1
                    return f"</h2{attrs}>"
                return match.group(0)
            if not seen_first:
                seen_first = True
                return match.group(0)
            open_demoted += 1
            return f"<h2{attrs}>"

        return self.H1_TAG.sub(fix, text)
