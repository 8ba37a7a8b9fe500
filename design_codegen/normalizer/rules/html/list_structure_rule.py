"""
ListStructureRule - Turn repeated `item` divs into a real list.

    <div class="benefit-item">A</div>
    <div class="benefit-item">B</div>
        ->
    <ul><li class="benefit-item">A</li>
    <li class="benefit-item">B</li></ul>

Two or more consecutive sibling `<div>`s (only whitespace between them)
whose class contains "item" form a run. Each item's closing tag is found
by div nesting depth, so nested divs inside an item are preserved. Runs
nested inside items are converted in the same pass.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from ...contracts.targets import RuleTarget

from ..base_rule import RewriteRule


@dataclass(frozen=True)
class _ItemSpan:
    open_start: int
    open_end: int
    close_start: int
    close_end: int


class ListStructureRule(RewriteRule):
    """Wrap runs of item divs in `<ul>` and rename them to `<li>`."""

    ITEM_DIV = re.compile(
        r"""<div\b[^>]*?\bclass\s*=\s*["'][^"']*item[^"']*["'][^>]*>""",
        re.IGNORECASE,
    )
    DIV_TAG = re.compile(r"<(/?)div\b[^>]*>", re.IGNORECASE)
    WHITESPACE = re.compile(r"\s*")

    MIN_ITEMS = 2

    @property
    def target(self) -> RuleTarget:
        return RuleTarget.HTML

    @property
    def priority(self) -> int:
        return 60

    def applies(self, text: str) -> bool:
        for match in self.ITEM_DIV.finditer(text):
            if len(self._collect_run(text, match)) >= self.MIN_ITEMS:
                return True
        return False

    def rewrite(self, text: str) -> str:
        position = 0
        while True:
            match = self.ITEM_DIV.search(text, position)
            if match is None:
                return text

            run = self._collect_run(text, match)
            if len(run) < self.MIN_ITEMS:
                position = match.end()
                continue

            text = self._wrap_run(text, run)
            # Resume inside the first item so nested runs are converted too
            position = run[0].open_start + len("<ul><li")

    # =========================================================================
    # SCANNING
    # =========================================================================

    def _find_close(self, text: str, start: int) -> Optional[re.Match]:
        """Closing `</div>` that balances an opening tag ending at `start`."""
        depth = 1
        for tag in self.DIV_TAG.finditer(text, start):
            if tag.group(1):
                depth -= 1
                if depth == 0:
                    return tag
            elif not tag.group(0).endswith("/>"):
                depth += 1
        return None

    def _collect_run(self, text: str, first: re.Match) -> List[_ItemSpan]:
        run: List[_ItemSpan] = []
        current: Optional[re.Match] = first
        while current is not None:
            close = self._find_close(text, current.end())
            if close is None:
                break
            run.append(_ItemSpan(current.start(), current.end(), close.start(), close.end()))
            gap_end = self.WHITESPACE.match(text, close.end()).end()
            current = self.ITEM_DIV.match(text, gap_end)
        return run

    @staticmethod
    def _wrap_run(text: str, run: List[_ItemSpan]) -> str:
        parts = [text[:run[0].open_start], "<ul>"]
        for index, item in enumerate(run):
            if index:
                parts.append(text[run[index - 1].close_end:item.open_start])
            # "<div" is four characters; keep the rest of the opening tag
            parts.append("<li" + text[item.open_start + 4:item.close_start] + "</li>")
        parts.append("</ul>")
        parts.append(text[run[-1].close_end:])
        return "".join(parts)
