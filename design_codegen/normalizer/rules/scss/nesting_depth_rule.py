"""
NestingDepthRule - Flag lines nested deeper than the guideline allows.

The running depth is the net count of `{` minus `}` up to and including
the current line. Every line where it exceeds the limit gets a trailing
comment; the stylesheet is otherwise untouched.
"""

from typing import List

from ...contracts.targets import RuleTarget

from ..base_rule import RewriteRule


class NestingDepthRule(RewriteRule):
    """Annotate over-nested lines with a warning comment."""

    DEFAULT_MAX_DEPTH = 4

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth

    @property
    def target(self) -> RuleTarget:
        return RuleTarget.SCSS

    @property
    def priority(self) -> int:
        return 60

    @property
    def warning(self) -> str:
        return f"/* WARNING: nesting depth exceeds {self.max_depth} levels */"

    def flagged_lines(self, text: str) -> List[int]:
        """Indexes of lines whose running depth exceeds the limit."""
        flagged = []
        depth = 0
        for index, line in enumerate(text.split("\n")):
            depth += line.count("{") - line.count("}")
            if depth > self.max_depth:
                flagged.append(index)
        return flagged

    def applies(self, text: str) -> bool:
        lines = text.split("\n")
        return any(self.warning not in lines[i] for i in self.flagged_lines(text))

    def rewrite(self, text: str) -> str:
        lines = text.split("\n")
        for index in self.flagged_lines(text):
            line = lines[index]
            if self.warning in line:
                continue
            if line.endswith("\r"):
                lines[index] = f"{line[:-1]} {self.warning}\r"
            else:
                lines[index] = f"{line} {self.warning}"
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{self.name}(max_depth={self.max_depth}, priority={self.priority})"
