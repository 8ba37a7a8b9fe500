"""
Rule Targets - Which kind of source text a rewrite rule operates on.

- HTML → markup fragments produced for the HTML guideline
- SCSS → stylesheet fragments produced for the SCSS guideline
"""

from enum import Enum


class RuleTarget(Enum):
    """Source language a rewrite rule applies to."""

    HTML = "html"
    """Markup fragments."""

    SCSS = "scss"
    """Stylesheet fragments."""

    @classmethod
    def from_string(cls, value: str) -> "RuleTarget":
        """Convert string to RuleTarget (case-insensitive)."""
        return cls(value.strip().lower())

    @property
    def label(self) -> str:
        return self.value.upper()
