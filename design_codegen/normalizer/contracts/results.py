"""
Results - Data structures describing a normalization run.

1. RuleOutcome: What one rule did to the text
2. NormalizationResult: Original text, final text and the per-rule trail
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .targets import RuleTarget


@dataclass
class RuleOutcome:
    """Result of running a single rule."""

    rule_name: str
    """Class name of the rule."""

    priority: int
    """Priority the rule ran at."""

    changed: bool = False
    """Rule modified the text."""

    skipped: bool = False
    """Guard predicate rejected the text."""

    error: Optional[str] = None
    """Exception message if the rule raised (text left unchanged)."""

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict:
        result = {
            "rule": self.rule_name,
            "priority": self.priority,
            "changed": self.changed,
            "skipped": self.skipped,
        }
        if self.error:
            result["error"] = self.error
        return result


@dataclass
class NormalizationResult:
    """
    Outcome of running a rule engine over a text.

    Example:
        result = engine.run(html)
        if result.changed:
            print(result.describe())
    """

    target: RuleTarget
    original: str
    output: str
    outcomes: List[RuleOutcome] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.output != self.original

    @property
    def applied_rules(self) -> List[str]:
        """Names of the rules that changed the text, in run order."""
        return [o.rule_name for o in self.outcomes if o.changed]

    @property
    def failed_rules(self) -> List[str]:
        return [o.rule_name for o in self.outcomes if o.failed]

    def describe(self) -> str:
        """Generate human-readable summary of the run."""
        if not self.changed:
            return f"{self.target.label}: no changes"
        return f"{self.target.label}: {', '.join(self.applied_rules)}"

    def to_dict(self) -> Dict:
        return {
            "target": self.target.value,
            "output": self.output,
            "changed": self.changed,
            "applied_rules": self.applied_rules,
            "outcomes": [o.to_dict() for o in self.outcomes],
        }
