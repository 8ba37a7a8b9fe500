"""
Contracts - Data structures for the normalizers.

Provides:
- RuleTarget: Source language of a rewrite rule
- RuleOutcome: Per-rule trail entry
- NormalizationResult: Result of a full engine run
"""

from .targets import RuleTarget
from .results import NormalizationResult, RuleOutcome

__all__ = [
    "RuleTarget",
    "RuleOutcome",
    "NormalizationResult",
]
