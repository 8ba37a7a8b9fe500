"""
Rules - Deterministic guideline rewrites.

Components:
- RewriteRule: Abstract base class for all rules
- RuleEngine: Runs rules in priority order
- html/: Markup rules
- scss/: Stylesheet rules

Usage:
    from design_codegen.normalizer.rules import create_html_engine

    engine = create_html_engine()
    result = engine.run(generated_html)
"""

from .base_rule import RewriteRule
from .rule_engine import RuleEngine, create_html_engine, create_scss_engine

__all__ = [
    "RewriteRule",
    "RuleEngine",
    "create_html_engine",
    "create_scss_engine",
]
