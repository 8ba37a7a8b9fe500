"""
HTML Normalizer - Make generated markup follow the HTML guideline.

Usage:
    from design_codegen.normalizer import HtmlNormalizer

    normalizer = HtmlNormalizer()
    html = normalizer.normalize('<div class="mainContainer"><a href="x">Go</a></div>')
    # '<div class="main-container"><a href="">Go</a></div>'
"""

import logging
from typing import Optional

from .contracts.results import NormalizationResult
from .rules.rule_engine import RuleEngine, create_html_engine

logger = logging.getLogger(__name__)


class HtmlNormalizer:
    """
    Thin facade over the HTML rule engine.

    normalize(normalize(h)) == normalize(h) for any fragment.
    """

    def __init__(self, engine: Optional[RuleEngine] = None):
        self._engine = engine or create_html_engine()

    @property
    def engine(self) -> RuleEngine:
        return self._engine

    def run(self, markup: Optional[str]) -> NormalizationResult:
        """Normalize and return the full per-rule trail."""
        return self._engine.run(markup)

    def normalize(self, markup: Optional[str]) -> Optional[str]:
        """
        Normalize a markup fragment.

        Args:
            markup: Generated HTML; None/empty is returned unchanged

        Returns:
            Guideline-compliant markup
        """
        return self.run(markup).output
