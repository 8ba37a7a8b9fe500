"""
SCSS Normalizer - Make generated stylesheets follow the SCSS guideline.

Usage:
    from design_codegen.normalizer import ScssNormalizer

    ScssNormalizer().normalize(".card {\n  margin: 20px;\n}")
    # '.card {\n  @include rem(margin, 20);\n}'
"""

import logging
from typing import Optional

from .contracts.results import NormalizationResult
from .rules.rule_engine import RuleEngine, create_scss_engine
from .rules.scss.nesting_depth_rule import NestingDepthRule

logger = logging.getLogger(__name__)


class ScssNormalizer:
    """
    Thin facade over the SCSS rule engine.

    Re-running normalize() on its own output is a no-op.
    """

    def __init__(
        self,
        max_nesting_depth: int = NestingDepthRule.DEFAULT_MAX_DEPTH,
        engine: Optional[RuleEngine] = None,
    ):
        self.max_nesting_depth = max_nesting_depth
        self._engine = engine or create_scss_engine(max_nesting_depth)

    @property
    def engine(self) -> RuleEngine:
        return self._engine

    def run(self, stylesheet: Optional[str]) -> NormalizationResult:
        """Normalize and return the full per-rule trail."""
        return self._engine.run(stylesheet)

    def normalize(self, stylesheet: Optional[str]) -> Optional[str]:
        """
        Normalize a stylesheet fragment.

        Args:
            stylesheet: Generated SCSS; None/empty is returned unchanged

        Returns:
            Guideline-compliant SCSS
        """
        return self.run(stylesheet).output
