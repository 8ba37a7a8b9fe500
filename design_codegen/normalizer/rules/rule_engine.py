"""
RuleEngine - Runs an ordered list of rewrite rules over a text.

Usage:
    from design_codegen.normalizer.rules import create_html_engine

    engine = create_html_engine()
    result = engine.run(html)
    print(result.output, result.applied_rules)

    # Or build a custom engine
    engine = RuleEngine(RuleTarget.HTML)
    engine.register(ClassCaseRule())
    engine.register(ButtonTypeRule())
    html = engine.apply(html)
"""

import logging
from typing import List, Optional, Type

from ..contracts.results import NormalizationResult, RuleOutcome
from ..contracts.targets import RuleTarget

from .base_rule import RewriteRule


logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Orchestrates rewrite rule execution.

    The engine keeps its rules sorted by priority and threads the text
    through them left to right. For each rule it:
    1. Checks the guard predicate
    2. Applies the rewrite
    3. Records a RuleOutcome

    A rule that raises is logged and skipped; the text it received is
    passed on unchanged.
    """

    def __init__(self, target: RuleTarget):
        """
        Initialize the rule engine.

        Args:
            target: Only rules for this target can be registered
        """
        self._target = target
        self._rules: List[RewriteRule] = []

    @property
    def target(self) -> RuleTarget:
        return self._target

    def register(self, rule: RewriteRule) -> None:
        """
        Register a rewrite rule.

        Args:
            rule: RewriteRule instance to register

        Raises:
            ValueError: If the rule targets another language
        """
        if rule.target is not self._target:
            raise ValueError(
                f"Cannot register {rule.name} ({rule.target.value}) "
                f"in a {self._target.value} engine"
            )
        self._rules.append(rule)
        self._rules.sort(key=lambda r: r.priority)
        logger.debug(f"Registered rule: {rule.name}")

    def register_all(self, rules: List[RewriteRule]) -> None:
        """
        Register multiple rules at once.

        Args:
            rules: List of RewriteRule instances
        """
        for rule in rules:
            self.register(rule)

    def unregister(self, rule_class: Type[RewriteRule]) -> bool:
        """
        Unregister a rule by class.

        Args:
            rule_class: Class of rule to remove

        Returns:
            True if rule was found and removed
        """
        original_count = len(self._rules)
        self._rules = [r for r in self._rules if not isinstance(r, rule_class)]
        removed = len(self._rules) < original_count
        if removed:
            logger.debug(f"Unregistered rule: {rule_class.__name__}")
        return removed

    def get_rule(self, name: str) -> Optional[RewriteRule]:
        """Look up a registered rule by name."""
        for rule in self._rules:
            if rule.name == name:
                return rule
        return None

    def run(self, text: Optional[str]) -> NormalizationResult:
        """
        Apply all rules in priority order.

        Args:
            text: Source text; None or empty is returned unchanged

        Returns:
            NormalizationResult with the final text and per-rule outcomes
        """
        if not text:
            return NormalizationResult(
                target=self._target, original=text, output=text
            )

        current = text
        outcomes: List[RuleOutcome] = []

        for rule in self._rules:
            outcome = RuleOutcome(rule_name=rule.name, priority=rule.priority)
            try:
                if not rule.applies(current):
                    outcome.skipped = True
                else:
                    rewritten = rule.rewrite(current)
                    outcome.changed = rewritten != current
                    current = rewritten
            except Exception as e:
                outcome.error = str(e)
                logger.error(f"Rule {rule.name} failed: {e}")
            outcomes.append(outcome)

        result = NormalizationResult(
            target=self._target,
            original=text,
            output=current,
            outcomes=outcomes,
        )
        logger.info(
            f"Applied {self._target.value} rules: "
            f"{len(result.applied_rules)}/{len(self._rules)} changed the text"
            + (f", {len(result.failed_rules)} failed" if result.failed_rules else "")
        )
        return result

    def apply(self, text: Optional[str]) -> Optional[str]:
        """Apply all rules and return only the final text."""
        return self.run(text).output

    @property
    def rules(self) -> List[RewriteRule]:
        """Get all registered rules (sorted by priority)."""
        return self._rules.copy()

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleEngine({self._target.value}, {len(self._rules)} rules)"


def create_html_engine() -> RuleEngine:
    """
    Create a RuleEngine with all HTML guideline rules registered.

    Returns:
        Configured RuleEngine ready to use
    """
    from .html import (
        AnchorHrefRule,
        ButtonTypeRule,
        ClassCaseRule,
        HeadingHierarchyRule,
        IconAriaRule,
        IconClassRule,
        ListStructureRule,
    )

    engine = RuleEngine(RuleTarget.HTML)
    engine.register_all([
        ClassCaseRule(),          # Priority 10 - Kebab-case class names first
        AnchorHrefRule(),         # Priority 20 - Empty hrefs
        IconClassRule(),          # Priority 30 - ico-* class pair
        ButtonTypeRule(),         # Priority 40 - type="button"
        IconAriaRule(),           # Priority 50 - aria-hidden on icons
        ListStructureRule(),      # Priority 60 - div items -> ul/li
        HeadingHierarchyRule(),   # Priority 70 - Single h1
    ])

    logger.debug(f"Created HTML engine with {len(engine)} rules")
    return engine


def create_scss_engine(max_nesting_depth: int = 4) -> RuleEngine:
    """
    Create a RuleEngine with all SCSS guideline rules registered.

    Args:
        max_nesting_depth: Brace depth above which lines are annotated

    Returns:
        Configured RuleEngine ready to use
    """
    from .scss import (
        BorderRule,
        ColorVariableRule,
        NestingDepthRule,
        RemFunctionRule,
        RemPropertyRule,
        ShadowRule,
    )

    engine = RuleEngine(RuleTarget.SCSS)
    engine.register_all([
        RemFunctionRule(),                        # Priority 10 - rem() -> @include rem()
        RemPropertyRule(),                        # Priority 20 - numeric properties
        BorderRule(),                             # Priority 30 - border shorthands
        ShadowRule(),                             # Priority 40 - box/text shadows
        ColorVariableRule(),                      # Priority 50 - $vars -> hex
        NestingDepthRule(max_nesting_depth),      # Priority 60 - lint last
    ])

    logger.debug(f"Created SCSS engine with {len(engine)} rules")
    return engine
