"""
RewriteRule - Abstract base class for deterministic text rewrite rules.

Each rule owns one guideline requirement. It exposes a cheap guard
(`applies`) and a rewrite that must be a no-op on its own output.

Usage:
    class MyRule(RewriteRule):
        @property
        def target(self) -> RuleTarget:
            return RuleTarget.HTML

        @property
        def priority(self) -> int:
            return 10

        def applies(self, text: str) -> bool:
            return "<foo" in text

        def rewrite(self, text: str) -> str:
            return text.replace("<foo", "<bar")
"""

from abc import ABC, abstractmethod

from ..contracts.targets import RuleTarget


class RewriteRule(ABC):
    """
    Abstract base class for rewrite rules.

    Subclasses must implement:
    - target: RuleTarget the rule operates on
    - priority: Execution order (lower = earlier)
    - applies(): Guard predicate, True if the rule may change the text
    - rewrite(): Return the rewritten text

    Priority Ranges (HTML):
    - 10: Class naming
    - 20-50: Attribute fixes (href, icons, button type, aria)
    - 60-70: Structural fixes (lists, headings)

    Priority Ranges (SCSS):
    - 10-40: rem() mixin conversion
    - 50: Color variables
    - 60: Nesting lint
    """

    @property
    @abstractmethod
    def target(self) -> RuleTarget:
        """
        Source language this rule rewrites.

        Returns:
            RuleTarget enum value
        """
        pass

    @property
    @abstractmethod
    def priority(self) -> int:
        """
        Execution priority. Lower values run first.

        Returns:
            Integer priority value
        """
        pass

    @property
    def name(self) -> str:
        """
        Rule name for logging and debugging.

        Returns:
            Class name by default
        """
        return self.__class__.__name__

    @abstractmethod
    def applies(self, text: str) -> bool:
        """
        Determine if this rule could change the given text.

        Args:
            text: Current text

        Returns:
            True if rewrite() should be called
        """
        pass

    @abstractmethod
    def rewrite(self, text: str) -> str:
        """
        Rewrite the text.

        Args:
            text: Current text

        Returns:
            Rewritten text; unmatched fragments pass through unchanged
        """
        pass

    def __call__(self, text: str) -> str:
        """Guarded rewrite: apply only when the guard accepts the text."""
        if not text or not self.applies(text):
            return text
        return self.rewrite(text)

    def __repr__(self) -> str:
        """String representation."""
        return f"{self.name}(target={self.target.value}, priority={self.priority})"

    def __eq__(self, other: object) -> bool:
        """Equality check based on class type."""
        if not isinstance(other, RewriteRule):
            return False
        return self.__class__ == other.__class__

    def __hash__(self) -> int:
        """Hash based on class name."""
        return hash(self.__class__.__name__)
