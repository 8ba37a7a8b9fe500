"""
Class Name Extractor - Collect class identifiers from markup or stylesheets.

The sorted set returned here is fed back into the next generation round
so the model reuses existing class names.

Usage:
    from design_codegen.normalizer import ClassNameExtractor

    ClassNameExtractor.from_markup('<div class="card card-title">')
    # ['card', 'card-title']
    ClassNameExtractor.from_stylesheet(".card { .card-title { ... } }")
    # ['card', 'card-title']
"""

import re
from typing import Iterable, List, Optional

CLASS_ATTRIBUTE_PATTERN = re.compile(r"""class\s*=\s*(["'])((?:(?!\1)[^>])+)\1""")
CLASS_SELECTOR_PATTERN = re.compile(r"\.([a-zA-Z][a-zA-Z0-9_-]*)\b")


def _sorted_unique(tokens: Iterable[str]) -> List[str]:
    return sorted({token for token in tokens if token})


class ClassNameExtractor:
    """Regex-based class name scanner; never raises on odd input."""

    @staticmethod
    def from_markup(markup: Optional[str]) -> List[str]:
        """
        Class tokens from `class="..."` / `class='...'` attributes.

        Returns:
            Sorted, deduplicated class names (empty for empty input)
        """
        if not markup:
            return []
        tokens: List[str] = []
        for match in CLASS_ATTRIBUTE_PATTERN.finditer(str(markup)):
            tokens.extend(match.group(2).split())
        return _sorted_unique(tokens)

    @staticmethod
    def from_stylesheet(stylesheet: Optional[str]) -> List[str]:
        """
        Identifiers following a `.` (class selectors).

        Returns:
            Sorted, deduplicated class names (empty for empty input)
        """
        if not stylesheet:
            return []
        return _sorted_unique(
            match.group(1) for match in CLASS_SELECTOR_PATTERN.finditer(str(stylesheet))
        )
