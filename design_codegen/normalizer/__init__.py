"""
Normalizer - Deterministic guideline enforcement for generated code.

Whatever the model produced, the output of these normalizers satisfies
the fixed HTML/SCSS structural rules.

Provides:
- HtmlNormalizer / ScssNormalizer: Rule pipelines
- ClassNameExtractor: Class names fed back into the next generation
- to_kebab_case: Shared naming conversion
"""

from .class_names import ClassNameExtractor
from .contracts import NormalizationResult, RuleOutcome, RuleTarget
from .html_normalizer import HtmlNormalizer
from .naming import to_kebab_case
from .scss_normalizer import ScssNormalizer
from .scss_palette import ScssPalette

__all__ = [
    "ClassNameExtractor",
    "NormalizationResult",
    "RuleOutcome",
    "RuleTarget",
    "HtmlNormalizer",
    "ScssNormalizer",
    "ScssPalette",
    "to_kebab_case",
]
