"""
Naming - Class name conventions shared by the normalizers.
"""

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_SEPARATORS = re.compile(r"[_\s]+")
_HYPHEN_RUNS = re.compile(r"-{2,}")


def to_kebab_case(token: str) -> str:
    """
    Convert an identifier to kebab-case.

        mainContainer    -> main-container
        benefit_item     -> benefit-item
        main__container  -> main-container
        -Hero  Title-    -> hero-title

    Idempotent: to_kebab_case(to_kebab_case(x)) == to_kebab_case(x).
    """
    if not token:
        return ""
    value = _CAMEL_BOUNDARY.sub(r"\1-\2", token)
    value = _SEPARATORS.sub("-", value)
    value = _HYPHEN_RUNS.sub("-", value)
    return value.lower().strip("-")


def is_kebab_case(token: str) -> bool:
    return bool(token) and to_kebab_case(token) == token
