"""
SCSS Palette - Hex values substituted for color variables.

The generated stylesheet must not depend on a variables partial, so
color variables are resolved to literal hex values.

Usage:
    from design_codegen.normalizer.scss_palette import ScssPalette

    ScssPalette.resolve("$color-primary")   # "#3b82f6"
    ScssPalette.resolve("$brand-special")   # "#cccccc"
"""

from typing import Dict, Tuple


class ScssPalette:
    """
    Centralized color definitions for variable resolution.

    Resolution order:
    1. Exact (case-insensitive) name in VARIABLES
    2. First keyword group in HEURISTICS contained in the name
    3. FALLBACK
    """

    # =========================================================================
    # BASE COLORS
    # =========================================================================

    PRIMARY = "#3b82f6"
    """Primary blue."""

    WHITE = "#ffffff"
    BLACK = "#000000"

    GRAY = "#6b7280"
    """Mid gray for text and borders."""

    LIGHT_GRAY = "#f3f4f6"
    DARK_GRAY = "#374151"

    RED = "#ef4444"
    GREEN = "#10b981"
    YELLOW = "#f59e0b"
    ORANGE = "#f97316"
    PURPLE = "#8b5cf6"
    PINK = "#ec4899"

    FALLBACK = "#cccccc"
    """Neutral gray used when a variable name gives no hint."""

    # =========================================================================
    # EXACT VARIABLE NAMES (lowercase, with sigil)
    # =========================================================================

    VARIABLES: Dict[str, str] = {
        "$primary": PRIMARY,
        "$primary-bg": PRIMARY,
        "$color-primary": PRIMARY,
        "$white": WHITE,
        "$color-white": WHITE,
        "$color-fff": WHITE,
        "$black": BLACK,
        "$color-black": BLACK,
        "$color-000": BLACK,
        "$gray": GRAY,
        "$grey": GRAY,
        "$color-gray": GRAY,
        "$color-grey": GRAY,
        "$light-gray": LIGHT_GRAY,
        "$light-grey": LIGHT_GRAY,
        "$dark-gray": DARK_GRAY,
        "$dark-grey": DARK_GRAY,
        "$red": RED,
        "$color-red": RED,
        "$green": GREEN,
        "$color-green": GREEN,
        "$blue": PRIMARY,
        "$color-blue": PRIMARY,
        "$yellow": YELLOW,
        "$color-yellow": YELLOW,
        "$orange": ORANGE,
        "$color-orange": ORANGE,
        "$purple": PURPLE,
        "$color-purple": PURPLE,
        "$pink": PINK,
        "$color-pink": PINK,
        "$success": GREEN,
        "$error": RED,
        "$warning": YELLOW,
        "$info": PRIMARY,
        "$danger": RED,
    }

    # =========================================================================
    # SUBSTRING HEURISTICS (checked in order)
    # =========================================================================

    HEURISTICS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
        (("white", "fff"), WHITE),
        (("black", "000"), BLACK),
        (("primary", "blue"), PRIMARY),
        (("gray", "grey"), GRAY),
        (("red", "danger"), RED),
        (("green", "success"), GREEN),
    )

    @classmethod
    def resolve(cls, variable: str) -> str:
        """
        Hex value for a color variable reference.

        Args:
            variable: Variable token including the `$` sigil

        Returns:
            `#rrggbb` string (never fails)
        """
        name = variable.lower()
        if name in cls.VARIABLES:
            return cls.VARIABLES[name]
        for keywords, hex_value in cls.HEURISTICS:
            if any(keyword in name for keyword in keywords):
                return hex_value
        return cls.FALLBACK
