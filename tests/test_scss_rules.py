"""
Unit tests for the SCSS guideline rules and ScssNormalizer.
"""

import pytest

from design_codegen.normalizer import ScssNormalizer, ScssPalette
from design_codegen.normalizer.rules.scss import (
    BorderRule,
    ColorVariableRule,
    NestingDepthRule,
    RemFunctionRule,
    RemPropertyRule,
    ShadowRule,
)
from design_codegen.normalizer.rules.scss.rem_rules import _DeclarationRule
from design_codegen.normalizer.rules.scss.values import (
    convert_border_value,
    convert_numeric_value,
    convert_shadow_value,
    is_exempt_value,
)


# ============================================================================
# VALUE CONVERTERS
# ============================================================================


class TestValueConverters:
    """Tests for the mixin argument helpers."""

    @pytest.mark.parametrize("value,expected", [
        ("24px", "24"),
        ("10px 20px", "10 20"),
        ("10px 20px 15px", "10 20 15"),
        ("1.5", "1.5"),
        ("-8px", "-8"),
        ("0 auto", "0 auto"),
        ("$gap", None),
        ("auto auto", None),
    ])
    def test_numeric(self, value, expected):
        assert convert_numeric_value(value) == expected

    @pytest.mark.parametrize("value", [
        "calc(100% - 10px)", "auto", "50%", "100vh", "1.5em", "2rem", "0",
    ])
    def test_exempt(self, value):
        assert is_exempt_value(value)

    def test_border(self):
        assert convert_border_value("1px solid #333") == "1 solid #333"
        assert convert_border_value("2px") == "2"
        assert convert_border_value("thin solid red") is None

    def test_shadow(self):
        assert convert_shadow_value("0 4px 8px 0 rgba(0, 0, 0, 0.25)") == (
            "0 4 8 0 rgba(0, 0, 0, 0.25)"
        )
        assert convert_shadow_value("1px 1px 2px #000") == "1 1 2 #000"
        assert convert_shadow_value("inset 0 1px 2px #000") is None


# ============================================================================
# REM RULES
# ============================================================================


class TestRemRules:
    """Tests for @include rem() conversion."""

    def test_rem_function(self):
        assert RemFunctionRule()("width: rem(24px);") == "@include rem(width, 24);"

    def test_numeric_property(self):
        assert RemPropertyRule()("margin: 20px;") == "@include rem(margin, 20);"

    def test_percentage_untouched(self):
        assert not RemPropertyRule().applies("width: 50%;")

    def test_calc_untouched(self):
        assert not RemPropertyRule().applies("top: calc(50% - 10px);")

    def test_longest_property_wins(self):
        """margin-top is not read as margin."""
        assert RemPropertyRule()("margin-top: 8px;") == "@include rem(margin-top, 8);"

    def test_unlisted_property_untouched(self):
        assert not RemPropertyRule().applies("z-index: 10;")

    def test_side_of_border_is_not_a_position(self):
        """border-top is not mistaken for the top property."""
        assert not RemPropertyRule().applies("border-top: 1px solid #000;")

    def test_border(self):
        assert BorderRule()("border: 1px solid #333;") == "@include rem(border, 1 solid #333);"

    def test_border_side(self):
        assert BorderRule()("border-bottom: 2px dashed red;") == (
            "@include rem(border-bottom, 2 dashed red);"
        )

    @pytest.mark.parametrize("value", ["none", "0"])
    def test_border_skips(self, value):
        assert not BorderRule().applies(f"border: {value};")

    def test_shadow(self):
        scss = "box-shadow: 0 4px 8px 0 rgba(0, 0, 0, 0.25);"
        assert ShadowRule()(scss) == "@include rem(box-shadow, 0 4 8 0 rgba(0, 0, 0, 0.25));"

    def test_shadow_none(self):
        assert not ShadowRule().applies("box-shadow: none;")

    def test_convert_is_required(self):
        """A declaration rule without convert() cannot be instantiated."""
        class NoConvertRule(_DeclarationRule):
            PATTERN = RemPropertyRule.PATTERN

            @property
            def priority(self) -> int:
                return 99

        with pytest.raises(TypeError):
            NoConvertRule()


# ============================================================================
# COLOR VARIABLES
# ============================================================================


class TestColorVariableRule:
    """Tests for $variable -> hex resolution."""

    def test_exact_name(self):
        assert ColorVariableRule()("color: $color-primary;") == "color: #3b82f6;"

    def test_fallback(self):
        assert ColorVariableRule()("background: $brand-special;") == "background: #cccccc;"

    def test_heuristic(self):
        assert ColorVariableRule()("border-color: $gray-500;") == "border-color: #6b7280;"

    def test_case_insensitive(self):
        assert ScssPalette.resolve("$WHITE") == "#ffffff"

    def test_declaration_kept(self):
        """Variable definitions are not references."""
        scss = "$primary: #123456;\n.a { color: $primary; }"
        assert ColorVariableRule()(scss) == "$primary: #123456;\n.a { color: #3b82f6; }"

    def test_full_name_replaced(self):
        """A longer variable is never partially replaced."""
        assert ColorVariableRule()("color: $white-ish;") == "color: #ffffff;"


# ============================================================================
# NESTING DEPTH
# ============================================================================


FIVE_LEVELS = """.a {
  .b {
    .c {
      .d {
        .e {
          color: #ffffff;
        }
      }
    }
  }
}"""

FOUR_LEVELS = """.a {
  .b {
    .c {
      .d {
        color: #ffffff;
      }
    }
  }
}"""


class TestNestingDepthRule:
    """Tests for the nesting lint."""

    def test_five_levels_flagged(self):
        rule = NestingDepthRule(max_depth=4)
        result = rule(FIVE_LEVELS)
        lines = result.split("\n")

        assert result.count(rule.warning) == 2
        assert lines[4].endswith(rule.warning)
        assert lines[5].endswith(rule.warning)

    def test_four_levels_clean(self):
        assert not NestingDepthRule(max_depth=4).applies(FOUR_LEVELS)

    def test_custom_limit(self):
        rule = NestingDepthRule(max_depth=3)
        assert rule.warning == "/* WARNING: nesting depth exceeds 3 levels */"
        assert rule.applies(FOUR_LEVELS)

    def test_idempotent(self):
        rule = NestingDepthRule()
        once = rule(FIVE_LEVELS)
        assert not rule.applies(once)
        assert rule(once) == once

    def test_crlf_preserved(self):
        rule = NestingDepthRule(max_depth=0)
        assert rule(".a {\r\n}") == f".a {{ {rule.warning}\r\n}}"


# ============================================================================
# FULL PIPELINE
# ============================================================================


class TestScssNormalizer:
    """End-to-end tests for ScssNormalizer."""

    def test_guideline_example(self, scss_normalizer):
        scss = ".card {\n  margin: 20px;\n  width: 50%;\n  color: $color-primary;\n}"
        assert scss_normalizer.normalize(scss) == (
            ".card {\n  @include rem(margin, 20);\n  width: 50%;\n  color: #3b82f6;\n}"
        )

    def test_border_with_variable(self, scss_normalizer):
        """Border conversion runs before variables are resolved."""
        result = scss_normalizer.normalize(".a { border: 1px solid $white; }")
        assert result == ".a { @include rem(border, 1 solid #ffffff); }"

    @pytest.mark.parametrize("scss", [
        ".card {\n  margin: 20px;\n  padding: 10px 20px;\n  color: $color-primary;\n}",
        ".a { border: 1px solid $white; box-shadow: 0 2px 4px $black; }",
        FIVE_LEVELS,
        ".x { width: rem(24px); top: calc(50% - 10px); }",
    ])
    def test_idempotent(self, scss_normalizer, scss):
        once = scss_normalizer.normalize(scss)
        assert scss_normalizer.normalize(once) == once

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_input_unchanged(self, scss_normalizer, value):
        assert scss_normalizer.normalize(value) == value

    def test_nesting_limit_configurable(self):
        normalizer = ScssNormalizer(max_nesting_depth=3)
        assert "exceeds 3 levels" in normalizer.normalize(FOUR_LEVELS)
