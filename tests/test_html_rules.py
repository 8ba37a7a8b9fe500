"""
Unit tests for the HTML guideline rules and HtmlNormalizer.

Each rule is tested in isolation (guard + rewrite), then the full
pipeline is checked end to end.
"""

import pytest

from design_codegen.normalizer.rules.html import (
    AnchorHrefRule,
    ButtonTypeRule,
    ClassCaseRule,
    HeadingHierarchyRule,
    IconAriaRule,
    IconClassRule,
    ListStructureRule,
)


# ============================================================================
# CLASS CASE
# ============================================================================


class TestClassCaseRule:
    """Tests for kebab-case class tokens."""

    def test_camel_and_snake(self):
        """Every token is converted."""
        rule = ClassCaseRule()
        html = '<div class="mainContainer hero_title">x</div>'
        assert rule(html) == '<div class="main-container hero-title">x</div>'

    def test_single_quotes_become_double(self):
        assert ClassCaseRule()("<p class='fooBar'>x</p>") == '<p class="foo-bar">x</p>'

    def test_empty_class_does_not_swallow_next_attribute(self):
        html = '<div class="" id="mainBox"><p class="subTitle">x</p></div>'
        assert ClassCaseRule()(html) == '<div class="" id="mainBox"><p class="sub-title">x</p></div>'

    def test_guard_without_class(self):
        """No class attribute means the rule does not apply."""
        assert not ClassCaseRule().applies("<div>x</div>")


# ============================================================================
# ANCHOR HREF
# ============================================================================


class TestAnchorHrefRule:
    """Tests for empty link targets."""

    def test_href_emptied(self):
        html = '<a class="link" href="https://example.com">Go</a>'
        assert AnchorHrefRule()(html) == '<a class="link" href="">Go</a>'

    def test_javascript_href(self):
        assert AnchorHrefRule()("<a href='javascript:void(0)'>x</a>") == '<a href="">x</a>'

    def test_data_attribute_untouched(self):
        """Only the real href attribute is rewritten."""
        html = '<a data-href="keep" href="/x">x</a>'
        assert AnchorHrefRule()(html) == '<a data-href="keep" href="">x</a>'

    def test_data_href_before_href(self):
        """An empty data-href does not make the real href count as empty."""
        html = '<a data-href="" href="/x">Go</a>'
        assert AnchorHrefRule()(html) == '<a data-href="" href="">Go</a>'

    def test_other_quote_inside_value(self):
        assert AnchorHrefRule()('<a href="it\'s">x</a>') == '<a href="">x</a>'

    def test_single_quoted_empty_href(self):
        assert AnchorHrefRule()("<a href=''>x</a>") == '<a href="">x</a>'

    def test_already_empty(self):
        """Empty hrefs do not trigger the rule."""
        assert not AnchorHrefRule().applies('<a href="">x</a>')


# ============================================================================
# ICON CLASSES
# ============================================================================


class TestIconClassRule:
    """Tests for the ico-<name> ico-normal pair."""

    @pytest.mark.parametrize("html,expected", [
        ('<i class="icon-search"></i>', '<i class="ico-search ico-normal"></i>'),
        ('<i class="icon"></i>', '<i class="ico-default ico-normal"></i>'),
        ('<i class="icon ico-close"></i>', '<i class="icon ico-close ico-normal"></i>'),
        ('<i class="big icon-arrow-left"></i>', '<i class="big ico-arrow-left ico-normal"></i>'),
    ])
    def test_standardized(self, html, expected):
        assert IconClassRule()(html) == expected

    def test_plain_ico_untouched(self):
        """Classes without an "icon" token are left alone."""
        html = '<i class="ico-close"></i>'
        assert IconClassRule()(html) == html

    def test_only_i_elements(self):
        """Non-<i> elements with icon classes are left alone."""
        html = '<span class="icon-search"></span><img class="icon-logo">'
        assert not IconClassRule().applies(html)

    def test_icon_name(self):
        rule = IconClassRule()
        assert rule.icon_name("icon-search") == "search"
        assert rule.icon_name("icons_menu") == "menu"
        assert rule.icon_name("ICON") == "default"


# ============================================================================
# BUTTON TYPE / ICON ARIA
# ============================================================================


class TestButtonTypeRule:
    """Tests for explicit button types."""

    def test_type_inserted(self):
        assert ButtonTypeRule()('<button class="btn">Go</button>') == (
            '<button type="button" class="btn">Go</button>'
        )

    def test_bare_button(self):
        assert ButtonTypeRule()("<button>Go</button>") == '<button type="button">Go</button>'

    def test_existing_type_kept(self):
        """Buttons that already declare a type are not touched."""
        assert not ButtonTypeRule().applies('<button type="submit">Send</button>')

    def test_data_type_is_not_a_type(self):
        html = '<button data-type="x">Go</button>'
        assert ButtonTypeRule()(html) == '<button type="button" data-type="x">Go</button>'


class TestIconAriaRule:
    """Tests for aria-hidden on icons."""

    def test_attribute_inserted(self):
        html = '<i class="ico-close ico-normal"></i>'
        assert IconAriaRule()(html) == '<i class="ico-close ico-normal" aria-hidden="true"></i>'

    def test_existing_attribute_kept(self):
        html = '<i class="ico-close" aria-hidden="false"></i>'
        assert not IconAriaRule().applies(html)

    def test_self_closing(self):
        assert IconAriaRule()('<i class="ico-x"/>') == '<i class="ico-x" aria-hidden="true" />'

    def test_non_icon_untouched(self):
        assert not IconAriaRule().applies('<i class="emphasis">x</i>')


# ============================================================================
# LIST STRUCTURE
# ============================================================================


class TestListStructureRule:
    """Tests for div item runs -> ul/li."""

    def test_run_wrapped(self):
        html = '<div class="benefit-item">A</div>\n<div class="benefit-item">B</div>'
        assert ListStructureRule()(html) == (
            '<ul><li class="benefit-item">A</li>\n<li class="benefit-item">B</li></ul>'
        )

    def test_single_item_untouched(self):
        html = '<div class="benefit-item">A</div><p>x</p>'
        assert not ListStructureRule().applies(html)

    def test_nested_divs_preserved(self):
        """Closing tags are matched by depth, not by the first </div>."""
        html = (
            '<div class="card-item"><div class="thumb">x</div></div>'
            '<div class="card-item">B</div>'
        )
        assert ListStructureRule()(html) == (
            '<ul><li class="card-item"><div class="thumb">x</div></li>'
            '<li class="card-item">B</li></ul>'
        )

    def test_separated_items_are_not_a_run(self):
        """Items split by other content do not form a run."""
        html = '<div class="a-item">A</div><p>x</p><div class="a-item">B</div>'
        assert ListStructureRule()(html) == html

    def test_idempotent(self):
        rule = ListStructureRule()
        html = '<div class="x-item">1</div><div class="x-item">2</div><div class="x-item">3</div>'
        once = rule(html)
        assert rule(once) == once
        assert once.count("<li") == 3


# ============================================================================
# HEADINGS
# ============================================================================


class TestHeadingHierarchyRule:
    """Tests for the single-h1 rule."""

    def test_later_h1_demoted(self):
        html = '<h1>Top</h1><h1 class="sub">Second</h1><h1>Third</h1>'
        assert HeadingHierarchyRule()(html) == (
            '<h1>Top</h1><h2 class="sub">Second</h2><h2>Third</h2>'
        )

    def test_single_h1_untouched(self):
        assert not HeadingHierarchyRule().applies("<h1>Only</h1><h2>x</h2>")


# ============================================================================
# FULL PIPELINE
# ============================================================================


class TestHtmlNormalizer:
    """End-to-end tests for HtmlNormalizer."""

    def test_guideline_example(self, html_normalizer):
        """Class case, empty href and button type in one pass."""
        html = '<div class="mainContainer"><a href="/home">Home</a><button>Go</button></div>'
        assert html_normalizer.normalize(html) == (
            '<div class="main-container"><a href="">Home</a>'
            '<button type="button">Go</button></div>'
        )

    def test_icon_pipeline(self, html_normalizer):
        """Icon classes are standardized before aria-hidden is added."""
        result = html_normalizer.normalize('<i class="iconSearch"></i>')
        assert result == '<i class="ico-search ico-normal" aria-hidden="true"></i>'

    @pytest.mark.parametrize("html", [
        '<div class="mainContainer"><a href="/home">Home</a><button>Go</button></div>',
        '<section class="benefitList"><div class="benefit_item"><i class="icon-check"></i>A</div>'
        '<div class="benefit_item">B</div></section><h1>a</h1><h1>b</h1>',
        "<p>plain</p>",
    ])
    def test_idempotent(self, html_normalizer, html):
        once = html_normalizer.normalize(html)
        assert html_normalizer.normalize(once) == once

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_input_unchanged(self, html_normalizer, value):
        assert html_normalizer.normalize(value) == value

    def test_run_reports_rules(self, html_normalizer):
        result = html_normalizer.run('<button class="fooBar">x</button>')
        assert result.changed
        assert result.applied_rules == ["ClassCaseRule", "ButtonTypeRule"]
        assert "ClassCaseRule" in result.describe()
