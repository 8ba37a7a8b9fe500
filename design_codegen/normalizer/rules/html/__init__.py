"""
HTML Rules - Guideline rewrites for generated markup.

Run order (priority):
10 ClassCaseRule, 20 AnchorHrefRule, 30 IconClassRule, 40 ButtonTypeRule,
50 IconAriaRule, 60 ListStructureRule, 70 HeadingHierarchyRule
"""

from .class_case_rule import ClassCaseRule
from .anchor_href_rule import AnchorHrefRule
from .icon_class_rule import IconClassRule
from .button_type_rule import ButtonTypeRule
from .icon_aria_rule import IconAriaRule
from .list_structure_rule import ListStructureRule
from .heading_rule import HeadingHierarchyRule

__all__ = [
    "ClassCaseRule",
    "AnchorHrefRule",
    "IconClassRule",
    "ButtonTypeRule",
    "IconAriaRule",
    "ListStructureRule",
    "HeadingHierarchyRule",
]
