"""
SCSS Rules - Guideline rewrites for generated stylesheets.

Run order (priority):
10 RemFunctionRule, 20 RemPropertyRule, 30 BorderRule, 40 ShadowRule,
50 ColorVariableRule, 60 NestingDepthRule
"""

from .rem_rules import BorderRule, RemFunctionRule, RemPropertyRule, ShadowRule
from .color_variable_rule import ColorVariableRule
from .nesting_depth_rule import NestingDepthRule

__all__ = [
    "RemFunctionRule",
    "RemPropertyRule",
    "BorderRule",
    "ShadowRule",
    "ColorVariableRule",
    "NestingDepthRule",
]
