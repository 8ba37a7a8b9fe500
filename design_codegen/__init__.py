"""
Design Codegen - Scene-tree analysis and guideline normalization for
model-generated HTML and SCSS.
"""

__version__ = "0.1.0"
