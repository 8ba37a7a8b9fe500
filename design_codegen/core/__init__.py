"""Core configuration for design_codegen."""

from .config import Settings, settings

__all__ = ["Settings", "settings"]
