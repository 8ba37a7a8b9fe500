"""
Monitoring - logging setup for design_codegen.

Provides:
- configure_logging: Apply a level to the package logger
- CodegenLogger: Structured analysis/normalization events
"""

from .logger import CodegenLogger, codegen_logger, configure_logging

__all__ = ["CodegenLogger", "codegen_logger", "configure_logging"]
