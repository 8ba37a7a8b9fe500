"""
Codegen Logger - Structured logging for analysis and normalization.

Every module logs through `logging.getLogger(__name__)`, so all records
land under the "design_codegen" hierarchy configured here.

Log Format:
==========
    [2026-01-01 12:00:00] INFO [design_codegen.codegen] html normalized ...
"""

import logging
import sys
from typing import List, Optional

# Configure the package logger
logger = logging.getLogger("design_codegen")
logger.setLevel(logging.INFO)

# Create console handler if not exists
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_logging(level: str = "INFO") -> None:
    """Set the level of the package logger (e.g. from settings.LOG_LEVEL)."""
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))


class CodegenLogger:
    """
    Structured logger for codegen operations.

    Usage:
        log = CodegenLogger()
        log.log_analysis(node_count=12, semantic_tags=["header"], list_count=1)
        log.log_normalization("html", applied=["ClassCaseRule"], changed=True)
    """

    def __init__(self):
        """Initialize the codegen logger."""
        self._logger = logging.getLogger("design_codegen.codegen")

    def log_analysis(
        self,
        node_count: int,
        semantic_tags: List[str],
        list_count: int,
        component_count: int = 0,
    ) -> None:
        """Log a finished scene analysis."""
        self._logger.info(
            f"scene analyzed: nodes={node_count} "
            f"semantic={','.join(semantic_tags) or '-'} "
            f"lists={list_count} components={component_count}"
        )

    def log_normalization(
        self,
        language: str,
        applied: List[str],
        changed: bool,
        input_length: Optional[int] = None,
    ) -> None:
        """Log a finished normalization pass."""
        self._logger.info(
            f"{language} normalized: changed={changed} "
            f"rules={','.join(applied) or '-'}"
            + (f" input_chars={input_length}" if input_length is not None else "")
        )

    def log_error(self, operation: str, error: Exception) -> None:
        """Log an error converted into a neutral result."""
        self._logger.warning(
            f"{operation} failed, returning neutral result: "
            f"{type(error).__name__}: {error}"
        )


# Singleton instance for easy import
codegen_logger = CodegenLogger()
