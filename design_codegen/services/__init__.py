from .codegen_service import (
    CodegenService,
    GenerationSession,
    HtmlGeneration,
    ScssGeneration,
    codegen_service,
)

__all__ = [
    "CodegenService",
    "GenerationSession",
    "HtmlGeneration",
    "ScssGeneration",
    "codegen_service",
]
