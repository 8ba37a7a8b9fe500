"""
Generation router - Finalize raw model responses.

Endpoints:
- POST /generation/html: Code block -> normalized markup (+ wrapper class)
- POST /generation/scss: Code block -> normalized stylesheet + class list
"""

import logging

from fastapi import APIRouter, HTTPException, status

from design_codegen.schemas.codegen import (
    HtmlGenerationRequest,
    HtmlGenerationResponse,
    ScssGenerationRequest,
    ScssGenerationResponse,
)
from design_codegen.services.codegen_service import GenerationSession, codegen_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/generation", tags=["generation"])


def _require_text(text: str) -> None:
    if not text or not text.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="response_text must not be empty",
        )


@router.post("/html", response_model=HtmlGenerationResponse)
async def finalize_html(request: HtmlGenerationRequest):
    """Extract, normalize and wrap generated markup."""
    _require_text(request.response_text)
    session = GenerationSession(document=request.document, scss_classes=list(request.class_names))
    generation = codegen_service.finalize_html(session, request.response_text)
    return HtmlGenerationResponse(**generation.to_dict())


@router.post("/scss", response_model=ScssGenerationResponse)
async def finalize_scss(request: ScssGenerationRequest):
    """Extract and normalize a generated stylesheet."""
    _require_text(request.response_text)
    session = GenerationSession(document=request.document, html_code=request.html_code or "")
    generation = codegen_service.finalize_scss(session, request.response_text)
    return ScssGenerationResponse(**generation.to_dict())
