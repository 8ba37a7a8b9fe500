"""
Normalize router - Guideline enforcement for generated code.

Endpoints:
- POST /normalize/html
- POST /normalize/scss
"""

import logging

from fastapi import APIRouter

from design_codegen.core.config import settings
from design_codegen.monitoring.logger import codegen_logger
from design_codegen.normalizer.contracts.results import NormalizationResult
from design_codegen.normalizer.html_normalizer import HtmlNormalizer
from design_codegen.normalizer.scss_normalizer import ScssNormalizer
from design_codegen.schemas.codegen import NormalizeRequest, NormalizeResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/normalize", tags=["normalize"])

html_normalizer = HtmlNormalizer()
scss_normalizer = ScssNormalizer(settings.SCSS_MAX_NESTING_DEPTH)


def _to_response(result: NormalizationResult) -> NormalizeResponse:
    codegen_logger.log_normalization(
        result.target.value,
        result.applied_rules,
        result.changed,
        input_length=len(result.original or ""),
    )
    return NormalizeResponse(
        output=result.output or "",
        changed=result.changed,
        applied_rules=result.applied_rules,
    )


@router.post("/html", response_model=NormalizeResponse, summary="Normalize generated HTML")
async def normalize_html(request: NormalizeRequest):
    return _to_response(html_normalizer.run(request.code))


@router.post("/scss", response_model=NormalizeResponse, summary="Normalize generated SCSS")
async def normalize_scss(request: NormalizeRequest):
    return _to_response(scss_normalizer.run(request.code))
