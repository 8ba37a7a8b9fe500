"""
Classes router - Class names defined by markup or a stylesheet.

Endpoints:
- POST /classes/markup
- POST /classes/stylesheet
"""

from fastapi import APIRouter

from design_codegen.normalizer.class_names import ClassNameExtractor
from design_codegen.schemas.codegen import ClassNamesRequest, ClassNamesResponse

router = APIRouter(prefix="/classes", tags=["classes"])


@router.post("/markup", response_model=ClassNamesResponse)
async def classes_from_markup(request: ClassNamesRequest):
    names = ClassNameExtractor.from_markup(request.code)
    return ClassNamesResponse(class_names=names, total=len(names))


@router.post("/stylesheet", response_model=ClassNamesResponse)
async def classes_from_stylesheet(request: ClassNamesRequest):
    names = ClassNameExtractor.from_stylesheet(request.code)
    return ClassNamesResponse(class_names=names, total=len(names))
