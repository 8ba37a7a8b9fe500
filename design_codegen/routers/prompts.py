"""
Prompts router - Prompt assembly for the HTML and SCSS generation passes.

Endpoints:
- POST /prompts/html: class_names switch to the class-list prompt
- POST /prompts/scss: html_code switches to the HTML-aware prompt

Session state travels in the request body; the server keeps none.
"""

from fastapi import APIRouter

from design_codegen.schemas.codegen import HtmlPromptRequest, PromptResponse, ScssPromptRequest
from design_codegen.services.codegen_service import GenerationSession, codegen_service

router = APIRouter(prefix="/prompts", tags=["prompts"])


@router.post("/html", response_model=PromptResponse, summary="Build an HTML generation prompt")
async def html_prompt(request: HtmlPromptRequest):
    session = GenerationSession(document=request.document, scss_classes=list(request.class_names))
    prompt = codegen_service.html_prompt(session, user_prompt=request.user_prompt)
    return PromptResponse(prompt=prompt, mode="class_list" if session.has_scss else "analysis")


@router.post("/scss", response_model=PromptResponse, summary="Build an SCSS generation prompt")
async def scss_prompt(request: ScssPromptRequest):
    session = GenerationSession(document=request.document, html_code=request.html_code or "")
    prompt = codegen_service.scss_prompt(session, user_prompt=request.user_prompt)
    return PromptResponse(prompt=prompt, mode="html" if session.has_html else "scene")
