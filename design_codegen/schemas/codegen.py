"""
Pydantic schemas for the codegen HTTP API.

These schemas define the REST contract.
Used in design_codegen/routers/*.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


# ============== SCENE ==============

class SceneRequest(BaseModel):
    """Exported selection to analyze."""
    document: Any = Field(
        default=None,
        description='Scene payload: {"selection": [...]}, a node or a list of nodes',
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "document": {
                    "selection": [
                        {"id": "1:2", "name": "header-wrap", "type": "FRAME", "children": []}
                    ]
                }
            }
        }
    }


# ============== NORMALIZATION ==============

class NormalizeRequest(BaseModel):
    """Generated code to normalize."""
    code: str = Field(default="", description="HTML or SCSS produced by a model")


class NormalizeResponse(BaseModel):
    """Normalized code and the rules that changed it."""
    output: str
    changed: bool
    applied_rules: List[str]


# ============== CLASS NAMES ==============

class ClassNamesRequest(BaseModel):
    code: str = Field(default="", description="Markup or stylesheet")


class ClassNamesResponse(BaseModel):
    class_names: List[str]
    total: int


# ============== PROMPTS ==============

class HtmlPromptRequest(BaseModel):
    """HTML prompt; a non-empty class list switches to the class-list prompt."""
    document: Any = None
    user_prompt: Optional[str] = None
    class_names: List[str] = Field(
        default_factory=list,
        description="Classes of the previously generated stylesheet",
    )


class ScssPromptRequest(BaseModel):
    """SCSS prompt; non-empty html_code switches to the HTML-aware prompt."""
    document: Any = None
    user_prompt: Optional[str] = None
    html_code: Optional[str] = Field(
        default=None,
        description="Previously generated markup",
    )


class PromptResponse(BaseModel):
    prompt: str
    mode: str = Field(..., description='"analysis", "class_list", "scene" or "html"')


# ============== GENERATION ==============

class HtmlGenerationRequest(BaseModel):
    """Raw model response to finalize into markup."""
    response_text: str = Field(..., description="Raw model response, fenced or not")
    document: Any = None
    class_names: List[str] = Field(default_factory=list)


class HtmlGenerationResponse(BaseModel):
    code: str
    analysis_summary: str
    applied_rules: List[str]


class ScssGenerationRequest(BaseModel):
    """Raw model response to finalize into a stylesheet."""
    response_text: str = Field(..., description="Raw model response, fenced or not")
    document: Any = None
    html_code: Optional[str] = None


class ScssGenerationResponse(BaseModel):
    code: str
    analysis_text: str
    class_names: List[str]
    applied_rules: List[str]
