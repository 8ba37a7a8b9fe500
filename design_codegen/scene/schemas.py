"""
Scene Schemas - Pydantic models for the exported selection JSON.

The design tool serializes its current selection into a JSON tree (one
object per node). These models validate that payload before it is turned
into the immutable SceneNode tree used by the analyzers.

Example document:
    {
        "timestamp": "2026-01-01T00:00:00Z",
        "figmaFile": {"id": "abc", "name": "Landing"},
        "selection": [
            {"id": "1:2", "name": "header-wrap", "type": "FRAME", "children": [...]}
        ]
    }
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# GEOMETRY / COLOR
# ---------------------------------------------------------------------------

class PositionSchema(BaseModel):
    """Node position in canvas coordinates."""
    model_config = ConfigDict(allow_inf_nan=False)

    x: float = 0
    y: float = 0


class SizeSchema(BaseModel):
    """Node bounding-box size."""
    model_config = ConfigDict(allow_inf_nan=False)

    width: float = 0
    height: float = 0


class ColorSchema(BaseModel):
    """Solid paint color: r/g/b in 0-255, alpha in 0-1."""
    model_config = ConfigDict(allow_inf_nan=False)

    r: float = 0
    g: float = 0
    b: float = 0
    a: float = 1


# ---------------------------------------------------------------------------
# NODE
# ---------------------------------------------------------------------------

class SceneNodeSchema(BaseModel):
    """
    One node of the exported scene tree.

    Only `type` drives variant selection; every other field is optional
    so partial exports still validate. `children` stays raw: each child is
    validated on its own while the tree is built, so one bad child never
    takes its siblings or ancestors down and depth is not bounded here.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore", allow_inf_nan=False)

    id: Optional[Union[str, int]] = None
    name: str = ""
    type: str = ""
    visible: bool = True
    depth: Optional[int] = None

    position: Optional[PositionSchema] = None
    size: Optional[SizeSchema] = None

    text: Optional[str] = None
    font_size: Optional[float] = Field(default=None, alias="fontSize")
    font_family: Optional[str] = Field(default=None, alias="fontFamily")
    font_weight: Optional[Union[str, int]] = Field(default=None, alias="fontWeight")

    background_color: Optional[ColorSchema] = Field(default=None, alias="backgroundColor")
    border_color: Optional[ColorSchema] = Field(default=None, alias="borderColor")
    border_width: Optional[float] = Field(default=None, alias="borderWidth")
    border_radius: Optional[float] = Field(default=None, alias="borderRadius")

    children: List[Any] = Field(default_factory=list)

    @field_validator("name", "type", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("visible", mode="before")
    @classmethod
    def _none_to_visible(cls, value: Any) -> Any:
        return True if value is None else value

    @field_validator("children", mode="before")
    @classmethod
    def _null_children(cls, value: Any) -> Any:
        return [] if value is None else value


class FileInfoSchema(BaseModel):
    """Source file reference included by the exporter."""
    id: Optional[str] = None
    name: Optional[str] = None


class SceneDocumentSchema(BaseModel):
    """Exported selection: metadata plus the ordered root nodes."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    timestamp: Optional[str] = None
    figma_file: Optional[FileInfoSchema] = Field(default=None, alias="figmaFile")
    selection: List[SceneNodeSchema] = Field(default_factory=list)

    @field_validator("selection", mode="before")
    @classmethod
    def _null_selection(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_json(self, indent: int = 2) -> str:
        """Serialize back to the exporter's camelCase JSON."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
