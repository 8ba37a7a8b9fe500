"""
Scene router - Structural analysis and style facts of an exported selection.

Endpoints:
- POST /scene/analyze: Semantic layout recommendation
- POST /scene/style-info: Colors, fonts, sizes and positions

Malformed payloads produce the neutral (empty) result, never a 4xx.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter

from design_codegen.monitoring.logger import codegen_logger
from design_codegen.scene.analyzer import SceneTreeAnalyzer
from design_codegen.scene.nodes import parse_scene_tree, walk
from design_codegen.scene.style_extractor import StyleInfoExtractor
from design_codegen.schemas.codegen import SceneRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scene", tags=["scene"])

analyzer = SceneTreeAnalyzer()
extractor = StyleInfoExtractor()


@router.post("/analyze", summary="Recommend an HTML structure for a selection")
async def analyze_scene(request: SceneRequest) -> Dict[str, Any]:
    """Classify texts, lists, buttons, images and layout regions."""
    roots = parse_scene_tree(request.document)
    result = analyzer.analyze(roots)
    codegen_logger.log_analysis(
        node_count=sum(1 for _ in walk(roots)),
        semantic_tags=result.semantic_tags,
        list_count=len(result.list_structures),
        component_count=len(result.distinct_components),
    )
    return result.to_dict()


@router.post("/style-info", summary="Collect style facts from a selection")
async def scene_style_info(request: SceneRequest) -> Dict[str, Any]:
    return extractor.extract_document(request.document).to_dict()
