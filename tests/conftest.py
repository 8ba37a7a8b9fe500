"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- Analyzer / extractor / normalizer instances
- Sample exported scene documents
- Test client (FastAPI TestClient)
"""

import copy
from typing import Any, Dict, Generator

import pytest
from fastapi.testclient import TestClient

from design_codegen.main import app
from design_codegen.normalizer import HtmlNormalizer, ScssNormalizer
from design_codegen.normalizer.contracts import RuleTarget
from design_codegen.normalizer.rules import RuleEngine
from design_codegen.scene import SceneTreeAnalyzer, StyleInfoExtractor
from design_codegen.services import CodegenService, GenerationSession


# ---------------------------------------------------------------------------
# SAMPLE SCENES
# ---------------------------------------------------------------------------
# header-wrap  -> header, one h2 title, one button component
# main-content -> main, four repeating RECTANGLE cards (list + images)
# footer       -> footer, one paragraph

SAMPLE_DOCUMENT: Dict[str, Any] = {
    "timestamp": "2026-01-01T00:00:00Z",
    "figmaFile": {"id": "file-1", "name": "Landing"},
    "selection": [
        {
            "id": "1:1",
            "name": "header-wrap",
            "type": "FRAME",
            "depth": 0,
            "position": {"x": 0, "y": 0},
            "size": {"width": 1200, "height": 80},
            "backgroundColor": {"r": 59, "g": 130, "b": 246, "a": 1},
            "children": [
                {
                    "id": "1:2",
                    "name": "Page Title",
                    "type": "TEXT",
                    "depth": 1,
                    "text": "Welcome",
                    "fontSize": 32,
                    "fontFamily": "Inter",
                    "fontWeight": 700,
                },
                {
                    "id": "1:3",
                    "name": "btn-primary",
                    "type": "INSTANCE",
                    "depth": 1,
                    "backgroundColor": {"r": 255, "g": 255, "b": 255},
                    "borderColor": {"r": 0, "g": 0, "b": 0},
                    "children": [],
                },
            ],
        },
        {
            "id": "2:1",
            "name": "main-content",
            "type": "FRAME",
            "depth": 0,
            "children": [
                {
                    "id": f"2:{i}",
                    "name": "card",
                    "type": "RECTANGLE",
                    "depth": 1,
                    "size": {"width": 300, "height": 200},
                    "backgroundColor": {"r": 243, "g": 244, "b": 246},
                }
                for i in range(2, 6)
            ],
        },
        {
            "id": "3:1",
            "name": "footer",
            "type": "FRAME",
            "depth": 0,
            "children": [
                {
                    "id": "3:2",
                    "name": "Copyright",
                    "type": "TEXT",
                    "depth": 1,
                    "text": "(c) 2026 Landing",
                    "fontSize": 12,
                    "fontFamily": "Roboto",
                },
            ],
        },
    ],
}


@pytest.fixture
def sample_document() -> Dict[str, Any]:
    """Three-region landing page selection (fresh copy per test)."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def header_document() -> Dict[str, Any]:
    """Single empty FRAME named like a header."""
    return {"selection": [{"id": "9:1", "name": "header-wrap", "type": "FRAME", "children": []}]}


# ---------------------------------------------------------------------------
# CORE FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def analyzer() -> SceneTreeAnalyzer:
    return SceneTreeAnalyzer()


@pytest.fixture
def extractor() -> StyleInfoExtractor:
    return StyleInfoExtractor()


@pytest.fixture
def html_normalizer() -> HtmlNormalizer:
    return HtmlNormalizer()


@pytest.fixture
def scss_normalizer() -> ScssNormalizer:
    return ScssNormalizer()


@pytest.fixture
def html_engine() -> RuleEngine:
    """Empty HTML RuleEngine instance."""
    return RuleEngine(RuleTarget.HTML)


@pytest.fixture
def service() -> CodegenService:
    return CodegenService(max_nesting_depth=4, json_indent=2)


@pytest.fixture
def session() -> GenerationSession:
    return GenerationSession()


# ---------------------------------------------------------------------------
# HTTP FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """Test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client
