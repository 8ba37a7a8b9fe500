"""
Codegen Service - Round-trip state between HTML and SCSS generation.

The host plugin generates markup and stylesheets in separate requests
and feeds the result of one into the prompt for the other. That state
lives in an explicit GenerationSession owned by the caller.

Flow:
1. start(): A new selection is exported; previous results are dropped
2. html_prompt(): Class-list prompt when a stylesheet exists, analyzer
   prompt otherwise
3. finalize_html(): Model text -> code block -> normalized markup
   (wrapper class enforced when the session has stylesheet classes)
4. scss_prompt(): HTML-aware prompt when markup exists
5. finalize_scss(): Model text -> normalized stylesheet; its classes are
   remembered for the next HTML pass

The service never talks to a model; transport stays with the caller.

Usage:
    from design_codegen.services import codegen_service, GenerationSession

    session = GenerationSession()
    codegen_service.start(session, scene_json)
    prompt = codegen_service.html_prompt(session, scene_json, "Hero section")
    html = codegen_service.finalize_html(session, model_text).code
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.config import settings
from ..monitoring.logger import codegen_logger
from ..normalizer.class_names import ClassNameExtractor
from ..normalizer.contracts.results import NormalizationResult
from ..normalizer.html_normalizer import HtmlNormalizer
from ..normalizer.scss_normalizer import ScssNormalizer
from ..prompts.helpers import ensure_wrapper_class, extract_code_block, pick_wrapper_class
from ..prompts.html_analysis import HtmlStructureAnalyzer, format_scss_analysis
from ..prompts.html_prompts import build_html_prompt, build_html_prompt_with_class_list
from ..prompts.scss_prompts import build_scss_prompt, build_scss_prompt_from_html
from ..scene.analyzer import SceneTreeAnalyzer
from ..scene.nodes import parse_scene_tree, walk
from ..scene.style_extractor import StyleInfoExtractor

logger = logging.getLogger(__name__)


@dataclass
class GenerationSession:
    """Results carried from one generation step to the next."""

    document: Any = None
    """Last exported scene payload."""

    html_code: str = ""
    """Last normalized markup."""

    scss_classes: List[str] = field(default_factory=list)
    """Classes defined by the last normalized stylesheet."""

    @property
    def has_html(self) -> bool:
        return bool(self.html_code)

    @property
    def has_scss(self) -> bool:
        return bool(self.scss_classes)


@dataclass
class HtmlGeneration:
    """Finalized markup."""

    code: str
    analysis_summary: str
    """Recommended structure of the session's scene."""

    normalization: Optional[NormalizationResult] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "analysis_summary": self.analysis_summary,
            "applied_rules": self.normalization.applied_rules if self.normalization else [],
        }


@dataclass
class ScssGeneration:
    """Finalized stylesheet."""

    code: str
    analysis_text: str
    """Markup/style summary the stylesheet was generated against."""

    class_names: List[str] = field(default_factory=list)
    normalization: Optional[NormalizationResult] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "analysis_text": self.analysis_text,
            "class_names": list(self.class_names),
            "applied_rules": self.normalization.applied_rules if self.normalization else [],
        }


class CodegenService:
    """
    Stateless orchestration over a caller-owned GenerationSession.

    Configuration (nesting limit, JSON indent) comes from settings unless
    passed explicitly.
    """

    def __init__(
        self,
        max_nesting_depth: Optional[int] = None,
        json_indent: Optional[int] = None,
    ):
        self.max_nesting_depth = (
            settings.SCSS_MAX_NESTING_DEPTH if max_nesting_depth is None else max_nesting_depth
        )
        self.json_indent = settings.PROMPT_JSON_INDENT if json_indent is None else json_indent
        self._analyzer = SceneTreeAnalyzer()
        self._extractor = StyleInfoExtractor()
        self._html_analyzer = HtmlStructureAnalyzer()
        self._html_normalizer = HtmlNormalizer()
        self._scss_normalizer = ScssNormalizer(self.max_nesting_depth)

    # =========================================================================
    # SESSION
    # =========================================================================

    def start(self, session: GenerationSession, document: Any) -> GenerationSession:
        """Store a freshly exported selection and drop earlier results."""
        session.document = document
        session.html_code = ""
        session.scss_classes = []

        roots = parse_scene_tree(document)
        analysis = self._analyzer.analyze(roots)
        codegen_logger.log_analysis(
            node_count=sum(1 for _ in walk(roots)),
            semantic_tags=analysis.semantic_tags,
            list_count=len(analysis.list_structures),
            component_count=len(analysis.distinct_components),
        )
        return session

    # =========================================================================
    # HTML
    # =========================================================================

    def html_prompt(
        self,
        session: GenerationSession,
        document: Any = None,
        user_prompt: Optional[str] = None,
    ) -> str:
        """
        Build the next HTML prompt.

        Args:
            session: Current session
            document: Scene payload; defaults to the session's
            user_prompt: Optional free-form request

        Returns:
            Class-list prompt when the session holds stylesheet classes,
            analyzer-guided prompt otherwise
        """
        document = session.document if document is None else document
        if session.has_scss:
            logger.debug(f"HTML prompt restricted to {len(session.scss_classes)} classes")
            return build_html_prompt_with_class_list(
                document, user_prompt, session.scss_classes, indent=self.json_indent
            )
        return build_html_prompt(document, user_prompt, indent=self.json_indent)

    def finalize_html(self, session: GenerationSession, model_text: Optional[str]) -> HtmlGeneration:
        """Turn a raw model response into session markup."""
        code = extract_code_block(model_text)
        result = self._html_normalizer.run(code)
        code = result.output or ""

        if session.has_scss:
            code = ensure_wrapper_class(code, pick_wrapper_class(session.scss_classes)) or ""

        session.html_code = code
        codegen_logger.log_normalization(
            "html", result.applied_rules, result.changed, input_length=len(model_text or "")
        )

        summary = self._analyzer.analyze_document(session.document).recommended_structure
        return HtmlGeneration(code=code, analysis_summary=summary, normalization=result)

    # =========================================================================
    # SCSS
    # =========================================================================

    def scss_prompt(
        self,
        session: GenerationSession,
        document: Any = None,
        user_prompt: Optional[str] = None,
    ) -> str:
        """HTML-aware stylesheet prompt when the session holds markup."""
        document = session.document if document is None else document
        if session.has_html:
            return build_scss_prompt_from_html(
                session.html_code,
                document,
                user_prompt,
                max_depth=self.max_nesting_depth,
                indent=self.json_indent,
            )
        return build_scss_prompt(
            document, user_prompt, max_depth=self.max_nesting_depth, indent=self.json_indent
        )

    def finalize_scss(self, session: GenerationSession, model_text: Optional[str]) -> ScssGeneration:
        """Turn a raw model response into a stylesheet and remember its classes."""
        code = extract_code_block(model_text)
        result = self._scss_normalizer.run(code)
        code = result.output or ""

        session.scss_classes = ClassNameExtractor.from_stylesheet(code)
        codegen_logger.log_normalization(
            "scss", result.applied_rules, result.changed, input_length=len(model_text or "")
        )

        analysis_text = format_scss_analysis(
            self._html_analyzer.analyze(session.html_code),
            self._extractor.extract_document(session.document),
        )
        return ScssGeneration(
            code=code,
            analysis_text=analysis_text,
            class_names=list(session.scss_classes),
            normalization=result,
        )


# Singleton instance for easy import
codegen_service = CodegenService()
