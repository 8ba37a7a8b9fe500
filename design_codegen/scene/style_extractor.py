"""
Style Info Extractor - Collect color, font and geometry facts.

Used to give the SCSS prompt concrete values from the design.
"""

import logging
from typing import Any, Optional, Sequence

from ..monitoring.logger import codegen_logger
from .contracts import StyleInfo
from .nodes import SCENE_ERRORS, NodeKind, SceneNode, parse_scene_tree, walk

logger = logging.getLogger(__name__)


class StyleInfoExtractor:
    """
    Depth-first collector of style facts.

    Colors are converted to hex and deduplicated by exact string; sizes
    and positions are kept as-is, one per node that has them. Input that
    cannot be processed yields the empty StyleInfo.
    """

    def extract(self, nodes: Optional[Sequence[SceneNode]]) -> StyleInfo:
        try:
            info = self._collect(nodes)
        except SCENE_ERRORS as e:
            codegen_logger.log_error("style extraction", e)
            info = StyleInfo()

        logger.debug(f"Extracted {len(info.colors)} colors, {len(info.fonts)} fonts")
        return info

    def extract_document(self, payload: Any) -> StyleInfo:
        """Parse an exported JSON payload and extract its style facts."""
        return self.extract(parse_scene_tree(payload))

    def _collect(self, nodes: Optional[Sequence[SceneNode]]) -> StyleInfo:
        if isinstance(nodes, dict):
            roots = parse_scene_tree(nodes)
        else:
            roots = list(nodes or ())
            if not all(isinstance(node, SceneNode) for node in roots):
                roots = parse_scene_tree(roots)

        info = StyleInfo()
        for node in walk(roots):
            if node.kind is NodeKind.TEXT:
                if node.font_family and node.font_family not in info.fonts:
                    info.fonts.append(node.font_family)
            else:
                for color in (node.background_color, node.border_color):
                    if color is None:
                        continue
                    hex_value = color.to_hex()
                    if hex_value not in info.colors:
                        info.colors.append(hex_value)

            if node.size is not None:
                info.sizes.append(node.size)
            if node.position is not None:
                info.positions.append(node.position)

        return info
