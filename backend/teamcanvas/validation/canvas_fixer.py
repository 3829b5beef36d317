"""
Canvas Auto-Fixer - rule-based repair of stored canvases.

Every fix is deterministic and works on a copy; the input canvas is
never mutated.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from teamcanvas.canvas.schema import TeamCanvas
from teamcanvas.layout.geometry import clamp
from teamcanvas.validation.canvas_validator import (
    CanvasValidationResult,
    CanvasValidator,
)


logger = logging.getLogger(__name__)


@dataclass
class FixResult:
    success: bool
    issues_fixed: List[str] = field(default_factory=list)
    issues_remaining: List[str] = field(default_factory=list)
    changes_made: List[str] = field(default_factory=list)


class CanvasAutoFixer:

    def __init__(self):
        self.validator = CanvasValidator()

    def fix(self, canvas: TeamCanvas) -> Tuple[TeamCanvas, FixResult]:
        fixed = copy.deepcopy(canvas) if canvas is not None else TeamCanvas()
        before = self.validator.validate(fixed)
        changes: List[str] = []

        changes.extend(self._dedupe_nodes(fixed))
        changes.extend(self._clamp_positions(fixed))
        changes.extend(self._fill_labels(fixed))
        changes.extend(self._prune_edges(fixed))

        after = self.validator.validate(fixed)
        remaining = set(after.codes())
        fixed_codes = sorted({code for code in before.codes() if code not in remaining})

        if changes:
            logger.info("[FIXER] applied %d change(s) to canvas", len(changes))

        return fixed, FixResult(
            success=after.is_valid,
            issues_fixed=fixed_codes,
            issues_remaining=sorted(remaining),
            changes_made=changes,
        )

    def _dedupe_nodes(self, canvas: TeamCanvas) -> List[str]:
        changes = []
        seen = set()
        kept = []
        for node in canvas.nodes:
            if node.id in seen:
                changes.append(f"Removed duplicate node '{node.id}'")
                continue
            seen.add(node.id)
            kept.append(node)
        canvas.nodes = kept
        return changes

    def _clamp_positions(self, canvas: TeamCanvas) -> List[str]:
        changes = []
        for node in canvas.nodes:
            x, y = clamp(node.x, 0, 100), clamp(node.y, 0, 100)
            if (x, y) != (node.x, node.y):
                changes.append(f"Moved node '{node.id}' into canvas bounds")
                node.x, node.y = x, y
        return changes

    def _fill_labels(self, canvas: TeamCanvas) -> List[str]:
        changes = []
        for node in canvas.nodes:
            if not (node.label or "").strip():
                node.label = node.id
                changes.append(f"Labelled node '{node.id}' with its id")
        return changes

    def _prune_edges(self, canvas: TeamCanvas) -> List[str]:
        changes = []
        node_ids = {node.id for node in canvas.nodes}
        seen_pairs = set()
        kept = []
        for edge in canvas.edges:
            if edge.from_id not in node_ids or edge.to_id not in node_ids:
                changes.append(f"Removed dangling edge '{edge.id}'")
                continue
            pair = (edge.from_id, edge.to_id)
            if pair in seen_pairs:
                changes.append(f"Removed duplicate edge '{edge.id}'")
                continue
            seen_pairs.add(pair)
            kept.append(edge)
        canvas.edges = kept
        return changes


def auto_fix_canvas(canvas: TeamCanvas) -> Tuple[TeamCanvas, FixResult]:
    return CanvasAutoFixer().fix(canvas)


def validate_and_fix_canvas(canvas: TeamCanvas) -> Tuple[TeamCanvas, CanvasValidationResult, FixResult]:
    validation = CanvasValidator().validate(canvas)
    if not validation.issues or validation.codes() == ["EMPTY_CANVAS"]:
        return canvas, validation, FixResult(success=True)
    fixed, result = auto_fix_canvas(canvas)
    return fixed, validation, result
