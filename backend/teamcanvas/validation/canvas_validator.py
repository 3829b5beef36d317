"""
Canvas Validator - checks a persisted team canvas before it is drawn.

Catches issues like:
- Duplicate node IDs
- Edges pointing at nodes that no longer exist
- Positions outside the 0-100 coordinate space
- Empty labels
- Duplicate edges
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from enum import Enum

from teamcanvas.canvas.schema import TeamCanvas


class ValidationSeverity(Enum):
    ERROR = "error"      # Canvas cannot be edited safely
    WARNING = "warning"  # Canvas renders, something is skipped or clipped
    INFO = "info"


@dataclass
class ValidationIssue:
    """A single validation issue found in the canvas"""
    severity: ValidationSeverity
    code: str
    message: str
    node_id: Optional[str] = None
    edge_id: Optional[str] = None


@dataclass
class CanvasValidationResult:
    is_valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def error_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.WARNING)

    def codes(self) -> List[str]:
        return [i.code for i in self.issues]


def _in_range(value: float) -> bool:
    return 0 <= value <= 100


class CanvasValidator:

    def validate(self, canvas: Optional[TeamCanvas]) -> CanvasValidationResult:
        issues: List[ValidationIssue] = []

        if canvas is None or not canvas.nodes:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.INFO,
                code="EMPTY_CANVAS",
                message="Canvas has no nodes; a default layout will be derived",
            ))
            return CanvasValidationResult(
                is_valid=True,
                issues=issues,
                stats={"nodes": 0, "edges": len(canvas.edges) if canvas else 0},
            )

        issues.extend(self._check_duplicate_node_ids(canvas))
        issues.extend(self._check_nodes(canvas))
        issues.extend(self._check_edges(canvas))

        return CanvasValidationResult(
            is_valid=not any(i.severity == ValidationSeverity.ERROR for i in issues),
            issues=issues,
            stats={"nodes": len(canvas.nodes), "edges": len(canvas.edges)},
        )

    def _check_duplicate_node_ids(self, canvas: TeamCanvas) -> List[ValidationIssue]:
        issues = []
        seen = set()
        for node in canvas.nodes:
            if node.id in seen:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="DUPLICATE_NODE_ID",
                    message=f"Node id '{node.id}' appears more than once",
                    node_id=node.id,
                ))
            seen.add(node.id)
        return issues

    def _check_nodes(self, canvas: TeamCanvas) -> List[ValidationIssue]:
        issues = []
        for node in canvas.nodes:
            if not _in_range(node.x) or not _in_range(node.y):
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="POSITION_OUT_OF_RANGE",
                    message=f"Node '{node.id}' at ({node.x}, {node.y}) is outside the canvas",
                    node_id=node.id,
                ))
            if not (node.label or "").strip():
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="EMPTY_LABEL",
                    message=f"Node '{node.id}' has no label",
                    node_id=node.id,
                ))
        return issues

    def _check_edges(self, canvas: TeamCanvas) -> List[ValidationIssue]:
        issues = []
        node_ids = {node.id for node in canvas.nodes}
        seen_pairs = set()
        for edge in canvas.edges:
            missing = [ref for ref in (edge.from_id, edge.to_id) if ref not in node_ids]
            if missing:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="DANGLING_EDGE",
                    message=f"Edge '{edge.id}' references missing node(s): {', '.join(missing)}",
                    edge_id=edge.id,
                ))
                continue

            pair = (edge.from_id, edge.to_id)
            if pair in seen_pairs:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="DUPLICATE_EDGE",
                    message=f"Edge '{edge.id}' duplicates {edge.from_id} -> {edge.to_id}",
                    edge_id=edge.id,
                ))
            seen_pairs.add(pair)
        return issues


def validate_canvas(canvas: Optional[TeamCanvas]) -> CanvasValidationResult:
    return CanvasValidator().validate(canvas)
