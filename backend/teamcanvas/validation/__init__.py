"""
Validation module for stored team canvases.
"""

from teamcanvas.validation.canvas_validator import (
    CanvasValidator,
    CanvasValidationResult,
    ValidationIssue,
    ValidationSeverity,
    validate_canvas,
)

from teamcanvas.validation.canvas_fixer import (
    CanvasAutoFixer,
    FixResult,
    auto_fix_canvas,
    validate_and_fix_canvas,
)


__all__ = [
    "CanvasValidator",
    "CanvasValidationResult",
    "ValidationIssue",
    "ValidationSeverity",
    "validate_canvas",
    "CanvasAutoFixer",
    "FixResult",
    "auto_fix_canvas",
    "validate_and_fix_canvas",
]
