"""Validators for structural checks of state machine descriptions."""

from .base import Severity, ValidationIssue, ValidationResult
from .reachability import check_dead_end_states, check_unreachable_states
from .reference_integrity import check_reference_integrity
from .runner import run_validators, validate_machine_file
from .style_coverage import check_style_coverage

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_dead_end_states",
    "check_unreachable_states",
    "check_reference_integrity",
    "check_style_coverage",
    "run_validators",
    "validate_machine_file",
]
