"""Validation runner that orchestrates all validators."""

from pathlib import Path
from typing import Any, Mapping

from ..machine.transitions import TransitionGraph
from ..schema.loader import parse_machine
from ..schema.models import StateMachine
from .base import ValidationResult
from .reachability import check_dead_end_states, check_unreachable_states
from .reference_integrity import check_reference_integrity
from .style_coverage import check_style_coverage


def run_validators(
    machine: StateMachine,
    style_table: Mapping[str, Any] | None = None,
) -> ValidationResult:
    """Run all validators on a state machine.

    Args:
        machine: The parsed state machine.
        style_table: Optional style table; enables the coverage check.

    Returns:
        Combined ValidationResult from all validators.
    """
    graph = TransitionGraph.from_machine(machine)
    result = ValidationResult()

    # Run reference integrity first (most fundamental)
    result.merge(check_reference_integrity(machine, graph))

    result.merge(check_unreachable_states(machine, graph))
    result.merge(check_dead_end_states(machine, graph))

    if style_table is not None:
        result.merge(check_style_coverage(machine, style_table))

    return result


def validate_machine_file(
    path: str | Path,
    style_table: Mapping[str, Any] | None = None,
) -> ValidationResult:
    """Load and validate a state machine file.

    Args:
        path: Path to the YAML or JSON machine file.
        style_table: Optional style table for the coverage check.

    Returns:
        ValidationResult from all validators.

    Raises:
        SchemaLoadError: If the file cannot be loaded.
        SchemaValidationError: If the machine fails schema validation.
    """
    machine = parse_machine(path)
    return run_validators(machine, style_table)
