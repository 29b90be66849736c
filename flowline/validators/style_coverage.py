"""Style table coverage check."""

from typing import Any, Mapping

from ..machine.builder import find_rule
from ..schema.models import StateMachine
from .base import ValidationResult


def check_style_coverage(
    machine: StateMachine, style_table: Mapping[str, Any]
) -> ValidationResult:
    """Report states that no style rule applies to.

    Args:
        machine: The parsed state machine.
        style_table: Mapping of tag (or state type) to style rule.

    Returns:
        ValidationResult with info issues for unstyled states.
    """
    result = ValidationResult()

    for state_name, state in machine.states.items():
        if find_rule(state, style_table) is None:
            keys = [k for k in [state.type, *state.tags] if k is not None]
            result.add_info(
                code="UNSTYLED_STATE",
                message=(
                    f"No style rule matches state '{state_name}'"
                    + (f" (tags: {', '.join(keys)})" if keys else "")
                ),
                state=state_name,
                keys=keys,
            )

    return result
