"""Reference integrity validator."""

from ..machine.transitions import TransitionGraph
from ..schema.models import StateMachine
from .base import ValidationResult


def check_reference_integrity(
    machine: StateMachine, graph: TransitionGraph
) -> ValidationResult:
    """Check that every state reference resolves to a defined state.

    This validator checks:
    - Transition targets reference defined states
    - The initial state, when given, is defined

    Args:
        machine: The parsed state machine.
        graph: The machine's transition graph.

    Returns:
        ValidationResult with errors for broken references.
    """
    result = ValidationResult()

    if machine.initial is not None and not graph.is_defined(machine.initial):
        result.add_error(
            code="UNDEFINED_INITIAL",
            message=f"Initial state '{machine.initial}' is not defined",
            state=machine.initial,
        )

    for source, target, event in graph.iter_transitions():
        if not graph.is_defined(target):
            result.add_error(
                code="UNDEFINED_TARGET",
                message=f"Transition targets undefined state '{target}'",
                state=source,
                event=event,
                target=target,
            )

    return result
