"""State reachability validators."""

from ..machine.transitions import TransitionGraph
from ..schema.models import StateMachine
from .base import ValidationResult

FINAL_TYPE = "final"


def check_unreachable_states(
    machine: StateMachine, graph: TransitionGraph
) -> ValidationResult:
    """Check for states that cannot be reached from the initial state.

    Only runs when the machine names an initial state that exists; a
    missing initial state is reported by the reference integrity check.

    Args:
        machine: The parsed state machine.
        graph: The machine's transition graph.

    Returns:
        ValidationResult with warnings for unreachable states.
    """
    result = ValidationResult()

    initial = machine.initial
    if initial is None or not graph.is_defined(initial):
        return result

    reachable = graph.get_reachable_states(initial)
    for state_name in graph.get_state_names():
        if state_name not in reachable:
            result.add_warning(
                code="UNREACHABLE_STATE",
                message=f"State '{state_name}' cannot be reached from initial state '{initial}'",
                state=state_name,
            )

    return result


def check_dead_end_states(
    machine: StateMachine, graph: TransitionGraph
) -> ValidationResult:
    """Check for states with no outbound transitions that aren't final.

    Args:
        machine: The parsed state machine.
        graph: The machine's transition graph.

    Returns:
        ValidationResult with warnings for implicit dead ends.
    """
    result = ValidationResult()

    for state_name in graph.get_states_with_no_outbound_transitions():
        state = machine.get_state(state_name)
        if state is not None and state.type == FINAL_TYPE:
            continue
        result.add_warning(
            code="DEAD_END_STATE",
            message=f"State '{state_name}' has no outbound transitions but is not marked as final",
            state=state_name,
        )

    return result
