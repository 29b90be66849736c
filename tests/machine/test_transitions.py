"""Tests for the transition graph."""

from flowline.machine.transitions import TransitionGraph
from flowline.schema.loader import parse_machine_from_string


class TestTransitionGraph:
    def test_states_in_declaration_order(self, branching_machine):
        graph = TransitionGraph.from_machine(branching_machine)
        assert graph.get_state_names() == ["Plan", "Scout", "Break In"]

    def test_transitions_keyed_by_event(self, branching_machine):
        graph = TransitionGraph.from_machine(branching_machine)
        assert sorted(graph.iter_transitions()) == [
            ("Plan", "Break In", "RUSH"),
            ("Plan", "Scout", "CASE"),
            ("Scout", "Break In", "GO"),
            ("Scout", "Plan", "BACK"),
        ]

    def test_edge_keeps_description(self, branching_machine):
        graph = TransitionGraph.from_machine(branching_machine)
        assert graph.graph.edges["Plan", "Scout", "CASE"]["description"] == "Case the vault"

    def test_state_attributes(self, branching_machine):
        graph = TransitionGraph.from_machine(branching_machine)
        assert graph.graph.nodes["Break In"]["type"] == "final"
        assert graph.graph.nodes["Scout"]["tags"] == ["Core"]

    def test_parallel_transitions(self):
        graph = TransitionGraph()
        graph.add_state("A")
        graph.add_state("B")
        graph.add_transition("A", "B", "GO")
        graph.add_transition("A", "B", "JUMP")

        assert graph.graph.number_of_edges("A", "B") == 2

    def test_undefined_target(self):
        machine = parse_machine_from_string(
            "id: Broken\nstates:\n  Start:\n    on:\n      GO: Nowhere\n"
        )
        graph = TransitionGraph.from_machine(machine)

        assert graph.is_defined("Start")
        assert not graph.is_defined("Nowhere")
        assert not graph.is_defined("Elsewhere")
        assert graph.get_state_names() == ["Start"]

    def test_reachable_states(self, examples_dir):
        from flowline.schema.loader import parse_machine

        machine = parse_machine(examples_dir / "invalid" / "unreachable_state.yaml")
        graph = TransitionGraph.from_machine(machine)

        assert graph.get_reachable_states("Start") == {"Start", "Finish"}
        assert graph.get_reachable_states("Hidden") == {"Hidden", "Start", "Finish"}
        assert graph.get_reachable_states("Missing") == set()

    def test_reachable_skips_undefined(self):
        graph = TransitionGraph()
        graph.add_state("A")
        graph.add_transition("A", "Ghost", "GO")

        assert graph.get_reachable_states("A") == {"A"}

    def test_no_outbound_transitions(self, minimal_graph):
        assert minimal_graph.get_states_with_no_outbound_transitions() == ["Finish"]
