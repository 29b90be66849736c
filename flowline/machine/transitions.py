"""Transition graph of a state machine, backed by networkx."""

from typing import Any, Iterator

import networkx as nx

from ..schema.models import StateMachine


class TransitionGraph:
    """A directed multigraph of states and their transitions.

    Nodes are state names; each transition is an edge keyed by its event.
    Targets missing from the machine still appear as nodes, flagged with
    ``defined=False``, so integrity checks can report them.
    """

    def __init__(self):
        """Initialize an empty transition graph."""
        self._graph = nx.MultiDiGraph()

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    @classmethod
    def from_machine(cls, machine: StateMachine) -> "TransitionGraph":
        """Build the transition graph of a machine."""
        graph = cls()
        for name, state in machine.states.items():
            graph.add_state(name, type=state.type, tags=list(state.tags))
        for name, state in machine.states.items():
            for event, transition in state.on.items():
                graph.add_transition(
                    name, transition.target, event, description=transition.description
                )
        return graph

    def add_state(self, name: str, **attrs: Any) -> None:
        """Add a defined state."""
        self._graph.add_node(name, defined=True, **attrs)

    def add_transition(
        self,
        source: str,
        target: str,
        event: str,
        description: str | None = None,
    ) -> None:
        """Add a transition edge, creating undefined endpoints as needed."""
        for name in (source, target):
            if not self._graph.has_node(name):
                self._graph.add_node(name, defined=False)
        self._graph.add_edge(source, target, key=event, description=description)

    def is_defined(self, name: str) -> bool:
        """Check whether a state was declared by the machine."""
        return bool(self._graph.nodes.get(name, {}).get("defined"))

    def get_state_names(self) -> list[str]:
        """Get all defined state names, in declaration order."""
        return [name for name, data in self._graph.nodes(data=True) if data.get("defined")]

    def iter_transitions(self) -> Iterator[tuple[str, str, str]]:
        """Iterate over transitions.

        Yields:
            Tuples of (source, target, event).
        """
        for source, target, event in self._graph.edges(keys=True):
            yield source, target, event

    def get_reachable_states(self, initial: str) -> set[str]:
        """Get every defined state reachable from initial, initial included."""
        if not self._graph.has_node(initial):
            return set()
        reachable = nx.descendants(self._graph, initial) | {initial}
        return {name for name in reachable if self.is_defined(name)}

    def get_states_with_no_outbound_transitions(self) -> list[str]:
        """Get defined states that have no outgoing transition."""
        return [
            name
            for name in self.get_state_names()
            if self._graph.out_degree(name) == 0
        ]
