"""Builder for converting a state machine description to a FlowChart."""

import logging
from typing import Any, Mapping

from ..graph.classdef import LinkDef
from ..graph.connection import Connection
from ..graph.directive import Directive
from ..graph.errors import UndefinedStateError
from ..graph.flowchart import FlowChart
from ..graph.node import ChartNode
from ..graph.options import LineStyle
from ..graph.utils import whitespace_to_underscores
from ..schema.loader import validate_data
from ..schema.models import State, StateMachine
from .style_table import StyleRule, StyleTable, default_style_table

logger = logging.getLogger(__name__)


def _as_machine(machine: StateMachine | Mapping[str, Any]) -> StateMachine:
    if isinstance(machine, StateMachine):
        return machine
    return validate_data(StateMachine, machine)


def _as_rule(entry: StyleRule | Mapping[str, Any]) -> StyleRule:
    if isinstance(entry, StyleRule):
        return entry
    class_def = entry.get("class_def", entry.get("class"))
    return StyleRule(class_def, entry.get("shape", "default"))


def _split_tag(tag: str) -> tuple[str, list[str]]:
    key, *values = tag.split(":")
    return key.strip(), values


def apply_tags(tags: list[str], directive: Directive) -> LineStyle | None:
    """Apply machine-level tags to a directive.

    Recognized tags:
        curve:<name>                   sets the line curve
        var:<key=value>[:key=value...] merges theme variables
        link:<style>                   line style for every transition

    Args:
        tags: The machine's tags.
        directive: The directive to configure.

    Returns:
        The line style named by a link tag, if any.

    Raises:
        InvalidChoiceError: If a curve or link tag names an unknown value.
    """
    line_style = None
    for tag in tags:
        key, values = _split_tag(tag)
        if key == "curve" and values:
            directive.curve(values[0])
        elif key == "var":
            variables = {}
            for pair in values:
                name, sep, value = pair.partition("=")
                if not sep:
                    logger.debug("Ignoring variable without a value: %r", pair)
                    continue
                variables[name] = value
            directive.variables(variables)
        elif key == "link" and values and line_style is None:
            line_style = LineStyle.parse(values[0])
        else:
            logger.debug("Ignoring unrecognized machine tag %r", tag)
    return line_style


def find_rule(state: State, style_table: Mapping[str, Any]) -> StyleRule | None:
    """Return the style rule for a state's type, else its first styled tag."""
    for key in [state.type, *state.tags]:
        if key is not None and key in style_table:
            return _as_rule(style_table[key])
    return None


def build_chart(
    machine: StateMachine | Mapping[str, Any],
    style_table: Mapping[str, Any] | None = None,
) -> FlowChart:
    """Build a FlowChart from a state machine description.

    Args:
        machine: The state machine, as a model or raw mapping.
        style_table: Mapping of tag (or state type) to StyleRule. Entries
            may also be mappings with ``class`` and ``shape`` keys.
            Defaults to the stock table.

    Returns:
        A FlowChart with one node per state and one connection per
        transition.

    Raises:
        SchemaValidationError: If a raw mapping fails validation.
        UndefinedStateError: If a transition targets an unknown state.
    """
    machine = _as_machine(machine)
    if style_table is None:
        style_table = default_style_table()

    chart = FlowChart(machine.id)
    chart.default_link(LinkDef().stroke("white"))

    directive = Directive()
    line_style = apply_tags(machine.tags, directive)
    if not directive.is_empty:
        chart.add_directive(directive)

    # Add all states first so transitions can refer to them
    nodes: dict[str, ChartNode] = {}
    for key, state in machine.states.items():
        node = ChartNode(whitespace_to_underscores(key)).text(state.description or key)
        rule = find_rule(state, style_table)
        if rule is not None:
            chart.add_class(rule.class_def)
            node.class_(rule.class_def).shape(rule.shape)
        nodes[key] = node
        chart.add_node(node)

    for key, state in machine.states.items():
        for event, transition in state.on.items():
            if transition.target not in nodes:
                raise UndefinedStateError(key, event, transition.target)
            connection = (
                Connection()
                .from_(nodes[key])
                .to(nodes[transition.target], True)
                .style(line_style)
            )
            if transition.description:
                connection.text(transition.description)
            chart.add_connection(connection)

    logger.debug(
        "Built chart %r with %d states and %d transitions",
        machine.id,
        len(nodes),
        len(chart.connections),
    )
    return chart


def render_title(title: str) -> str:
    """Return the front-matter block that titles a diagram."""
    return f"---\ntitle: {title}\n---\n"


def process_machine(
    machine: StateMachine | Mapping[str, Any],
    style_table: Mapping[str, Any] | None = None,
) -> str:
    """Render a state machine description as titled Mermaid flowchart text.

    Raises:
        SchemaValidationError: If a raw mapping fails validation.
        UndefinedStateError: If a transition targets an unknown state.
    """
    machine = _as_machine(machine)
    return render_title(machine.id) + build_chart(machine, style_table).render()
