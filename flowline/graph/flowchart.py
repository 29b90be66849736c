"""The flowchart graph and its Mermaid encoder."""

import logging
from typing import Any, Iterable, Mapping

from .classdef import ClassDef, LinkDef, is_node_style
from .connection import Connection, Endpoint
from .directive import Directive
from .node import ChartNode
from .options import Direction
from .utils import id_generator, slugify

logger = logging.getLogger(__name__)

_subgraph_names = id_generator("sub")

_INDENT = "  "


def _require(items: Iterable[Any], kind: type, label: str) -> None:
    if any(not isinstance(item, kind) for item in items):
        raise TypeError(f"{label} must contain only {kind.__name__} objects.")


def _append_new(collection: list, items: Iterable[Any]) -> None:
    # Membership is by identity; entities do not define equality
    for item in items:
        if not any(item is existing for existing in collection):
            collection.append(item)


class FlowChart:
    """A Mermaid flowchart.

    Nodes, connections, classes and directives are held by reference, so
    the same node may appear in several connections and subgraphs. Every
    collection keeps insertion order, which is also render order, so a
    chart built the same way always renders the same text.
    """

    def __init__(self, name: str | None = None):
        """Create an empty flowchart.

        Args:
            name: Name used when the chart is embedded as a subgraph.
        """
        self._direction = Direction.TB
        self._classes: list[ClassDef] = []
        self._connections: list[Connection] = []
        self._directives: list[Directive] = []
        self._nodes: list[ChartNode] = []
        self._subgraphs: list["FlowChart"] = []
        self._default_class: ClassDef | None = None
        self._default_link: LinkDef | None = None
        self._name = name
        self._generated_name: str | None = None
        self._style: ClassDef | None = None

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def chart_direction(self) -> Direction:
        return self._direction

    @property
    def classes(self) -> list[ClassDef]:
        return list(self._classes)

    @property
    def connections(self) -> list[Connection]:
        return list(self._connections)

    @property
    def directives(self) -> list[Directive]:
        return list(self._directives)

    @property
    def nodes(self) -> list[ChartNode]:
        return list(self._nodes)

    @property
    def subgraphs(self) -> list["FlowChart"]:
        return list(self._subgraphs)

    @property
    def default_class_def(self) -> ClassDef | None:
        return self._default_class

    @property
    def default_link_def(self) -> LinkDef | None:
        return self._default_link

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def style(self) -> ClassDef | None:
        """The container style applied when the chart is a subgraph."""
        return self._style

    @classmethod
    def copy_of(cls, chart: "FlowChart") -> "FlowChart":
        """Create a new chart sharing every entity of chart.

        The collections are copied, the entities in them are not.

        Raises:
            TypeError: If chart is not a FlowChart.
        """
        if not isinstance(chart, FlowChart):
            raise TypeError("Requires a source FlowChart object.")
        copy = (
            cls(chart.name)
            .direction(chart.chart_direction)
            .add_class(*chart.classes)
            .add_connection(*chart.connections)
            .add_directive(*chart.directives)
            .add_node(*chart.nodes)
            .add_style(chart.style)
            .add_subgraph(*chart.subgraphs)
        )
        copy._default_class = chart.default_class_def
        copy._default_link = chart.default_link_def
        return copy

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def add_class(self, *class_defs: ClassDef) -> "FlowChart":
        """Add class definitions, rendered at the end with their nodes.

        Raises:
            TypeError: If any argument is not a node ClassDef.
        """
        if any(not is_node_style(class_def) for class_def in class_defs):
            raise TypeError("class_defs must contain only node ClassDef objects.")
        _append_new(self._classes, class_defs)
        return self

    def add_connection(self, *connections: Connection) -> "FlowChart":
        """Add connections and any of their nodes not already in the chart.

        Raises:
            TypeError: If any argument is not a Connection.
        """
        _require(connections, Connection, "connections")
        for connection in connections:
            _append_new(self._connections, [connection])
            _append_new(self._nodes, connection.nodes)
        return self

    def add_directive(self, *directives: Directive) -> "FlowChart":
        """Add directives, rendered at the start of the chart.

        Raises:
            TypeError: If any argument is not a Directive.
        """
        _require(directives, Directive, "directives")
        _append_new(self._directives, directives)
        return self

    def add_node(self, *nodes: ChartNode) -> "FlowChart":
        """Add nodes to the chart.

        Raises:
            TypeError: If any argument is not a ChartNode.
        """
        _require(nodes, ChartNode, "nodes")
        _append_new(self._nodes, nodes)
        return self

    def add_style(self, class_def: ClassDef | None = None) -> "FlowChart":
        """Set the container style used when the chart is a subgraph.

        Raises:
            TypeError: If class_def is not a node ClassDef.
        """
        if class_def is not None and not is_node_style(class_def):
            raise TypeError("Requires a node ClassDef object.")
        self._style = class_def
        return self

    def add_subgraph(self, *charts: "FlowChart") -> "FlowChart":
        """Embed other charts as subgraphs, pulling in their nodes.

        Raises:
            TypeError: If any argument is not a FlowChart.
            ValueError: If a chart is this chart or already contains it.
        """
        _require(charts, FlowChart, "charts")
        if any(chart is self or chart._contains(self) for chart in charts):
            raise ValueError("A chart cannot be a subgraph of itself.")
        for chart in charts:
            _append_new(self._subgraphs, [chart])
            _append_new(self._nodes, chart.nodes)
        return self

    def _contains(self, chart: "FlowChart") -> bool:
        """Check whether chart appears anywhere in this chart's subgraph tree."""
        pending = list(self._subgraphs)
        seen: list[FlowChart] = []
        while pending:
            current = pending.pop()
            if current is chart:
                return True
            if not any(current is other for other in seen):
                seen.append(current)
                pending.extend(current._subgraphs)
        return False

    def connect(
        self,
        node1: "str | ChartNode | Endpoint | Mapping[str, Any]",
        node2: "str | ChartNode | Endpoint | Mapping[str, Any]",
        depth: int = 0,
    ) -> "FlowChart":
        """Create a connection between two endpoints and add it.

        A string becomes a node whose id is the slugified string and whose
        text is the string itself; a node with that id already in the chart
        is reused. A mapping is read as ``{"node", "arrow", "arrow_style"}``.

        Example:
            FlowChart().connect("Home", "About")

        Args:
            node1: The first endpoint.
            node2: The second endpoint.
            depth: Extra ranks between the endpoints.
        """
        source = self._endpoint(node1)
        target = self._endpoint(node2)
        connection = (
            Connection(depth)
            .from_(source.node, source.arrow, source.arrow_style)
            .to(target.node, target.arrow, target.arrow_style)
        )
        return self.add_connection(connection)

    def _endpoint(self, value: Any) -> Endpoint:
        if isinstance(value, Endpoint):
            return value
        if isinstance(value, ChartNode):
            return Endpoint(value)
        if isinstance(value, str):
            node_id = slugify(value)
            node = self.find_node(node_id) or ChartNode(node_id).text(value)
            return Endpoint(node)
        if isinstance(value, Mapping):
            return Endpoint(
                value["node"],
                value.get("arrow", False),
                value.get("arrow_style", "default"),
            )
        raise TypeError(f"Cannot connect a {type(value).__name__}.")

    def default_class(self, class_def: ClassDef | None = None) -> "FlowChart":
        """Set the class applied to every unstyled node. (Clears it when omitted.)

        Raises:
            TypeError: If class_def is not a node ClassDef.
        """
        if class_def is None:
            self._default_class = None
            return self
        if not is_node_style(class_def):
            raise TypeError("Requires a node ClassDef object.")
        self._default_class = ClassDef.copy_of(class_def, "default")
        return self

    def default_link(self, link_def: LinkDef | None = None) -> "FlowChart":
        """Set the style applied to every unstyled connection. (Clears it when omitted.)

        Raises:
            TypeError: If link_def is not a LinkDef.
        """
        if link_def is None:
            self._default_link = None
            return self
        if not isinstance(link_def, LinkDef):
            raise TypeError("Requires a LinkDef object.")
        self._default_link = LinkDef.copy_of(link_def)
        return self

    def direction(self, direction: "str | Direction" = Direction.TB) -> "FlowChart":
        """Set the orientation: TB (or TD), BT, LR or RL.

        Raises:
            InvalidChoiceError: If direction is not a known orientation.
        """
        self._direction = Direction.parse(direction)
        return self

    def named(self, name: str | None = "") -> "FlowChart":
        """Set the name used when the chart is a subgraph."""
        self._name = name
        return self

    def find_node(self, node_id: str) -> ChartNode | None:
        """Return the first node with the given id, or None."""
        return next((node for node in self._nodes if node.id == node_id), None)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _all_nodes(self) -> list[ChartNode]:
        nodes = list(self._nodes)
        for chart in self._subgraphs:
            _append_new(nodes, chart._all_nodes())
        return nodes

    def _nested_nodes(self) -> list[ChartNode]:
        nodes: list[ChartNode] = []
        for chart in self._subgraphs:
            _append_new(nodes, chart._all_nodes())
        return nodes

    def _reset_nodes(self) -> None:
        for node in self._all_nodes():
            node.reset()

    def _subgraph_name(self) -> str:
        if self._name:
            return self._name
        if self._generated_name is None:
            self._generated_name = next(_subgraph_names)
        return self._generated_name

    def _render_content(
        self,
        rendered: list[Connection],
        indent: str,
        declared: list[ChartNode] | None = None,
    ) -> list[str]:
        lines = []
        for connection in self._connections:
            lines.append(indent + connection.render())
            rendered.append(connection)

        # Members declared before this block are listed by id to keep them inside it
        declared = declared or []
        nested = self._nested_nodes()
        for node in self._nodes:
            if any(node is n for n in nested):
                continue
            if not node.emitted:
                lines.append(indent + node.render())
            elif any(node is n for n in declared):
                lines.append(indent + node.id)

        for chart in self._subgraphs:
            lines.extend(indent + line for line in chart._render_subgraph(rendered))
        return lines

    def _render_subgraph(self, rendered: list[Connection]) -> list[str]:
        name = self._subgraph_name()
        lines = [f"subgraph {name}"]
        declared = [node for node in self._nodes if node.emitted]
        try:
            lines.extend(self._render_content(rendered, _INDENT, declared))
        finally:
            self._reset_nodes()
        lines.append("end")
        if self._style is not None:
            lines.append(f"style {name} {','.join(self._style.declarations())}")
        return lines

    def render(self) -> str:
        """Return the Mermaid text for the whole chart.

        Directives come first, then the header, connections, loose nodes
        and subgraphs, followed by class and link style declarations.
        Link styles are addressed by each connection's position among all
        rendered connections, subgraphs included.
        """
        lines = [directive.render() for directive in self._directives]
        lines.append(f"flowchart {self._direction.value}")

        rendered: list[Connection] = []
        try:
            lines.extend(self._render_content(rendered, ""))
        finally:
            self._reset_nodes()

        if self._default_class is not None:
            lines.append(self._default_class.render())

        all_nodes = self._all_nodes()
        for class_def in self._classes:
            lines.append(class_def.render())
            members = [node.id for node in all_nodes if node.node_class is class_def]
            if members:
                lines.append(f"class {','.join(members)} {class_def.name}")

        if self._default_link is not None:
            lines.append(self._default_link.render())

        for index, connection in enumerate(rendered):
            if connection.link_class is not None:
                lines.append(connection.link_class.render([index]))

        logger.debug(
            "Rendered flowchart with %d nodes and %d connections",
            len(all_nodes),
            len(rendered),
        )
        return "\n".join(lines) + "\n"
