"""Connections (edges) between flowchart nodes."""

from dataclasses import dataclass

from .classdef import LinkDef
from .errors import IncompleteConnectionError
from .node import ChartNode
from .options import ArrowStyle, LineStyle


@dataclass
class Endpoint:
    """One end of a connection."""

    node: ChartNode
    arrow: bool = False
    arrow_style: ArrowStyle = ArrowStyle.DEFAULT

    def __post_init__(self):
        if not isinstance(self.node, ChartNode):
            raise TypeError("An endpoint requires a ChartNode object.")
        self.arrow_style = ArrowStyle.parse(self.arrow_style)


class Connection:
    """A link between two nodes.

    Each end carries its own arrowhead. ``depth`` is the number of extra
    ranks the line spans, which lengthens the rendered line.
    """

    def __init__(self, depth: int = 0):
        """Create a connection.

        Args:
            depth: Extra ranks between the endpoints.

        Raises:
            ValueError: If depth is not a non-negative integer.
        """
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
            raise ValueError(f"Depth must be a non-negative integer, got {depth!r}")
        self._depth = depth
        self._source: Endpoint | None = None
        self._target: Endpoint | None = None
        self._line_style = LineStyle.DEFAULT
        self._label: str | None = None
        self._link_class: LinkDef | None = None

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def source(self) -> Endpoint | None:
        """The endpoint on the first end of the connection."""
        return self._source

    @property
    def target(self) -> Endpoint | None:
        """The endpoint on the second end of the connection."""
        return self._target

    @property
    def line_style(self) -> LineStyle:
        return self._line_style

    @property
    def link_text(self) -> str | None:
        return self._label

    @property
    def link_class(self) -> LinkDef | None:
        return self._link_class

    @property
    def nodes(self) -> list[ChartNode]:
        """The nodes attached to this connection, from first."""
        return [end.node for end in (self._source, self._target) if end is not None]

    def from_(
        self,
        node: ChartNode,
        arrow: bool = False,
        arrow_style: "str | ArrowStyle" = ArrowStyle.DEFAULT,
    ) -> "Connection":
        """Attach node to the first end of the connection.

        Args:
            node: The node to attach.
            arrow: Whether an arrowhead points at the node.
            arrow_style: The arrowhead style: default, round or cross.
        """
        self._source = Endpoint(node, arrow, arrow_style)
        return self

    def to(
        self,
        node: ChartNode,
        arrow: bool = False,
        arrow_style: "str | ArrowStyle" = ArrowStyle.DEFAULT,
    ) -> "Connection":
        """Attach node to the second end of the connection."""
        self._target = Endpoint(node, arrow, arrow_style)
        return self

    def style(self, line_style: "str | LineStyle | None" = None) -> "Connection":
        """Set the line style: default, dotted or thick."""
        self._line_style = (
            LineStyle.DEFAULT if line_style is None else LineStyle.parse(line_style)
        )
        return self

    def text(self, label: str | None = None) -> "Connection":
        """Set the text shown on the line. (Clears it when omitted.)"""
        self._label = label
        return self

    def class_(self, link_def: LinkDef | None = None) -> "Connection":
        """Set a copy of link_def as this connection's style.

        Raises:
            TypeError: If link_def is not a LinkDef.
        """
        if link_def is None:
            self._link_class = None
            return self
        if not isinstance(link_def, LinkDef):
            raise TypeError("link_def must be a LinkDef object.")
        self._link_class = LinkDef.copy_of(link_def)
        return self

    def line_length(self) -> int:
        """Number of glyphs in the line body."""
        if self._source is None or self._target is None:
            raise IncompleteConnectionError()
        length = 3 + self._depth
        if self._source.arrow or self._target.arrow:
            length -= 1
        if self._line_style is LineStyle.DOTTED and length % 2 == 0:
            length += 1
        return length

    def _line(self) -> str:
        length = self.line_length()
        if self._line_style is LineStyle.DOTTED:
            return "".join("-."[i % 2] for i in range(length))
        if self._line_style is LineStyle.THICK:
            return "=" * length
        return "-" * length

    def render(self) -> str:
        """Return the Mermaid text for the connection.

        Renders both endpoint nodes, so the first mention of a node in a
        pass carries its shape and text.

        Raises:
            IncompleteConnectionError: If either endpoint is missing.
        """
        if self._source is None or self._target is None:
            raise IncompleteConnectionError()
        source, target = self._source, self._target
        line = self._line()
        left = source.arrow_style.glyph(left=True) if source.arrow else " "
        right = target.arrow_style.glyph(left=False) if target.arrow else ""
        label = f"|{self._label}| " if self._label else " "
        return f"{source.node.render()}{left}{line}{right}{label}{target.node.render()}"

    def __repr__(self) -> str:
        ends = [node.id for node in self.nodes]
        return f"Connection({' -> '.join(ends)!r}, depth={self._depth})"
