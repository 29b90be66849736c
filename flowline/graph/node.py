"""Flowchart node."""

from .classdef import ClassDef, is_node_style
from .options import NodeShape
from .utils import id_generator

_node_ids = id_generator("node")


class ChartNode:
    """A vertex of a flowchart.

    A node is shared by reference between every connection and (sub)graph
    that mentions it. The ``emitted`` flag is render-pass state only: it is
    set the first time the node is rendered in a pass so later mentions use
    the bare id, and the owning graph resets it when the pass ends.
    """

    def __init__(self, node_id: str | None = None):
        """Create a node.

        Args:
            node_id: A unique id. Generated when omitted.
        """
        self._id = node_id if node_id is not None else next(_node_ids)
        self._class: ClassDef | None = None
        self._shape: NodeShape | None = None
        self._text = ""
        self._emitted = False

    @property
    def id(self) -> str:
        return self._id

    @property
    def node_class(self) -> ClassDef | None:
        return self._class

    @property
    def node_shape(self) -> NodeShape | None:
        return self._shape

    @property
    def node_text(self) -> str:
        return self._text

    @property
    def emitted(self) -> bool:
        """Whether the node was already rendered in the current pass."""
        return self._emitted

    @classmethod
    def copy_of(cls, node: "ChartNode", node_id: str | None = None) -> "ChartNode":
        """Create a new node with the text, class and shape of node.

        Args:
            node: The node to copy.
            node_id: Id for the copy. Generated when omitted.

        Raises:
            TypeError: If node is not a ChartNode.
        """
        if not isinstance(node, ChartNode):
            raise TypeError("Requires a source ChartNode object.")
        copy = cls(node_id).text(node.node_text)
        if node.node_class is not None:
            copy.class_(node.node_class)
        if node.node_shape is not None:
            copy.shape(node.node_shape)
        return copy

    def class_(self, class_def: ClassDef | None = None) -> "ChartNode":
        """Set the node's class definition. (Clears it when omitted.)

        Raises:
            TypeError: If class_def is not a ClassDef, or is a LinkDef.
        """
        if class_def is not None and not is_node_style(class_def):
            raise TypeError("class_def must be a node ClassDef object.")
        self._class = class_def
        return self

    def shape(self, shape: "str | NodeShape | None" = None) -> "ChartNode":
        """Set the node's shape. (Clears it when omitted.)

        Raises:
            InvalidChoiceError: If shape is not a known node shape.
        """
        self._shape = None if shape is None else NodeShape.parse(shape)
        return self

    def text(self, text: str = "") -> "ChartNode":
        """Set the node's label text."""
        self._text = text
        return self

    def render(self) -> str:
        """Return the node's Mermaid text and mark it emitted.

        The first call in a pass declares the node with its shape and text;
        later calls return only the id.
        """
        if self._emitted:
            return self._id
        self._emitted = True
        if not self._text:
            return self._id
        start, end = (self._shape or NodeShape.DEFAULT).brackets
        return f"{self._id}{start}{self._text}{end}"

    def reset(self) -> None:
        """Clear the emitted flag."""
        self._emitted = False

    def __repr__(self) -> str:
        return f"ChartNode({self._id!r})"
