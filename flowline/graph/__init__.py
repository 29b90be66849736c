"""Flowchart model and Mermaid encoder."""

from .errors import (
    IncompleteConnectionError,
    InvalidChoiceError,
    MachineError,
    UndefinedStateError,
)
from .options import ArrowStyle, Curve, Direction, FlowOption, LineStyle, NodeShape
from .utils import id_generator, slugify
from .classdef import ClassDef, LinkDef
from .node import ChartNode
from .connection import Connection, Endpoint
from .directive import Directive
from .flowchart import FlowChart

__all__ = [
    "IncompleteConnectionError",
    "InvalidChoiceError",
    "MachineError",
    "UndefinedStateError",
    "ArrowStyle",
    "Curve",
    "Direction",
    "FlowOption",
    "LineStyle",
    "NodeShape",
    "id_generator",
    "slugify",
    "ClassDef",
    "LinkDef",
    "ChartNode",
    "Connection",
    "Endpoint",
    "Directive",
    "FlowChart",
]
