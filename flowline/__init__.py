"""flowline: build flowcharts in Python and encode them as Mermaid text."""

from .graph import (
    ArrowStyle,
    ChartNode,
    ClassDef,
    Connection,
    Curve,
    Direction,
    Directive,
    Endpoint,
    FlowChart,
    LineStyle,
    LinkDef,
    NodeShape,
    slugify,
)
from .machine import StyleRule, build_chart, default_style_table, process_machine

__all__ = [
    "ArrowStyle",
    "ChartNode",
    "ClassDef",
    "Connection",
    "Curve",
    "Direction",
    "Directive",
    "Endpoint",
    "FlowChart",
    "LineStyle",
    "LinkDef",
    "NodeShape",
    "slugify",
    "StyleRule",
    "build_chart",
    "default_style_table",
    "process_machine",
]
