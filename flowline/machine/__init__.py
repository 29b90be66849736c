"""Conversion of state machine descriptions into flowcharts."""

from .builder import apply_tags, build_chart, find_rule, process_machine, render_title
from .style_table import StyleRule, StyleTable, build_style_table, default_style_table
from .transitions import TransitionGraph

__all__ = [
    "apply_tags",
    "build_chart",
    "find_rule",
    "process_machine",
    "render_title",
    "StyleRule",
    "StyleTable",
    "build_style_table",
    "default_style_table",
    "TransitionGraph",
]
