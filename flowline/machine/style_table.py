"""Style tables mapping state tags to a class definition and node shape."""

from dataclasses import dataclass

from ..graph.classdef import ClassDef, is_node_style
from ..graph.options import NodeShape
from ..schema.models import StyleTableSpec

_PROPERTIES = ("color", "fill", "stroke", "stroke_width", "stroke_dash")


@dataclass
class StyleRule:
    """How states carrying a tag or type are drawn."""

    class_def: ClassDef
    shape: NodeShape = NodeShape.DEFAULT

    def __post_init__(self):
        if not is_node_style(self.class_def):
            raise TypeError("class_def must be a node ClassDef object.")
        self.shape = NodeShape.parse(self.shape)


StyleTable = dict[str, StyleRule]


def _slug_name(tag: str) -> str:
    return "".join(c if c.isalnum() else "_" for c in tag)


def build_style_table(spec: StyleTableSpec) -> StyleTable:
    """Build a style table from a validated spec.

    A rule that extends a base class starts from that base's properties;
    the rule's own properties win. Each rule gets its own ClassDef, named
    after the rule's ``name`` or, failing that, its tag.

    Args:
        spec: The parsed style table file.

    Returns:
        Mapping of tag (or state type) to StyleRule.
    """
    table: StyleTable = {}
    for tag, rule in spec.rules.items():
        class_def = ClassDef(rule.name or _slug_name(tag))
        sources = [spec.base[rule.extends]] if rule.extends else []
        sources.append(rule)
        for source in sources:
            for prop in _PROPERTIES:
                value = getattr(source, prop)
                if value is not None:
                    getattr(class_def, prop)(value)
        table[tag] = StyleRule(class_def, rule.shape)
    return table


def default_style_table() -> StyleTable:
    """Return the stock table used for episode scene charts."""
    base = ClassDef("base").fill("black").color("white")
    return {
        "Introduction": StyleRule(
            ClassDef.copy_of(base, "introduction").stroke("green"), NodeShape.PILL
        ),
        "Core": StyleRule(
            ClassDef.copy_of(base, "core").stroke("blue"), NodeShape.DEFAULT
        ),
        "Alternate": StyleRule(
            ClassDef.copy_of(base, "alternate").stroke("yellow"), NodeShape.HEX
        ),
        "Antagonist Reaction": StyleRule(
            ClassDef("reaction").fill("red"), NodeShape.TRAPEZOID
        ),
        "final": StyleRule(
            ClassDef.copy_of(base, "final").stroke("red"), NodeShape.PILL
        ),
    }
