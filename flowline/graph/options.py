"""Closed option sets used by flowchart entities."""

import re
from enum import Enum

from .errors import InvalidChoiceError


class Choice(str, Enum):
    """Base for string enums that validate user input."""

    @classmethod
    def parse(cls, value: "str | Choice") -> "Choice":
        """Return the member matching value.

        Raises:
            InvalidChoiceError: If value is not a member of the set.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidChoiceError(cls.label(), value, cls.values()) from None

    @classmethod
    def match(cls, value: str) -> bool:
        """Check whether value names a member of the set."""
        try:
            cls.parse(value)
        except InvalidChoiceError:
            return False
        return True

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def label(cls) -> str:
        return re.sub(r"(?<!^)(?=[A-Z])", " ", cls.__name__).lower()


class NodeShape(Choice):
    """Shapes a node can be drawn with."""

    DEFAULT = "default"
    ROUND_RECT = "round-rect"
    PILL = "pill"
    STADIUM = "stadium"
    SUBROUTINE = "subroutine"
    CYLINDER = "cylinder"
    DATABASE = "database"
    CIRCLE = "circle"
    ASYMMETRIC = "asymmetric"
    FLAG = "flag"
    DIAMOND = "diamond"
    RHOMBUS = "rhombus"
    HEX = "hex"
    HEXAGON = "hexagon"
    PARALLEL_R = "parallel-r"
    SKEW_R = "skew-r"
    PARALLEL_L = "parallel-l"
    SKEW_L = "skew-l"
    TRAPEZOID = "trapezoid"
    TRAPEZOID_ALT = "trapezoid-alt"
    DOUBLE_CIRCLE = "double-circle"

    @property
    def brackets(self) -> tuple[str, str]:
        """The (start, end) strings wrapped around the node text."""
        return _SHAPE_BRACKETS[self.value]


_SHAPE_BRACKETS: dict[str, tuple[str, str]] = {
    "default": ("[", "]"),
    "round-rect": ("(", ")"),
    "pill": ("([", "])"),
    "stadium": ("([", "])"),
    "subroutine": ("[[", "]]"),
    "cylinder": ("[(", ")]"),
    "database": ("[(", ")]"),
    "circle": ("((", "))"),
    "asymmetric": (">", "]"),
    "flag": (">", "]"),
    "diamond": ("{", "}"),
    "rhombus": ("{", "}"),
    "hex": ("{{", "}}"),
    "hexagon": ("{{", "}}"),
    "parallel-r": ("[/", "/]"),
    "skew-r": ("[/", "/]"),
    "parallel-l": ("[\\", "\\]"),
    "skew-l": ("[\\", "\\]"),
    "trapezoid": ("[/", "\\]"),
    "trapezoid-alt": ("[\\", "/]"),
    "double-circle": ("(((", ")))"),
}


class ArrowStyle(Choice):
    """Arrowhead drawn at a connection endpoint."""

    DEFAULT = "default"
    ROUND = "round"
    CROSS = "cross"

    @classmethod
    def _missing_(cls, value):
        # Mermaid spells the cross head as a bare "x"
        if value == "x":
            return cls.CROSS
        return None

    def glyph(self, left: bool) -> str:
        """The character drawn for this head on the given side of the line."""
        if self is ArrowStyle.ROUND:
            return "o"
        if self is ArrowStyle.CROSS:
            return "x"
        return "<" if left else ">"


class LineStyle(Choice):
    """Stroke used for the body of a connection."""

    DEFAULT = "default"
    DOTTED = "dotted"
    THICK = "thick"


class Direction(Choice):
    """Orientation of a flowchart."""

    TB = "TB"
    TD = "TD"
    BT = "BT"
    LR = "LR"
    RL = "RL"


class Curve(Choice):
    """Curve interpolation for the lines between nodes."""

    BASIS = "basis"
    BUMP_X = "bumpX"
    BUMP_Y = "bumpY"
    CARDINAL = "cardinal"
    CATMULL_ROM = "catmullRom"
    LINEAR = "linear"
    MONOTONE_X = "monotoneX"
    MONOTONE_Y = "monotoneY"
    NATURAL = "natural"
    STEP = "step"
    STEP_AFTER = "stepAfter"
    STEP_BEFORE = "stepBefore"


class FlowOption(Choice):
    """Recognized keys of the flowchart block in an init directive."""

    TITLE_TOP_MARGIN = "titleTopMargin"
    DIAGRAM_PADDING = "diagramPadding"
    HTML_LABELS = "htmlLabels"
    NODE_SPACING = "nodeSpacing"
    RANK_SPACING = "rankSpacing"
    CURVE = "curve"
    PADDING = "padding"
    USE_MAX_WIDTH = "useMaxWidth"
