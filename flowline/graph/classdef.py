"""Style definitions for nodes (classDef) and connections (linkStyle)."""

from typing import Iterable

from .utils import id_generator

_class_names = id_generator("class")
_link_names = id_generator("link")

# Output spelling of each style property, in render order
_PROPERTY_KEYS: dict[str, str] = {
    "color": "color",
    "fill": "fill",
    "stroke": "stroke",
    "stroke_width": "stroke-width",
    "stroke_dash": "stroke-dasharray",
}


class ClassDef:
    """A named bundle of visual properties applied to nodes.

    Every setter returns the instance so definitions can be built fluently:

        ClassDef("base").fill("black").color("white")
    """

    def __init__(self, name: str):
        """Create a class definition.

        Args:
            name: The name the class is declared under.

        Raises:
            TypeError: If name is not a string.
        """
        if not isinstance(name, str):
            raise TypeError("A class definition must have a string name.")
        self._name = name
        self._style: dict[str, str | None] = {key: None for key in _PROPERTY_KEYS}

    @property
    def name(self) -> str:
        """The name the class is declared under."""
        return self._name

    @property
    def style(self) -> dict[str, str | None]:
        """A copy of the property values, keyed by property name."""
        return dict(self._style)

    @classmethod
    def copy_of(cls, source: "ClassDef", name: str | None = None) -> "ClassDef":
        """Create a new definition with the same properties as source.

        Args:
            source: The definition to copy.
            name: Name for the copy. A unique name is generated when omitted.

        Returns:
            A new ClassDef instance.

        Raises:
            TypeError: If source is not a ClassDef.
        """
        if not isinstance(source, ClassDef):
            raise TypeError("Requires a source ClassDef object.")
        copy = cls(name if name is not None else next(_class_names))
        copy._style.update(source._style)
        return copy

    def color(self, value: str | None = None) -> "ClassDef":
        """Set the text color. (Clears it when value is omitted.)"""
        self._style["color"] = value
        return self

    def fill(self, value: str | None = None) -> "ClassDef":
        """Set the fill color. (Clears it when value is omitted.)"""
        self._style["fill"] = value
        return self

    def stroke(self, value: str | None = None) -> "ClassDef":
        """Set the stroke color. (Clears it when value is omitted.)"""
        self._style["stroke"] = value
        return self

    def stroke_width(self, value: str | None = None) -> "ClassDef":
        """Set the stroke width as a CSS length. (Clears it when omitted.)"""
        self._style["stroke_width"] = value
        return self

    def stroke_dash(self, value: str | None = None) -> "ClassDef":
        """Set the SVG stroke-dasharray. (Clears it when omitted.)"""
        self._style["stroke_dash"] = value
        return self

    def declarations(self) -> list[str]:
        """Return the ``key:value`` tokens for every property that is set."""
        return [
            f"{key}:{self._style[prop]}"
            for prop, key in _PROPERTY_KEYS.items()
            if self._style[prop] is not None
        ]

    def render(self) -> str:
        """Return the Mermaid classDef line for this definition."""
        return f"classDef {self._name} {','.join(self.declarations())}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


class LinkDef(ClassDef):
    """A style definition for connections.

    Link styles are addressed by connection index rather than by name, so
    the name only serves to tell copies apart.
    """

    def __init__(self, name: str | None = None):
        super().__init__(name if name is not None else next(_link_names))

    @classmethod
    def copy_of(cls, source: "LinkDef", name: str | None = None) -> "LinkDef":
        """Create a new link definition with the same properties as source.

        Raises:
            TypeError: If source is not a LinkDef.
        """
        if not isinstance(source, LinkDef):
            raise TypeError("Requires a source LinkDef object.")
        copy = cls(name)
        copy._style.update(source._style)
        return copy

    def render(self, indexes: Iterable[int] | None = None) -> str:
        """Return the Mermaid linkStyle line for this definition.

        Args:
            indexes: Positions of the styled connections in the diagram.
                When omitted, renders the default link style.
        """
        target = "default" if indexes is None else ",".join(str(i) for i in indexes)
        return f"linkStyle {target} {','.join(self.declarations())}"


def is_node_style(value: object) -> bool:
    """Check that value is a node class definition and not a link style."""
    return isinstance(value, ClassDef) and not isinstance(value, LinkDef)
