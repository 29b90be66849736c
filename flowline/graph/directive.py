"""Diagram-level init directive."""

import json
from typing import Any, Mapping

from .options import Curve, FlowOption


class Directive:
    """Theme, font and layout settings emitted once at the top of a diagram."""

    def __init__(self):
        self._theme: str | None = None
        self._font_family: str | None = None
        self._variables: dict[str, Any] | None = None
        self._flowchart: dict[str, Any] | None = None

    @property
    def themed(self) -> str | None:
        return self._theme

    @property
    def family(self) -> str | None:
        return self._font_family

    @property
    def flow(self) -> dict[str, Any] | None:
        """A copy of the flowchart options, or None when unset."""
        return None if self._flowchart is None else dict(self._flowchart)

    @property
    def theme_variables(self) -> dict[str, Any] | None:
        return None if self._variables is None else dict(self._variables)

    @property
    def is_empty(self) -> bool:
        """Whether rendering would produce an empty init block."""
        return not (self._theme or self._font_family or self._variables or self._flowchart)

    def curve(self, value: "str | Curve | None" = None) -> "Directive":
        """Set the curve type for lines. (Removes it when value is omitted.)

        Raises:
            InvalidChoiceError: If value is not a known curve.
        """
        if value is None:
            self._set_flow_option(FlowOption.CURVE.value, None)
        else:
            self._set_flow_option(FlowOption.CURVE.value, Curve.parse(value).value)
        return self

    def flowchart(self, options: Mapping[str, Any] | None = None) -> "Directive":
        """Merge several flowchart options at once.

        A None value removes that option. Calling without options clears the
        whole flowchart block.

        Args:
            options: Mapping of flowchart option name to value.

        Raises:
            TypeError: If options is not a mapping.
            InvalidChoiceError: If a key is not a flowchart option, or the
                curve value is not a known curve.
        """
        if options is None:
            self._flowchart = None
            return self
        if not isinstance(options, Mapping):
            raise TypeError("Flowchart options must be a mapping.")

        # Validate everything before touching state
        updates: dict[str, Any] = {}
        for key, value in options.items():
            option = FlowOption.parse(key)
            if option is FlowOption.CURVE and value is not None:
                value = Curve.parse(value).value
            updates[option.value] = value

        for key, value in updates.items():
            self._set_flow_option(key, value)
        return self

    def html_labels(self, value: bool | None = True) -> "Directive":
        """Set whether labels are rendered as html elements."""
        self._set_flow_option(FlowOption.HTML_LABELS.value, value)
        return self

    def font_family(self, value: str | None = None) -> "Directive":
        """Set the CSS font-family. (Clears it when value is omitted.)

        Raises:
            TypeError: If value is not a string.
        """
        if value is not None and not isinstance(value, str):
            raise TypeError("Font family must be a string.")
        self._font_family = value
        return self

    def theme(self, value: str | None = None) -> "Directive":
        """Set the theme name. (Clears it when value is omitted.)"""
        self._theme = value
        return self

    def variables(self, values: Mapping[str, Any] | None = None) -> "Directive":
        """Merge theme variables into the directive. (Clears them when omitted.)"""
        if values is None:
            self._variables = None
        else:
            self._variables = {**(self._variables or {}), **values} or None
        return self

    def _set_flow_option(self, key: str, value: Any) -> None:
        flow = dict(self._flowchart or {})
        if value is None:
            flow.pop(key, None)
        else:
            flow[key] = value
        self._flowchart = flow or None

    def render(self) -> str:
        """Return the Mermaid init directive line."""
        config: dict[str, Any] = {}
        if self._theme:
            config["theme"] = self._theme
        if self._font_family:
            config["fontFamily"] = self._font_family
        if self._variables:
            config["themeVariables"] = self._variables
        if self._flowchart:
            config["flowchart"] = self._flowchart
        return f"%%{{ init: {json.dumps(config)} }}%%"
