"""Pydantic models for state machine and style table files."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..graph.options import NodeShape


class Transition(BaseModel):
    """A named transition out of a state."""

    target: str
    description: str | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_target(cls, data: Any) -> Any:
        """Allow the shorthand ``EVENT: Target``."""
        if isinstance(data, str):
            return {"target": data}
        return data


class State(BaseModel):
    """A state of the machine."""

    model_config = ConfigDict(extra="allow")

    tags: list[str] = Field(default_factory=list)
    type: str | None = None
    description: str | None = None
    on: dict[str, Transition] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_on_key(cls, data: Any) -> Any:
        """Restore the ``on`` key, which YAML 1.1 loads as boolean true."""
        if isinstance(data, dict) and True in data and "on" not in data:
            data = {("on" if key is True else key): value for key, value in data.items()}
        return data

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, value: Any) -> Any:
        """Normalize a single tag to a list."""
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("on", mode="before")
    @classmethod
    def normalize_on(cls, value: Any) -> Any:
        if value is None:
            return {}
        return value


class StateMachine(BaseModel):
    """Root model for a state machine description.

    ``tags`` configure the diagram: ``curve:<name>``, ``link:<line style>``
    and ``var:<key=value>[:key=value...]``.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    initial: str | None = None
    tags: list[str] = Field(default_factory=list)
    states: dict[str, State] = Field(default_factory=dict)

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, value: Any) -> Any:
        """Normalize a scalar tag to a list."""
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @model_validator(mode="before")
    @classmethod
    def normalize_states(cls, data: Any) -> Any:
        """Allow states declared with no body (``Scene 5:``)."""
        if isinstance(data, dict) and isinstance(data.get("states"), dict):
            states = {
                name: {} if state is None else state
                for name, state in data["states"].items()
            }
            data = {**data, "states": states}
        return data

    def get_state(self, name: str) -> State | None:
        """Get a state by name."""
        return self.states.get(name)

    def get_all_state_names(self) -> list[str]:
        """Get all state names."""
        return list(self.states.keys())


class StyleRuleSpec(BaseModel):
    """Style and shape applied to states carrying a tag or type."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    extends: str | None = None
    color: str | None = None
    fill: str | None = None
    stroke: str | None = None
    stroke_width: str | None = Field(default=None, alias="stroke-width")
    stroke_dash: str | None = Field(default=None, alias="stroke-dasharray")
    shape: str = NodeShape.DEFAULT.value

    @field_validator("shape")
    @classmethod
    def check_shape(cls, value: str) -> str:
        if not NodeShape.match(value):
            raise ValueError(
                f"'{value}' is not a valid node shape "
                f"(expected one of: {', '.join(NodeShape.values())})"
            )
        return value


class BaseClassSpec(BaseModel):
    """A reusable set of style properties that rules can extend."""

    model_config = ConfigDict(populate_by_name=True)

    color: str | None = None
    fill: str | None = None
    stroke: str | None = None
    stroke_width: str | None = Field(default=None, alias="stroke-width")
    stroke_dash: str | None = Field(default=None, alias="stroke-dasharray")


class StyleTableSpec(BaseModel):
    """Root model for a style table file.

    Example:
        base:
          base: {fill: black, color: white}
        rules:
          Core: {extends: base, stroke: blue}
          final: {extends: base, stroke: red, shape: pill}
    """

    base: dict[str, BaseClassSpec] = Field(default_factory=dict)
    rules: dict[str, StyleRuleSpec] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_extends(self) -> "StyleTableSpec":
        for tag, rule in self.rules.items():
            if rule.extends is not None and rule.extends not in self.base:
                raise ValueError(
                    f"Rule '{tag}' extends undefined base class '{rule.extends}'"
                )
        return self
