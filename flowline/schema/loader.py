"""YAML and JSON loading for state machines and style tables."""

import json
import logging
import re
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from .errors import SchemaLoadError, SchemaValidationError
from .models import StateMachine, StyleTableSpec

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class _MachineLoader(yaml.SafeLoader):
    """SafeLoader that reads only true/false as booleans.

    State and event names such as ``on``, ``off``, ``yes`` and ``no`` stay
    strings instead of turning into YAML 1.1 booleans.
    """


_MachineLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:bool"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_MachineLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def load_yaml(path: str | Path) -> dict:
    """Load a YAML (or JSON) file and return the raw data.

    Args:
        path: Path to the file.

    Returns:
        The parsed data as a dictionary.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise SchemaLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.load(f, Loader=_MachineLoader)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Invalid JSON: {e}", str(path)) from e
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    logger.debug("Loaded %s", path)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Expected mapping at root, got {type(data).__name__}", str(path)
        )

    return data


def _load_string(text: str) -> dict:
    # JSON is a subset of YAML, so one parser covers both
    try:
        data = yaml.load(text, Loader=_MachineLoader)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise SchemaLoadError(f"Expected mapping at root, got {type(data).__name__}")

    return data


def parse_machine(path: str | Path) -> StateMachine:
    """Load and parse a state machine file.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaValidationError: If the data fails validation.
    """
    return validate_data(StateMachine, load_yaml(path))


def parse_machine_from_string(text: str) -> StateMachine:
    """Parse a YAML or JSON string into a StateMachine.

    Raises:
        SchemaLoadError: If the text cannot be parsed.
        SchemaValidationError: If the data fails validation.
    """
    return validate_data(StateMachine, _load_string(text))


def parse_style_table(path: str | Path) -> StyleTableSpec:
    """Load and parse a style table file.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaValidationError: If the data fails validation.
    """
    return validate_data(StyleTableSpec, load_yaml(path))


def parse_style_table_from_string(text: str) -> StyleTableSpec:
    """Parse a YAML or JSON string into a StyleTableSpec."""
    return validate_data(StyleTableSpec, _load_string(text))


def validate_data(model: type[ModelT], data: Any) -> ModelT:
    """Validate raw data against a model.

    Args:
        model: The pydantic model class.
        data: The raw data.

    Returns:
        The validated model instance.

    Raises:
        SchemaValidationError: If the data fails validation.
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"Schema validation failed with {len(errors)} error(s)", errors
        ) from e
