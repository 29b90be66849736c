"""Schema layer for parsing and validating machine and style files."""

from .errors import SchemaLoadError, SchemaValidationError
from .models import (
    BaseClassSpec,
    State,
    StateMachine,
    StyleRuleSpec,
    StyleTableSpec,
    Transition,
)
from .loader import (
    load_yaml,
    parse_machine,
    parse_machine_from_string,
    parse_style_table,
    parse_style_table_from_string,
    validate_data,
)

__all__ = [
    "SchemaLoadError",
    "SchemaValidationError",
    "BaseClassSpec",
    "State",
    "StateMachine",
    "StyleRuleSpec",
    "StyleTableSpec",
    "Transition",
    "load_yaml",
    "parse_machine",
    "parse_machine_from_string",
    "parse_style_table",
    "parse_style_table_from_string",
    "validate_data",
]
