"""Validation issues and the result that collects them."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Severity level of a validation issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationIssue:
    """A problem found in a machine, located by state and event."""

    code: str
    message: str
    severity: Severity
    state: str | None = None
    event: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class ValidationResult:
    """Issues collected by one or more checks over a state machine."""

    issues: list[ValidationIssue] = field(default_factory=list)

    def _with(self, severity: Severity) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity is severity]

    @property
    def errors(self) -> list[ValidationIssue]:
        return self._with(Severity.ERROR)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return self._with(Severity.WARNING)

    @property
    def infos(self) -> list[ValidationIssue]:
        return self._with(Severity.INFO)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def is_valid(self) -> bool:
        """A machine is valid when no check reported an error."""
        return not self.has_errors

    def add(
        self,
        severity: Severity,
        code: str,
        message: str,
        state: str | None = None,
        event: str | None = None,
        **details: Any,
    ) -> None:
        """Record an issue; extra keyword arguments become its details."""
        self.issues.append(
            ValidationIssue(code, message, Severity(severity), state, event, details)
        )

    def add_error(self, code: str, message: str, *args: Any, **details: Any) -> None:
        self.add(Severity.ERROR, code, message, *args, **details)

    def add_warning(self, code: str, message: str, *args: Any, **details: Any) -> None:
        self.add(Severity.WARNING, code, message, *args, **details)

    def add_info(self, code: str, message: str, *args: Any, **details: Any) -> None:
        self.add(Severity.INFO, code, message, *args, **details)

    def merge(self, other: "ValidationResult") -> None:
        """Append every issue of other to this result."""
        self.issues.extend(other.issues)
