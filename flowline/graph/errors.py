"""Exceptions raised while building or rendering a flowchart."""

from typing import Iterable


class InvalidChoiceError(ValueError):
    """Raised when a value is not a member of a closed option set."""

    def __init__(self, kind: str, value: object, allowed: Iterable[str]):
        self.kind = kind
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"{value!r} is not a valid {kind}. "
            f"Expected one of: {', '.join(self.allowed)}"
        )


class IncompleteConnectionError(ValueError):
    """Raised when a connection is rendered without both endpoints."""

    def __init__(self, message: str = "Connection needs both a from and a to node"):
        super().__init__(message)


class MachineError(Exception):
    """Base exception for state machine conversion errors."""

    pass


class UndefinedStateError(MachineError):
    """Raised when a transition targets a state that is not defined."""

    def __init__(self, source: str, event: str, target: str):
        self.source = source
        self.event = event
        self.target = target
        super().__init__(
            f"Transition '{event}' from state '{source}' targets "
            f"undefined state '{target}'"
        )
