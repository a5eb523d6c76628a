"""Shared callback aliases and errors for the state machine runtime."""

from __future__ import annotations

from typing import Callable

Effect = Callable[[], None]
Predicate = Callable[[], bool]


class MachineError(Exception):
    """Raised when a machine is configured or driven incorrectly."""


class MachineRunningError(MachineError):
    """Raised by ``start`` on a machine that is already running."""


class NoInitialStateError(MachineError):
    """Raised by ``start`` when no initial state was given or assigned."""


class EventTypeError(MachineError, TypeError):
    """Raised when a transition's event does not match the machine's event type."""

    def __init__(self, event: object, event_type: type, message: str) -> None:
        self.event = event
        self.event_type = event_type
        super().__init__(message)
