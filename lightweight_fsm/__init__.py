"""lightweight-fsm - A minimal, embeddable finite state machine runtime."""
from __future__ import annotations

from lightweight_fsm.machine import Machine
from lightweight_fsm.state import State
from lightweight_fsm.transition import Transition, TransitionSpec
from lightweight_fsm.types import (
    Effect,
    EventTypeError,
    MachineError,
    MachineRunningError,
    NoInitialStateError,
    Predicate,
)

__all__ = [
    "Machine",
    "State",
    "Transition",
    "TransitionSpec",
    "Effect",
    "Predicate",
    "MachineError",
    "MachineRunningError",
    "NoInitialStateError",
    "EventTypeError",
]
