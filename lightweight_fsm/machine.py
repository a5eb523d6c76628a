"""Machine - transition table, lifecycle, and event dispatch."""
from __future__ import annotations

import logging
from typing import Generic, Iterable, TypeVar, Union

from lightweight_fsm.state import State
from lightweight_fsm.transition import Transition, TransitionSpec
from lightweight_fsm.types import (
    EventTypeError,
    MachineError,
    MachineRunningError,
    NoInitialStateError,
)

E = TypeVar("E")

TransitionLike = Union[Transition, TransitionSpec]

logger = logging.getLogger(__name__)


class Machine(Generic[E]):
    """Flat finite state machine driven by ``notify``.

    Transitions are indexed by ``(event, source state)``. Several transitions
    may share a key; they are tried in registration order and the first one
    whose guard passes fires. Firing runs, in order: the current state's exit
    effect, the transition's actions, the current-state update, and the
    target's entry effect.

    ``notify`` may be called from inside any of those callbacks. The nested
    call runs to completion before the outer one continues, and the outer call
    never re-evaluates its candidates: everything it still has to do is
    already decided when the first callback runs. If a callback raises, the
    error propagates and the transition is left half-done; nothing is rolled
    back.
    """

    def __init__(self, event_type: type[E]) -> None:
        if event_type is None or event_type is type(None):
            raise TypeError("A machine needs a concrete event type, got None")
        if not isinstance(event_type, type):
            raise TypeError(
                f"event_type must be a class, got {event_type!r}"
            )
        self._event_type = event_type
        self._table: dict[tuple[E, State], list[TransitionSpec]] = {}
        self._registered: list[TransitionSpec] = []
        self._initial: State | None = None
        self._current: State | None = None
        self._running: bool = False

    @property
    def event_type(self) -> type[E]:
        return self._event_type

    @property
    def initial_state(self) -> State | None:
        return self._initial

    @property
    def current_state(self) -> State | None:
        return self._current

    def is_running(self) -> bool:
        return self._running

    def is_stopped(self) -> bool:
        return not self._running

    def set_initial(self, state: State) -> Machine[E]:
        """Assign the state ``start()`` enters when called without arguments.

        The initial state can only be assigned once.
        """
        if state is None:
            raise MachineError("Initial state cannot be None")
        if self._initial is not None:
            raise MachineError(
                f"Initial state already set to {self._initial!r}"
            )
        self._initial = state
        return self

    def register(self, transition: TransitionLike) -> Machine[E]:
        """Store a copy of *transition* under ``(event, source)``.

        Raises ``MachineError`` if either endpoint is missing, and
        ``EventTypeError`` if the event is not an instance of the machine's
        event type. Subclass instances are accepted, except ``bool`` events in
        an ``int`` machine: ``True == 1`` would make them collide with integer
        keys.
        """
        spec = transition.spec() if isinstance(transition, Transition) else transition
        if spec.source is None or spec.target is None:
            raise MachineError(
                f"Transition on {spec.event!r} needs both a source and a target, "
                f"got {spec.source!r} -> {spec.target!r}"
            )
        if not isinstance(spec.event, self._event_type) or (
            isinstance(spec.event, bool) and self._event_type is int
        ):
            raise EventTypeError(
                spec.event,
                self._event_type,
                f"Transition event {spec.event!r} is not a "
                f"{self._event_type.__qualname__}",
            )
        self._table.setdefault((spec.event, spec.source), []).append(spec)
        self._registered.append(spec)
        return self

    def register_all(self, transitions: Iterable[TransitionLike]) -> Machine[E]:
        for transition in transitions:
            self.register(transition)
        return self

    def transitions(
        self, event: E | None = None, source: State | None = None
    ) -> list[TransitionSpec]:
        """Registered transitions in registration order, optionally filtered."""
        if event is not None and source is not None:
            return list(self._table.get((event, source), ()))
        return [
            spec
            for spec in self._registered
            if (event is None or spec.event == event)
            and (source is None or spec.source is source)
        ]

    def start(self, initial: State | None = None) -> None:
        """Enter *initial* (or the assigned initial state) and begin running.

        The machine is marked running before the entry effect runs, so the
        effect may already ``notify``.
        """
        if self._running:
            raise MachineRunningError("Machine is already running")
        state = initial if initial is not None else self._initial
        if state is None:
            raise NoInitialStateError("Cannot start a machine without an initial state")
        self._current = state
        self._running = True
        logger.debug("machine started in %r", state)
        state.enter()

    def stop(self) -> None:
        """Leave the current state and stop. ``current_state`` is kept."""
        if self._current is not None:
            self._current.leave()
        self._running = False
        logger.debug("machine stopped in %r", self._current)

    def notify(self, event: E) -> bool:
        """Dispatch *event*. Returns True if a transition fired.

        A stopped machine, an unknown ``(event, state)`` pair, or guards that
        all reject are silent no-ops.
        """
        if not self._running:
            return False
        source = self._current
        if source is None:
            return False
        candidates = self._table.get((event, source))
        if not candidates:
            return False

        for selected in candidates:
            if selected.guard_passes():
                break
        else:
            return False

        target = selected.target
        logger.debug("%r -> %r on %r", source, target, event)
        source.leave()
        selected.invoke_actions()
        self._current = target
        target.enter()
        return True
