"""State - a point of execution with optional entry and exit effects."""
from __future__ import annotations

from typing import Hashable

from lightweight_fsm.transition import Transition
from lightweight_fsm.types import Effect


class State:
    """A passive record of entry/exit effects.

    States compare and hash by identity, so two states configured with the
    same callbacks are still distinct keys in a machine's transition table.
    ``name`` is only a label for ``repr``.
    """

    def __init__(
        self,
        name: str | None = None,
        on_enter: Effect | None = None,
        on_leave: Effect | None = None,
    ) -> None:
        self.name = name
        self._on_enter = on_enter
        self._on_leave = on_leave

    def on_enter(self, effect: Effect) -> State:
        """Attach the entry effect. Replaces any previous one."""
        self._on_enter = effect
        return self

    def on_leave(self, effect: Effect) -> State:
        """Attach the exit effect. Replaces any previous one."""
        self._on_leave = effect
        return self

    def enter(self) -> None:
        if self._on_enter is not None:
            self._on_enter()

    def leave(self) -> None:
        if self._on_leave is not None:
            self._on_leave()

    def to(self, target: State, event: Hashable) -> Transition:
        """Start building a transition from this state to *target* on *event*."""
        return Transition(self, target, event)

    def __repr__(self) -> str:
        if self.name is None:
            return f"<State at {id(self):#x}>"
        return f"<State {self.name!r}>"
