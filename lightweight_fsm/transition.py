"""Transition builder and the immutable record a machine stores."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Hashable, Iterable

from lightweight_fsm.types import Effect, Predicate

if TYPE_CHECKING:
    from lightweight_fsm.state import State


def _guard_passes(guard: Predicate | None) -> bool:
    return guard is None or bool(guard())


def _invoke_all(actions: Iterable[Effect]) -> None:
    for action in actions:
        action()


@dataclass(frozen=True, slots=True)
class TransitionSpec:
    """Snapshot of a transition as registered in a machine's table."""

    source: State
    target: State
    event: Hashable
    guard: Predicate | None = None
    actions: tuple[Effect, ...] = ()

    def guard_passes(self) -> bool:
        return _guard_passes(self.guard)

    def invoke_actions(self) -> None:
        _invoke_all(self.actions)


class Transition:
    """Edge from *source* to *target* fired by *event*.

    Configure with chained calls, then hand to ``Machine.register``::

        machine.register(idle.to(busy, "go").guard_is(ready).add_action(log))

    The machine keeps a ``TransitionSpec`` copy, so edits made after
    registration do not reach the table.
    """

    def __init__(self, source: State, target: State, event: Hashable) -> None:
        self._source = source
        self._target = target
        self._event = event
        self._guard: Predicate | None = None
        self._actions: list[Effect] = []

    @property
    def source(self) -> State:
        return self._source

    @property
    def target(self) -> State:
        return self._target

    @property
    def event(self) -> Hashable:
        return self._event

    @property
    def guard(self) -> Predicate | None:
        return self._guard

    @property
    def actions(self) -> tuple[Effect, ...]:
        return tuple(self._actions)

    def guard_is(self, predicate: Predicate) -> Transition:
        """Set the guard. Only one guard is kept; later calls overwrite."""
        self._guard = predicate
        return self

    def add_action(self, effect: Effect) -> Transition:
        """Append an action. Actions run in the order they were added."""
        self._actions.append(effect)
        return self

    def guard_passes(self) -> bool:
        return _guard_passes(self._guard)

    def invoke_actions(self) -> None:
        _invoke_all(self._actions)

    def spec(self) -> TransitionSpec:
        return TransitionSpec(
            source=self._source,
            target=self._target,
            event=self._event,
            guard=self._guard,
            actions=tuple(self._actions),
        )

    def __repr__(self) -> str:
        return (
            f"Transition({self._source!r} -> {self._target!r} "
            f"on {self._event!r}, {len(self._actions)} action(s))"
        )
