"""Tests for Transition and TransitionSpec."""
from __future__ import annotations

import dataclasses

import pytest

from lightweight_fsm import State, Transition, TransitionSpec


class TestTransition:
    """Test cases for the Transition builder."""

    def test_accessors(self):
        """Source, target and event are kept; no guard or actions by default."""
        a, b = State(), State()
        t = Transition(a, b, 7)

        assert t.source is a
        assert t.target is b
        assert t.event == 7
        assert t.guard is None
        assert t.actions == ()

    def test_guard_passes_without_guard(self):
        """No guard means the transition is always eligible."""
        t = Transition(State(), State(), "q")
        assert t.guard_passes() is True

    def test_guard_result_is_returned(self):
        """guard_passes reports the guard's verdict."""
        assert Transition(State(), State(), "q").guard_is(lambda: True).guard_passes() is True
        assert Transition(State(), State(), "q").guard_is(lambda: False).guard_passes() is False

    def test_guard_result_is_coerced_to_bool(self):
        """Truthy and falsy guard results become True and False."""
        assert Transition(State(), State(), "q").guard_is(lambda: 1).guard_passes() is True
        assert Transition(State(), State(), "q").guard_is(lambda: []).guard_passes() is False

    def test_guard_is_replaced(self):
        """Only the last guard is kept."""
        t = Transition(State(), State(), "q")
        t.guard_is(lambda: False)
        t.guard_is(lambda: True)

        assert t.guard_passes() is True

    def test_guard_side_effects_run_on_each_evaluation(self):
        """The guard is called every time it is evaluated, never cached."""
        calls = []

        def guard():
            calls.append(1)
            return False

        t = Transition(State(), State(), "q").guard_is(guard)
        t.guard_passes()
        t.guard_passes()

        assert len(calls) == 2

    def test_actions_accumulate_in_order(self):
        """Added actions do not replace each other and run in added order."""
        order = []
        t = (
            Transition(State(), State(), "q")
            .add_action(lambda: order.append("a"))
            .add_action(lambda: order.append("b"))
            .add_action(lambda: order.append("c"))
        )

        t.invoke_actions()

        assert order == ["a", "b", "c"]
        assert len(t.actions) == 3

    def test_builder_methods_chain(self):
        """guard_is and add_action return the transition itself."""
        t = Transition(State(), State(), "q")
        assert t.guard_is(lambda: True) is t
        assert t.add_action(lambda: None) is t

    def test_repr_names_endpoints(self):
        """repr shows both states, the event and the action count."""
        t = Transition(State("a"), State("b"), "q").add_action(lambda: None)
        assert repr(t) == "Transition(<State 'a'> -> <State 'b'> on 'q', 1 action(s))"


class TestTransitionSpec:
    """Test cases for the registered snapshot."""

    def test_spec_copies_fields(self):
        """The snapshot carries the builder's endpoints, event, guard and actions."""
        a, b = State(), State()
        guard = lambda: True  # noqa: E731
        action = lambda: None  # noqa: E731
        t = Transition(a, b, "q").guard_is(guard).add_action(action)

        spec = t.spec()

        assert spec.source is a
        assert spec.target is b
        assert spec.event == "q"
        assert spec.guard is guard
        assert spec.actions == (action,)

    def test_spec_unaffected_by_later_edits(self):
        """Actions added after the snapshot do not leak into it."""
        order = []
        t = Transition(State(), State(), "q").add_action(lambda: order.append(1))
        spec = t.spec()

        t.add_action(lambda: order.append(2))
        t.guard_is(lambda: False)
        spec.invoke_actions()

        assert order == [1]
        assert spec.guard_passes() is True

    def test_spec_is_frozen(self):
        """Fields of a snapshot cannot be reassigned."""
        spec = Transition(State(), State(), "q").spec()
        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.event = "r"  # type: ignore[misc]

    def test_spec_defaults(self):
        """A spec built directly has no guard and no actions."""
        spec = TransitionSpec(source=State(), target=State(), event=1)
        assert spec.guard_passes() is True
        spec.invoke_actions()

    def test_spec_and_builder_agree(self):
        """The snapshot evaluates the same guard and actions as its builder."""
        order = []
        t = (
            Transition(State(), State(), "q")
            .guard_is(lambda: False)
            .add_action(lambda: order.append("x"))
            .add_action(lambda: order.append("y"))
        )
        spec = t.spec()

        assert spec.guard_passes() is t.guard_passes() is False
        t.invoke_actions()
        spec.invoke_actions()

        assert order == ["x", "y", "x", "y"]
