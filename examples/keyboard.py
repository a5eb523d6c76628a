"""Keyboard that wears out -- guards, actions, and stopping from a state.

Demonstrates:
- Enum events and a typed Machine
- Self-loop transitions guarded by a counter, with an action that decrements it
- Two transitions sharing an (event, state) key, disambiguated by guards
- A terminal state that stops the machine from its entry effect

Run: python -m examples.keyboard
"""

import enum
import random

from lightweight_fsm import Machine, State


class Key(enum.Enum):
    KEY = enum.auto()
    CAPS_LOCK = enum.auto()


def main() -> None:
    print("=== Keyboard ===\n")

    remaining = 20
    sm: Machine[Key] = Machine(Key)

    def keys_remaining() -> bool:
        return remaining > 0

    def worn_out() -> bool:
        return remaining == 0

    def press() -> None:
        nonlocal remaining
        remaining -= 1

    def on_broken() -> None:
        print("  keyboard is broken, stopping")
        sm.stop()

    standard = State("standard", on_enter=lambda: print("  -> standard"))
    caps_locked = State("caps_locked", on_enter=lambda: print("  -> CAPS LOCKED"))
    broken = State("broken", on_enter=on_broken)

    # Registration order matters: the counting self-loop is tried first.
    sm.set_initial(standard).register_all([
        standard.to(caps_locked, Key.CAPS_LOCK),
        caps_locked.to(standard, Key.CAPS_LOCK),
        standard.to(standard, Key.KEY).guard_is(keys_remaining).add_action(press),
        caps_locked.to(caps_locked, Key.KEY).guard_is(keys_remaining).add_action(press),
        standard.to(broken, Key.KEY).guard_is(worn_out),
        caps_locked.to(broken, Key.KEY).guard_is(worn_out),
    ])

    rng = random.Random(7)
    sm.start()
    presses = 0
    while sm.is_running():
        key = Key.CAPS_LOCK if rng.randint(0, 5) == 0 else Key.KEY
        sm.notify(key)
        if key is Key.KEY:
            presses += 1

    print(f"\nDone after {presses} key presses, final state {sm.current_state!r}.")


if __name__ == "__main__":
    main()
