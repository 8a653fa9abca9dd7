from __future__ import annotations

import pytest

from keychord.chords import ActiveStateTracker, ButtonState, KeyEvent, KeyPattern


def make_event(
    state: ButtonState, scan_code: int = 30, **modifiers: bool
) -> KeyEvent:
    return KeyEvent(scan_code=scan_code, button_state=state, **modifiers)


def press(scan_code: int = 30, **modifiers: bool) -> KeyEvent:
    return make_event(ButtonState.PRESSED, scan_code, **modifiers)


def release(scan_code: int = 30, **modifiers: bool) -> KeyEvent:
    return make_event(ButtonState.RELEASED, scan_code, **modifiers)


def make_tracker(*bindings: tuple[KeyPattern, str]) -> ActiveStateTracker:
    tracker = ActiveStateTracker()
    for pattern, action in bindings:
        tracker.insert(pattern, action)
    return tracker


JUMP = KeyPattern(scan_code=30, button_state=ButtonState.PRESSED)


def test_active_set_starts_empty() -> None:
    tracker = make_tracker()

    assert tracker.active == frozenset()
    assert tracker.handle_key(press()) == []


def test_press_release_symmetry() -> None:
    tracker = make_tracker((JUMP, "jump"))

    fired = tracker.handle_key(press(shift=True))
    assert fired == ["jump"]
    assert tracker.active == frozenset({"jump"})

    fired = tracker.handle_key(release(shift=True))
    assert fired == []
    assert "jump" not in tracker.active


def test_release_with_unconstrained_modifier_change_still_deactivates() -> None:
    tracker = make_tracker((JUMP, "jump"))

    tracker.handle_key(press(shift=True))
    tracker.handle_key(release(shift=False))

    assert not tracker.is_active("jump")


def test_modifier_drift_leaves_constrained_binding_active() -> None:
    binding = KeyPattern(scan_code=30, button_state=ButtonState.PRESSED, shift=True)
    tracker = make_tracker((binding, "jump"))

    tracker.handle_key(press(shift=True))
    tracker.handle_key(release(shift=False))

    assert tracker.is_active("jump")

    tracker.handle_key(release(shift=True))

    assert not tracker.is_active("jump")


def test_multi_binding_independence() -> None:
    tracker = make_tracker(
        (KeyPattern(ctrl=True), "A"),
        (KeyPattern(shift=True), "B"),
    )

    fired = tracker.handle_key(press(ctrl=True, shift=True))

    assert sorted(fired) == ["A", "B"]
    assert tracker.active == frozenset({"A", "B"})


def test_release_fires_release_bindings_without_activating() -> None:
    on_release = KeyPattern(scan_code=30, button_state=ButtonState.RELEASED)
    tracker = make_tracker((JUMP, "jump"), (on_release, "land"))

    tracker.handle_key(press())
    fired = tracker.handle_key(release())

    assert fired == ["land"]
    assert tracker.active == frozenset()


def test_wildcard_state_binding_fires_on_both_edges() -> None:
    tracker = make_tracker((KeyPattern(scan_code=30), "hold"))

    assert tracker.handle_key(press()) == ["hold"]
    assert tracker.is_active("hold")
    assert tracker.handle_key(release()) == ["hold"]
    assert not tracker.is_active("hold")


def test_fired_lists_repeated_actions_across_nodes() -> None:
    tracker = make_tracker(
        (KeyPattern(ctrl=True), "A"),
        (KeyPattern(shift=True), "A"),
    )

    fired = tracker.handle_key(press(ctrl=True, shift=True))

    assert fired == ["A", "A"]
    assert tracker.active == frozenset({"A"})


def test_only_deepest_binding_activates() -> None:
    tracker = make_tracker(
        (KeyPattern(scan_code=30), "walk"),
        (KeyPattern(scan_code=30, shift=True), "run"),
    )

    assert tracker.handle_key(press(shift=True)) == ["run"]
    assert tracker.active == frozenset({"run"})


def test_root_bindings_are_the_fallback() -> None:
    tracker = make_tracker(
        (KeyPattern.wildcard(), "any"),
        (JUMP, "jump"),
    )

    assert tracker.handle_key(press(scan_code=31)) == ["any"]
    assert tracker.handle_key(press()) == ["jump"]
    assert tracker.active == frozenset({"any", "jump"})


def test_active_snapshot_is_read_only() -> None:
    tracker = make_tracker((JUMP, "jump"))
    tracker.handle_key(press())

    snapshot = tracker.active
    tracker.handle_key(release())

    assert snapshot == frozenset({"jump"})
    assert tracker.active == frozenset()


def test_insert_rejects_empty_action() -> None:
    tracker = make_tracker()

    with pytest.raises(ValueError):
        tracker.insert(JUMP, "")
