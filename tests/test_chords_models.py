from __future__ import annotations

import itertools

import pytest

from keychord.chords import ButtonState, KeyEvent, KeyPattern


def make_patterns() -> list[KeyPattern]:
    return [
        KeyPattern(scan_code=scan, button_state=state, shift=shift)
        for scan, state, shift in itertools.product(
            (None, 30, 31),
            (None, ButtonState.PRESSED),
            (None, True, False),
        )
    ]


def press(scan_code: int = 30, **modifiers: bool) -> KeyEvent:
    return KeyEvent(scan_code=scan_code, button_state=ButtonState.PRESSED, **modifiers)


def test_subsumption_is_reflexive() -> None:
    for pattern in make_patterns():
        assert pattern.subsumes(pattern)


def test_subsumption_is_antisymmetric_under_structural_equality() -> None:
    for left, right in itertools.product(make_patterns(), repeat=2):
        if left.subsumes(right) and right.subsumes(left):
            assert left == right


def test_subsumption_is_transitive() -> None:
    patterns = make_patterns()
    for a, b, c in itertools.product(patterns, repeat=3):
        if a.subsumes(b) and b.subsumes(c):
            assert a.subsumes(c)


def test_wildcard_subsumes_everything_and_only_itself() -> None:
    wildcard = KeyPattern.wildcard()
    for pattern in make_patterns():
        assert wildcard.subsumes(pattern)
        if pattern.subsumes(wildcard):
            assert pattern.is_wildcard


def test_structural_equality_is_narrower_than_subsumption() -> None:
    general = KeyPattern(scan_code=30)
    specific = KeyPattern(scan_code=30, shift=True)

    assert general.subsumes(specific)
    assert general != specific
    assert KeyPattern(scan_code=30) == general
    assert hash(KeyPattern(scan_code=30)) == hash(general)


def test_matches_treats_none_as_free_pass() -> None:
    pattern = KeyPattern(scan_code=30, button_state=ButtonState.PRESSED)

    assert pattern.matches(press(shift=True))
    assert pattern.matches(press(ctrl=True, alt=True))
    assert not pattern.matches(press(scan_code=31))
    assert not pattern.matches(
        KeyEvent(scan_code=30, button_state=ButtonState.RELEASED)
    )


def test_matches_checks_modifiers_and_virtual_code() -> None:
    pattern = KeyPattern(virtual_code="Space", shift=False)
    event = KeyEvent(scan_code=57, button_state="pressed", virtual_code="space")

    assert pattern.virtual_code == "space"
    assert pattern.matches(event)
    assert not pattern.matches(
        KeyEvent(scan_code=57, button_state="pressed", virtual_code="space", shift=True)
    )


def test_missing_virtual_code_only_matches_wildcard_field() -> None:
    event = press()

    assert KeyPattern(scan_code=30).matches(event)
    assert not KeyPattern(virtual_code="a").matches(event)


def test_from_event_pins_every_field() -> None:
    event = KeyEvent(
        scan_code=30,
        button_state=ButtonState.PRESSED,
        virtual_code="a",
        shift=True,
    )
    pattern = KeyPattern.from_event(event)

    assert pattern.matches(event)
    assert not pattern.matches(KeyEvent(30, ButtonState.PRESSED, "a"))
    assert pattern.token == (
        "scan_code=30,button_state=pressed,virtual_code=a,"
        "shift=True,ctrl=False,alt=False,logo=False"
    )


def test_as_pressed_only_changes_button_state() -> None:
    release = KeyEvent(
        scan_code=30, button_state=ButtonState.RELEASED, virtual_code="a", ctrl=True
    )

    pressed = release.as_pressed()

    assert pressed.button_state is ButtonState.PRESSED
    assert pressed.scan_code == 30
    assert pressed.virtual_code == "a"
    assert pressed.ctrl is True
    assert release.pressed is False


def test_event_rejects_negative_scan_code() -> None:
    with pytest.raises(ValueError):
        KeyEvent(scan_code=-1, button_state=ButtonState.PRESSED)


def test_wildcard_token() -> None:
    assert KeyPattern.wildcard().token == "*"
