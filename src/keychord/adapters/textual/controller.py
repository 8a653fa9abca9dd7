"""Bridges Textual key names into ``KeyEvent``s for an ``ActiveStateTracker``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from keychord.chords import ActiveStateTracker, ButtonState, KeyEvent


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


_MODIFIER_ALIASES = {
    "shift": "shift",
    "ctrl": "ctrl",
    "control": "ctrl",
    "alt": "alt",
    "meta": "alt",
    "option": "alt",
    "super": "logo",
    "hyper": "logo",
    "logo": "logo",
}


@dataclass(slots=True)
class TextualHooks:
    """Callbacks the adapter uses to push state back to the host UI."""

    update_active: Callable[[frozenset[str]], None] = _noop
    show_fired: Callable[[list[str]], None] = _noop
    log: Callable[[str], None] = _noop


def textual_key_to_event(
    key: str,
    *,
    scan_code: int = 0,
    modifiers: Iterable[str] = (),
    released: bool = False,
) -> KeyEvent:
    """Split a Textual key string such as ``"ctrl+shift+a"`` into an event.

    Textual does not expose hardware scan codes, so the caller supplies one
    (``0`` by default) and bindings are expected to match on the virtual
    code. A bare upper-case letter is read as the shifted lower-case key.
    """

    flags = {"shift": False, "ctrl": False, "alt": False, "logo": False}
    for modifier in modifiers:
        alias = _MODIFIER_ALIASES.get(str(modifier).strip().lower())
        if alias:
            flags[alias] = True

    *prefix, name = key.split("+")
    if not name:
        name = "+"
    for part in prefix:
        alias = _MODIFIER_ALIASES.get(part.strip().lower())
        if alias:
            flags[alias] = True

    if len(name) == 1 and name.isupper():
        flags["shift"] = True

    return KeyEvent(
        scan_code=scan_code,
        button_state=ButtonState.RELEASED if released else ButtonState.PRESSED,
        virtual_code=name,
        **flags,
    )


class TextualChordAdapter:
    """Feeds Textual key events into a tracker and reports the outcome."""

    def __init__(self, tracker: ActiveStateTracker, hooks: TextualHooks) -> None:
        self.tracker = tracker
        self.hooks = hooks
        self.hooks.update_active(self.tracker.active)

    def handle_textual_key(
        self,
        key: str,
        *,
        scan_code: int = 0,
        modifiers: Iterable[str] = (),
        released: bool = False,
    ) -> list[str]:
        event = textual_key_to_event(
            key, scan_code=scan_code, modifiers=modifiers, released=released
        )
        self.hooks.log(f"key -> {event.virtual_code} {event.button_state.value}")
        fired = self.tracker.handle_key(event)
        self.hooks.show_fired(fired)
        self.hooks.update_active(self.tracker.active)
        self.hooks.log(f"fired <- {fired!r} active={sorted(self.tracker.active)!r}")
        return fired

    def tap(
        self,
        key: str,
        *,
        scan_code: int = 0,
        modifiers: Iterable[str] = (),
    ) -> list[str]:
        """Press then release ``key``; returns the actions fired by the press.

        Terminals only report key presses, so the demo app uses this to keep
        the active set from accumulating.
        """

        fired = self.handle_textual_key(key, scan_code=scan_code, modifiers=modifiers)
        self.handle_textual_key(
            key, scan_code=scan_code, modifiers=modifiers, released=True
        )
        return fired


__all__ = ["TextualChordAdapter", "TextualHooks", "textual_key_to_event"]
