"""Key events and the wildcard patterns matched against them."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Optional


class ButtonState(str, Enum):
    """Whether a key event is a press or a release."""

    PRESSED = "pressed"
    RELEASED = "released"


def _normalize_virtual(code: Optional[str]) -> Optional[str]:
    if code is None:
        return None
    cleaned = code.strip().lower()
    if not cleaned:
        raise ValueError("virtual_code cannot be empty")
    return cleaned


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Concrete key event delivered by the host."""

    scan_code: int
    button_state: ButtonState
    virtual_code: Optional[str] = None
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    logo: bool = False

    def __post_init__(self) -> None:
        if self.scan_code < 0:
            raise ValueError("scan_code must be non-negative")
        object.__setattr__(self, "button_state", ButtonState(self.button_state))
        object.__setattr__(self, "virtual_code", _normalize_virtual(self.virtual_code))

    @property
    def pressed(self) -> bool:
        return self.button_state is ButtonState.PRESSED

    def as_pressed(self) -> "KeyEvent":
        """Copy of this event with only ``button_state`` forced to pressed."""
        return replace(self, button_state=ButtonState.PRESSED)


@dataclass(frozen=True, slots=True)
class KeyPattern:
    """Partially-specified filter over key events.

    Every field is optional and ``None`` matches any value. Equality is
    structural, so two patterns are equal only when their wildcards line up
    too; that is narrower than ``subsumes``, which is the ordering the
    pattern tree is built on.
    """

    scan_code: Optional[int] = None
    button_state: Optional[ButtonState] = None
    virtual_code: Optional[str] = None
    shift: Optional[bool] = None
    ctrl: Optional[bool] = None
    alt: Optional[bool] = None
    logo: Optional[bool] = None

    def __post_init__(self) -> None:
        if self.button_state is not None:
            object.__setattr__(self, "button_state", ButtonState(self.button_state))
        object.__setattr__(self, "virtual_code", _normalize_virtual(self.virtual_code))

    @classmethod
    def wildcard(cls) -> "KeyPattern":
        return cls()

    @classmethod
    def from_event(cls, event: KeyEvent) -> "KeyPattern":
        """Pattern pinned to every field of ``event``.

        An event without a virtual code yields a wildcard ``virtual_code``.
        """
        return cls(
            scan_code=event.scan_code,
            button_state=event.button_state,
            virtual_code=event.virtual_code,
            shift=event.shift,
            ctrl=event.ctrl,
            alt=event.alt,
            logo=event.logo,
        )

    @property
    def is_wildcard(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def subsumes(self, other: "KeyPattern") -> bool:
        return (
            _admits(self.scan_code, other.scan_code)
            and _admits(self.button_state, other.button_state)
            and _admits(self.virtual_code, other.virtual_code)
            and _admits(self.shift, other.shift)
            and _admits(self.ctrl, other.ctrl)
            and _admits(self.alt, other.alt)
            and _admits(self.logo, other.logo)
        )

    def matches(self, event: KeyEvent) -> bool:
        return (
            _admits(self.scan_code, event.scan_code)
            and _admits(self.button_state, event.button_state)
            and _admits(self.virtual_code, event.virtual_code)
            and _admits(self.shift, event.shift)
            and _admits(self.ctrl, event.ctrl)
            and _admits(self.alt, event.alt)
            and _admits(self.logo, event.logo)
        )

    @property
    def token(self) -> str:
        """Compact ``field=value`` rendering used in telemetry."""
        parts: list[str] = []
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, ButtonState):
                value = value.value
            parts.append(f"{f.name}={value}")
        return ",".join(parts) if parts else "*"


def _admits(expected: object, actual: object) -> bool:
    return expected is None or expected == actual


__all__ = [
    "ButtonState",
    "KeyEvent",
    "KeyPattern",
]
