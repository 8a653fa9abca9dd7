"""Turn declarative key attributes into ``KeyPattern`` fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from keychord.chords import ButtonState, KeyPattern

from .errors import BindingConfigError, MalformedToken, UnsupportedSelector

WILDCARD = "*"

_TRUE_TOKENS = frozenset({"true", "yes", "on", "1"})
_FALSE_TOKENS = frozenset({"false", "no", "off", "0"})

MODIFIER_ATTRIBUTES = ("shift", "ctrl", "alt", "logo")


@dataclass(frozen=True, slots=True)
class Selector:
    """Non-literal attribute value that would need resolving against a host."""

    expression: str


AttributeValue = Union[str, Selector]


def _literal(attribute: str, value: AttributeValue) -> str:
    if isinstance(value, Selector):
        raise UnsupportedSelector(attribute, value.expression)
    return str(value).strip().lower()


def parse_scan_code(value: AttributeValue, *, attribute: str = "scan") -> Optional[int]:
    token = _literal(attribute, value)
    if token == WILDCARD:
        return None
    try:
        scan_code = int(token)
    except ValueError as exc:
        raise MalformedToken(attribute, token) from exc
    if scan_code < 0:
        raise MalformedToken(attribute, token)
    return scan_code


def parse_virtual_code(
    value: AttributeValue, *, attribute: str = "virtual"
) -> Optional[str]:
    token = _literal(attribute, value)
    if token == WILDCARD:
        return None
    if not token:
        raise MalformedToken(attribute, token)
    return token


def parse_button_state(
    value: AttributeValue, *, attribute: str = "state"
) -> Optional[ButtonState]:
    token = _literal(attribute, value)
    if token == WILDCARD:
        return None
    try:
        return ButtonState(token)
    except ValueError as exc:
        raise MalformedToken(attribute, token) from exc


def parse_modifier(value: AttributeValue, *, attribute: str) -> Optional[bool]:
    token = _literal(attribute, value)
    if token == WILDCARD:
        return None
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise MalformedToken(attribute, token)


def parse_key(attributes: Mapping[str, AttributeValue]) -> KeyPattern:
    """Build a pattern from one key entry.

    Absent attributes default to a pressed key with every modifier released;
    ``scan`` and ``virtual`` default to wildcards. Unknown attribute names
    are ignored. Raises a ``BindingConfigError`` subclass on the first
    attribute that does not parse.
    """

    scan_code: Optional[int] = None
    virtual_code: Optional[str] = None
    button_state: Optional[ButtonState] = ButtonState.PRESSED
    modifiers: dict[str, Optional[bool]] = {name: False for name in MODIFIER_ATTRIBUTES}

    if not isinstance(attributes, Mapping):
        raise BindingConfigError(
            f"Key entry must be a mapping of attributes, got {type(attributes).__name__}"
        )

    for name, value in attributes.items():
        if not isinstance(name, str):
            raise MalformedToken("key", repr(name))
        key = name.strip().lower()
        if key == "scan":
            scan_code = parse_scan_code(value)
        elif key == "virtual":
            virtual_code = parse_virtual_code(value)
        elif key == "state":
            button_state = parse_button_state(value)
        elif key in modifiers:
            modifiers[key] = parse_modifier(value, attribute=key)

    return KeyPattern(
        scan_code=scan_code,
        button_state=button_state,
        virtual_code=virtual_code,
        **modifiers,
    )


__all__ = [
    "AttributeValue",
    "MODIFIER_ATTRIBUTES",
    "Selector",
    "WILDCARD",
    "parse_button_state",
    "parse_key",
    "parse_modifier",
    "parse_scan_code",
    "parse_virtual_code",
]
