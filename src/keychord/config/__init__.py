"""Declarative binding configuration for the chord engine."""

from .errors import (
    BindingConfigError,
    MalformedToken,
    MissingRequiredAttribute,
    UnsupportedSelector,
)
from .attributes import (
    Selector,
    parse_button_state,
    parse_key,
    parse_modifier,
    parse_scan_code,
    parse_virtual_code,
)
from .loader import LoadReport, load_controls, read_controls_file
from .defaults import DEFAULT_CONTROLS, load_default_controls

__all__ = [
    "BindingConfigError",
    "MalformedToken",
    "MissingRequiredAttribute",
    "UnsupportedSelector",
    "Selector",
    "parse_button_state",
    "parse_key",
    "parse_modifier",
    "parse_scan_code",
    "parse_virtual_code",
    "LoadReport",
    "load_controls",
    "read_controls_file",
    "DEFAULT_CONTROLS",
    "load_default_controls",
]
