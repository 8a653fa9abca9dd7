"""Errors raised while reading binding configuration."""

from __future__ import annotations

from typing import Any


class BindingConfigError(ValueError):
    """Base class for configuration entries that cannot become patterns."""


class MalformedToken(BindingConfigError):
    """Raised when an attribute value is not a recognised literal."""

    def __init__(self, attribute: str, token: str):
        super().__init__(f"Attribute '{attribute}' has malformed value {token!r}")
        self.attribute = attribute
        self.token = token


class UnsupportedSelector(BindingConfigError):
    """Raised when a non-literal selector is used for an attribute."""

    def __init__(self, attribute: str, selector: Any):
        super().__init__(
            f"Attribute '{attribute}' uses selector {selector!r}; only literals are supported"
        )
        self.attribute = attribute
        self.selector = selector


class MissingRequiredAttribute(BindingConfigError):
    """Raised when a control omits an attribute it cannot do without."""

    def __init__(self, attribute: str):
        super().__init__(f"Missing required attribute '{attribute}'")
        self.attribute = attribute


__all__ = [
    "BindingConfigError",
    "MalformedToken",
    "UnsupportedSelector",
    "MissingRequiredAttribute",
]
