"""Load declarative control entries into an ``ActiveStateTracker``."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping

from keychord.chords import ActiveStateTracker, KeyPattern
from keychord.runtime.telemetry import record_event, span

from .attributes import AttributeValue, Selector, parse_key
from .errors import BindingConfigError, MissingRequiredAttribute, UnsupportedSelector


@dataclass(slots=True)
class LoadReport:
    """Bindings that made it into the tree and the entries that did not."""

    inserted: list[tuple[KeyPattern, str]] = field(default_factory=list)
    errors: list[BindingConfigError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _action_name(control: Mapping[str, Any]) -> str:
    if not isinstance(control, Mapping):
        raise BindingConfigError(
            f"Control must be a mapping, got {type(control).__name__}"
        )
    value = control.get("action")
    if value is None:
        raise MissingRequiredAttribute("action")
    if isinstance(value, Selector):
        raise UnsupportedSelector("action", value.expression)
    name = str(value).strip()
    if not name:
        raise MissingRequiredAttribute("action")
    return name


def load_controls(
    tracker: ActiveStateTracker,
    controls: Iterable[Mapping[str, Any]],
    *,
    logger_name: str | None = None,
) -> LoadReport:
    """Register every key entry of every control with ``tracker``.

    Each control carries an ``action`` and a ``keys`` list of attribute
    mappings. A control without an action is skipped as a whole; a key entry
    that fails to parse is skipped on its own. Skipped entries are reported
    on the returned ``LoadReport`` rather than raised.
    """

    report = LoadReport()
    with span(
        "config::load_controls",
        logger_name=logger_name,
        component="config",
    ) as handle:
        for control in controls:
            try:
                action = _action_name(control)
            except BindingConfigError as exc:
                report.errors.append(exc)
                continue

            keys = control.get("keys", ())
            if not isinstance(keys, (list, tuple)):
                report.errors.append(
                    BindingConfigError("Control 'keys' must be a list of key entries")
                )
                continue

            for attributes in keys:
                try:
                    pattern = parse_key(attributes)
                except BindingConfigError as exc:
                    report.errors.append(exc)
                    continue
                tracker.insert(pattern, action)
                report.inserted.append((pattern, action))

        handle.add_metadata("inserted", len(report.inserted))
        handle.add_metadata("errors", len(report.errors))

    for error in report.errors:
        record_event(
            "config.rejected",
            level="warning",
            data={"error": str(error)},
            logger_name=logger_name,
        )
    return report


def _decode_value(attribute: str, value: Any) -> AttributeValue:
    if isinstance(value, Mapping):
        if "select" not in value:
            raise BindingConfigError(
                f"Attribute '{attribute}' must be a string or a selector object"
            )
        return Selector(str(value["select"]))
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _decode_control(raw: Any) -> dict[str, Any]:
    if not isinstance(raw, Mapping):
        raise BindingConfigError("Each control must be a JSON object")
    control: dict[str, Any] = {}
    if "action" in raw:
        control["action"] = _decode_value("action", raw["action"])
    keys = raw.get("keys", [])
    if not isinstance(keys, list):
        raise BindingConfigError("Control 'keys' must be a list")
    decoded_keys: list[dict[str, AttributeValue]] = []
    for entry in keys:
        if not isinstance(entry, Mapping):
            raise BindingConfigError("Each key entry must be a JSON object")
        decoded_keys.append(
            {str(name): _decode_value(str(name), value) for name, value in entry.items()}
        )
    control["keys"] = decoded_keys
    return control


def read_controls_file(path: str | Path) -> list[dict[str, Any]]:
    """Read controls from a JSON document of the form ``{"controls": [...]}``."""

    with open(path, encoding="utf-8") as handle:
        document = json.load(handle)
    if not isinstance(document, Mapping) or not isinstance(
        document.get("controls"), list
    ):
        raise BindingConfigError(f"{path}: expected an object with a 'controls' list")
    return [_decode_control(raw) for raw in document["controls"]]


__all__ = [
    "LoadReport",
    "load_controls",
    "read_controls_file",
]
