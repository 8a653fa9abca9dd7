"""Built-in controls used by the demo app and as a starting point for hosts."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from keychord.chords import ActiveStateTracker

from .loader import LoadReport, load_controls

DEFAULT_CONTROLS: tuple[Mapping[str, Any], ...] = (
    {
        "action": "move.forward",
        "keys": (
            {"virtual": "w", "shift": "*"},
            {"virtual": "up", "shift": "*"},
        ),
    },
    {
        "action": "move.back",
        "keys": (
            {"virtual": "s", "shift": "*"},
            {"virtual": "down", "shift": "*"},
        ),
    },
    {
        "action": "move.left",
        "keys": (
            {"virtual": "a", "shift": "*"},
            {"virtual": "left", "shift": "*"},
        ),
    },
    {
        "action": "move.right",
        "keys": (
            {"virtual": "d", "shift": "*"},
            {"virtual": "right", "shift": "*"},
        ),
    },
    {
        "action": "move.sprint",
        "keys": ({"shift": "true", "virtual": "*", "ctrl": "*", "alt": "*", "logo": "*"},),
    },
    {
        "action": "jump",
        "keys": ({"virtual": "space", "shift": "*"},),
    },
    {
        "action": "menu.toggle",
        "keys": ({"virtual": "escape"},),
    },
)


def load_default_controls(
    tracker: ActiveStateTracker,
    *,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    logger_name: str | None = None,
) -> LoadReport:
    """Register the built-in controls, optionally filtered by action name."""

    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    selected = [
        control
        for control in DEFAULT_CONTROLS
        if (include_set is None or control["action"] in include_set)
        and control["action"] not in exclude_set
    ]
    return load_controls(tracker, selected, logger_name=logger_name)


__all__ = ["DEFAULT_CONTROLS", "load_default_controls"]
