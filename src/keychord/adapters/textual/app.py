"""Executable Textual app that shows which bound actions a key fires."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use keychord.adapters.textual.app"
    ) from exc

from keychord.chords import ActiveStateTracker
from keychord.config import load_controls, load_default_controls, read_controls_file
from keychord.runtime import telemetry

from .controller import TextualChordAdapter, TextualHooks


def create_tracker(bindings_path: str | None = None) -> ActiveStateTracker:
    """Tracker loaded from ``bindings_path`` or the built-in controls."""

    tracker = ActiveStateTracker(logger_name="keychord.demo")
    if bindings_path:
        report = load_controls(tracker, read_controls_file(bindings_path))
    else:
        report = load_default_controls(tracker)
    for error in report.errors:
        telemetry.record_event(
            "demo.binding_skipped", level="warning", data={"error": str(error)}
        )
    return tracker


class ChordDemoApp(App[None]):
    """Minimal Textual UI listing fired and active actions."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#fired-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		overflow: auto;
	}

	#active-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, tracker: ActiveStateTracker) -> None:
        super().__init__()
        self.tracker = tracker
        self.adapter: TextualChordAdapter | None = None
        self._history: list[str] = []
        self._fired_widget: Static | None = None
        self._active_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._fired_widget = Static("", id="fired-view")
        self._active_widget = Static("", id="active-line")
        yield self._fired_widget
        yield self._active_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualHooks(
            update_active=self._update_active,
            show_fired=self._show_fired,
        )
        self.adapter = TextualChordAdapter(self.tracker, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key in {"ctrl+c", "ctrl+q"}:
            return
        self.adapter.tap(event.key)
        event.stop()

    def _show_fired(self, fired: list[str]) -> None:
        if not fired:
            return
        self._history.append(", ".join(fired))
        del self._history[:-50]
        if self._fired_widget:
            self._fired_widget.update("\n".join(self._history))

    def _update_active(self, active: frozenset[str]) -> None:
        if self._active_widget:
            label = ", ".join(sorted(active)) or "-"
            self._active_widget.update(f"active: {label}")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the keychord Textual demo.")
    parser.add_argument(
        "--bindings",
        default=os.environ.get("KEYCHORD_BINDINGS"),
        help="JSON controls file (default: built-in controls)",
    )
    parser.add_argument(
        "--preset",
        choices=("development", "production"),
        default=None,
        help="Telemetry preset to apply before starting",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.preset:
        telemetry.configure(preset=args.preset)
    app = ChordDemoApp(create_tracker(args.bindings))
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
