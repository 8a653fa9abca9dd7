"""Press/release bookkeeping for actions bound in a ``PatternTree``."""

from __future__ import annotations

from typing import Iterable, Optional

from keychord.runtime.telemetry import record_event, span

from .models import KeyEvent, KeyPattern
from .tree import NodeRef, PatternTree


class ActiveStateTracker:
    """Owns a pattern tree and the set of actions currently held.

    A press adds every action bound to the nearest matching patterns. A
    release removes the actions found by re-querying the tree with the same
    event forced to the pressed state, so bindings written against the press
    are the ones released.

    The re-query uses the release event's own modifiers. If a modifier that
    the binding constrains changes between press and release (press
    ``shift+30``, release ``30`` after letting go of shift first), the
    binding is not found again and its action stays active until a matching
    release arrives.
    """

    def __init__(
        self,
        tree: Optional[PatternTree] = None,
        *,
        logger_name: str | None = None,
    ) -> None:
        self._tree = tree if tree is not None else PatternTree.with_root()
        self._active: set[str] = set()
        self._logger_name = logger_name

    @property
    def tree(self) -> PatternTree:
        return self._tree

    @property
    def active(self) -> frozenset[str]:
        return frozenset(self._active)

    def is_active(self, action: str) -> bool:
        return action in self._active

    def insert(self, pattern: KeyPattern, action: str) -> NodeRef:
        with span(
            "chords::insert",
            logger_name=self._logger_name,
            component="chords",
            metadata={"pattern": pattern.token, "action": action},
        ) as handle:
            ref = self._tree.find_or_insert(pattern, action)
            handle.add_metadata("node", ref)
            return ref

    def handle_key(self, event: KeyEvent) -> list[str]:
        with span(
            "chords::handle_key",
            logger_name=self._logger_name,
            component="chords",
            metadata={
                "scan_code": event.scan_code,
                "state": event.button_state.value,
            },
        ) as handle:
            fired = self._bound_actions(self._tree.all_nearest(event))
            handle.add_metadata("fired", len(fired))

            if event.pressed:
                self._activate(fired)
            else:
                released = self._bound_actions(
                    self._tree.all_nearest(event.as_pressed())
                )
                self._deactivate(released)
            return fired

    def _bound_actions(self, refs: Iterable[NodeRef]) -> list[str]:
        actions: list[str] = []
        for ref in refs:
            actions.extend(sorted(self._tree.actions_of(ref)))
        return actions

    def _activate(self, actions: Iterable[str]) -> None:
        for action in actions:
            if action in self._active:
                continue
            self._active.add(action)
            record_event(
                "chords.activate",
                level="debug",
                data={"action": action},
                logger_name=self._logger_name,
            )

    def _deactivate(self, actions: Iterable[str]) -> None:
        for action in actions:
            if action not in self._active:
                continue
            self._active.discard(action)
            record_event(
                "chords.deactivate",
                level="debug",
                data={"action": action},
                logger_name=self._logger_name,
            )


__all__ = ["ActiveStateTracker"]
