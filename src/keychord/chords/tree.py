"""Subsumption-ordered tree of key patterns and the actions bound to them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, NewType, Optional

from .models import KeyEvent, KeyPattern

NodeRef = NewType("NodeRef", int)

ROOT = NodeRef(0)


@dataclass(slots=True)
class PatternNode:
    """One pattern, the action names bound to it, and its child references."""

    pattern: KeyPattern
    actions: set[str] = field(default_factory=set)
    children: list[NodeRef] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class TreeStats:
    """Snapshot of tree size used for diagnostics."""

    node_count: int
    binding_count: int
    depth: int


class PatternTree:
    """Arena of ``PatternNode``s rooted at the fully wildcard pattern.

    Every node's pattern is strictly subsumed by its parent's, and no
    pattern is stored twice. When a new node is attached, siblings it
    subsumes are moved beneath it and it takes the place of the first of
    them, so a general pattern registered after a specific one still ends
    up above it. Adoption only looks at direct siblings: a subsumed node
    already filed under another sibling stays where it is.

    Siblings that constrain unrelated fields (one only ``shift``, another
    only ``ctrl``) are legitimate and can both match the same event. A
    pattern constraining both is filed under whichever of them comes first,
    so which sibling still reports its own match depends on registration
    order.
    """

    def __init__(self) -> None:
        self._nodes: list[PatternNode] = [PatternNode(KeyPattern.wildcard())]
        self._index: dict[KeyPattern, NodeRef] = {self._nodes[0].pattern: ROOT}

    @classmethod
    def with_root(cls) -> "PatternTree":
        return cls()

    @property
    def root(self) -> NodeRef:
        return ROOT

    def __len__(self) -> int:
        return len(self._nodes)

    def pattern_of(self, ref: NodeRef) -> KeyPattern:
        return self._nodes[ref].pattern

    def actions_of(self, ref: NodeRef) -> frozenset[str]:
        return frozenset(self._nodes[ref].actions)

    def children_of(self, ref: NodeRef) -> tuple[NodeRef, ...]:
        return tuple(self._nodes[ref].children)

    def bind(self, ref: NodeRef, action: str) -> None:
        if not action:
            raise ValueError("action name cannot be empty")
        self._nodes[ref].actions.add(action)

    def find_or_insert(
        self, pattern: KeyPattern, action: Optional[str] = None
    ) -> NodeRef:
        """Locate the node holding ``pattern``, creating it if needed.

        A pattern that is already stored is reused directly. Otherwise
        descends through the first child that subsumes ``pattern`` at each
        level and stops at a structurally equal node. When no child
        subsumes it a new child is attached there. ``action``, when given,
        is added to the resulting node's action set.
        """

        if action is not None and not action:
            raise ValueError("action name cannot be empty")

        existing = self._index.get(pattern)
        if existing is not None:
            if action is not None:
                self.bind(existing, action)
            return existing

        ref = ROOT
        while True:
            node = self._nodes[ref]
            if node.pattern == pattern:
                break
            child = self._first_subsuming_child(node, pattern)
            if child is None:
                ref = self._attach(ref, pattern)
                break
            ref = child

        if action is not None:
            self.bind(ref, action)
        return ref

    def all_nearest(self, event: KeyEvent) -> list[NodeRef]:
        """Most specific matching node along every matching branch.

        Never empty: the root matches every event and is returned when no
        descendant does.
        """

        results: list[NodeRef] = []
        self._collect_nearest(ROOT, event, results)
        return results

    def iter_nodes(self) -> Iterator[tuple[NodeRef, PatternNode]]:
        for index, node in enumerate(self._nodes):
            yield NodeRef(index), node

    def stats(self) -> TreeStats:
        return TreeStats(
            node_count=len(self._nodes),
            binding_count=sum(len(node.actions) for node in self._nodes),
            depth=self._depth(ROOT),
        )

    def _first_subsuming_child(
        self, node: PatternNode, pattern: KeyPattern
    ) -> Optional[NodeRef]:
        for child in node.children:
            if self._nodes[child].pattern.subsumes(pattern):
                return child
        return None

    def _attach(self, parent: NodeRef, pattern: KeyPattern) -> NodeRef:
        ref = NodeRef(len(self._nodes))
        new_node = PatternNode(pattern)
        self._nodes.append(new_node)
        self._index[pattern] = ref

        kept: list[NodeRef] = []
        slot: Optional[int] = None
        for sibling in self._nodes[parent].children:
            if pattern.subsumes(self._nodes[sibling].pattern):
                if slot is None:
                    slot = len(kept)
                new_node.children.append(sibling)
            else:
                kept.append(sibling)
        kept.insert(len(kept) if slot is None else slot, ref)
        self._nodes[parent].children = kept
        return ref

    def _collect_nearest(
        self, ref: NodeRef, event: KeyEvent, results: list[NodeRef]
    ) -> None:
        matching = [
            child
            for child in self._nodes[ref].children
            if self._nodes[child].pattern.matches(event)
        ]
        if not matching:
            results.append(ref)
            return
        for child in matching:
            self._collect_nearest(child, event, results)

    def _depth(self, ref: NodeRef) -> int:
        children = self._nodes[ref].children
        if not children:
            return 0
        return 1 + max(self._depth(child) for child in children)


__all__ = [
    "NodeRef",
    "PatternNode",
    "PatternTree",
    "TreeStats",
]
