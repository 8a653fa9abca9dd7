"""Wildcard key patterns, the tree that orders them, and active-set tracking."""

from .models import ButtonState, KeyEvent, KeyPattern
from .tree import NodeRef, PatternNode, PatternTree, TreeStats
from .tracker import ActiveStateTracker

__all__ = [
    "ButtonState",
    "KeyEvent",
    "KeyPattern",
    "NodeRef",
    "PatternNode",
    "PatternTree",
    "TreeStats",
    "ActiveStateTracker",
]
