"""Textual host adapter for the chord engine."""

from .controller import TextualChordAdapter, TextualHooks, textual_key_to_event

__all__ = ["TextualChordAdapter", "TextualHooks", "textual_key_to_event"]
