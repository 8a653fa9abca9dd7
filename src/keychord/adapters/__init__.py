"""Host adapters that feed key events into the chord engine."""
