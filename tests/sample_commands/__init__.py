"""Command package used by the loader tests."""
