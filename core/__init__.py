"""Process-wide helpers."""
