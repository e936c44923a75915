"""Output package - shared formatting helpers."""
