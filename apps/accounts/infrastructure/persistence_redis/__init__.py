"""Redis persistence."""
