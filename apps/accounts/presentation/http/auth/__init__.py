"""HTTP auth helpers (cookie, bearer guard)."""
