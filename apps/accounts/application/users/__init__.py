"""User store components."""
