"""Token lifecycle components."""
