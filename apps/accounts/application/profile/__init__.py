"""Profile use cases."""
