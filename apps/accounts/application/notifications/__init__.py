"""Notification components."""
