"""Notification Ports."""

from apps.accounts.application.notifications.ports.mailer import Mailer

__all__ = ["Mailer"]
