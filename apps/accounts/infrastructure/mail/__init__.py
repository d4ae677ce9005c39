"""Outbound mail."""

from apps.accounts.infrastructure.mail.smtp_mailer import SmtpMailer

__all__ = ["SmtpMailer"]
