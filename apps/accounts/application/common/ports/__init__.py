"""Common Ports."""

from apps.accounts.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]
