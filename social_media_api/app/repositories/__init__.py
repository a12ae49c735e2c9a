"""
Storage collaborators.

Services depend on the ``AccountRepository`` and ``MessageRepository``
protocols from ``base``; the SQLite implementations live in
``account_repository`` and ``message_repository``.
"""

from .account_repository import SQLiteAccountRepository
from .base import AccountRepository, MessageRepository
from .message_repository import SQLiteMessageRepository

__all__ = [
    "AccountRepository",
    "MessageRepository",
    "SQLiteAccountRepository",
    "SQLiteMessageRepository",
]
