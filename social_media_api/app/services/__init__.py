"""
Service layer.

Each service encapsulates the validation rules of one domain and talks
to storage only through the store it was constructed with, so tests
can hand in in‑memory fakes.
"""

from .account_service import AccountService
from .message_service import MessageService

__all__ = ["AccountService", "MessageService"]
