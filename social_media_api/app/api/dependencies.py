"""
Dependency factories for FastAPI routes.

Routes receive services through ``Depends``; services receive their
stores the same way.  Tests replace the store factories through
``app.dependency_overrides`` to run against in‑memory fakes.
"""

from fastapi import Depends

from ..core.config import settings
from ..repositories.account_repository import SQLiteAccountRepository
from ..repositories.base import AccountRepository, MessageRepository
from ..repositories.message_repository import SQLiteMessageRepository
from ..services.account_service import AccountService
from ..services.message_service import MessageService


def get_account_repository() -> AccountRepository:
    return SQLiteAccountRepository(settings.database_url)


def get_message_repository() -> MessageRepository:
    return SQLiteMessageRepository(settings.database_url)


def get_account_service(
    account_repository: AccountRepository = Depends(get_account_repository),
) -> AccountService:
    return AccountService(account_repository)


def get_message_service(
    message_repository: MessageRepository = Depends(get_message_repository),
    account_service: AccountService = Depends(get_account_service),
) -> MessageService:
    return MessageService(message_repository, account_service)
