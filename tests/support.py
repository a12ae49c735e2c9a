# In-memory stores and TestClient wiring shared by the test modules.
# The fakes mirror the SQLite stores: ids start at 1 and listings keep insertion order.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from fastapi.testclient import TestClient

from social_media_api.app.api.dependencies import get_account_repository, get_message_repository
from social_media_api.app.main import app
from social_media_api.app.schemas.account import Account
from social_media_api.app.schemas.message import Message


class FakeAccountRepository:
    def __init__(self) -> None:
        self.accounts: Dict[int, Account] = {}
        self._next_id = 1

    def find_by_id(self, account_id: int) -> Optional[Account]:
        return self.accounts.get(account_id)

    def find_by_username(self, username: str) -> Optional[Account]:
        return next((a for a in self.accounts.values() if a.username == username), None)

    def find_by_username_and_password(self, username: str, password: str) -> Optional[Account]:
        return next(
            (a for a in self.accounts.values() if a.username == username and a.password == password),
            None,
        )

    def save(self, account: Account) -> Account:
        if account.account_id is None:
            account = account.model_copy(update={"account_id": self._next_id})
            self._next_id += 1
        self.accounts[account.account_id] = account
        return account


class FakeMessageRepository:
    def __init__(self) -> None:
        self.messages: Dict[int, Message] = {}
        self._next_id = 1

    def find_by_id(self, message_id: int) -> Optional[Message]:
        return self.messages.get(message_id)

    def find_all(self) -> List[Message]:
        return list(self.messages.values())

    def save(self, message: Message) -> Message:
        if message.message_id is None:
            message = message.model_copy(update={"message_id": self._next_id})
            self._next_id += 1
        self.messages[message.message_id] = message
        return message

    def delete_by_id(self, message_id: int) -> None:
        self.messages.pop(message_id, None)

    def find_by_posted_by(self, account_id: int) -> List[Message]:
        return [m for m in self.messages.values() if m.posted_by == account_id]


@contextmanager
def api_test_client(
    *,
    account_repository: Any | None = None,
    message_repository: Any | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient with the stores overridden for the duration of the block."""
    if account_repository is not None:
        app.dependency_overrides[get_account_repository] = lambda: account_repository
    if message_repository is not None:
        app.dependency_overrides[get_message_repository] = lambda: message_repository

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
