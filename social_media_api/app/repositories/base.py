"""Store protocols consumed by the service layer."""

from typing import List, Optional, Protocol

from ..schemas.account import Account
from ..schemas.message import Message


class AccountRepository(Protocol):
    def find_by_id(self, account_id: int) -> Optional[Account]: ...

    def find_by_username(self, username: str) -> Optional[Account]: ...

    def find_by_username_and_password(self, username: str, password: str) -> Optional[Account]: ...

    def save(self, account: Account) -> Account:
        """Persist ``account`` and return it with its assigned id.

        Implementations raise ``DuplicateResourceError`` when the
        username is already taken at the storage level.
        """
        ...


class MessageRepository(Protocol):
    def find_by_id(self, message_id: int) -> Optional[Message]: ...

    def find_all(self) -> List[Message]: ...

    def save(self, message: Message) -> Message:
        """Insert ``message`` when it has no id, otherwise update its text."""
        ...

    def delete_by_id(self, message_id: int) -> None: ...

    def find_by_posted_by(self, account_id: int) -> List[Message]: ...
