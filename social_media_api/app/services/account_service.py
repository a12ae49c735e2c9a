"""
Business logic for accounts.

Registration validates the username and password and checks that the
username is free; login matches the exact username/password pair.
Passwords are stored as given.
"""

import logging

from ..core.exceptions import (
    DUPLICATE_USERNAME_MESSAGE,
    DuplicateResourceError,
    InvalidRequestError,
    ResourceNotFoundError,
)
from ..repositories.base import AccountRepository
from ..schemas.account import Account

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 4


class AccountService:
    """Service for registering, authenticating and looking up accounts."""

    def __init__(self, account_repository: AccountRepository) -> None:
        self.account_repository = account_repository

    def register(self, account: Account) -> Account:
        """Validate and persist a new account.

        The existence lookup runs before any check, but errors are raised
        in the order blank username, short password, duplicate username.
        Two concurrent registrations can both pass the lookup; the store's
        uniqueness constraint rejects the second insert.
        """
        account_exists = self.account_repository.find_by_username(account.username) is not None

        if not account.username:
            raise InvalidRequestError("Username cannot be blank")
        if len(account.password) < MIN_PASSWORD_LENGTH:
            raise InvalidRequestError("Password has to be at least 4 characters long")
        if account_exists:
            raise DuplicateResourceError(DUPLICATE_USERNAME_MESSAGE)

        # The store assigns the identifier.
        saved = self.account_repository.save(account.model_copy(update={"account_id": None}))
        logger.info("Registered account %s (%s)", saved.account_id, saved.username)
        return saved

    def login(self, account: Account) -> Account:
        """Return the account matching both username and password.

        Unknown usernames and wrong passwords fail the same way.
        """
        matched = self.account_repository.find_by_username_and_password(
            account.username, account.password
        )
        if matched is None:
            logger.warning("Failed login for username %s", account.username)
            raise ResourceNotFoundError("No account was found with given credentials")
        return matched

    def get_user_by_id(self, account_id: int) -> Account:
        account = self.account_repository.find_by_id(account_id)
        if account is None:
            raise ResourceNotFoundError("Account with this ID does not exist")
        return account
