"""
SQLite store for accounts.

Each call opens its own connection and closes it before returning.
Username uniqueness is enforced by the ``UNIQUE`` constraint of the
``account`` table; a violation on insert is reported as
``DuplicateResourceError``.
"""

import logging
import sqlite3
from typing import Optional

from ..core.db import fits_integer_column, get_connection
from ..core.exceptions import DUPLICATE_USERNAME_MESSAGE, DuplicateResourceError
from ..schemas.account import Account

logger = logging.getLogger(__name__)


def _row_to_account(row: sqlite3.Row) -> Account:
    return Account(
        account_id=row["account_id"],
        username=row["username"],
        password=row["password"],
    )


class SQLiteAccountRepository:
    """Account store backed by the ``account`` table."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    def _fetch_one(self, sql: str, params: tuple) -> Optional[Account]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(sql, params).fetchone()
            return _row_to_account(row) if row else None
        finally:
            conn.close()

    def find_by_id(self, account_id: int) -> Optional[Account]:
        if not fits_integer_column(account_id):
            return None
        return self._fetch_one(
            "SELECT account_id, username, password FROM account WHERE account_id = ?",
            (account_id,),
        )

    def find_by_username(self, username: str) -> Optional[Account]:
        return self._fetch_one(
            "SELECT account_id, username, password FROM account WHERE username = ?",
            (username,),
        )

    def find_by_username_and_password(self, username: str, password: str) -> Optional[Account]:
        return self._fetch_one(
            "SELECT account_id, username, password FROM account WHERE username = ? AND password = ?",
            (username, password),
        )

    def save(self, account: Account) -> Account:
        """Insert a new account, or update username/password of an existing one."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            if account.account_id is None:
                cursor.execute(
                    "INSERT INTO account (username, password) VALUES (?, ?)",
                    (account.username, account.password),
                )
                account_id = cursor.lastrowid
            else:
                cursor.execute(
                    "UPDATE account SET username = ?, password = ? WHERE account_id = ?",
                    (account.username, account.password, account.account_id),
                )
                account_id = account.account_id
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            logger.warning("Username %s rejected by the store: %s", account.username, exc)
            raise DuplicateResourceError(DUPLICATE_USERNAME_MESSAGE) from exc
        finally:
            conn.close()
        logger.debug("Saved account %s", account_id)
        return account.model_copy(update={"account_id": account_id})
