"""SQLite store for messages, backed by the ``message`` table."""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import fits_integer_column, get_connection
from ..schemas.message import Message

logger = logging.getLogger(__name__)

_COLUMNS = "message_id, posted_by, message_text"


def _row_to_message(row: sqlite3.Row) -> Message:
    return Message(
        message_id=row["message_id"],
        posted_by=row["posted_by"],
        message_text=row["message_text"],
    )


class SQLiteMessageRepository:
    """Message store.  Results are ordered by id, i.e. insertion order."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    def find_by_id(self, message_id: int) -> Optional[Message]:
        if not fits_integer_column(message_id):
            return None
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM message WHERE message_id = ?",
                (message_id,),
            ).fetchone()
            return _row_to_message(row) if row else None
        finally:
            conn.close()

    def find_all(self) -> List[Message]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM message ORDER BY message_id"
            ).fetchall()
            return [_row_to_message(row) for row in rows]
        finally:
            conn.close()

    def find_by_posted_by(self, account_id: int) -> List[Message]:
        if not fits_integer_column(account_id):
            return []
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM message WHERE posted_by = ? ORDER BY message_id",
                (account_id,),
            ).fetchall()
            return [_row_to_message(row) for row in rows]
        finally:
            conn.close()

    def save(self, message: Message) -> Message:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            if message.message_id is None:
                cursor.execute(
                    "INSERT INTO message (posted_by, message_text) VALUES (?, ?)",
                    (message.posted_by, message.message_text),
                )
                message_id = cursor.lastrowid
            else:
                cursor.execute(
                    "UPDATE message SET message_text = ? WHERE message_id = ?",
                    (message.message_text, message.message_id),
                )
                message_id = message.message_id
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
        logger.debug("Saved message %s", message_id)
        return message.model_copy(update={"message_id": message_id})

    def delete_by_id(self, message_id: int) -> None:
        if not fits_integer_column(message_id):
            return
        conn = get_connection(self.db_path)
        try:
            conn.execute("DELETE FROM message WHERE message_id = ?", (message_id,))
            conn.commit()
        finally:
            conn.close()
