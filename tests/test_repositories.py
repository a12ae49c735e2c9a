"""
Tests for the SQLite stores and migrations.

Each test runs against its own migrated database file.
"""

import sqlite3

import pytest

from social_media_api.app.core.db import MIGRATIONS, get_connection, get_database_path, init_db
from social_media_api.app.core.exceptions import DuplicateResourceError
from social_media_api.app.repositories import SQLiteAccountRepository, SQLiteMessageRepository
from social_media_api.app.schemas.account import Account
from social_media_api.app.schemas.message import Message


def test_init_db_is_idempotent(db_path) -> None:
    init_db(db_path)

    conn = get_connection(db_path)
    try:
        versions = [row["version"] for row in conn.execute("SELECT version FROM migrations ORDER BY version")]
    finally:
        conn.close()
    assert versions == [version for version, _ in MIGRATIONS]


def test_relative_database_path_resolves_under_package(tmp_path) -> None:
    absolute = str(tmp_path / "x.db")
    assert get_database_path(absolute) == absolute
    assert get_database_path("relative.db").endswith("social_media_api/relative.db")


def test_account_store_round_trip(db_path) -> None:
    repo = SQLiteAccountRepository(db_path)

    saved = repo.save(Account(username="alice", password="pass1"))

    assert saved.account_id == 1
    assert repo.find_by_id(1) == saved
    assert repo.find_by_username("alice") == saved
    assert repo.find_by_username_and_password("alice", "pass1") == saved
    assert repo.find_by_username_and_password("alice", "wrong") is None
    assert repo.find_by_username("bob") is None
    assert repo.find_by_id(2) is None


def test_unique_username_enforced_by_store(db_path) -> None:
    repo = SQLiteAccountRepository(db_path)
    repo.save(Account(username="alice", password="pass1"))

    with pytest.raises(DuplicateResourceError) as excinfo:
        repo.save(Account(username="alice", password="other"))
    assert isinstance(excinfo.value.__cause__, sqlite3.IntegrityError)


def test_message_store_crud(db_path) -> None:
    accounts = SQLiteAccountRepository(db_path)
    alice = accounts.save(Account(username="alice", password="pass1"))
    bob = accounts.save(Account(username="bob", password="pass2"))
    repo = SQLiteMessageRepository(db_path)

    first = repo.save(Message(posted_by=alice.account_id, message_text="first"))
    second = repo.save(Message(posted_by=bob.account_id, message_text="second"))
    third = repo.save(Message(posted_by=alice.account_id, message_text="third"))

    assert [m.message_id for m in repo.find_all()] == [1, 2, 3]
    assert repo.find_by_posted_by(alice.account_id) == [first, third]
    assert repo.find_by_posted_by(99) == []

    updated = repo.save(second.model_copy(update={"message_text": "edited"}))
    assert updated.message_id == second.message_id
    assert repo.find_by_id(second.message_id).message_text == "edited"

    repo.delete_by_id(first.message_id)
    assert repo.find_by_id(first.message_id) is None
    assert len(repo.find_all()) == 2


def test_message_store_rejects_unknown_author(db_path) -> None:
    repo = SQLiteMessageRepository(db_path)

    with pytest.raises(sqlite3.IntegrityError):
        repo.save(Message(posted_by=42, message_text="orphan"))


def test_out_of_range_ids_find_nothing(db_path) -> None:
    accounts = SQLiteAccountRepository(db_path)
    alice = accounts.save(Account(username="alice", password="pass1"))
    repo = SQLiteMessageRepository(db_path)
    kept = repo.save(Message(posted_by=alice.account_id, message_text="kept"))

    assert accounts.find_by_id(2**63) is None
    assert repo.find_by_id(2**63) is None
    assert repo.find_by_posted_by(-(2**63) - 1) == []
    repo.delete_by_id(2**64)
    assert repo.find_all() == [kept]
