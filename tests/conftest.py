"""
Shared test configuration.

Settings are read from the environment once at import, so the database
location is pinned to a temporary directory before the application
package is imported anywhere.
"""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("DATABASE_URL", str(Path(tempfile.mkdtemp()) / "social_media_test.db"))
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest  # noqa: E402

from social_media_api.app.core.db import init_db  # noqa: E402
from social_media_api.app.services.account_service import AccountService  # noqa: E402
from social_media_api.app.services.message_service import MessageService  # noqa: E402
from tests.support import FakeAccountRepository, FakeMessageRepository  # noqa: E402


@pytest.fixture
def account_repository() -> FakeAccountRepository:
    return FakeAccountRepository()


@pytest.fixture
def message_repository() -> FakeMessageRepository:
    return FakeMessageRepository()


@pytest.fixture
def account_service(account_repository: FakeAccountRepository) -> AccountService:
    return AccountService(account_repository)


@pytest.fixture
def message_service(
    message_repository: FakeMessageRepository, account_service: AccountService
) -> MessageService:
    return MessageService(message_repository, account_service)


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    """Path of a freshly migrated SQLite database."""
    path = str(tmp_path / "social_media.db")
    init_db(path)
    return path
