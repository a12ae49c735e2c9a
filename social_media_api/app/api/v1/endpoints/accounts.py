"""
Account endpoints for API v1.

Provide registration, login and the per‑account message listing.
Login answers with the stored account itself; there are no tokens.
"""

from typing import List

from fastapi import APIRouter, Depends

from social_media_api.app.api.dependencies import get_account_service, get_message_service
from social_media_api.app.schemas.account import Account
from social_media_api.app.schemas.message import Message
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService

router = APIRouter()


@router.post("/register", response_model=Account)
def register(account: Account, service: AccountService = Depends(get_account_service)) -> Account:
    """Register a new account.

    Answers 400 for a blank username or a password shorter than four
    characters and 409 when the username is taken.
    """
    return service.register(account)


@router.post("/login", response_model=Account)
def login(account: Account, service: AccountService = Depends(get_account_service)) -> Account:
    """Return the account matching the given credentials, or 401."""
    return service.login(account)


@router.get("/accounts/{account_id}/messages", response_model=List[Message])
def get_messages_from_account(
    account_id: int,
    service: MessageService = Depends(get_message_service),
) -> List[Message]:
    """List messages posted by an account (empty for unknown accounts)."""
    return service.get_messages_by_account_id(account_id)
