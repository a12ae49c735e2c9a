"""
Top‑level router for version 1 of the API.

This router aggregates the domain‑specific routers.  Account routes
define their own paths (``/register``, ``/login``, ``/accounts/...``)
so they are included without a prefix.
"""

from fastapi import APIRouter

from .endpoints import accounts, messages

router = APIRouter()

router.include_router(accounts.router, tags=["accounts"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
