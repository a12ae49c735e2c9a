"""
Pydantic model for accounts.

Passwords are stored and returned exactly as supplied; there is no
hashing in this API.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel


class Account(CamelModel):
    """A registered user's credential record."""

    account_id: Optional[int] = Field(None, examples=[1])
    username: str = Field(..., examples=["alice"])
    password: str = Field(..., examples=["pass1"])
