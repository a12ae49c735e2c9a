"""
Pydantic model for messages.

``posted_by`` is optional on input so that a missing author reaches the
service and is reported as an invalid user rather than a schema error.
The PATCH endpoint only reads ``message_text``.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel


class Message(CamelModel):
    """A short text posted by an account."""

    message_id: Optional[int] = Field(None, examples=[1])
    posted_by: Optional[int] = Field(None, examples=[1])
    message_text: str = Field(..., examples=["Hello world"])
