"""
Service layer for messages.

Messages must be posted by an existing account and carry between 1 and
255 characters of text.  Any caller may patch or delete any message;
there is no ownership check.
"""

import logging
from typing import List

from ..core.exceptions import InvalidRequestError, ResourceNotFoundError
from ..repositories.base import MessageRepository
from ..schemas.message import Message
from .account_service import AccountService

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 255


def _validate_text(message_text: str) -> None:
    if not message_text:
        raise InvalidRequestError("Message cannot be blank.")
    if len(message_text) > MAX_MESSAGE_LENGTH:
        raise InvalidRequestError("Message cannot be over 255 characters.")


class MessageService:
    """Service for creating, reading, patching and deleting messages."""

    def __init__(self, message_repository: MessageRepository, account_service: AccountService) -> None:
        self.message_repository = message_repository
        self.account_service = account_service

    def create_message(self, message: Message) -> Message:
        """Validate the author and text, then persist the message.

        A missing author is reported as an invalid request, not as a
        missing resource.
        """
        try:
            self.account_service.get_user_by_id(message.posted_by)
        except ResourceNotFoundError as exc:
            raise InvalidRequestError("Message needs to be posted by a valid user.") from exc

        _validate_text(message.message_text)

        saved = self.message_repository.save(message.model_copy(update={"message_id": None}))
        logger.info("Account %s posted message %s", saved.posted_by, saved.message_id)
        return saved

    def get_message_by_id(self, message_id: int) -> Message:
        message = self.message_repository.find_by_id(message_id)
        if message is None:
            raise ResourceNotFoundError("Message with this ID does not exist")
        return message

    def get_messages(self) -> List[Message]:
        return self.message_repository.find_all()

    def delete_message(self, message_id: int) -> int:
        """Delete a message and return the number of rows removed (1 or 0)."""
        if self.message_repository.find_by_id(message_id) is None:
            return 0
        self.message_repository.delete_by_id(message_id)
        logger.info("Deleted message %s", message_id)
        return 1

    def patch_message(self, message_id: int, message: Message) -> None:
        """Replace the text of an existing message.

        An unknown id is an invalid request here, unlike
        ``get_message_by_id`` which reports it as not found.
        """
        message_to_update = self.message_repository.find_by_id(message_id)
        if message_to_update is None:
            raise InvalidRequestError(
                "Cannot update a message with this ID because it does not exist."
            )

        _validate_text(message.message_text)

        self.message_repository.save(
            message_to_update.model_copy(update={"message_text": message.message_text})
        )
        logger.info("Updated text of message %s", message_id)

    def get_messages_by_account_id(self, account_id: int) -> List[Message]:
        return self.message_repository.find_by_posted_by(account_id)
