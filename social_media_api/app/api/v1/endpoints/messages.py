"""
Message endpoints for API v1.

Create, list, fetch, patch and delete messages.  Fetching or deleting a
message that does not exist is not an error: the response is 200 with
an empty body.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Response, status

from social_media_api.app.api.dependencies import get_message_service
from social_media_api.app.core.exceptions import ResourceNotFoundError
from social_media_api.app.schemas.message import Message
from social_media_api.app.services.message_service import MessageService

router = APIRouter()


@router.post("", response_model=Message)
def create_message(message: Message, service: MessageService = Depends(get_message_service)) -> Message:
    """Create a message; 400 if the author or the text is invalid."""
    return service.create_message(message)


@router.get("", response_model=List[Message])
def get_messages(service: MessageService = Depends(get_message_service)) -> List[Message]:
    return service.get_messages()


@router.get("/{message_id}", response_model=Optional[Message])
def get_message_by_id(
    message_id: int,
    service: MessageService = Depends(get_message_service),
) -> Union[Message, Response]:
    """Return the message, or an empty 200 response if it does not exist."""
    try:
        return service.get_message_by_id(message_id)
    except ResourceNotFoundError:
        # Not found is reported as an empty body here, never as 401.
        return Response(status_code=status.HTTP_200_OK)


@router.delete("/{message_id}", response_model=Optional[int])
def delete_message(
    message_id: int,
    service: MessageService = Depends(get_message_service),
) -> Union[int, Response]:
    """Delete a message; the body is ``1`` on success and empty otherwise."""
    if service.delete_message(message_id) == 1:
        return 1
    return Response(status_code=status.HTTP_200_OK)


@router.patch("/{message_id}", response_model=int)
def patch_message(
    message_id: int,
    message: Message,
    service: MessageService = Depends(get_message_service),
) -> int:
    """Replace the text of a message; 400 if the id or the text is invalid."""
    service.patch_message(message_id, message)
    return 1
