"""Endpoints for direct messages between members."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from complaint_desk.application.use_cases.chats import (
    get_or_create_chat_room,
    list_chat_messages,
    list_chat_rooms,
    send_chat_message,
)
from complaint_desk.domain.entities import Attachment, UserProfile
from complaint_desk.infrastructure.database import get_db
from complaint_desk.interfaces.api.dependencies import get_current_active_user
from complaint_desk.interfaces.api.routes_helpers import USE_CASE_ERRORS, http_error_from
from complaint_desk.interfaces.api.schemas import (
    ChatMessageCreate,
    ChatMessageRead,
    ChatRoomCreate,
    ChatRoomRead,
)

router = APIRouter(prefix="/chats", tags=["chats"])


@router.get("/", response_model=list[ChatRoomRead])
def read_chat_rooms(
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    """Return the conversations of the user, most recent activity first."""

    return list_chat_rooms(db, user=current_user)


@router.post("/", response_model=ChatRoomRead)
def open_chat_room(
    payload: ChatRoomCreate,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    try:
        return get_or_create_chat_room(db, user=current_user, other_user_id=payload.user_id)
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc


@router.get("/{room_id}/messages", response_model=list[ChatMessageRead])
def read_chat_messages(
    room_id: str,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    try:
        return list_chat_messages(db, user=current_user, room_id=room_id)
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc


@router.post(
    "/{room_id}/messages", response_model=ChatMessageRead, status_code=status.HTTP_201_CREATED
)
def create_chat_message(
    room_id: str,
    payload: ChatMessageCreate,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    attachments = [Attachment(name=item.name, url=item.url) for item in payload.attachments]
    try:
        return send_chat_message(
            db,
            sender=current_user,
            room_id=room_id,
            text=payload.text,
            attachments=attachments,
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc
