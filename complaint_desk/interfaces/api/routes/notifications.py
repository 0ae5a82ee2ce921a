"""Endpoints and websocket handler for in-app notifications."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

import anyio
from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect, status
from sqlalchemy.orm import Session

from complaint_desk.application.use_cases.notifications import (
    MarkReadDebouncer,
    NotificationInbox,
    NotificationSubscription,
)
from complaint_desk.config import get_settings
from complaint_desk.domain.entities import NotificationRecord, UserProfile
from complaint_desk.interfaces.api.dependencies import (
    get_current_active_user,
    get_inbox,
    get_session_factory,
    resolve_current_user,
)
from complaint_desk.interfaces.api.schemas import MarkAllReadResponse, NotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _to_payload(records: Sequence[NotificationRecord]) -> list[dict[str, Any]]:
    return [
        NotificationRead.model_validate(record).model_dump(mode="json", by_alias=True)
        for record in records
    ]


@router.get("/", response_model=list[NotificationRead], response_model_by_alias=True)
async def list_notifications(
    current_user: UserProfile = Depends(get_current_active_user),
    inbox: NotificationInbox = Depends(get_inbox),
):
    """Return the notifications of the authenticated user, newest first."""

    return await inbox.list(current_user.id)


@router.post("/read-all", response_model=MarkAllReadResponse)
async def mark_all_notifications_read(
    current_user: UserProfile = Depends(get_current_active_user),
    inbox: NotificationInbox = Depends(get_inbox),
):
    updated = await inbox.mark_all_read(current_user.id)
    return MarkAllReadResponse(updated=updated)


@router.post("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
async def mark_notification_read(
    notification_id: str,
    current_user: UserProfile = Depends(get_current_active_user),
    inbox: NotificationInbox = Depends(get_inbox),
) -> None:
    if not await inbox.mark_read(current_user.id, notification_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Notification not found",
        )


def _authenticate(token: str, session_factory: Callable[[], Session]) -> UserProfile:
    session = session_factory()
    try:
        user = resolve_current_user(token, session)
    finally:
        session.close()
    if not user.is_active():
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Inactive user")
    return user


async def _push_snapshots(websocket: WebSocket, subscription: NotificationSubscription) -> None:
    try:
        async for snapshot in subscription:
            await websocket.send_json({"type": "snapshot", "data": _to_payload(snapshot)})
    except WebSocketDisconnect:
        subscription.unsubscribe()


async def _receive_commands(
    websocket: WebSocket,
    user: UserProfile,
    inbox: NotificationInbox,
    debouncer: MarkReadDebouncer,
) -> None:
    """Handle client messages until the socket closes."""

    while True:
        try:
            message = await websocket.receive_json()
        except WebSocketDisconnect:
            return
        except ValueError:
            continue

        if not isinstance(message, dict):
            continue

        message_type = message.get("type")
        if message_type == "ping":
            await websocket.send_json({"type": "pong"})
        elif message_type == "open":
            debouncer.schedule(user.id)
        elif message_type == "close":
            debouncer.cancel()
        elif message_type == "mark_all_read":
            await inbox.mark_all_read(user.id)
        elif message_type == "mark_read":
            notification_id = message.get("id")
            if isinstance(notification_id, str):
                await inbox.mark_read(user.id, notification_id)


@router.websocket("/ws")
async def notifications_websocket(
    websocket: WebSocket,
    session_factory: Callable[[], Session] = Depends(get_session_factory),
    inbox: NotificationInbox = Depends(get_inbox),
) -> None:
    """Stream notification snapshots to the user owning ``token``.

    A snapshot is sent right away and again after every change. Sending
    ``{"type": "open"}`` marks everything read after a short delay.
    """

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=1008)
        return

    try:
        user = await anyio.to_thread.run_sync(_authenticate, token, session_factory)
    except HTTPException:
        await websocket.close(code=1008)
        return

    await websocket.accept()
    debouncer = MarkReadDebouncer(inbox, get_settings().notification_mark_read_delay_seconds)
    subscription = inbox.subscribe(user.id)
    try:
        async with anyio.create_task_group() as task_group:
            task_group.start_soon(_push_snapshots, websocket, subscription)
            await _receive_commands(websocket, user, inbox, debouncer)
            task_group.cancel_scope.cancel()
    finally:
        debouncer.cancel()
        subscription.unsubscribe()
        logger.debug("Notification socket closed for user %s", user.id)
