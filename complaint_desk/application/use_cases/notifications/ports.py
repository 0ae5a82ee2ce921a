"""Collaborator interfaces consumed by the notification core."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from complaint_desk.domain.entities import (
    DeliveryAttempt,
    Department,
    NotificationRecord,
    Organization,
    UserProfile,
)


class Directory(Protocol):
    """Read access to profiles, organizations and departments."""

    async def get_profile(self, user_id: str) -> UserProfile | None: ...

    async def get_organization(self, org_id: str) -> Organization | None: ...

    async def find_department_by_name(self, org_id: str, name: str) -> Department | None: ...

    async def list_users(self, org_id: str, *, role: str | None = None) -> Sequence[UserProfile]: ...


class NotificationStore(Protocol):
    """Storage for the in-app notification records of each user."""

    async def append(self, record: NotificationRecord) -> NotificationRecord: ...

    async def list_for_user(self, user_id: str) -> Sequence[NotificationRecord]: ...

    async def mark_all_read(self, user_id: str) -> int: ...

    async def mark_read(self, user_id: str, notification_id: str) -> bool: ...


class ChangeFeed(Protocol):
    """Per-user change signal raised after every committed notification write."""

    def listen(self, user_id: str) -> asyncio.Queue[None]: ...

    def forget(self, user_id: str, queue: asyncio.Queue[None]) -> None: ...

    def publish(self, user_id: str) -> None: ...


class DeliveryLog(Protocol):
    """Append-only audit of outbound email attempts.

    Implementations never raise.
    """

    async def append(self, org_id: str, attempt: DeliveryAttempt) -> None: ...


@dataclass(frozen=True)
class EmailDraftRequest:
    """Structured payload handed to the text generator."""

    notification_type: str
    user_name: str
    org_name: str
    ticket_id: str | None = None
    ticket_title: str | None = None
    commenter_name: str | None = None
    new_user_name: str | None = None


@dataclass(frozen=True)
class EmailDraft:
    subject: str
    body: str


class TextGenerator(Protocol):
    async def generate(self, request: EmailDraftRequest) -> EmailDraft: ...


class Mailer(Protocol):
    """Tenant-aware email sender.

    ``send`` records one delivery-log row per attempt and returns ``False``
    when the tenant has no mail credentials.
    """

    async def send(self, to: str, subject: str, html_body: str, org_id: str) -> bool: ...


__all__ = [
    "ChangeFeed",
    "DeliveryLog",
    "Directory",
    "EmailDraft",
    "EmailDraftRequest",
    "Mailer",
    "NotificationStore",
    "TextGenerator",
]
