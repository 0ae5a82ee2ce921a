"""Domain entities representing in-app notifications and email attempts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class IconKind(str, Enum):
    """Icon shown next to a notification in the inbox."""

    ALERT = "shieldAlert"
    MESSAGE = "messageSquare"
    CHECK = "checkCircle"
    USER_PLUS = "userPlus"
    USER_CHECK = "userCheck"
    BELL = "bell"


class DeliveryStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class NotificationRecord:
    """Information message delivered to a specific user.

    Records are immutable once stored except for the ``read`` flag.
    """

    id: str | None
    user_id: str
    title: str
    description: str
    link: str
    icon_name: IconKind
    read: bool = False
    created_at: datetime | None = None


@dataclass
class DeliveryAttempt:
    """Audit row describing one outbound email attempt of a tenant."""

    id: str | None
    org_id: str
    to: str
    subject: str
    status: DeliveryStatus
    error: str | None = None
    sent_at: datetime | None = None


__all__ = ["DeliveryAttempt", "DeliveryStatus", "IconKind", "NotificationRecord"]
