"""Domain entities describing user profiles and their preferences."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum

ROLE_ADMIN = "admin"
ROLE_SUPERVISOR = "supervisor"
ROLE_EMPLOYEE = "employee"
ROLES: tuple[str, ...] = (ROLE_ADMIN, ROLE_SUPERVISOR, ROLE_EMPLOYEE)

STATUS_ACTIVE = "active"
STATUS_PENDING = "pending"
STATUS_INACTIVE = "inactive"
STATUSES: tuple[str, ...] = (STATUS_ACTIVE, STATUS_PENDING, STATUS_INACTIVE)


class PreferenceKey(str, Enum):
    """Preference flags that gate notification emails."""

    TICKET_UPDATES = "ticket_updates"
    NEW_COMMENTS = "new_comments"
    USER_APPROVALS = "user_approvals"


@dataclass
class NotificationPreferences:
    """Per-user switches for notification emails.

    ``None`` means the user never set the flag. Ticket updates and new comments
    default to enabled; user approvals default to disabled because only admins
    receive them and admins get the flag explicitly at creation time.
    """

    ticket_updates: bool | None = None
    new_comments: bool | None = None
    user_approvals: bool | None = None

    def allows(self, key: PreferenceKey) -> bool:
        """Return whether emails for ``key`` should be sent."""

        if key is PreferenceKey.TICKET_UPDATES:
            return True if self.ticket_updates is None else self.ticket_updates
        if key is PreferenceKey.NEW_COMMENTS:
            return True if self.new_comments is None else self.new_comments
        if key is PreferenceKey.USER_APPROVALS:
            return bool(self.user_approvals)
        raise TypeError(f"Unknown preference key: {key!r}")

    @classmethod
    def for_role(cls, role: str) -> "NotificationPreferences":
        """Return the preferences assigned to a freshly created profile."""

        if role == ROLE_ADMIN:
            return cls(ticket_updates=True, new_comments=True, user_approvals=True)
        return cls(ticket_updates=True, new_comments=True)


@dataclass
class UserProfile:
    """Core attributes describing a member of an organization."""

    id: str | None
    org_id: str
    email: str
    name: str
    password: str
    role: str
    status: str
    department: str | None = None
    phone: str | None = None
    notification_preferences: NotificationPreferences = field(
        default_factory=NotificationPreferences
    )
    created_at: datetime | None = None
    last_seen: datetime | None = None

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.role == ROLE_ADMIN

    def is_supervisor(self) -> bool:
        return self.role == ROLE_SUPERVISOR

    def is_active(self) -> bool:
        return self.status == STATUS_ACTIVE

    def is_online(self, now: datetime, threshold: timedelta) -> bool:
        """Approximate presence: the last heartbeat is younger than ``threshold``."""

        if self.last_seen is None:
            return False
        return now - self.last_seen < threshold


__all__ = [
    "NotificationPreferences",
    "PreferenceKey",
    "ROLES",
    "ROLE_ADMIN",
    "ROLE_EMPLOYEE",
    "ROLE_SUPERVISOR",
    "STATUSES",
    "STATUS_ACTIVE",
    "STATUS_INACTIVE",
    "STATUS_PENDING",
    "UserProfile",
]
