"""Domain events that produce user notifications.

Each event names its recipient and tenant and carries only the fields needed to
describe it. The set of event types is closed: the classifier and the
preference mapping handle every type explicitly.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Union


@dataclass(frozen=True)
class _EventBase:
    kind: ClassVar[str]

    recipient_user_id: str
    org_id: str

    def payload(self) -> dict[str, Any]:
        """Return the event fields along with its ``kind`` tag."""

        data = asdict(self)
        data["notification_type"] = self.kind
        return data


@dataclass(frozen=True)
class NewUserPending(_EventBase):
    kind: ClassVar[str] = "newUserPending"

    new_user_name: str


@dataclass(frozen=True)
class TicketCreated(_EventBase):
    kind: ClassVar[str] = "ticketCreated"

    ticket_id: str
    ticket_title: str


@dataclass(frozen=True)
class TicketComment(_EventBase):
    kind: ClassVar[str] = "ticketComment"

    ticket_id: str
    ticket_title: str
    commenter_name: str


@dataclass(frozen=True)
class TicketResolved(_EventBase):
    kind: ClassVar[str] = "ticketResolved"

    ticket_id: str
    ticket_title: str


@dataclass(frozen=True)
class UserApproved(_EventBase):
    kind: ClassVar[str] = "userApproved"


@dataclass(frozen=True)
class TicketAssigned(_EventBase):
    kind: ClassVar[str] = "ticketAssigned"

    ticket_id: str
    ticket_title: str


@dataclass(frozen=True)
class UserProfileUpdated(_EventBase):
    kind: ClassVar[str] = "userProfileUpdated"


NotificationEvent = Union[
    NewUserPending,
    TicketCreated,
    TicketComment,
    TicketResolved,
    UserApproved,
    TicketAssigned,
    UserProfileUpdated,
]

EVENT_TYPES: tuple[type, ...] = (
    NewUserPending,
    TicketCreated,
    TicketComment,
    TicketResolved,
    UserApproved,
    TicketAssigned,
    UserProfileUpdated,
)


__all__ = [
    "EVENT_TYPES",
    "NewUserPending",
    "NotificationEvent",
    "TicketAssigned",
    "TicketComment",
    "TicketCreated",
    "TicketResolved",
    "UserApproved",
    "UserProfileUpdated",
]
