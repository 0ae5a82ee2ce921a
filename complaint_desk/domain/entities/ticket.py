"""Domain entities describing tickets and their conversation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

TICKET_STATUS_OPEN = "Open"
TICKET_STATUS_IN_PROGRESS = "In Progress"
TICKET_STATUS_RESOLVED = "Resolved"
TICKET_STATUSES: tuple[str, ...] = (
    TICKET_STATUS_OPEN,
    TICKET_STATUS_IN_PROGRESS,
    TICKET_STATUS_RESOLVED,
)

TICKET_PRIORITIES: tuple[str, ...] = ("Low", "Medium", "High", "Urgent")


@dataclass
class Attachment:
    """File reference stored by the external object storage."""

    name: str
    url: str


@dataclass
class Ticket:
    """Complaint filed by a member of an organization."""

    id: str | None
    org_id: str
    title: str
    description: str
    priority: str
    status: str
    is_public: bool
    department: str
    category: str
    reported_by_id: str
    reported_by_name: str
    attachments: list[Attachment] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_resolved(self) -> bool:
        return self.status == TICKET_STATUS_RESOLVED


@dataclass
class Comment:
    """Message posted on a ticket."""

    id: str | None
    ticket_id: str
    text: str
    author_id: str
    author_name: str
    attachments: list[Attachment] = field(default_factory=list)
    created_at: datetime | None = None


@dataclass(frozen=True)
class TicketAnalysis:
    """AI assistance produced for a ticket and its conversation."""

    summary: str
    analysis: str
    suggested_reply: str


__all__ = [
    "Attachment",
    "Comment",
    "TICKET_PRIORITIES",
    "TICKET_STATUSES",
    "TICKET_STATUS_IN_PROGRESS",
    "TICKET_STATUS_OPEN",
    "TICKET_STATUS_RESOLVED",
    "Ticket",
    "TicketAnalysis",
]
