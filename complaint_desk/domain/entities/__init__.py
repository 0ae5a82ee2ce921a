"""Domain entities exposed by the application."""

from .chat import ChatMessage, ChatRoom
from .notification import DeliveryAttempt, DeliveryStatus, IconKind, NotificationRecord
from .notification_event import (
    EVENT_TYPES,
    NewUserPending,
    NotificationEvent,
    TicketAssigned,
    TicketComment,
    TicketCreated,
    TicketResolved,
    UserApproved,
    UserProfileUpdated,
)
from .organization import Category, Department, Organization, SmtpSettings
from .ticket import (
    TICKET_PRIORITIES,
    TICKET_STATUSES,
    TICKET_STATUS_IN_PROGRESS,
    TICKET_STATUS_OPEN,
    TICKET_STATUS_RESOLVED,
    Attachment,
    Comment,
    Ticket,
    TicketAnalysis,
)
from .user import (
    ROLES,
    ROLE_ADMIN,
    ROLE_EMPLOYEE,
    ROLE_SUPERVISOR,
    STATUSES,
    STATUS_ACTIVE,
    STATUS_INACTIVE,
    STATUS_PENDING,
    NotificationPreferences,
    PreferenceKey,
    UserProfile,
)

__all__ = [
    "Attachment",
    "Category",
    "ChatMessage",
    "ChatRoom",
    "Comment",
    "DeliveryAttempt",
    "DeliveryStatus",
    "Department",
    "EVENT_TYPES",
    "IconKind",
    "NewUserPending",
    "NotificationEvent",
    "NotificationPreferences",
    "NotificationRecord",
    "Organization",
    "PreferenceKey",
    "ROLES",
    "ROLE_ADMIN",
    "ROLE_EMPLOYEE",
    "ROLE_SUPERVISOR",
    "STATUSES",
    "STATUS_ACTIVE",
    "STATUS_INACTIVE",
    "STATUS_PENDING",
    "SmtpSettings",
    "TICKET_PRIORITIES",
    "TICKET_STATUSES",
    "TICKET_STATUS_IN_PROGRESS",
    "TICKET_STATUS_OPEN",
    "TICKET_STATUS_RESOLVED",
    "Ticket",
    "TicketAnalysis",
    "TicketAssigned",
    "TicketComment",
    "TicketCreated",
    "TicketResolved",
    "UserApproved",
    "UserProfile",
    "UserProfileUpdated",
]
