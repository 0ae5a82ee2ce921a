"""Repository implementations for infrastructure layer."""

from .chat_repository import ChatRepository
from .notification_repository import EmailLogRepository, NotificationRepository
from .organization_repository import (
    CategoryRepository,
    DepartmentRepository,
    OrganizationRepository,
)
from .ticket_repository import CommentRepository, TicketRepository
from .user_repository import UserRepository

__all__ = [
    "CategoryRepository",
    "ChatRepository",
    "CommentRepository",
    "DepartmentRepository",
    "EmailLogRepository",
    "NotificationRepository",
    "OrganizationRepository",
    "TicketRepository",
    "UserRepository",
]
