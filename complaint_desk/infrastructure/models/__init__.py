"""ORM models used by the application infrastructure."""

from .chat import ChatMessageModel, ChatRoomModel
from .notification import EmailLogModel, NotificationModel
from .organization import CategoryModel, DepartmentModel, OrganizationModel
from .ticket import CommentModel, TicketModel
from .user import UserModel

__all__ = [
    "CategoryModel",
    "ChatMessageModel",
    "ChatRoomModel",
    "CommentModel",
    "DepartmentModel",
    "EmailLogModel",
    "NotificationModel",
    "OrganizationModel",
    "TicketModel",
    "UserModel",
]
