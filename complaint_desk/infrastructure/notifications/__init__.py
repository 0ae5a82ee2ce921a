"""Notification adapters for the infrastructure layer."""

from .manager import NotificationChangeBroker, notification_broker
from .store import SqlAlchemyDeliveryLog, SqlAlchemyDirectory, SqlAlchemyNotificationStore

__all__ = [
    "NotificationChangeBroker",
    "SqlAlchemyDeliveryLog",
    "SqlAlchemyDirectory",
    "SqlAlchemyNotificationStore",
    "notification_broker",
]
