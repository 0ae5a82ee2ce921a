"""Use cases for managing the members of an organization."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .change_status import approve_user, change_user_status, reject_user
from .get_user import get_user, list_organization_users
from .record_presence import is_online, record_presence
from .register_employee import register_employee
from .update_user import (
    change_password,
    update_notification_preferences,
    update_user_profile,
)

__all__ = [
    "AuthenticationStatus",
    "approve_user",
    "authenticate_user",
    "change_password",
    "change_user_status",
    "get_user",
    "is_online",
    "list_organization_users",
    "record_presence",
    "register_employee",
    "reject_user",
    "update_notification_preferences",
    "update_user_profile",
]
