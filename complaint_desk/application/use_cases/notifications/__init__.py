"""Notification fan-out: classification, recipients, dispatch and inbox."""

from .classifier import NotificationTemplate, classify, preference_key_for
from .dispatcher import (
    TEXT_GENERATION_NOT_CONFIGURED,
    DispatchOutcome,
    DispatcherConfig,
    NotificationDispatcher,
)
from .events import (
    notify_ticket_comment,
    notify_ticket_created,
    notify_ticket_updated,
    notify_user_approved,
    notify_user_profile_updated,
    notify_user_registered,
)
from .inbox import MarkReadDebouncer, NotificationInbox, NotificationSubscription
from .ports import (
    ChangeFeed,
    DeliveryLog,
    Directory,
    EmailDraft,
    EmailDraftRequest,
    Mailer,
    NotificationStore,
    TextGenerator,
)

__all__ = [
    "ChangeFeed",
    "DeliveryLog",
    "Directory",
    "DispatchOutcome",
    "DispatcherConfig",
    "EmailDraft",
    "EmailDraftRequest",
    "Mailer",
    "MarkReadDebouncer",
    "NotificationDispatcher",
    "NotificationInbox",
    "NotificationStore",
    "NotificationSubscription",
    "NotificationTemplate",
    "TEXT_GENERATION_NOT_CONFIGURED",
    "TextGenerator",
    "classify",
    "notify_ticket_comment",
    "notify_ticket_created",
    "notify_ticket_updated",
    "notify_user_approved",
    "notify_user_profile_updated",
    "notify_user_registered",
    "preference_key_for",
]
