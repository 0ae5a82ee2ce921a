"""Helpers used by workflows to notify users after a committed change.

Every helper resolves the recipients, fans the events out through the
dispatcher and never raises: notification problems are logged only.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Sequence

from complaint_desk.domain.entities import NotificationEvent, Ticket, UserProfile

from . import recipients
from .dispatcher import DispatchOutcome, NotificationDispatcher

logger = logging.getLogger(__name__)


async def _fan_out(
    dispatcher: NotificationDispatcher,
    resolving: Awaitable[Sequence[NotificationEvent]] | Sequence[NotificationEvent],
    context: str,
) -> list[DispatchOutcome]:
    try:
        if isinstance(resolving, Awaitable):
            events = await resolving
        else:
            events = resolving
        return await dispatcher.dispatch_all(events)
    except Exception:
        logger.exception("Notification fan-out failed for %s", context)
        return []


async def notify_ticket_created(
    dispatcher: NotificationDispatcher, *, ticket: Ticket
) -> list[DispatchOutcome]:
    return await _fan_out(
        dispatcher,
        recipients.for_ticket_created(dispatcher.directory, ticket),
        f"new ticket {ticket.id}",
    )


async def notify_ticket_comment(
    dispatcher: NotificationDispatcher,
    *,
    ticket: Ticket,
    author_id: str,
    author_name: str,
) -> list[DispatchOutcome]:
    return await _fan_out(
        dispatcher,
        recipients.for_ticket_comment(ticket, author_id, author_name),
        f"comment on ticket {ticket.id}",
    )


async def notify_ticket_updated(
    dispatcher: NotificationDispatcher, *, before: Ticket, after: Ticket
) -> list[DispatchOutcome]:
    return await _fan_out(
        dispatcher,
        recipients.for_ticket_updated(dispatcher.directory, before, after),
        f"update of ticket {before.id}",
    )


async def notify_user_registered(
    dispatcher: NotificationDispatcher, *, user: UserProfile
) -> list[DispatchOutcome]:
    return await _fan_out(
        dispatcher,
        recipients.for_user_registered(dispatcher.directory, user),
        f"registration of user {user.id}",
    )


async def notify_user_approved(
    dispatcher: NotificationDispatcher, *, user: UserProfile
) -> list[DispatchOutcome]:
    return await _fan_out(
        dispatcher, recipients.for_user_approved(user), f"approval of user {user.id}"
    )


async def notify_user_profile_updated(
    dispatcher: NotificationDispatcher, *, before: UserProfile, after: UserProfile
) -> list[DispatchOutcome]:
    return await _fan_out(
        dispatcher,
        recipients.for_user_profile_updated(before, after),
        f"profile update of user {after.id}",
    )


__all__ = [
    "notify_ticket_comment",
    "notify_ticket_created",
    "notify_ticket_updated",
    "notify_user_approved",
    "notify_user_profile_updated",
    "notify_user_registered",
]
