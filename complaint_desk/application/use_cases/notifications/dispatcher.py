"""Turn notification events into an in-app record and an optional email."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from complaint_desk.domain.entities import (
    DeliveryAttempt,
    DeliveryStatus,
    NotificationEvent,
    NotificationRecord,
    Organization,
    UserProfile,
)
from complaint_desk.utils import local_now

from .classifier import NotificationTemplate, classify, preference_key_for
from .ports import (
    DeliveryLog,
    Directory,
    EmailDraftRequest,
    Mailer,
    NotificationStore,
    TextGenerator,
)

logger = logging.getLogger(__name__)

TEXT_GENERATION_NOT_CONFIGURED = "text generation not configured"


@dataclass(frozen=True)
class DispatcherConfig:
    """Capabilities available to the dispatcher.

    ``email_enabled`` is false when no text generator is configured for the
    deployment; notification emails are then skipped and audited.
    """

    email_enabled: bool = False


@dataclass(frozen=True)
class DispatchOutcome:
    """Settled result of dispatching one event."""

    event: NotificationEvent
    record: NotificationRecord | None = None
    error: Exception | None = None

    @property
    def delivered(self) -> bool:
        return self.record is not None


class NotificationDispatcher:
    """Single entry point used by every workflow that notifies users.

    The email channel never raises: failures there are logged and audited in
    the delivery log. The in-app record is always attempted and a storage
    failure is the only error that reaches the caller of :meth:`dispatch`.
    """

    def __init__(
        self,
        *,
        directory: Directory,
        notifications: NotificationStore,
        delivery_log: DeliveryLog,
        mailer: Mailer,
        text_generator: TextGenerator | None = None,
        config: DispatcherConfig | None = None,
    ) -> None:
        self._directory = directory
        self._notifications = notifications
        self._delivery_log = delivery_log
        self._mailer = mailer
        self._text_generator = text_generator
        self._config = config or DispatcherConfig()

    @property
    def directory(self) -> Directory:
        return self._directory

    @property
    def email_available(self) -> bool:
        return self._config.email_enabled and self._text_generator is not None

    async def dispatch(self, event: NotificationEvent) -> NotificationRecord | None:
        """Deliver ``event`` to its recipient.

        Returns the stored record, or ``None`` when the recipient profile or
        the organization does not exist.
        """

        template = classify(event)

        profile = await self._directory.get_profile(event.recipient_user_id)
        if profile is None:
            logger.warning(
                "Skipping %s notification: user %s not found (organization %s)",
                event.kind,
                event.recipient_user_id,
                event.org_id,
            )
            return None

        organization = await self._directory.get_organization(event.org_id)
        if organization is None:
            logger.warning(
                "Skipping %s notification for user %s: organization %s not found",
                event.kind,
                event.recipient_user_id,
                event.org_id,
            )
            return None

        record = NotificationRecord(
            id=None,
            user_id=profile.id,
            title=template.title,
            description=template.description,
            link=template.link,
            icon_name=template.icon,
            read=False,
        )
        emailed, stored = await asyncio.gather(
            self._deliver_email(event, template, profile, organization),
            self._notifications.append(record),
            return_exceptions=True,
        )
        if isinstance(emailed, BaseException):
            logger.error(
                "Email delivery of %s notification to user %s in organization %s failed: %s",
                event.kind,
                profile.id,
                event.org_id,
                emailed,
                exc_info=emailed,
            )
        if isinstance(stored, BaseException):
            logger.error(
                "Failed to store %s notification for user %s in organization %s",
                event.kind,
                profile.id,
                event.org_id,
            )
            raise stored
        return stored

    async def dispatch_all(self, events: Iterable[NotificationEvent]) -> list[DispatchOutcome]:
        """Dispatch ``events`` concurrently and collect every outcome.

        One failing dispatch never cancels or affects its siblings.
        """

        pending = list(events)
        if not pending:
            return []

        results = await asyncio.gather(
            *(self.dispatch(event) for event in pending),
            return_exceptions=True,
        )

        outcomes: list[DispatchOutcome] = []
        for event, result in zip(pending, results):
            if isinstance(result, Exception):
                logger.error(
                    "Dispatching %s to user %s in organization %s failed: %s",
                    event.kind,
                    event.recipient_user_id,
                    event.org_id,
                    result,
                    exc_info=result,
                )
                outcomes.append(DispatchOutcome(event=event, error=result))
            elif isinstance(result, BaseException):
                raise result
            else:
                outcomes.append(DispatchOutcome(event=event, record=result))
        return outcomes

    async def _deliver_email(
        self,
        event: NotificationEvent,
        template: NotificationTemplate,
        profile: UserProfile,
        organization: Organization,
    ) -> None:
        if not profile.notification_preferences.allows(preference_key_for(event)):
            logger.debug(
                "User %s opted out of %s emails", profile.id, event.kind
            )
            return

        if not self.email_available:
            logger.info(
                "Text generation unavailable; %s email to user %s not sent",
                event.kind,
                profile.id,
            )
            await self._audit_failure(
                organization, profile, template.title, TEXT_GENERATION_NOT_CONFIGURED
            )
            return

        payload = event.payload()
        request = EmailDraftRequest(
            notification_type=event.kind,
            user_name=profile.name,
            org_name=organization.name,
            ticket_id=payload.get("ticket_id"),
            ticket_title=payload.get("ticket_title"),
            commenter_name=payload.get("commenter_name"),
            new_user_name=payload.get("new_user_name"),
        )

        try:
            draft = await self._text_generator.generate(request)
        except Exception as exc:
            logger.exception(
                "Drafting %s email for user %s in organization %s failed",
                event.kind,
                profile.id,
                organization.id,
            )
            await self._audit_failure(
                organization, profile, template.title, str(exc) or type(exc).__name__
            )
            return

        try:
            await self._mailer.send(
                profile.email,
                draft.subject or template.title,
                draft.body,
                organization.id,
            )
        except Exception:
            # The mailer already recorded the failed attempt.
            logger.exception(
                "Sending %s email to user %s in organization %s failed",
                event.kind,
                profile.id,
                organization.id,
            )

    async def _audit_failure(
        self,
        organization: Organization,
        profile: UserProfile,
        subject: str,
        error: str,
    ) -> None:
        attempt = DeliveryAttempt(
            id=None,
            org_id=organization.id,
            to=profile.email,
            subject=subject,
            status=DeliveryStatus.FAILURE,
            error=error,
            sent_at=local_now(),
        )
        try:
            await self._delivery_log.append(organization.id, attempt)
        except Exception:
            logger.exception(
                "Could not write delivery log entry for organization %s", organization.id
            )


__all__ = [
    "DispatchOutcome",
    "DispatcherConfig",
    "NotificationDispatcher",
    "TEXT_GENERATION_NOT_CONFIGURED",
]
