"""Use case for broadcasting an email to selected members."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from complaint_desk.application.use_cases.notifications.ports import Directory

from .tenant_mailer import TenantMailer

logger = logging.getLogger(__name__)


@dataclass
class CustomEmailResult:
    sent: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


def format_email_body(body: str) -> str:
    """Wrap plain text in a paragraph and keep its line breaks."""

    if body.strip().startswith("<"):
        return body
    return "<p>" + body.replace("\n", "<br>") + "</p>"


async def send_custom_email(
    mailer: TenantMailer,
    directory: Directory,
    *,
    org_id: str,
    recipient_ids: Sequence[str],
    subject: str,
    body: str,
) -> CustomEmailResult:
    """Send ``subject``/``body`` to every recipient of the organization.

    Recipients that do not exist in the organization are skipped. One failed
    delivery does not stop the others.
    """

    if not org_id:
        raise ValueError("Organization ID is required to send an email.")
    unique_ids = list(dict.fromkeys(recipient_ids))
    if not unique_ids:
        raise ValueError("At least one recipient must be selected.")
    if not subject.strip():
        raise ValueError("The subject is required.")

    html_body = format_email_body(body)
    result = CustomEmailResult()

    profiles = await asyncio.gather(*(directory.get_profile(uid) for uid in unique_ids))
    targets = []
    for uid, profile in zip(unique_ids, profiles):
        if profile is None or profile.org_id != org_id or not profile.email:
            logger.warning("Could not find email for user %s. Skipping.", uid)
            result.skipped.append(uid)
            continue
        targets.append(profile)

    outcomes = await asyncio.gather(
        *(mailer.send(profile.email, subject, html_body, org_id) for profile in targets),
        return_exceptions=True,
    )
    for profile, outcome in zip(targets, outcomes):
        if outcome is True:
            result.sent.append(profile.id)
        else:
            result.failed.append(profile.id)
    return result


__all__ = ["CustomEmailResult", "format_email_body", "send_custom_email"]
