"""In-memory collaborators for exercising the notification core."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from itertools import count

from complaint_desk.application.use_cases.notifications import EmailDraft, EmailDraftRequest
from complaint_desk.domain.entities import (
    ROLE_ADMIN,
    ROLE_EMPLOYEE,
    STATUS_ACTIVE,
    Department,
    NotificationPreferences,
    NotificationRecord,
    Organization,
    SmtpSettings,
    UserProfile,
)
from complaint_desk.infrastructure.email import MailTransportError

ORG_ID = "org-1"


def make_profile(
    user_id: str,
    *,
    org_id: str = ORG_ID,
    role: str = ROLE_EMPLOYEE,
    preferences: NotificationPreferences | None = None,
    department: str | None = "General",
) -> UserProfile:
    return UserProfile(
        id=user_id,
        org_id=org_id,
        email=f"{user_id}@example.com",
        name=f"User {user_id}",
        password="hashed",
        role=role,
        status=STATUS_ACTIVE,
        department=department,
        notification_preferences=preferences or NotificationPreferences.for_role(role),
    )


def make_admin(user_id: str, **kwargs) -> UserProfile:
    return make_profile(user_id, role=ROLE_ADMIN, **kwargs)


def make_organization(org_id: str = ORG_ID, *, with_smtp: bool = True) -> Organization:
    smtp = SmtpSettings(host="smtp.example.com", port="587", user="mailer", password="secret")
    return Organization(
        id=org_id,
        name="Acme",
        owner_id="admin-1",
        smtp=smtp if with_smtp else None,
    )


class FakeDirectory:
    def __init__(self, profiles=(), organizations=(), departments=(), broken_profiles=()):
        self.profiles = {profile.id: profile for profile in profiles}
        self.organizations = {organization.id: organization for organization in organizations}
        self.departments = list(departments)
        self.broken_profiles = set(broken_profiles)

    async def get_profile(self, user_id: str) -> UserProfile | None:
        if user_id in self.broken_profiles:
            raise ConnectionError(f"profile lookup failed for {user_id}")
        return self.profiles.get(user_id)

    async def get_organization(self, org_id: str) -> Organization | None:
        return self.organizations.get(org_id)

    async def find_department_by_name(self, org_id: str, name: str) -> Department | None:
        for department in self.departments:
            if department.org_id == org_id and department.name == name:
                return department
        return None

    async def list_users(self, org_id: str, *, role: str | None = None):
        return [
            profile
            for profile in self.profiles.values()
            if profile.org_id == org_id and (role is None or profile.role == role)
        ]


class InMemoryNotificationStore:
    """Notification store that signals ``changes`` after every write."""

    def __init__(self, changes=None, *, failing_users=()):
        self.records: list[NotificationRecord] = []
        self._changes = changes
        self._failing_users = set(failing_users)
        self._ids = count(1)
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    async def append(self, record: NotificationRecord) -> NotificationRecord:
        if record.user_id in self._failing_users:
            raise RuntimeError("notification storage unavailable")
        sequence = next(self._ids)
        stored = replace(
            record,
            id=f"notification-{sequence}",
            created_at=self._clock + timedelta(seconds=sequence),
        )
        self.records.append(stored)
        self._publish(record.user_id)
        return stored

    async def list_for_user(self, user_id: str) -> list[NotificationRecord]:
        records = [record for record in self.records if record.user_id == user_id]
        return sorted(records, key=lambda record: record.created_at, reverse=True)

    async def mark_all_read(self, user_id: str) -> int:
        updated = 0
        for index, record in enumerate(self.records):
            if record.user_id == user_id and not record.read:
                self.records[index] = replace(record, read=True)
                updated += 1
        if updated:
            self._publish(user_id)
        return updated

    async def mark_read(self, user_id: str, notification_id: str) -> bool:
        for index, record in enumerate(self.records):
            if record.id == notification_id and record.user_id == user_id and not record.read:
                self.records[index] = replace(record, read=True)
                self._publish(user_id)
                return True
        return False

    def _publish(self, user_id: str) -> None:
        if self._changes is not None:
            self._changes.publish(user_id)


class RecordingDeliveryLog:
    def __init__(self):
        self.attempts = []

    async def append(self, org_id, attempt) -> None:
        self.attempts.append(replace(attempt, org_id=org_id))


class FakeTransport:
    """Mail transport that records messages or fails on demand."""

    def __init__(self, *, error: Exception | None = None):
        self.sent = []
        self._error = error

    async def send(self, email, smtp) -> None:
        if self._error is not None:
            raise MailTransportError(str(self._error)) from self._error
        self.sent.append(email)


class StubTextGenerator:
    def __init__(self, *, error: Exception | None = None):
        self.requests: list[EmailDraftRequest] = []
        self._error = error

    async def generate(self, request: EmailDraftRequest) -> EmailDraft:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return EmailDraft(
            subject=f"Update for {request.user_name}",
            body=f"<p>Hello {request.user_name}</p>",
        )
