"""Domain entities describing tenants and their structure."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

DEFAULT_SMTP_PORT = 587
IMPLICIT_TLS_PORT = 465


@dataclass
class SmtpSettings:
    """Mail server credentials configured by a tenant."""

    host: str | None = None
    port: str | None = None
    user: str | None = None
    password: str | None = None

    def is_configured(self) -> bool:
        """Return ``True`` when host, user and password are all present."""

        return bool(self.host and self.user and self.password)

    def resolved_port(self) -> int:
        try:
            port = int(self.port or DEFAULT_SMTP_PORT)
        except (TypeError, ValueError):
            return DEFAULT_SMTP_PORT
        return port or DEFAULT_SMTP_PORT

    def use_implicit_tls(self) -> bool:
        return self.resolved_port() == IMPLICIT_TLS_PORT


@dataclass
class Organization:
    """Isolation boundary for users, departments, tickets and mail settings."""

    id: str | None
    name: str
    owner_id: str | None = None
    theme: str = "green"
    smtp: SmtpSettings | None = None
    created_at: datetime | None = None

    def has_mail_transport(self) -> bool:
        return self.smtp is not None and self.smtp.is_configured()


@dataclass
class Department:
    """Unit of an organization that owns tickets and may have a supervisor."""

    id: str | None
    org_id: str
    name: str
    supervisor_id: str | None = None
    supervisor_name: str | None = None
    created_at: datetime | None = None


@dataclass
class Category:
    """Classification applied to tickets."""

    id: str | None
    org_id: str
    name: str
    description: str = ""
    created_at: datetime | None = None


__all__ = ["Category", "Department", "Organization", "SmtpSettings"]
