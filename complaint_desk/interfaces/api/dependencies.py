"""FastAPI dependency utilities."""

from collections.abc import Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from complaint_desk.application.use_cases.mailer import TenantMailer
from complaint_desk.application.use_cases.notifications import (
    DispatcherConfig,
    NotificationDispatcher,
    NotificationInbox,
    TextGenerator,
)
from complaint_desk.config import get_settings
from complaint_desk.domain.entities import STATUS_INACTIVE, UserProfile
from complaint_desk.infrastructure.database import SessionLocal, get_db
from complaint_desk.infrastructure.email import SmtpMailTransport
from complaint_desk.infrastructure.notifications import (
    NotificationChangeBroker,
    SqlAlchemyDeliveryLog,
    SqlAlchemyDirectory,
    SqlAlchemyNotificationStore,
    notification_broker,
)
from complaint_desk.infrastructure.openai_client import (
    OpenAIConfigurationError,
    OpenAIEmailDrafter,
    OpenAITicketAnalyzer,
)
from complaint_desk.infrastructure.repositories import UserRepository
from complaint_desk.infrastructure.security import decode_access_token, password_signature

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def _credentials_exception(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> UserProfile:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_exception() from exc

    user_id = payload.get("sub")
    signature_claim = payload.get("pwd_sig")
    if not isinstance(user_id, str) or not isinstance(signature_claim, str):
        raise _credentials_exception()

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _credentials_exception("User not found")
    if signature_claim != password_signature(user):
        raise _credentials_exception()
    if user.status == STATUS_INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Your account has been suspended. Please contact your administrator.",
        )
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> UserProfile:
    """Return the authenticated user, pending approval or not."""

    return resolve_current_user(token, db)


def get_current_active_user(current_user: UserProfile = Depends(get_current_user)) -> UserProfile:
    """Ensure the authenticated user has been approved."""

    if not current_user.is_active():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Your account is pending approval",
        )
    return current_user


def require_admin(current_user: UserProfile = Depends(get_current_active_user)) -> UserProfile:
    """Ensure the authenticated user has administrator privileges."""

    if not current_user.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized",
        )
    return current_user


def get_session_factory() -> Callable[[], Session]:
    return SessionLocal


def get_notification_broker() -> NotificationChangeBroker:
    return notification_broker


def get_directory(
    session_factory: Callable[[], Session] = Depends(get_session_factory),
) -> SqlAlchemyDirectory:
    return SqlAlchemyDirectory(session_factory)


def get_notification_store(
    session_factory: Callable[[], Session] = Depends(get_session_factory),
    broker: NotificationChangeBroker = Depends(get_notification_broker),
) -> SqlAlchemyNotificationStore:
    return SqlAlchemyNotificationStore(session_factory, broker)


def get_delivery_log(
    session_factory: Callable[[], Session] = Depends(get_session_factory),
) -> SqlAlchemyDeliveryLog:
    return SqlAlchemyDeliveryLog(session_factory)


def get_mail_transport() -> SmtpMailTransport:
    return SmtpMailTransport(timeout=get_settings().smtp_timeout_seconds)


def get_text_generator() -> TextGenerator | None:
    """Return the email drafter, or ``None`` when no OpenAI key is configured."""

    if not get_settings().text_generation_enabled:
        return None
    return OpenAIEmailDrafter()


def get_ticket_analyzer() -> OpenAITicketAnalyzer:
    """Return a configured instance of :class:`OpenAITicketAnalyzer`."""

    try:
        return OpenAITicketAnalyzer()
    except OpenAIConfigurationError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exc),
        ) from exc


def get_tenant_mailer(
    directory: SqlAlchemyDirectory = Depends(get_directory),
    transport: SmtpMailTransport = Depends(get_mail_transport),
    delivery_log: SqlAlchemyDeliveryLog = Depends(get_delivery_log),
) -> TenantMailer:
    return TenantMailer(directory=directory, transport=transport, delivery_log=delivery_log)


def get_dispatcher(
    directory: SqlAlchemyDirectory = Depends(get_directory),
    store: SqlAlchemyNotificationStore = Depends(get_notification_store),
    delivery_log: SqlAlchemyDeliveryLog = Depends(get_delivery_log),
    mailer: TenantMailer = Depends(get_tenant_mailer),
    text_generator: TextGenerator | None = Depends(get_text_generator),
) -> NotificationDispatcher:
    return NotificationDispatcher(
        directory=directory,
        notifications=store,
        delivery_log=delivery_log,
        mailer=mailer,
        text_generator=text_generator,
        config=DispatcherConfig(email_enabled=text_generator is not None),
    )


def get_inbox(
    store: SqlAlchemyNotificationStore = Depends(get_notification_store),
    broker: NotificationChangeBroker = Depends(get_notification_broker),
) -> NotificationInbox:
    return NotificationInbox(store, broker)
