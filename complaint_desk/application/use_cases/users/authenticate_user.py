"""Use case for authenticating a user."""

from enum import Enum, auto

from sqlalchemy.orm import Session

from complaint_desk.domain.entities import STATUS_INACTIVE, STATUS_PENDING
from complaint_desk.infrastructure.repositories import UserRepository
from complaint_desk.infrastructure.security import verify_password


class AuthenticationStatus(Enum):
    """Possible outcomes when attempting to authenticate a user."""

    SUCCESS = auto()
    INVALID_CREDENTIALS = auto()
    INACTIVE = auto()
    PENDING_APPROVAL = auto()


def authenticate_user(session: Session, email: str, password: str):
    """Return the authentication result along with the user when possible.

    Pending users may sign in; the client routes them to the approval page.
    """

    repository = UserRepository(session)
    user = repository.get_by_email(email)

    if not user:
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    if not verify_password(password, user.password):
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    if user.status == STATUS_INACTIVE:
        return user, AuthenticationStatus.INACTIVE

    if user.status == STATUS_PENDING:
        return user, AuthenticationStatus.PENDING_APPROVAL

    return user, AuthenticationStatus.SUCCESS
