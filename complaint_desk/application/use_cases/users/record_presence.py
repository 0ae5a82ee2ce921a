"""Use case for the presence heartbeat."""

from dataclasses import replace
from datetime import timedelta

from sqlalchemy.orm import Session

from complaint_desk.domain.entities import UserProfile
from complaint_desk.infrastructure.repositories import UserRepository
from complaint_desk.utils import local_now


def record_presence(session: Session, user_id: str) -> UserProfile | None:
    """Store the current time as the last time ``user_id`` was seen."""

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        return None
    return repository.update(replace(user, last_seen=local_now()))


def is_online(user: UserProfile, threshold_seconds: int) -> bool:
    return user.is_online(local_now(), timedelta(seconds=threshold_seconds))
