"""Persistence layer for user profiles."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from complaint_desk.domain.entities import NotificationPreferences, UserProfile
from complaint_desk.infrastructure.models import UserModel
from complaint_desk.utils import from_storage, to_storage


class UserRepository:
    """Provide CRUD operations for :class:`UserProfile` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: str) -> UserProfile | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> UserProfile | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.email == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def list_for_org(
        self,
        org_id: str,
        *,
        role: str | None = None,
        status: str | None = None,
    ) -> Sequence[UserProfile]:
        query = self.session.query(UserModel).filter(UserModel.org_id == org_id)
        if role is not None:
            query = query.filter(UserModel.role == role)
        if status is not None:
            query = query.filter(UserModel.status == status)
        query = query.order_by(UserModel.created_at.asc(), UserModel.id.asc())
        return [self._to_entity(model) for model in query.all()]

    def create(self, user: UserProfile) -> UserProfile:
        model = UserModel()
        if user.id is not None:
            model.id = user.id
        self._apply_entity_to_model(model, user)
        if user.created_at is not None:
            model.created_at = to_storage(user.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: UserProfile) -> UserProfile:
        model = self.session.get(UserModel, user.id) if user.id else None
        if model is None:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: UserProfile) -> None:
        preferences = user.notification_preferences or NotificationPreferences()
        model.org_id = user.org_id
        model.email = user.email.strip().lower()
        model.name = user.name
        model.password = user.password
        model.role = user.role
        model.status = user.status
        model.department = user.department
        model.phone = user.phone
        model.pref_ticket_updates = preferences.ticket_updates
        model.pref_new_comments = preferences.new_comments
        model.pref_user_approvals = preferences.user_approvals
        model.last_seen = to_storage(user.last_seen)

    @staticmethod
    def _to_entity(model: UserModel) -> UserProfile:
        return UserProfile(
            id=model.id,
            org_id=model.org_id,
            email=model.email,
            name=model.name,
            password=model.password,
            role=model.role,
            status=model.status,
            department=model.department,
            phone=model.phone,
            notification_preferences=NotificationPreferences(
                ticket_updates=model.pref_ticket_updates,
                new_comments=model.pref_new_comments,
                user_approvals=model.pref_user_approvals,
            ),
            created_at=from_storage(model.created_at),
            last_seen=from_storage(model.last_seen),
        )


__all__ = ["UserRepository"]
