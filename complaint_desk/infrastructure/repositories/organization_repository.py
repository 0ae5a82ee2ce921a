"""Persistence helpers for organizations, departments and categories."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from complaint_desk.domain.entities import Category, Department, Organization, SmtpSettings
from complaint_desk.infrastructure.models import (
    CategoryModel,
    DepartmentModel,
    OrganizationModel,
)
from complaint_desk.utils import from_storage


class OrganizationRepository:
    """Provide CRUD operations for :class:`Organization` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, org_id: str) -> Organization | None:
        model = self.session.get(OrganizationModel, org_id)
        return self._to_entity(model) if model else None

    def list(self) -> Sequence[Organization]:
        query = self.session.query(OrganizationModel).order_by(OrganizationModel.name.asc())
        return [self._to_entity(model) for model in query.all()]

    def create(self, organization: Organization) -> Organization:
        model = OrganizationModel()
        if organization.id is not None:
            model.id = organization.id
        self._apply_entity_to_model(model, organization)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, organization: Organization) -> Organization:
        model = self.session.get(OrganizationModel, organization.id) if organization.id else None
        if model is None:
            msg = f"Organization with id {organization.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, organization)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: OrganizationModel, organization: Organization) -> None:
        smtp = organization.smtp or SmtpSettings()
        model.name = organization.name
        model.owner_id = organization.owner_id
        model.theme = organization.theme
        model.smtp_host = smtp.host
        model.smtp_port = smtp.port
        model.smtp_user = smtp.user
        model.smtp_password = smtp.password

    @staticmethod
    def _to_entity(model: OrganizationModel) -> Organization:
        smtp = None
        if any((model.smtp_host, model.smtp_port, model.smtp_user, model.smtp_password)):
            smtp = SmtpSettings(
                host=model.smtp_host,
                port=model.smtp_port,
                user=model.smtp_user,
                password=model.smtp_password,
            )
        return Organization(
            id=model.id,
            name=model.name,
            owner_id=model.owner_id,
            theme=model.theme,
            smtp=smtp,
            created_at=from_storage(model.created_at),
        )


class DepartmentRepository:
    """Provide CRUD operations for departments scoped to an organization."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_org(self, org_id: str) -> Sequence[Department]:
        query = (
            self.session.query(DepartmentModel)
            .filter(DepartmentModel.org_id == org_id)
            .order_by(DepartmentModel.name.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, org_id: str, department_id: str) -> Department | None:
        model = self._get_model(org_id, department_id)
        return self._to_entity(model) if model else None

    def get_by_name(self, org_id: str, name: str) -> Department | None:
        model = (
            self.session.query(DepartmentModel)
            .filter(DepartmentModel.org_id == org_id, DepartmentModel.name == name)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, department: Department) -> Department:
        model = DepartmentModel(org_id=department.org_id)
        self._apply_entity_to_model(model, department)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, department: Department) -> Department:
        model = self._get_model(department.org_id, department.id)
        if model is None:
            msg = f"Department with id {department.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, department)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, org_id: str, department_id: str) -> None:
        model = self._get_model(org_id, department_id)
        if model is None:
            msg = f"Department with id {department_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def _get_model(self, org_id: str, department_id: str | None) -> DepartmentModel | None:
        if department_id is None:
            return None
        return (
            self.session.query(DepartmentModel)
            .filter(DepartmentModel.org_id == org_id, DepartmentModel.id == department_id)
            .first()
        )

    @staticmethod
    def _apply_entity_to_model(model: DepartmentModel, department: Department) -> None:
        model.name = department.name
        model.supervisor_id = department.supervisor_id
        model.supervisor_name = department.supervisor_name

    @staticmethod
    def _to_entity(model: DepartmentModel) -> Department:
        return Department(
            id=model.id,
            org_id=model.org_id,
            name=model.name,
            supervisor_id=model.supervisor_id,
            supervisor_name=model.supervisor_name,
            created_at=from_storage(model.created_at),
        )


class CategoryRepository:
    """Provide CRUD operations for ticket categories."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_org(self, org_id: str) -> Sequence[Category]:
        query = (
            self.session.query(CategoryModel)
            .filter(CategoryModel.org_id == org_id)
            .order_by(CategoryModel.name.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, org_id: str, category_id: str) -> Category | None:
        model = self._get_model(org_id, category_id)
        return self._to_entity(model) if model else None

    def create(self, category: Category) -> Category:
        model = CategoryModel(
            org_id=category.org_id,
            name=category.name,
            description=category.description,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, category: Category) -> Category:
        model = self._get_model(category.org_id, category.id)
        if model is None:
            msg = f"Category with id {category.id} not found"
            raise ValueError(msg)
        model.name = category.name
        model.description = category.description
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, org_id: str, category_id: str) -> None:
        model = self._get_model(org_id, category_id)
        if model is None:
            msg = f"Category with id {category_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def _get_model(self, org_id: str, category_id: str | None) -> CategoryModel | None:
        if category_id is None:
            return None
        return (
            self.session.query(CategoryModel)
            .filter(CategoryModel.org_id == org_id, CategoryModel.id == category_id)
            .first()
        )

    @staticmethod
    def _to_entity(model: CategoryModel) -> Category:
        return Category(
            id=model.id,
            org_id=model.org_id,
            name=model.name,
            description=model.description or "",
            created_at=from_storage(model.created_at),
        )


__all__ = ["CategoryRepository", "DepartmentRepository", "OrganizationRepository"]
