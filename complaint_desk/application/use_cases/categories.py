"""Use cases for managing ticket categories."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from sqlalchemy.orm import Session

from complaint_desk.domain.entities import Category
from complaint_desk.infrastructure.repositories import CategoryRepository

from .errors import EntityNotFoundError


def list_categories(session: Session, *, org_id: str) -> Sequence[Category]:
    return CategoryRepository(session).list_for_org(org_id)


def create_category(session: Session, *, org_id: str, name: str, description: str = "") -> Category:
    name = name.strip()
    if not name:
        raise ValueError("The category name is required")
    return CategoryRepository(session).create(
        Category(id=None, org_id=org_id, name=name, description=description.strip())
    )


def update_category(
    session: Session,
    *,
    org_id: str,
    category_id: str,
    name: str | None = None,
    description: str | None = None,
) -> Category:
    repository = CategoryRepository(session)
    current = repository.get(org_id, category_id)
    if current is None:
        raise EntityNotFoundError("Category not found")
    if name is not None and not name.strip():
        raise ValueError("The category name is required")
    updated = replace(
        current,
        name=name.strip() if name is not None else current.name,
        description=description.strip() if description is not None else current.description,
    )
    return repository.update(updated)


def delete_category(session: Session, *, org_id: str, category_id: str) -> None:
    repository = CategoryRepository(session)
    if repository.get(org_id, category_id) is None:
        raise EntityNotFoundError("Category not found")
    repository.delete(org_id, category_id)


__all__ = ["create_category", "delete_category", "list_categories", "update_category"]
