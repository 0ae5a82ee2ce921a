"""SQLAlchemy models for organizations, departments and categories."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, UniqueConstraint

from complaint_desk.infrastructure.database import Base
from complaint_desk.utils import new_id, storage_now


class OrganizationModel(Base):
    """Database representation of a tenant and its mail credentials."""

    __tablename__ = "organization"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(120), nullable=False)
    owner_id = Column(String(32), nullable=True)
    theme = Column(String(30), nullable=False, default="green")
    smtp_host = Column(String(255), nullable=True)
    smtp_port = Column(String(10), nullable=True)
    smtp_user = Column(String(255), nullable=True)
    smtp_password = Column(String(255), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=storage_now)


class DepartmentModel(Base):
    __tablename__ = "department"
    __table_args__ = (UniqueConstraint("org_id", "name", name="uq_department_org_name"),)

    id = Column(String(32), primary_key=True, default=new_id)
    org_id = Column(String(32), ForeignKey("organization.id"), nullable=False, index=True)
    name = Column(String(120), nullable=False)
    supervisor_id = Column(String(32), nullable=True)
    supervisor_name = Column(String(120), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=storage_now)


class CategoryModel(Base):
    __tablename__ = "category"

    id = Column(String(32), primary_key=True, default=new_id)
    org_id = Column(String(32), ForeignKey("organization.id"), nullable=False, index=True)
    name = Column(String(120), nullable=False)
    description = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(), nullable=False, default=storage_now)


__all__ = ["CategoryModel", "DepartmentModel", "OrganizationModel"]
