"""UserRole and RoleAccess ORM models (RBAC join tables)."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from contact_manager.infrastructure.persistence.database import Base
from contact_manager.infrastructure.persistence.models.mixins import TimestampMixin


class UserRole(TimestampMixin, Base):
    """Many-to-many user-role. Table: user_roles. PK (user_id, role_id)."""

    __tablename__ = "user_roles"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        primary_key=True,
    )
    role_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("roles.role_id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    expiry_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )


class RoleAccess(TimestampMixin, Base):
    """Many-to-many role-access. Table: access_role. PK (role_id, access_id)."""

    __tablename__ = "access_role"

    role_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("roles.role_id", ondelete="CASCADE"),
        primary_key=True,
    )
    access_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("access.access_id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
