"""Role ORM model. Table: roles."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from contact_manager.infrastructure.persistence.database import Base
from contact_manager.infrastructure.persistence.models.mixins import TimestampMixin


class Role(TimestampMixin, Base):
    """Role. Unique role_name."""

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(
        "role_id", Integer, primary_key=True, autoincrement=True
    )
    name: Mapped[str] = mapped_column(
        "role_name", String(255), nullable=False, unique=True
    )
