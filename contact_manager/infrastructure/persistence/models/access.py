"""Access (permission) ORM model. Table: access."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from contact_manager.infrastructure.persistence.database import Base
from contact_manager.infrastructure.persistence.models.mixins import TimestampMixin


class Access(TimestampMixin, Base):
    """Access. Unique access_name (e.g. 'contact:read')."""

    __tablename__ = "access"

    id: Mapped[int] = mapped_column(
        "access_id", Integer, primary_key=True, autoincrement=True
    )
    name: Mapped[str] = mapped_column(
        "access_name", String(255), nullable=False, unique=True
    )
