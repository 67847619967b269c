"""User ORM model for authentication. Table: users."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from contact_manager.infrastructure.persistence.database import Base
from contact_manager.infrastructure.persistence.models.mixins import TimestampMixin


class User(TimestampMixin, Base):
    """User. Unique user_name; password column holds a one-way hash only."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        "user_id", Integer, primary_key=True, autoincrement=True
    )
    username: Mapped[str] = mapped_column(
        "user_name", String(255), nullable=False, unique=True
    )
    mobile: Mapped[str] = mapped_column(String(10), nullable=False)
    email: Mapped[str] = mapped_column("email_id", String(255), nullable=False)
    hashed_password: Mapped[str] = mapped_column(
        "password", String(255), nullable=False
    )
