"""SQLAlchemy model for users."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ledger.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """Database model for users."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id})>"
