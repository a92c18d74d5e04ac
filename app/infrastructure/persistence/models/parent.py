"""Parent ORM model. Account that owns child profiles."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Parent(CuidMixin, TimestampMixin, Base):
    """Parent account. Table: parent. external_auth_id is the identity-provider user id."""

    __tablename__ = "parent"

    external_auth_id: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
