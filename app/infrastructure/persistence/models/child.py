"""Child ORM model. Profile that authors posts and earns XP."""

from datetime import date
from typing import Any

from sqlalchemy import JSON, Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    ActiveMixin,
    CuidMixin,
    TimestampMixin,
)


class Child(CuidMixin, TimestampMixin, ActiveMixin, Base):
    """Child profile. Table: child. username is unique and used in profile URLs and cache keys."""

    __tablename__ = "child"

    code: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    parent_id: Mapped[str] = mapped_column(
        String, ForeignKey("parent.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    avatar: Mapped[str | None] = mapped_column(String, nullable=True)
    password_hash: Mapped[str] = mapped_column(String, nullable=False)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    gender: Mapped[str | None] = mapped_column(String(20), nullable=True)
    preferred_categories: Mapped[list[Any] | None] = mapped_column(JSON, nullable=True)

    xp_points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    total_posts: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_likes_received: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_comments_made: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    learning_hours: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
