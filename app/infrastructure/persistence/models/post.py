"""Post ORM model. Content shared by a child, shown in feeds and on profiles."""

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.domain.enums import MediaType
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.category import Category
from app.infrastructure.persistence.models.child import Child
from app.infrastructure.persistence.models.mixins import (
    ActiveMixin,
    CuidMixin,
    TimestampMixin,
)


class Post(CuidMixin, TimestampMixin, ActiveMixin, Base):
    """Post entity. Table: post. Index: (is_active, created_at) for the feed."""

    __tablename__ = "post"

    code: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    child_id: Mapped[str] = mapped_column(
        String, ForeignKey("child.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id: Mapped[str] = mapped_column(
        String, ForeignKey("category.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    media_type: Mapped[str] = mapped_column(
        String(10), nullable=False, default=MediaType.NONE.value
    )
    media_url: Mapped[str | None] = mapped_column(String, nullable=True)
    media_thumbnail: Mapped[str | None] = mapped_column(String, nullable=True)
    likes_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    comments_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    views_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    child: Mapped[Child] = relationship(lazy="raise")
    category: Mapped[Category] = relationship(lazy="raise")

    __table_args__ = (
        Index("ix_post_active_created", "is_active", "created_at"),
        CheckConstraint(
            "media_type IN ({})".format(", ".join(f"'{v}'" for v in MediaType.values())),
            name="post_media_type_check",
        ),
    )
