"""Comment ORM model. Authored by a child or a parent on a post."""

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.domain.enums import ActorType
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.child import Child
from app.infrastructure.persistence.models.mixins import (
    ActiveMixin,
    CuidMixin,
    TimestampMixin,
)


class Comment(CuidMixin, TimestampMixin, ActiveMixin, Base):
    """Comment entity. Table: comment. Exactly one of child_id / parent_id is set."""

    __tablename__ = "comment"

    code: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    post_id: Mapped[str] = mapped_column(
        String, ForeignKey("post.id", ondelete="CASCADE"), nullable=False, index=True
    )
    author_type: Mapped[str] = mapped_column(String(10), nullable=False)
    child_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("child.id", ondelete="CASCADE"), nullable=True, index=True
    )
    parent_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("parent.id", ondelete="CASCADE"), nullable=True, index=True
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    likes_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_edited: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    child: Mapped[Child | None] = relationship(lazy="raise")

    __table_args__ = (
        CheckConstraint(
            "author_type IN ({})".format(", ".join(f"'{v}'" for v in ActorType.values())),
            name="comment_author_type_check",
        ),
        CheckConstraint(
            "(child_id IS NULL) <> (parent_id IS NULL)",
            name="comment_single_author_check",
        ),
    )
