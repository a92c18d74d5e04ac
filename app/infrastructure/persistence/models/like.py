"""Like ORM model. One row per (post, child) or (post, parent)."""

from sqlalchemy import CheckConstraint, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin


class Like(CuidMixin, CreatedAtMixin, Base):
    """Like entity. Table: post_like. Exactly one of child_id / parent_id is set."""

    __tablename__ = "post_like"

    post_id: Mapped[str] = mapped_column(
        String, ForeignKey("post.id", ondelete="CASCADE"), nullable=False, index=True
    )
    child_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("child.id", ondelete="CASCADE"), nullable=True
    )
    parent_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("parent.id", ondelete="CASCADE"), nullable=True
    )

    __table_args__ = (
        UniqueConstraint("post_id", "child_id", name="uq_like_post_child"),
        UniqueConstraint("post_id", "parent_id", name="uq_like_post_parent"),
        CheckConstraint(
            "(child_id IS NULL) <> (parent_id IS NULL)",
            name="like_single_actor_check",
        ),
    )
