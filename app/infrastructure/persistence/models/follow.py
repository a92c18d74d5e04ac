"""Follow ORM model. Directed edge between two accounts (child or parent on either side)."""

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin


class Follow(CuidMixin, CreatedAtMixin, Base):
    """Follow entity. Table: follow. One follower_* and one following_* column is set."""

    __tablename__ = "follow"

    follower_type: Mapped[str] = mapped_column(String(10), nullable=False)
    follower_child_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("child.id", ondelete="CASCADE"), nullable=True
    )
    follower_parent_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("parent.id", ondelete="CASCADE"), nullable=True
    )
    following_type: Mapped[str] = mapped_column(String(10), nullable=False)
    following_child_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("child.id", ondelete="CASCADE"), nullable=True, index=True
    )
    following_parent_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("parent.id", ondelete="CASCADE"), nullable=True, index=True
    )

    __table_args__ = (
        Index("ix_follow_follower_child", "follower_child_id"),
        Index("ix_follow_follower_parent", "follower_parent_id"),
    )
