"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure.
"""

from app.application.interfaces.repositories import (
    ICategoryRepository,
    IChildRepository,
    ICommentRepository,
    IFollowRepository,
    ILikeRepository,
    IParentRepository,
    IPostRepository,
)

__all__ = [
    "ICategoryRepository",
    "IChildRepository",
    "ICommentRepository",
    "IFollowRepository",
    "ILikeRepository",
    "IParentRepository",
    "IPostRepository",
]
