"""DTOs for the parent dashboard (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParentStatsResult:
    """Aggregates over all children of a parent."""

    total_children: int
    total_posts: int
    learning_hours: float
