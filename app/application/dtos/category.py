"""DTOs for categories (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryResult:
    """Category read-model."""

    id: str
    name: str
    icon: str
    color: str


@dataclass(frozen=True)
class CategoryCreate:
    name: str
    icon: str
    color: str
