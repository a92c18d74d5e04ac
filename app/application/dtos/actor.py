"""Actor identity forwarded by the upstream auth gateway."""

from dataclasses import dataclass

from app.domain.enums import ActorType


@dataclass(frozen=True)
class Actor:
    """Account performing the request: a child or a parent, by internal id."""

    actor_type: ActorType
    actor_id: str

    @property
    def is_child(self) -> bool:
        return self.actor_type is ActorType.CHILD

    @property
    def is_parent(self) -> bool:
        return self.actor_type is ActorType.PARENT
