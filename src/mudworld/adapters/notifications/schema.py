"""Wire format for place notifications."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from mudworld.domain.model import NotificationEvent


class NotificationPayload(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    entity: str
    entity_id: int = Field(alias="entityId")
    event: str
    message_key: str = Field(alias="messageKey")
    args: list[str] = Field(default_factory=list)
    target_entity: str | None = Field(default=None, alias="targetEntity")
    target_entity_id: int | None = Field(default=None, alias="targetEntityId")
    world_name: str | None = Field(default=None, alias="worldName")

    @classmethod
    def from_event(cls, event: NotificationEvent) -> NotificationPayload:
        return cls(
            entity=event.entity_type.value,
            entity_id=event.entity_id,
            event=event.event_kind.value,
            message_key=event.message_key,
            args=list(event.args),
            target_entity=event.target_entity_type.value if event.target_entity_type else None,
            target_entity_id=event.target_entity_id,
            world_name=event.world_name,
        )

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)
