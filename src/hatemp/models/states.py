from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class EntityState(BaseModel):
    """Represents a Home Assistant state object as returned by the REST API."""

    # Values are kept exactly as the hub sent them. A numeric `state` is a decode error rather
    # than being coerced, and attribute values keep their JSON types.
    model_config = ConfigDict(extra="allow", frozen=True)

    entity_id: str | None = Field(default=None)
    """The full entity ID, e.g. 'sensor.outdoor'."""

    state: str | None = Field(default=None)
    """The primary state value, or None if the hub reports none."""

    attributes: dict[str, Any] | None = Field(default=None)
    """The attributes of the entity, or None if the hub reports none."""

    last_updated: str
    """Time the state or attributes last changed, as sent by the hub."""

    last_changed: str
    """Time the state last changed, as sent by the hub."""

    @property
    def domain(self) -> str | None:
        """The domain part of the entity id, e.g. 'sensor'."""
        if not self.entity_id:
            return None
        return self.entity_id.split(".")[0]


ENTITY_STATE_LIST_ADAPTER = TypeAdapter(list[EntityState])
"""Validates the array returned by `GET /api/states`."""
