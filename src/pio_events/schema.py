# Assumptions:
# - Pydantic schema for reading serialized events back
# - Shape checks only, field contents are not validated
# - Unknown keys are ignored

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EventDocument(BaseModel):
    """Wire shape of a serialized event"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    event: str | None = Field(None, description="Name of the event")
    entity_type: str | None = Field(None, alias="entityType", description="Entity type")
    entity_id: str | None = Field(None, alias="entityId", description="Entity id")
    target_entity_type: str | None = Field(
        None, alias="targetEntityType", description="Target entity type"
    )
    target_entity_id: str | None = Field(None, alias="targetEntityId", description="Target entity id")
    properties: dict[str, Any] | None = Field(None, description="Free-form event properties")
    event_time: str | None = Field(None, alias="eventTime", description="Formatted event time")
