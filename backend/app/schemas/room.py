from __future__ import annotations
from typing import Any
from datetime import datetime
from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel
from app.schemas.common import ApiModel


class RoomWrite(ApiModel):
    """Body of POST /api/rooms and PUT /api/rooms/{id}; a full replace of every mutable field."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True)

    number: str = Field(min_length=1)
    type: str = Field(min_length=1)
    capacity: int = Field(gt=0)
    price: float = Field(ge=0)
    # accepted as-is, see DESIGN.md
    amenities: Any = Field(default_factory=list)
    # not checked against ROOM_STATUSES, see DESIGN.md
    status: str = "available"


class RoomPublic(ApiModel):
    id: int
    number: str
    type: str
    capacity: int
    price: float
    amenities: Any = Field(default_factory=list)
    status: str
    created_at: datetime
