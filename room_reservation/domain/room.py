from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RoomSpec(BaseModel):
    """Параметры новой комнаты (без идентификатора)."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    number_of_seats: int
    amenities: List[str] = Field(default_factory=list)  # Удобства: "tv", "whiteboard"...
    price_per_hour: float
    room_name: str


class Room(BaseModel):
    """Комната, доступная для бронирования. После создания не меняется."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    number_of_seats: int
    amenities: List[str] = Field(default_factory=list)
    price_per_hour: float
    room_name: str

    @classmethod
    def from_spec(cls, room_id: int, spec: RoomSpec) -> "Room":
        """Создает комнату из параметров и выданного идентификатора."""
        return cls(id=room_id, **spec.model_dump())
