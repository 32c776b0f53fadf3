"""
Бронирования и записи о клиентах.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from room_reservation.domain.value_objects import BookingStatus, TimeSlot, require_naive_time


class BookingDraft(BaseModel):
    """Бронирование, прошедшее проверку, но еще не получившее идентификатор."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    customer_name: str
    date: dt.date
    start_time: dt.time
    end_time: dt.time
    room_id: int
    booking_date: dt.datetime  # Момент создания бронирования
    booking_status: BookingStatus = BookingStatus.CONFIRMED

    @field_validator("start_time", "end_time")
    @classmethod
    def naive_times(cls, v):
        return require_naive_time(v)

    @property
    def slot(self) -> TimeSlot:
        return TimeSlot(date=self.date, start_time=self.start_time, end_time=self.end_time)


class Booking(BookingDraft):
    """Подтвержденное бронирование комнаты. После создания не меняется."""

    id: int

    @classmethod
    def from_draft(cls, booking_id: int, draft: BookingDraft) -> "Booking":
        return cls(id=booking_id, **draft.model_dump())


class CustomerRecord(BaseModel):
    """
    Запись о клиенте: пара (имя, идентификатор бронирования).

    Добавляется по одной на каждое успешное бронирование, поэтому одно
    и то же имя может встречаться несколько раз.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    name: str
    booking_id: int
