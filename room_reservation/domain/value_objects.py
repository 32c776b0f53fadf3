"""
Объекты-значения контекста бронирования комнат.
"""

import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class BookingStatus(str, Enum):
    """Статусы бронирования."""

    # Отмены и переносов нет, поэтому все бронирования подтверждены
    CONFIRMED = "confirmed"


def require_naive_time(v: dt.time) -> dt.time:
    """Время без часового пояса: иначе его нельзя сравнить с другими."""
    if v.tzinfo is not None:
        raise ValueError("Время должно указываться без часового пояса")
    return v


class TimeSlot(BaseModel):
    """Интервал времени [start_time, end_time) в пределах одного дня."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    date: dt.date
    start_time: dt.time
    end_time: dt.time

    @field_validator("start_time")
    @classmethod
    def naive_start(cls, v):
        return require_naive_time(v)

    @field_validator("end_time")
    @classmethod
    def end_after_start(cls, v, info):
        require_naive_time(v)
        if "start_time" in info.data and v <= info.data["start_time"]:
            raise ValueError("Время окончания должно быть позже времени начала")
        return v

    def overlaps(self, other: "TimeSlot") -> bool:
        """Стандартная проверка пересечения полуоткрытых интервалов."""
        if self.date != other.date:
            return False
        return self.start_time < other.end_time and self.end_time > other.start_time

    def collides_with(self, existing: "TimeSlot") -> bool:
        """
        Исходное правило конфликта: новый интервал конфликтует с существующим,
        если его начало или конец попадает внутрь существующего.

        Правило несимметрично: x.collides_with(y) != y.collides_with(x),
        и существующее бронирование, целиком лежащее внутри нового,
        конфликтом не считается.
        """
        if self.date != existing.date:
            return False
        starts_inside = existing.start_time <= self.start_time < existing.end_time
        ends_inside = existing.start_time < self.end_time <= existing.end_time
        return starts_inside or ends_inside
