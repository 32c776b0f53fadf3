"""
Прикладной слой: сервисы, координирующие работу с комнатами и бронированиями.

ReservationService единственный, кто создает бронирования. Проверка
конфликтов и сохранение выполняются в одной критической секции хранилища.
"""

import datetime as dt
import logging
from typing import Any, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from room_reservation.application.ports import Clock, ReservationStore
from room_reservation.domain.booking import Booking, BookingDraft
from room_reservation.domain.exceptions import (
    BookingConflictError,
    InvalidBookingError,
    InvalidInputError,
    InvalidRoomError,
    RoomNotFoundError,
)
from room_reservation.domain.policies import ReservationPolicy
from room_reservation.domain.room import Room, RoomSpec
from room_reservation.domain.value_objects import (
    BookingStatus,
    TimeSlot,
    require_naive_time,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# DTO для входящих данных


class CreateBookingRequest(BaseModel):
    """Запрос на бронирование комнаты."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Имя хранится как есть: по нему же потом ищется история клиента
    customer_name: str = Field(..., min_length=1)
    date: dt.date
    start_time: dt.time
    end_time: dt.time
    room_id: int

    @field_validator("customer_name")
    @classmethod
    def name_not_blank(cls, v):
        if not v.strip():
            raise ValueError("Имя клиента не может быть пустым")
        return v

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

    @property
    def slot(self) -> TimeSlot:
        return TimeSlot(date=self.date, start_time=self.start_time, end_time=self.end_time)


def parse_request(
    model_class: Type[T],
    payload: Union[T, Mapping[str, Any]],
    error_class: Type[InvalidInputError],
) -> T:
    """Приводит входные данные к DTO, ошибки pydantic превращает в доменные."""
    if isinstance(payload, model_class):
        return payload
    try:
        return model_class.model_validate(payload)
    except ValidationError as e:
        logger.warning("Отклонен некорректный запрос %s: %s", model_class.__name__, e)
        raise error_class(
            f"Invalid {model_class.__name__} payload",
            errors=e.errors(include_url=False, include_context=False),
        ) from e


# Сервисы приложения


class RoomService:
    """Сервис приложения для работы с комнатами."""

    def __init__(self, store: ReservationStore):
        self._store = store

    def create_room(self, payload: Union[RoomSpec, Mapping[str, Any]]) -> Room:
        """Создает новую комнату."""
        spec = parse_request(RoomSpec, payload, InvalidRoomError)
        room = self._store.create_room(spec)
        logger.info("Создана комната %s (id=%s)", room.room_name, room.id)
        return room

    def list_rooms(self) -> List[Room]:
        return self._store.list_rooms()

    def get_room(self, room_id: int) -> Room:
        """Возвращает комнату или бросает RoomNotFoundError."""
        room = self._store.find_room(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return room


class ReservationService:
    """Сервис приложения для бронирования комнат."""

    def __init__(
        self,
        store: ReservationStore,
        clock: Clock,
        policy: Optional[ReservationPolicy] = None,
        require_existing_room: bool = True,
    ):
        self._store = store
        self._clock = clock
        self.policy = policy or ReservationPolicy()
        self.require_existing_room = require_existing_room

    def reserve(
        self, payload: Union[CreateBookingRequest, Mapping[str, Any]]
    ) -> Booking:
        """
        Бронирует комнату на интервал времени.

        Raises:
            InvalidBookingError: запрос неполный или некорректный
            RoomNotFoundError: комнаты нет (если включена проверка ссылки)
            BookingConflictError: интервал пересекается с существующей бронью
        """
        request = parse_request(CreateBookingRequest, payload, InvalidBookingError)
        slot = request.slot

        # Чтение существующих броней и запись новой не должны разделяться
        with self._store.transaction():
            if self.require_existing_room and self._store.find_room(request.room_id) is None:
                logger.warning("Бронирование несуществующей комнаты %s", request.room_id)
                raise RoomNotFoundError(request.room_id)

            existing = self._store.list_bookings_for_room_on(request.room_id, slot.date)
            conflicts = self.policy.find_conflicts(slot, existing)
            if conflicts:
                logger.warning(
                    "Конфликт бронирования комнаты %s на %s %s-%s (пересекается с %s)",
                    request.room_id,
                    slot.date,
                    slot.start_time,
                    slot.end_time,
                    [b.id for b in conflicts],
                )
                raise BookingConflictError(
                    request.room_id, slot, [b.id for b in conflicts]
                )

            draft = BookingDraft(
                customer_name=request.customer_name,
                date=request.date,
                start_time=request.start_time,
                end_time=request.end_time,
                room_id=request.room_id,
                booking_date=self._clock.now(),
                booking_status=BookingStatus.CONFIRMED,
            )
            booking = self._store.create_booking(draft)

        logger.info(
            "Бронирование %s подтверждено: комната %s, клиент %s",
            booking.id,
            booking.room_id,
            booking.customer_name,
        )
        return booking

    def book(
        self,
        customer_name: str,
        date: Union[dt.date, str],
        start_time: Union[dt.time, str],
        end_time: Union[dt.time, str],
        room_id: int,
    ) -> Booking:
        """То же, что reserve, но с отдельными аргументами."""
        return self.reserve(
            {
                "customer_name": customer_name,
                "date": date,
                "start_time": start_time,
                "end_time": end_time,
                "room_id": room_id,
            }
        )
