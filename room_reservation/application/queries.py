"""
Запросы на чтение: проекции данных хранилища.

Бизнес-правил здесь нет, только сборка представлений. Если бронирование
ссылается на отсутствующую комнату, страдает только эта запись
представления, остальные собираются как обычно.
"""

import datetime as dt
import logging
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from room_reservation.application.ports import ReservationStore
from room_reservation.domain.booking import Booking
from room_reservation.domain.exceptions import RoomNotFoundError
from room_reservation.domain.room import Room
from room_reservation.domain.value_objects import BookingStatus

logger = logging.getLogger(__name__)


class View(BaseModel):
    """Базовый класс представлений: camelCase-псевдонимы для внешних систем."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


# DTO для исходящих данных


class RoomBookingEntry(View):
    """Бронирование в составе представления комнаты."""

    customer_name: str
    date: dt.date
    start_time: dt.time
    end_time: dt.time

    @classmethod
    def from_domain(cls, booking: Booking) -> "RoomBookingEntry":
        return cls(
            customer_name=booking.customer_name,
            date=booking.date,
            start_time=booking.start_time,
            end_time=booking.end_time,
        )


class RoomBookingsView(View):
    """Комната вместе со всеми своими бронированиями."""

    id: int
    number_of_seats: int
    amenities: List[str]
    price_per_hour: float
    room_name: str
    bookings: List[RoomBookingEntry] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, room: Room, bookings: List[Booking]) -> "RoomBookingsView":
        """Создает представление из комнаты и ее бронирований."""
        return cls(
            **room.model_dump(),
            bookings=[RoomBookingEntry.from_domain(b) for b in bookings],
        )


class CustomerBookingEntry(View):
    """Бронирование в составе представления клиента."""

    room_name: Optional[str]
    room_missing: bool = False  # Комната не найдена в хранилище
    date: dt.date
    start_time: dt.time
    end_time: dt.time


class CustomerBookingsView(View):
    customer_name: str
    bookings: List[CustomerBookingEntry] = Field(default_factory=list)


class CustomerHistoryEntry(CustomerBookingEntry):
    """Подробная запись истории бронирований клиента."""

    booking_id: int
    booking_date: dt.datetime
    booking_status: BookingStatus


class CustomerHistoryView(View):
    customer_name: str
    bookings: List[CustomerHistoryEntry] = Field(default_factory=list)


# Сервис запросов


class ReservationQueryService:
    """Сервис запросов на чтение: комнаты, клиенты и история бронирований."""

    def __init__(self, store: ReservationStore):
        self._store = store

    def resolve_room(self, room_id: int) -> Room:
        """Находит комнату или бросает RoomNotFoundError."""
        room = self._store.find_room(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

    def rooms_with_bookings(self) -> List[RoomBookingsView]:
        """Все комнаты с их бронированиями в порядке добавления."""
        with self._store.transaction():
            rooms = self._store.list_rooms()
            bookings = self._store.list_bookings()

        return [
            RoomBookingsView.from_domain(
                room, [b for b in bookings if b.room_id == room.id]
            )
            for room in rooms
        ]

    def customers_with_bookings(self) -> List[CustomerBookingsView]:
        """
        Клиенты с их бронированиями.

        Представление строится для каждой записи о клиенте, без
        объединения одинаковых имен: клиент с двумя бронями встретится
        дважды, и оба раза с обеими бронями.
        """
        with self._store.transaction():
            customers = self._store.list_customers()
            bookings = self._store.list_bookings()
            rooms = self._room_index()

        views = []
        for customer in customers:
            entries = []
            for booking in bookings:
                if booking.customer_name != customer.name:
                    continue
                room_name = self._room_name(rooms, booking)
                entries.append(
                    CustomerBookingEntry(
                        room_name=room_name,
                        room_missing=room_name is None,
                        date=booking.date,
                        start_time=booking.start_time,
                        end_time=booking.end_time,
                    )
                )
            views.append(
                CustomerBookingsView(customer_name=customer.name, bookings=entries)
            )
        return views

    def customer_history(self, name: str) -> CustomerHistoryView:
        """
        История бронирований клиента.

        Для неизвестного имени возвращается пустая история, а не ошибка.
        """
        with self._store.transaction():
            bookings = self._store.list_bookings_for_customer(name)
            rooms = self._room_index()

        entries = []
        for booking in bookings:
            room_name = self._room_name(rooms, booking)
            entries.append(
                CustomerHistoryEntry(
                    room_name=room_name,
                    room_missing=room_name is None,
                    date=booking.date,
                    start_time=booking.start_time,
                    end_time=booking.end_time,
                    booking_id=booking.id,
                    booking_date=booking.booking_date,
                    booking_status=booking.booking_status,
                )
            )
        return CustomerHistoryView(customer_name=name, bookings=entries)

    def _room_index(self) -> Dict[int, Room]:
        return {room.id: room for room in self._store.list_rooms()}

    @staticmethod
    def _room_name(rooms: Dict[int, Room], booking: Booking) -> Optional[str]:
        room = rooms.get(booking.room_id)
        if room is None:
            logger.warning(
                "Бронирование %s ссылается на несуществующую комнату %s",
                booking.id,
                booking.room_id,
            )
            return None
        return room.room_name
