"""
Инфраструктурный слой: хранилище в памяти.

Все изменения коллекций и выдача идентификаторов происходят под одной
реентерабельной блокировкой, поэтому сервис бронирования может
объединить проверку конфликтов и запись в одну критическую секцию.
"""

import datetime as dt
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from room_reservation.application.ports import IdGenerator, ReservationStore
from room_reservation.domain.booking import Booking, BookingDraft, CustomerRecord
from room_reservation.domain.room import Room, RoomSpec
from room_reservation.infrastructure.clock import SequentialIdGenerator

logger = logging.getLogger(__name__)


class InMemoryReservationStore(ReservationStore):
    """Реализация хранилища комнат и бронирований в памяти."""

    def __init__(
        self,
        room_ids: Optional[IdGenerator] = None,
        booking_ids: Optional[IdGenerator] = None,
    ) -> None:
        self._room_ids = room_ids or SequentialIdGenerator()
        self._booking_ids = booking_ids or SequentialIdGenerator()
        self._rooms: List[Room] = []
        self._rooms_by_id: Dict[int, Room] = {}
        self._bookings: List[Booking] = []
        self._customers: List[CustomerRecord] = []
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator["InMemoryReservationStore"]:
        with self._lock:
            yield self

    def create_room(self, spec: RoomSpec) -> Room:
        with self._lock:
            room = Room.from_spec(self._room_ids.next_id(), spec)
            self._rooms.append(room)
            self._rooms_by_id[room.id] = room
        logger.debug("Комната %s добавлена в хранилище", room.id)
        return room

    def list_rooms(self) -> List[Room]:
        with self._lock:
            return list(self._rooms)

    def find_room(self, room_id: int) -> Optional[Room]:
        with self._lock:
            return self._rooms_by_id.get(room_id)

    def create_booking(self, draft: BookingDraft) -> Booking:
        with self._lock:
            booking = Booking.from_draft(self._booking_ids.next_id(), draft)
            customer = CustomerRecord(name=booking.customer_name, booking_id=booking.id)
            self._bookings.append(booking)
            self._customers.append(customer)
        logger.debug("Бронирование %s добавлено в хранилище", booking.id)
        return booking

    def list_bookings(self) -> List[Booking]:
        with self._lock:
            return list(self._bookings)

    def list_bookings_for_room(self, room_id: int) -> List[Booking]:
        with self._lock:
            return [b for b in self._bookings if b.room_id == room_id]

    def list_bookings_for_room_on(self, room_id: int, date: dt.date) -> List[Booking]:
        with self._lock:
            return [
                b for b in self._bookings if b.room_id == room_id and b.date == date
            ]

    def list_bookings_for_customer(self, name: str) -> List[Booking]:
        with self._lock:
            return [b for b in self._bookings if b.customer_name == name]

    def list_customers(self) -> List[CustomerRecord]:
        with self._lock:
            return list(self._customers)
