"""
Интерфейсы (порты) прикладного слоя.

Хранилище, часы и генератор идентификаторов реализуются в инфраструктуре
и передаются сервисам извне.
"""

import datetime as dt
from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import List, Optional

from room_reservation.domain.booking import Booking, BookingDraft, CustomerRecord
from room_reservation.domain.room import Room, RoomSpec


class Clock(ABC):
    """Источник текущего времени."""

    @abstractmethod
    def now(self) -> dt.datetime:
        """Возвращает текущий момент времени (UTC)."""
        raise NotImplementedError


class IdGenerator(ABC):
    """Источник монотонно возрастающих идентификаторов."""

    @abstractmethod
    def next_id(self) -> int:
        raise NotImplementedError


class ReservationStore(ABC):
    """
    Хранилище комнат, бронирований и записей о клиентах.

    Все списки возвращаются в порядке добавления. Хранилище
    единолично владеет коллекциями: наружу отдаются копии списков.
    """

    @abstractmethod
    def transaction(self) -> AbstractContextManager:
        """
        Возвращает контекстный менеджер критической секции.

        Все, что выполняется внутри, не перемежается с другими
        изменениями хранилища. Секция должна быть реентерабельной.
        """
        raise NotImplementedError

    @abstractmethod
    def create_room(self, spec: RoomSpec) -> Room:
        """Выдает комнате следующий идентификатор и сохраняет ее."""
        raise NotImplementedError

    @abstractmethod
    def list_rooms(self) -> List[Room]:
        raise NotImplementedError

    @abstractmethod
    def find_room(self, room_id: int) -> Optional[Room]:
        """Находит комнату по идентификатору."""
        raise NotImplementedError

    @abstractmethod
    def create_booking(self, draft: BookingDraft) -> Booking:
        """
        Выдает бронированию следующий идентификатор, сохраняет его
        и добавляет запись о клиенте. Выполняется атомарно.
        """
        raise NotImplementedError

    @abstractmethod
    def list_bookings(self) -> List[Booking]:
        raise NotImplementedError

    @abstractmethod
    def list_bookings_for_room(self, room_id: int) -> List[Booking]:
        raise NotImplementedError

    @abstractmethod
    def list_bookings_for_room_on(self, room_id: int, date: dt.date) -> List[Booking]:
        """Бронирования комнаты на конкретную дату."""
        raise NotImplementedError

    @abstractmethod
    def list_bookings_for_customer(self, name: str) -> List[Booking]:
        raise NotImplementedError

    @abstractmethod
    def list_customers(self) -> List[CustomerRecord]:
        """Записи о клиентах, по одной на каждое бронирование."""
        raise NotImplementedError
