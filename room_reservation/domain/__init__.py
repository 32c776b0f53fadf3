"""
Доменная модель бронирования комнат.

Содержит сущности (комната, бронирование, запись о клиенте),
объекты-значения и правила обнаружения конфликтов.
"""

from .booking import Booking, BookingDraft, CustomerRecord
from .exceptions import (
    BookingConflictError,
    InvalidBookingError,
    InvalidInputError,
    InvalidRoomError,
    ReservationError,
    RoomNotFoundError,
)
from .policies import OverlapPolicy, ReservationPolicy
from .room import Room, RoomSpec
from .value_objects import BookingStatus, TimeSlot

__all__ = [
    # Сущности
    "Room",
    "RoomSpec",
    "Booking",
    "BookingDraft",
    "CustomerRecord",
    # Объекты-значения
    "TimeSlot",
    "BookingStatus",
    # Политики
    "OverlapPolicy",
    "ReservationPolicy",
    # Исключения
    "ReservationError",
    "BookingConflictError",
    "RoomNotFoundError",
    "InvalidInputError",
    "InvalidBookingError",
    "InvalidRoomError",
]
