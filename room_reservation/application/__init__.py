"""
Прикладной слой бронирования комнат.

Содержит порты (интерфейсы хранилища, часов и генератора идентификаторов),
сервисы записи и сервис запросов на чтение.
"""

from .ports import Clock, IdGenerator, ReservationStore
from .queries import (
    CustomerBookingEntry,
    CustomerBookingsView,
    CustomerHistoryEntry,
    CustomerHistoryView,
    ReservationQueryService,
    RoomBookingEntry,
    RoomBookingsView,
)
from .services import CreateBookingRequest, ReservationService, RoomService

__all__ = [
    # Порты
    "Clock",
    "IdGenerator",
    "ReservationStore",
    # Сервисы
    "RoomService",
    "ReservationService",
    "ReservationQueryService",
    # DTO
    "CreateBookingRequest",
    "RoomBookingEntry",
    "RoomBookingsView",
    "CustomerBookingEntry",
    "CustomerBookingsView",
    "CustomerHistoryEntry",
    "CustomerHistoryView",
]
