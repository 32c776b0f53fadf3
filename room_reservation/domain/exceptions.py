"""
Исключения контекста бронирования комнат.

Каждое исключение знает HTTP-статус, которым его следует вернуть клиенту,
и умеет представить себя в виде тела ответа.
"""

from typing import Any, Dict, List, Optional, Sequence

from room_reservation.domain.value_objects import TimeSlot


class ReservationError(Exception):
    """Базовое исключение для ошибок бронирования."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class BookingConflictError(ReservationError):
    """Комната уже забронирована на пересекающийся интервал."""

    def __init__(
        self,
        room_id: int,
        slot: TimeSlot,
        conflicting_booking_ids: Sequence[int] = (),
    ):
        super().__init__("Room is already booked for the given date and time")
        self.room_id = room_id
        self.slot = slot
        self.conflicting_booking_ids = list(conflicting_booking_ids)


class RoomNotFoundError(ReservationError):
    """Комната с указанным идентификатором не найдена."""

    status_code = 404

    def __init__(self, room_id: int):
        super().__init__(f"Room with id {room_id} not found")
        self.room_id = room_id


class InvalidInputError(ReservationError):
    """Входные данные отсутствуют или имеют неверный формат."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        if self.errors:
            body["errors"] = self.errors
        return body


class InvalidBookingError(InvalidInputError):
    """Некорректный запрос на бронирование."""

    pass


class InvalidRoomError(InvalidInputError):
    """Некорректный запрос на создание комнаты."""

    pass
