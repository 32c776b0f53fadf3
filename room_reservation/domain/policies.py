"""
Правила обнаружения конфликтов между бронированиями.
"""

from enum import Enum
from typing import Iterable, List

from room_reservation.domain.booking import Booking
from room_reservation.domain.value_objects import TimeSlot


class OverlapPolicy(str, Enum):
    """Способ сравнения интервалов при проверке конфликта."""

    # Исходное несимметричное правило, сохранено для совместимости
    LEGACY = "legacy"
    # Симметричное пересечение полуоткрытых интервалов
    STRICT = "strict"


class ReservationPolicy:
    """Политика бронирования: какие существующие брони мешают новой."""

    def __init__(self, overlap_policy: OverlapPolicy = OverlapPolicy.LEGACY):
        self.overlap_policy = OverlapPolicy(overlap_policy)

    def conflicts(self, candidate: TimeSlot, existing: TimeSlot) -> bool:
        """Проверяет, конфликтует ли новый интервал с существующим."""
        if self.overlap_policy is OverlapPolicy.STRICT:
            return candidate.overlaps(existing)
        return candidate.collides_with(existing)

    def find_conflicts(
        self, candidate: TimeSlot, bookings: Iterable[Booking]
    ) -> List[Booking]:
        """Возвращает бронирования, с которыми конфликтует новый интервал."""
        return [
            booking for booking in bookings if self.conflicts(candidate, booking.slot)
        ]
