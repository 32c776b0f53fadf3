"""
Общие фикстуры для тестов сервиса бронирования.
"""

import datetime as dt

import pytest

from room_reservation.application.ports import Clock
from room_reservation.application.queries import ReservationQueryService
from room_reservation.application.services import ReservationService, RoomService
from room_reservation.domain.policies import OverlapPolicy, ReservationPolicy
from room_reservation.infrastructure.store import InMemoryReservationStore

FIXED_NOW = dt.datetime(2024, 1, 1, 8, 0, tzinfo=dt.timezone.utc)


class FixedClock(Clock):
    """Часы, которые всегда показывают одно и то же время."""

    def __init__(self, now: dt.datetime = FIXED_NOW):
        self._now = now

    def now(self) -> dt.datetime:
        return self._now


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def store() -> InMemoryReservationStore:
    """Фикстура, предоставляющая чистое хранилище."""
    return InMemoryReservationStore()


@pytest.fixture
def room_service(store: InMemoryReservationStore) -> RoomService:
    return RoomService(store)


@pytest.fixture
def reservation_service(
    store: InMemoryReservationStore, clock: FixedClock
) -> ReservationService:
    """Сервис бронирования с исходным (несимметричным) правилом конфликтов."""
    return ReservationService(store, clock, ReservationPolicy(OverlapPolicy.LEGACY))


@pytest.fixture
def strict_reservation_service(
    store: InMemoryReservationStore, clock: FixedClock
) -> ReservationService:
    return ReservationService(store, clock, ReservationPolicy(OverlapPolicy.STRICT))


@pytest.fixture
def query_service(store: InMemoryReservationStore) -> ReservationQueryService:
    return ReservationQueryService(store)


@pytest.fixture
def alpha_room(room_service: RoomService):
    """Комната Alpha из базового сценария."""
    return room_service.create_room(
        {"numberOfSeats": 4, "amenities": ["tv"], "pricePerHour": 10, "roomName": "Alpha"}
    )
