import datetime as dt

import pytest

from room_reservation.application.queries import ReservationQueryService
from room_reservation.application.services import ReservationService
from room_reservation.domain.exceptions import RoomNotFoundError
from room_reservation.domain.value_objects import BookingStatus


@pytest.fixture
def populated(room_service, reservation_service):
    """Две комнаты и три бронирования двух клиентов."""
    alpha = room_service.create_room(
        {"numberOfSeats": 4, "amenities": ["tv"], "pricePerHour": 10, "roomName": "Alpha"}
    )
    beta = room_service.create_room(
        {"numberOfSeats": 8, "amenities": [], "pricePerHour": 25.5, "roomName": "Beta"}
    )
    reservation_service.book("Ann", "2024-01-01", "09:00", "10:00", alpha.id)
    reservation_service.book("Bo", "2024-01-01", "09:00", "10:00", beta.id)
    reservation_service.book("Ann", "2024-01-02", "14:00", "15:00", beta.id)
    return alpha, beta


class TestRoomsWithBookings:
    def test_rooms_listed_with_their_bookings(self, query_service, populated):
        """Тест: каждая комната содержит свои бронирования в порядке добавления."""
        views = query_service.rooms_with_bookings()

        assert [v.room_name for v in views] == ["Alpha", "Beta"]
        assert [b.customer_name for b in views[0].bookings] == ["Ann"]
        assert [b.customer_name for b in views[1].bookings] == ["Bo", "Ann"]
        assert views[1].bookings[1].date == dt.date(2024, 1, 2)
        assert views[1].price_per_hour == 25.5

    def test_room_without_bookings_has_empty_list(self, query_service, room_service):
        room_service.create_room(
            {"numberOfSeats": 1, "pricePerHour": 1, "roomName": "Empty"}
        )

        views = query_service.rooms_with_bookings()

        assert len(views) == 1
        assert views[0].bookings == []

    def test_room_view_serializes_with_camel_case_names(self, query_service, populated):
        body = query_service.rooms_with_bookings()[0].model_dump(by_alias=True, mode="json")

        assert body == {
            "id": 1,
            "numberOfSeats": 4,
            "amenities": ["tv"],
            "pricePerHour": 10.0,
            "roomName": "Alpha",
            "bookings": [
                {
                    "customerName": "Ann",
                    "date": "2024-01-01",
                    "startTime": "09:00:00",
                    "endTime": "10:00:00",
                }
            ],
        }


class TestCustomersWithBookings:
    def test_one_view_per_customer_record(self, query_service, populated):
        """Тест: имена не объединяются, Ann встречается дважды."""
        views = query_service.customers_with_bookings()

        assert [v.customer_name for v in views] == ["Ann", "Bo", "Ann"]
        assert views[0] == views[2]

    def test_bookings_resolve_room_names(self, query_service, populated):
        views = query_service.customers_with_bookings()

        assert [b.room_name for b in views[0].bookings] == ["Alpha", "Beta"]
        assert [b.room_name for b in views[1].bookings] == ["Beta"]
        assert not any(b.room_missing for v in views for b in v.bookings)

    def test_no_customers_gives_empty_list(self, query_service):
        assert query_service.customers_with_bookings() == []


class TestCustomerHistory:
    def test_history_lists_all_customer_bookings(self, query_service, populated, clock):
        history = query_service.customer_history("Ann")

        assert history.customer_name == "Ann"
        assert [b.booking_id for b in history.bookings] == [1, 3]
        assert [b.room_name for b in history.bookings] == ["Alpha", "Beta"]
        assert history.bookings[1].start_time == dt.time(14, 0)
        assert all(b.booking_status is BookingStatus.CONFIRMED for b in history.bookings)
        assert all(b.booking_date == clock.now() for b in history.bookings)

    def test_history_matches_name_exactly(self, query_service, reservation_service, populated):
        """Тест: имя клиента ищется в том виде, в каком было забронировано."""
        alpha, _ = populated
        booking = reservation_service.book(" Ann ", "2024-01-03", "09:00", "10:00", alpha.id)

        padded = query_service.customer_history(" Ann ")

        assert [b.booking_id for b in padded.bookings] == [booking.id]
        assert [b.booking_id for b in query_service.customer_history("Ann").bookings] == [1, 3]

    def test_unknown_customer_has_empty_history(self, query_service, populated):
        """Тест: для неизвестного имени возвращается пустой список, а не ошибка."""
        history = query_service.customer_history("Nobody")

        assert history.customer_name == "Nobody"
        assert history.bookings == []


class TestMissingRoom:
    """Бронирование ссылается на комнату, которой нет в хранилище."""

    @pytest.fixture
    def dangling(self, store, clock, room_service, reservation_service):
        alpha = room_service.create_room(
            {"numberOfSeats": 4, "pricePerHour": 10, "roomName": "Alpha"}
        )
        reservation_service.book("Ann", "2024-01-01", "09:00", "10:00", alpha.id)
        lenient = ReservationService(store, clock, require_existing_room=False)
        lenient.book("Ann", "2024-01-01", "09:00", "10:00", 404)
        return alpha

    def test_missing_room_only_affects_its_entry(self, query_service, dangling):
        """Тест: ошибка поиска комнаты не ломает остальные записи."""
        views = query_service.customers_with_bookings()

        entries = views[0].bookings
        assert [e.room_name for e in entries] == ["Alpha", None]
        assert [e.room_missing for e in entries] == [False, True]

    def test_history_marks_missing_room(self, query_service, dangling):
        history = query_service.customer_history("Ann")

        assert [e.room_missing for e in history.bookings] == [False, True]
        assert history.bookings[1].booking_id == 2

    def test_rooms_view_ignores_dangling_booking(self, query_service, dangling):
        views = query_service.rooms_with_bookings()

        assert len(views) == 1
        assert len(views[0].bookings) == 1

    def test_resolve_room_raises_for_unknown_id(self, store, dangling):
        service = ReservationQueryService(store)

        assert service.resolve_room(dangling.id).room_name == "Alpha"
        with pytest.raises(RoomNotFoundError):
            service.resolve_room(404)
