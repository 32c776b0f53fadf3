from typing import Any, Dict, Optional

from room_reservation.application.ports import Clock, ReservationStore
from room_reservation.application.queries import ReservationQueryService
from room_reservation.application.services import ReservationService, RoomService
from room_reservation.domain.policies import ReservationPolicy
from room_reservation.infrastructure.clock import SystemClock
from room_reservation.infrastructure.config import Settings
from room_reservation.infrastructure.logging_config import configure_logging
from room_reservation.infrastructure.store import InMemoryReservationStore


def bootstrap_app(
    settings: Optional[Settings] = None,
    store: Optional[ReservationStore] = None,
    clock: Optional[Clock] = None,
) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    # 1. Настройки и логирование
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    # 2. Хранилище, общее для всех сервисов
    store = store or InMemoryReservationStore()

    # 3. Сервисы, получающие зависимости явно
    reservation_service = ReservationService(
        store=store,
        clock=clock or SystemClock(),
        policy=ReservationPolicy(settings.overlap_policy),
        require_existing_room=settings.require_existing_room,
    )

    return {
        "settings": settings,
        "store": store,
        "room_service": RoomService(store),
        "reservation_service": reservation_service,
        "query_service": ReservationQueryService(store),
    }
