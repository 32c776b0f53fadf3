"""
Инфраструктурный слой бронирования комнат.

Содержит реализации портов: хранилище в памяти, системные часы,
генератор идентификаторов, а также конфигурацию и настройку логирования.
"""

from .clock import SequentialIdGenerator, SystemClock
from .config import Settings
from .logging_config import configure_logging
from .store import InMemoryReservationStore

__all__ = [
    "InMemoryReservationStore",
    "SequentialIdGenerator",
    "SystemClock",
    "Settings",
    "configure_logging",
]
