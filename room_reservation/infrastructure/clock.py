import datetime as dt
import itertools
import threading

from room_reservation.application.ports import Clock, IdGenerator


class SystemClock(Clock):
    """Системные часы (UTC)."""

    def now(self) -> dt.datetime:
        return dt.datetime.now(dt.timezone.utc)


class SequentialIdGenerator(IdGenerator):
    """Потокобезопасный счетчик: start, start + 1, ..."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)
