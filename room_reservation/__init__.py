"""
Сервис бронирования комнат.

Учитывает комнаты, принимает заявки на бронирование интервалов времени
и не допускает двойного бронирования одной комнаты.
"""

from .bootstrap import bootstrap_app

__all__ = ["bootstrap_app"]
