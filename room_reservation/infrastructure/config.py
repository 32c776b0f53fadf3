"""
Конфигурация сервиса бронирования.

Значения берутся из переменных окружения (и файла .env, если он есть).
"""

import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from room_reservation.domain.policies import OverlapPolicy

ENV_PREFIX = "RESERVATION_"


class Settings(BaseModel):
    """Настройки сервиса."""

    overlap_policy: OverlapPolicy = OverlapPolicy.LEGACY
    require_existing_room: bool = True
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v):
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return level

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Читает настройки из окружения.

        Args:
            env: Словарь переменных; если не передан, загружается .env
                 и используется os.environ
        """
        if env is None:
            load_dotenv()
            env = os.environ

        values = {}
        for field_name in cls.model_fields:
            key = ENV_PREFIX + field_name.upper()
            if key in env:
                values[field_name] = env[key]
        return cls.model_validate(values)
