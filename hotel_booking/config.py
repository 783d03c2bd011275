"""
Настройки менеджера бронирований.
"""

import os
from typing import Any, Dict

from pydantic import BaseModel, field_validator

from .infrastructure.logger import LEVELS

ENV_PREFIX = "HOTEL_"


class HotelSettings(BaseModel):
    """Настройки логирования и шаблоны уведомлений."""

    log_level: str = "INFO"
    confirmation_template: str = "Ваше бронирование подтверждено: {booking}"
    cancellation_template: str = "Ваше бронирование отменено: {booking}"

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LEVELS:
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return v

    @field_validator("confirmation_template", "cancellation_template")
    @classmethod
    def has_booking_placeholder(cls, v: str) -> str:
        if "{booking}" not in v:
            raise ValueError("Шаблон уведомления должен содержать {booking}")
        return v

    @classmethod
    def from_env(cls) -> "HotelSettings":
        """Читает настройки из переменных окружения с префиксом HOTEL_."""
        values: Dict[str, Any] = {}
        for name in cls.model_fields:
            env_value = os.getenv(ENV_PREFIX + name.upper())
            if env_value is not None:
                values[name] = env_value
        return cls(**values)
