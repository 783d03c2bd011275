"""
Модели номеров, клиентов и бронирований.

Все модели неизменяемы: сервисы отдают наружу значения,
изменить которые в обход сервиса нельзя.
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def is_entity_id(value: Any) -> bool:
    """Идентификатор должен быть целым числом, bool не допускается."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_calendar_date(value: Any) -> bool:
    """Дата бронирования должна быть датой без времени."""
    return isinstance(value, date) and not isinstance(value, datetime)


def same_id(left: Any, right: Any) -> bool:
    """Точное сравнение идентификаторов: 1, 1.0 и True не совпадают."""
    return type(left) is type(right) and left == right


class Room(BaseModel):
    """Номер в отеле."""

    model_config = ConfigDict(frozen=True, strict=True)

    room_id: int
    type: str  # Тип номера (например, "Standard", "Deluxe", "Suite")
    price: float = Field(..., ge=0, description="Цена за ночь")
    available: bool = True

    def with_availability(self, available: bool) -> "Room":
        """Возвращает копию номера с новым флагом доступности."""
        return self.model_copy(update={"available": available})


class Customer(BaseModel):
    """Клиент отеля."""

    model_config = ConfigDict(frozen=True, strict=True)

    customer_id: int
    name: str


class Booking(BaseModel):
    """Бронирование номера."""

    model_config = ConfigDict(frozen=True, strict=True)

    booking_id: int
    room_id: int
    customer_id: int
    start_date: date
    end_date: date

    @property
    def nights(self) -> int:
        """Количество ночей в бронировании."""
        return (self.end_date - self.start_date).days

    def __str__(self) -> str:
        return (
            f"Booking(booking_id={self.booking_id}, room_id={self.room_id}, "
            f"customer_id={self.customer_id}, start_date={self.start_date}, "
            f"end_date={self.end_date})"
        )
