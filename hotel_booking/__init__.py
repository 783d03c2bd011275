"""
Менеджер бронирования номеров отеля.

Хранит номера, клиентов и бронирования в памяти, не допускает
двойного бронирования номера и уведомляет клиента о создании
и отмене бронирования.
"""

from .application import BookingService, RoomService
from .bootstrap import bootstrap_app
from .config import HotelSettings
from .domain import (
    Booking,
    BookingNotFoundException,
    BookingValidationException,
    Customer,
    HotelBookingException,
    InvalidBookingParametersException,
    InvalidDateRangeException,
    NotificationDeliveryException,
    Room,
    RoomUnavailableException,
)

__all__ = [
    # Модели
    "Room",
    "Customer",
    "Booking",
    # Сервисы
    "RoomService",
    "BookingService",
    # Исключения
    "HotelBookingException",
    "BookingValidationException",
    "InvalidBookingParametersException",
    "InvalidDateRangeException",
    "RoomUnavailableException",
    "BookingNotFoundException",
    "NotificationDeliveryException",
    # Конфигурация
    "HotelSettings",
    "bootstrap_app",
]
