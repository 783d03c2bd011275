"""
Доменный слой: модели номеров, клиентов и бронирований,
исключения и интерфейсы (порты) внешних зависимостей.
"""

from .exceptions import (
    BookingNotFoundException,
    BookingValidationException,
    HotelBookingException,
    InvalidBookingParametersException,
    InvalidDateRangeException,
    NotificationDeliveryException,
    RoomUnavailableException,
)
from .interfaces import ILogger, INotificationService, NullLogger
from .models import Booking, Customer, Room

__all__ = [
    "Room",
    "Customer",
    "Booking",
    "ILogger",
    "INotificationService",
    "NullLogger",
    "HotelBookingException",
    "BookingValidationException",
    "InvalidBookingParametersException",
    "InvalidDateRangeException",
    "RoomUnavailableException",
    "BookingNotFoundException",
    "NotificationDeliveryException",
]
