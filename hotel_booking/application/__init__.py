"""
Прикладной слой: сервисы номеров и бронирований.
"""

from .booking_service import BookingService
from .room_service import RoomService

__all__ = [
    "RoomService",
    "BookingService",
]
