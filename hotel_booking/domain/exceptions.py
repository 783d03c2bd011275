"""
Исключения менеджера бронирований.
"""

from typing import Any


class HotelBookingException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BookingValidationException(HotelBookingException, ValueError):
    """Исключение при недопустимых данных бронирования."""

    pass


class InvalidBookingParametersException(BookingValidationException):
    """Не передан один или несколько обязательных параметров."""

    def __init__(self) -> None:
        super().__init__("Недопустимые параметры бронирования")


class InvalidDateRangeException(BookingValidationException):
    """Дата начала бронирования позже даты окончания."""

    def __init__(self) -> None:
        super().__init__("Дата начала бронирования должна быть раньше даты окончания")


class RoomUnavailableException(BookingValidationException):
    """
    Номер нельзя забронировать.

    Используется и для несуществующего, и для занятого номера:
    вызывающая сторона не различает эти случаи.
    """

    def __init__(self, room_id: Any):
        super().__init__(f"Номер с ID {room_id} недоступен для бронирования.")
        self.room_id = room_id


class BookingNotFoundException(HotelBookingException):
    """Исключение: бронирование не найдено."""

    def __init__(self, booking_id: Any):
        super().__init__(f"Бронирование с ID {booking_id} не найдено.")
        self.booking_id = booking_id


class NotificationDeliveryException(HotelBookingException):
    """Исключение при ошибке доставки уведомления клиенту."""

    def __init__(self, customer_id: Any, reason: str):
        super().__init__(
            f"Не удалось отправить уведомление клиенту {customer_id}: {reason}"
        )
        self.customer_id = customer_id
        self.reason = reason
