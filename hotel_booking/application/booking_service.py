"""
Сервис управления бронированиями в отеле.

Координирует проверку доступности номера через RoomService,
ведение списка бронирований и уведомление клиентов.
"""

from datetime import date
from threading import RLock
from typing import Any, List, Optional, Tuple

from ..config import HotelSettings
from ..domain.exceptions import (
    BookingNotFoundException,
    InvalidBookingParametersException,
    InvalidDateRangeException,
    RoomUnavailableException,
)
from ..domain.interfaces import ILogger, INotificationService, NullLogger
from ..domain.models import Booking, is_calendar_date, is_entity_id, same_id
from .room_service import RoomService


class BookingService:
    """Сервис приложения для работы с бронированиями."""

    def __init__(
        self,
        room_service: RoomService,
        notification_service: INotificationService,
        settings: Optional[HotelSettings] = None,
        logger: Optional[ILogger] = None,
    ):
        self._bookings: List[Booking] = []
        self._room_service = room_service
        self._notification_service = notification_service
        self._settings = settings or HotelSettings()
        self._logger = logger or NullLogger()
        # Проверка номера и смена доступности выполняются под одной блокировкой
        self._lock = RLock()

    def create_booking(
        self,
        booking_id: Optional[int],
        room_id: Optional[int],
        customer_id: Optional[int],
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> Booking:
        """
        Создает бронирование и помечает номер недоступным.

        Raises:
            InvalidBookingParametersException: параметр не передан или имеет
                неверный тип (ID не int, дата не date).
            InvalidDateRangeException: дата начала позже даты окончания.
            RoomUnavailableException: номер не найден или уже занят.
        """
        ids = (booking_id, room_id, customer_id)
        if not all(is_entity_id(value) for value in ids) or not (
            is_calendar_date(start_date) and is_calendar_date(end_date)
        ):
            raise InvalidBookingParametersException()
        if start_date > end_date:
            raise InvalidDateRangeException()

        with self._lock:
            room = self._room_service.find_room_by_id(room_id)
            if room is None or not room.available:
                self._logger.warning(
                    "Номер недоступен для бронирования",
                    room_id=room_id,
                    reason="not_found" if room is None else "occupied",
                )
                raise RoomUnavailableException(room_id)

            booking = Booking(
                booking_id=booking_id,
                room_id=room_id,
                customer_id=customer_id,
                start_date=start_date,
                end_date=end_date,
            )
            self._bookings.append(booking)
            self._room_service.update_room_availability(room_id, False)
            self._logger.info("Бронирование создано", booking=str(booking))

            self._notify(
                customer_id,
                self._settings.confirmation_template.format(booking=booking),
                booking,
            )
            return booking

    def cancel_booking(self, booking_id: Any) -> None:
        """
        Отменяет бронирование: освобождает номер, уведомляет клиента
        и удаляет бронирование из списка.

        Raises:
            BookingNotFoundException: бронирование с таким ID не найдено.
        """
        with self._lock:
            booking = self.find_booking_by_id(booking_id)
            if booking is None:
                raise BookingNotFoundException(booking_id)

            self._room_service.update_room_availability(booking.room_id, True)
            self._notify(
                booking.customer_id,
                self._settings.cancellation_template.format(booking=booking),
                booking,
            )
            # list.remove удаляет первое совпадение, то есть найденное бронирование
            self._bookings.remove(booking)
            self._logger.info("Бронирование отменено", booking=str(booking))

    def find_booking_by_id(self, booking_id: Any) -> Optional[Booking]:
        """Находит первое бронирование с указанным ID."""
        with self._lock:
            return next(
                (b for b in self._bookings if same_id(b.booking_id, booking_id)),
                None,
            )

    def get_all_bookings(self) -> Tuple[Booking, ...]:
        """Возвращает неизменяемый снимок всех бронирований."""
        with self._lock:
            return tuple(self._bookings)

    def _notify(self, customer_id: int, message: str, booking: Booking) -> None:
        try:
            self._notification_service.send_notification(customer_id, message)
        except Exception as e:
            # Состояние уже изменено и не откатывается
            self._logger.error(
                "Ошибка отправки уведомления",
                customer_id=customer_id,
                booking=str(booking),
                error=str(e),
            )
            raise
