from datetime import date

import pytest
from pydantic import ValidationError

from hotel_booking.domain.exceptions import (
    BookingNotFoundException,
    InvalidBookingParametersException,
    RoomUnavailableException,
)
from hotel_booking.domain.models import Booking, Customer, Room


def test_room_defaults_to_available():
    """Тест: новый номер по умолчанию доступен."""
    room = Room(room_id=1, type="Standard", price=100.0)

    assert room.available is True


def test_room_price_cannot_be_negative():
    """Тест: отрицательная цена номера отклоняется."""
    with pytest.raises(ValidationError):
        Room(room_id=1, type="Standard", price=-1.0)


def test_room_is_immutable():
    """Тест: флаг доступности нельзя изменить напрямую."""
    room = Room(room_id=1, type="Standard", price=100.0)

    with pytest.raises(ValidationError):
        room.available = False


def test_with_availability_returns_copy():
    """Тест: смена доступности создает новый объект, исходный не меняется."""
    room = Room(room_id=1, type="Deluxe", price=200.0)

    updated = room.with_availability(False)

    assert updated.available is False
    assert room.available is True
    assert updated.room_id == room.room_id
    assert updated.price == room.price


def test_customer_fields():
    customer = Customer(customer_id=123, name="Иван")

    assert customer.customer_id == 123
    assert customer.name == "Иван"


def test_booking_rendering_and_nights():
    """Тест: строковое представление бронирования содержит все поля."""
    booking = Booking(
        booking_id=1,
        room_id=101,
        customer_id=123,
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 4),
    )

    assert str(booking) == (
        "Booking(booking_id=1, room_id=101, customer_id=123, "
        "start_date=2024-01-01, end_date=2024-01-04)"
    )
    assert booking.nights == 3


def test_exception_messages():
    """Тест: сообщения исключений содержат идентификаторы."""
    room_error = RoomUnavailableException(101)
    booking_error = BookingNotFoundException(999)

    assert "недоступен" in str(room_error)
    assert room_error.room_id == 101
    assert "не найдено" in str(booking_error)
    assert booking_error.booking_id == 999
    assert isinstance(InvalidBookingParametersException(), ValueError)


def test_models_do_not_coerce_ids():
    """Тест: строковый ID не приводится к int."""
    with pytest.raises(ValidationError):
        Room(room_id="1", type="Standard", price=100.0)
    with pytest.raises(ValidationError):
        Booking(
            booking_id="1",
            room_id=101,
            customer_id=123,
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 2),
        )
