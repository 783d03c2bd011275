"""
Демонстрация менеджера бронирований: python -m hotel_booking
"""

from datetime import date, timedelta

from .bootstrap import bootstrap_app
from .domain.exceptions import BookingNotFoundException, RoomUnavailableException
from .domain.models import Room


def main() -> None:
    print("--- Демонстрация менеджера бронирований ---")
    app = bootstrap_app()
    room_service = app["room_service"]
    booking_service = app["booking_service"]

    # 1. Заполняем номерной фонд
    room_service.add_room(Room(room_id=101, type="Standard", price=100.0))
    room_service.add_room(Room(room_id=102, type="Deluxe", price=200.0))
    room_service.add_room(Room(room_id=103, type="Suite", price=300.0, available=False))

    # 2. Бронируем номер
    print("\n--- Создание бронирования ---")
    start_date = date.today()
    booking = booking_service.create_booking(
        1, 101, 123, start_date, start_date + timedelta(days=3)
    )
    print(f"Создано: {booking}, ночей: {booking.nights}")

    # 3. Повторное бронирование того же номера
    try:
        booking_service.create_booking(2, 101, 456, start_date, start_date)
    except RoomUnavailableException as e:
        print(f"Ошибка бронирования: {e}")

    free_rooms = room_service.get_available_rooms(lambda room: room.available)
    print(f"Свободные номера: {[room.room_id for room in free_rooms]}")

    # 4. Отмена бронирования
    print("\n--- Отмена бронирования ---")
    booking_service.cancel_booking(1)
    try:
        booking_service.cancel_booking(1)
    except BookingNotFoundException as e:
        print(f"Ошибка отмены: {e}")

    print(f"Бронирований осталось: {len(booking_service.get_all_bookings())}")
    print("\n--- Демонстрация завершена ---")


if __name__ == "__main__":
    main()
