from typing import Any, Dict, Optional

from .application import BookingService, RoomService
from .config import HotelSettings
from .domain.interfaces import INotificationService
from .infrastructure import ConsoleLogger, ConsoleNotificationService


def bootstrap_app(
    settings: Optional[HotelSettings] = None,
    notification_service: Optional[INotificationService] = None,
) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    # 1. Настройки: явно переданные или из переменных окружения
    settings = settings or HotelSettings.from_env()
    logger = ConsoleLogger(level=settings.log_level)

    # 2. Создаем сервисы, передавая им зависимости
    room_service = RoomService(logger=logger)
    notification_service = notification_service or ConsoleNotificationService(
        logger=logger
    )
    booking_service = BookingService(
        room_service=room_service,
        notification_service=notification_service,
        settings=settings,
        logger=logger,
    )

    # Возвращаем настроенные компоненты
    return {
        "settings": settings,
        "logger": logger,
        "room_service": room_service,
        "notification_service": notification_service,
        "booking_service": booking_service,
    }
