"""
Интерфейсы (порты) для внешних зависимостей менеджера бронирований.
"""

from typing import Any, Protocol


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class INotificationService(Protocol):
    """Внешний сервис для уведомления клиентов."""

    def send_notification(self, customer_id: int, message: str) -> None:
        """Отправляет уведомление клиенту."""
        ...


class NullLogger(ILogger):
    """Логгер, который ничего не выводит. Используется по умолчанию."""

    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    def info(self, message: str, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    def error(self, message: str, **kwargs: Any) -> None:
        pass
