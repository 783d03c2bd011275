"""
Реализации сервиса уведомлений клиентов.

Реальная доставка (SMS, email, push) здесь не реализуется.
"""

from typing import Iterable, List, Optional, Set, Tuple

from ..domain.exceptions import NotificationDeliveryException
from ..domain.interfaces import ILogger, INotificationService, NullLogger


class ConsoleNotificationService(INotificationService):
    """Сервис уведомлений, выводящий сообщения в консоль."""

    def __init__(self, logger: Optional[ILogger] = None):
        self._logger = logger or NullLogger()

    def send_notification(self, customer_id: int, message: str) -> None:
        print(f"[NOTIFY] customer={customer_id}: {message}", flush=True)
        self._logger.debug("Уведомление отправлено", customer_id=customer_id)


class InMemoryNotificationService(INotificationService):
    """Сервис уведомлений, сохраняющий отправленные сообщения в памяти."""

    def __init__(self, unreachable: Iterable[int] = ()):
        self.sent: List[Tuple[int, str]] = []
        # Клиенты, доставка которым завершается ошибкой
        self._unreachable: Set[int] = set(unreachable)

    def send_notification(self, customer_id: int, message: str) -> None:
        if customer_id in self._unreachable:
            raise NotificationDeliveryException(customer_id, "клиент недоступен")
        self.sent.append((customer_id, message))

    def messages_for(self, customer_id: int) -> List[str]:
        """Возвращает сообщения, отправленные указанному клиенту."""
        return [message for recipient, message in self.sent if recipient == customer_id]
