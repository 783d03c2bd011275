"""
Инфраструктурный слой: логгеры и сервисы уведомлений.
"""

from ..domain.interfaces import NullLogger
from .logger import ConsoleLogger
from .notifications import ConsoleNotificationService, InMemoryNotificationService

__all__ = [
    "ConsoleLogger",
    "NullLogger",
    "ConsoleNotificationService",
    "InMemoryNotificationService",
]
