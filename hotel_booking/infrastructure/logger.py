"""
Реализации логгера для менеджера бронирований.
"""

import json
import sys
from typing import Any, Dict

from ..domain.interfaces import ILogger

LEVELS: Dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
}


class ConsoleLogger(ILogger):
    """Простая реализация логгера, выводящая сообщения в консоль."""

    def __init__(self, level: str = "INFO"):
        if level.upper() not in LEVELS:
            raise ValueError(f"Неизвестный уровень логирования: {level}")
        self._threshold = LEVELS[level.upper()]

    def _log(self, level: str, message: str, context: Dict[str, Any]) -> None:
        if LEVELS[level] < self._threshold:
            return
        stream = sys.stderr if LEVELS[level] >= LEVELS["WARNING"] else sys.stdout
        print(f"[{level}] {message}", file=stream, flush=True)
        if context:
            print(
                "  Context:",
                json.dumps(context, default=str, ensure_ascii=False, indent=2),
                file=stream,
                flush=True,
            )

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, kwargs)

