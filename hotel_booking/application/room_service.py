"""
Сервис управления номерами в отеле.
"""

from threading import RLock
from typing import Any, Callable, List, Optional, Tuple

from ..domain.interfaces import ILogger, NullLogger
from ..domain.models import Room, same_id

RoomFilter = Callable[[Room], bool]


class RoomService:
    """
    Хранит номера отеля в порядке добавления.

    Сервис не выбрасывает исключений: отсутствующий номер и None
    на входе дают пустой результат или ничего не меняют.
    """

    def __init__(self, logger: Optional[ILogger] = None):
        self._rooms: List[Room] = []
        self._lock = RLock()
        self._logger = logger or NullLogger()

    def add_room(self, room: Optional[Room]) -> None:
        """Добавляет номер. None игнорируется."""
        if room is None:
            self._logger.debug("Пропуск добавления: номер не передан")
            return
        with self._lock:
            self._rooms.append(room)
        self._logger.info("Номер добавлен", room_id=room.room_id, type=room.type)

    def find_room_by_id(self, room_id: Any) -> Optional[Room]:
        """Ищет первый номер с указанным идентификатором."""
        if room_id is None:
            return None
        with self._lock:
            return next(
                (room for room in self._rooms if same_id(room.room_id, room_id)),
                None,
            )

    def get_available_rooms(self, predicate: Optional[RoomFilter]) -> List[Room]:
        """
        Возвращает номера, удовлетворяющие фильтру, в порядке добавления.

        Доступность номера отдельно не проверяется, это задача фильтра.
        Без фильтра возвращается пустой список.
        """
        if predicate is None:
            return []
        with self._lock:
            return [room for room in self._rooms if predicate(room)]

    def update_room_availability(self, room_id: Any, available: bool) -> None:
        """Обновляет доступность номера. Неизвестный номер игнорируется."""
        if room_id is None:
            return
        with self._lock:
            for index, room in enumerate(self._rooms):
                if same_id(room.room_id, room_id):
                    self._rooms[index] = room.with_availability(available)
                    break
            else:
                self._logger.debug(
                    "Номер для обновления доступности не найден", room_id=room_id
                )
                return
        self._logger.info(
            "Доступность номера обновлена", room_id=room_id, available=available
        )

    def get_all_rooms(self) -> Tuple[Room, ...]:
        """Возвращает неизменяемый снимок всех номеров."""
        with self._lock:
            return tuple(self._rooms)
