from typing import Any, Callable, Dict, Iterator, Optional, Tuple


class RoomRegistry:
    """In-memory rooms, one independent mapping per game kind.

    Rooms are created on first join and stay allocated until the process
    exits unless the caller discards them explicitly.
    """

    def __init__(self, factories: Dict[str, Callable[[str], Any]]):
        self._factories = dict(factories)
        self._rooms: Dict[str, Dict[str, Any]] = {kind: {} for kind in self._factories}

    @property
    def kinds(self) -> Tuple[str, ...]:
        return tuple(self._rooms)

    def get(self, kind: str, room_id: str) -> Optional[Any]:
        return self._rooms[kind].get(room_id)

    def get_or_create(self, kind: str, room_id: str) -> Any:
        rooms = self._rooms[kind]
        room = rooms.get(room_id)
        if room is None:
            room = self._factories[kind](room_id)
            rooms[room_id] = room
        return room

    def discard(self, kind: str, room_id: str) -> None:
        self._rooms[kind].pop(room_id, None)

    def rooms(self, kind: str) -> Iterator[Tuple[str, Any]]:
        return iter(list(self._rooms[kind].items()))

    def __len__(self) -> int:
        return sum(len(rooms) for rooms in self._rooms.values())
