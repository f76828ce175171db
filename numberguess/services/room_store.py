"""
Room Store

In-memory table of active rooms keyed by room id.
"""

from typing import Dict, List, Optional
from ..models.room import Room


class RoomStore:
    """
    Volatile room table. Nothing is persisted; a second process would hold
    its own, disjoint table.
    """

    def __init__(self):
        self._rooms: Dict[str, Room] = {}

    def create(self, room_id: str, host_sid: str) -> Room:
        """Create a room with a single host player, replacing any room with the same id."""
        room = Room(room_id=room_id, players=[host_sid], current_turn=host_sid)
        self._rooms[room_id] = room
        return room

    def get(self, room_id: str) -> Optional[Room]:
        return self._rooms.get(room_id)

    def delete(self, room_id: str) -> None:
        self._rooms.pop(room_id, None)

    def rooms_with_player(self, sid: str) -> List[Room]:
        """Rooms the given client currently plays in (snapshot, safe to mutate the store)."""
        return [room for room in self._rooms.values() if room.has_player(sid)]

    def all(self) -> List[Room]:
        return list(self._rooms.values())

    def __contains__(self, room_id: str) -> bool:
        return room_id in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)
