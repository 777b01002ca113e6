import threading
from typing import Dict, List, Optional, Tuple

from trivia.models import Player, Room, WAITING


class GameState:
    """Room registry and player index for one server process.

    ``rooms`` keeps creation order, which matchmaking relies on. All
    mutations must happen while holding ``lock``.
    """

    def __init__(self):
        self.rooms: Dict[str, Room] = {}
        self.player_index: Dict[str, str] = {}
        self.lock = threading.RLock()

    def add_room(self, room: Room) -> None:
        self.rooms[room.id] = room

    def get_room(self, room_id: str) -> Optional[Room]:
        return self.rooms.get(room_id)

    def remove_room(self, room_id: str) -> Optional[Room]:
        """Drop a room and every player index entry still pointing at it."""
        room = self.rooms.pop(room_id, None)
        if room is None:
            return None
        for sid in [sid for sid, rid in self.player_index.items() if rid == room_id]:
            del self.player_index[sid]
        return room

    def locate(self, connection_id: str) -> Tuple[Optional[Room], Optional[Player]]:
        room_id = self.player_index.get(connection_id)
        room = self.rooms.get(room_id) if room_id else None
        if room is None:
            return None, None
        return room, room.find_player(connection_id)

    def open_rooms(self, max_players: int) -> List[Room]:
        """Waiting rooms that still have a free seat, oldest first."""
        return [r for r in self.rooms.values() if r.status == WAITING and len(r.players) < max_players]
