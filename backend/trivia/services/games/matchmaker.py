import logging
import random
import time
import uuid
from typing import List, Sequence

from trivia.models import Player, Question, Room
from . import messages
from .settings import GameSettings
from .state import GameState


def pick_questions(bank: Sequence[Question], count: int, rng: random.Random) -> List[Question]:
    """Random sample without replacement, in random order."""
    return rng.sample(list(bank), k=min(count, len(bank)))


def new_room_id() -> str:
    return f"room_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


def default_display_name(connection_id: str) -> str:
    return f"Player {connection_id[:6]}"


def announce_roster(state: GameState, broadcaster, room: Room, settings: GameSettings) -> None:
    """Send the room roster to its members and the open-room list to everyone."""
    broadcaster.to_room(room.id, messages.PLAYERS, messages.players_payload(room))
    broadcaster.to_all(messages.ROOMS, messages.rooms_payload(state.open_rooms(settings.max_players)))


class Matchmaker:
    def __init__(self, state: GameState, broadcaster, settings: GameSettings,
                 question_bank: Sequence[Question], rng: random.Random, logger=None):
        self.state = state
        self.broadcaster = broadcaster
        self.settings = settings
        self.question_bank = question_bank
        self.rng = rng
        self.logger = logger or logging.getLogger(__name__)

    def find_or_create_room(self) -> Room:
        open_rooms = self.state.open_rooms(self.settings.max_players)
        if open_rooms:
            return open_rooms[0]
        room = Room(
            id=new_room_id(),
            questions=tuple(pick_questions(self.question_bank, self.settings.questions_per_game, self.rng)),
        )
        self.state.add_room(room)
        self.logger.info(f"[room-create] room={room.id} questions={len(room.questions)}")
        return room

    def join_or_create(self, display_name: str, connection_id: str) -> str:
        """Seat a connection in the oldest open room, creating one if needed.

        Caller holds ``state.lock`` and has already checked for a duplicate join.
        """
        room = self.find_or_create_room()
        player = Player(connection_id=connection_id,
                        display_name=display_name or default_display_name(connection_id))
        room.players.append(player)
        self.state.player_index[connection_id] = room.id
        self.broadcaster.subscribe(connection_id, room.id)
        self.logger.info(f"[join] room={room.id} sid={connection_id} name={player.display_name!r} players={len(room.players)}")
        announce_roster(self.state, self.broadcaster, room, self.settings)
        return room.id
