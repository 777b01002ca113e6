import logging
import random
from typing import Optional, Sequence

from trivia.models import FINISHED, Question
from trivia.questions import QUESTION_BANK
from . import messages
from .lifecycle import LifecycleController
from .matchmaker import Matchmaker
from .settings import GameSettings
from .state import GameState


class GameService:
    """Entry point for socket handlers and HTTP routes.

    Owns the room registry and player index. Every public method runs under
    the state lock so handlers on different threads never interleave.
    """

    def __init__(self, broadcaster, scheduler, settings: Optional[GameSettings] = None,
                 question_bank: Sequence[Question] = QUESTION_BANK,
                 rng: Optional[random.Random] = None, logger=None):
        self.settings = settings or GameSettings()
        self.broadcaster = broadcaster
        self.logger = logger or logging.getLogger(__name__)
        self.state = GameState()
        self.matchmaker = Matchmaker(self.state, broadcaster, self.settings, question_bank,
                                     rng or random.Random(), logger=self.logger)
        self.lifecycle = LifecycleController(self.state, broadcaster, scheduler, self.settings, logger=self.logger)

    def join(self, connection_id: str, display_name: str = '') -> str:
        with self.state.lock:
            room_id = self.state.player_index.get(connection_id)
            if room_id is not None:
                room = self.state.get_room(room_id)
                if room is not None and room.status != FINISHED:
                    self.logger.info(f"[join-skip] room={room_id} sid={connection_id} already seated")
                    return room_id
                # Finished game: free the seat before matchmaking again
                self.lifecycle.player_left(connection_id, unsubscribe=True)
            room_id = self.matchmaker.join_or_create(display_name, connection_id)
            self.lifecycle.player_joined(self.state.get_room(room_id))
            return room_id

    def answer(self, connection_id: str, answer: int) -> Optional[bool]:
        with self.state.lock:
            return self.lifecycle.submit_answer(connection_id, answer)

    def leave(self, connection_id: str) -> None:
        with self.state.lock:
            self.lifecycle.player_left(connection_id, unsubscribe=True)

    def disconnect(self, connection_id: str) -> None:
        with self.state.lock:
            self.lifecycle.player_left(connection_id)

    def lobby_snapshot(self):
        with self.state.lock:
            return messages.rooms_payload(self.state.open_rooms(self.settings.max_players))

    def send_lobby(self, connection_id: str) -> None:
        self.broadcaster.to_connection(connection_id, messages.ROOMS, self.lobby_snapshot())

    def stats(self):
        with self.state.lock:
            return {'rooms': len(self.state.rooms), 'players': len(self.state.player_index)}
