import logging
from typing import Optional

from trivia.models import FINISHED, PLAYING, WAITING, Room
from . import messages
from .matchmaker import announce_roster
from .scoring import build_leaderboard, has_answered_current, score_answer
from .settings import GameSettings
from .state import GameState


class LifecycleController:
    """Drives rooms through waiting -> playing -> finished.

    Timers are never cancelled. Each callback captures only the room id
    (plus the question index it expects) and re-reads live state under the
    lock when it fires, so a stale timer is a no-op.
    """

    def __init__(self, state: GameState, broadcaster, scheduler, settings: GameSettings, logger=None):
        self.state = state
        self.broadcaster = broadcaster
        self.scheduler = scheduler
        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)

    # ---- waiting -> playing ----

    def player_joined(self, room: Room) -> None:
        count = len(room.players)
        if room.status != WAITING or not self.settings.min_players <= count <= self.settings.max_players:
            return
        self.logger.info(f"[timer-set] room={room.id} stage=auto_start players={count} delay={self.settings.auto_start_delay}s")
        self.scheduler.call_later(self.settings.auto_start_delay, self._auto_start, room.id)

    def _auto_start(self, room_id: str) -> None:
        with self.state.lock:
            room = self.state.get_room(room_id)
            if room is None or room.status != WAITING or len(room.players) < self.settings.min_players:
                self.logger.info(f"[timer-abort] room={room_id} stage=auto_start")
                return
            self.start_game(room)

    def start_game(self, room: Room) -> None:
        room.status = PLAYING
        room.current_question_index = 0
        self.logger.info(f"[game-start] room={room.id} players={len(room.players)} questions={len(room.questions)}")
        if not room.questions:
            self.end_game(room)
            return
        self.broadcaster.to_room(room.id, messages.START, self._question_payload(room))
        self._schedule_advance(room)

    # ---- playing -> playing / finished ----

    def _schedule_advance(self, room: Room) -> None:
        self.scheduler.call_later(self.settings.question_duration, self._advance, room.id, room.current_question_index)

    def _advance(self, room_id: str, expected_index: int) -> None:
        with self.state.lock:
            room = self.state.get_room(room_id)
            if room is None or room.status != PLAYING or room.current_question_index != expected_index:
                self.logger.info(f"[timer-abort] room={room_id} stage=question expected_index={expected_index}")
                return
            room.current_question_index += 1
            if room.current_question_index >= len(room.questions):
                self.end_game(room)
                return
            self.logger.info(f"[question] room={room.id} number={room.current_question_index + 1}/{len(room.questions)}")
            self.broadcaster.to_room(room.id, messages.QUESTION, self._question_payload(room))
            self._schedule_advance(room)

    def end_game(self, room: Room) -> None:
        room.status = FINISHED
        leaderboard = build_leaderboard(room.players)
        self.logger.info(f"[game-end] room={room.id} leaderboard={leaderboard}")
        self.broadcaster.to_room(room.id, messages.END, messages.end_payload(leaderboard))
        self.scheduler.call_later(self.settings.room_cleanup_delay, self._teardown, room.id)

    def _teardown(self, room_id: str) -> None:
        with self.state.lock:
            room = self.state.remove_room(room_id)
            if room is None:
                return
            for player in room.players:
                self.broadcaster.unsubscribe(player.connection_id, room.id)
            self.logger.info(f"[room-delete] room={room_id} reason=finished")

    def _question_payload(self, room: Room):
        return messages.question_payload(room, self.settings.question_duration,
                                         reveal_answer=self.settings.reveal_correct_answer)

    # ---- player events ----

    def submit_answer(self, connection_id: str, answer: int) -> Optional[bool]:
        """Score an answer to the current question; None when it was ignored."""
        room, player = self.state.locate(connection_id)
        if room is None or player is None or room.status != PLAYING:
            return None
        if has_answered_current(room, player):
            self.logger.info(f"[answer-skip] room={room.id} sid={connection_id} question={room.current_question_index} already answered")
            return None
        correct = score_answer(room, player, answer, self.settings.points_per_correct_answer)
        self.broadcaster.to_connection(connection_id, messages.RESULT, messages.result_payload(correct, player))
        self.broadcaster.to_room(room.id, messages.SCORES, messages.scores_payload(room))
        return correct

    def player_left(self, connection_id: str, unsubscribe: bool = False) -> None:
        room_id = self.state.player_index.pop(connection_id, None)
        room = self.state.get_room(room_id) if room_id else None
        if room is None:
            return
        player = room.remove_player(connection_id)
        if unsubscribe:
            self.broadcaster.unsubscribe(connection_id, room.id)
        name = player.display_name if player else 'Unknown'
        self.logger.info(f"[disconnect] room={room.id} sid={connection_id} name={name!r} remaining={len(room.players)}")
        if not room.players:
            self.state.remove_room(room.id)
            self.logger.info(f"[room-delete] room={room.id} reason=empty")
            self.broadcaster.to_all(messages.ROOMS, messages.rooms_payload(self.state.open_rooms(self.settings.max_players)))
            return
        # A waiting room left with too few players keeps its pending auto-start
        # timer; the timer re-checks the player count when it fires.
        announce_roster(self.state, self.broadcaster, room, self.settings)
