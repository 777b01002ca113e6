import time
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

WAITING = 'waiting'
PLAYING = 'playing'
FINISHED = 'finished'


@dataclass(frozen=True)
class Question:
    id: int
    text: str
    options: Tuple[str, str, str, str]
    correct_option_index: int
    category: str

    def __post_init__(self):
        if len(self.options) != 4:
            raise ValueError(f"question {self.id} must have exactly 4 options")
        if not 0 <= self.correct_option_index <= 3:
            raise ValueError(f"question {self.id} has an out of range correct option")

    def to_dict(self, reveal_answer: bool = False):
        data = {
            'id': self.id,
            'question': self.text,
            'options': list(self.options),
            'category': self.category,
        }
        if reveal_answer:
            data['correctAnswer'] = self.correct_option_index
        return data


@dataclass
class Player:
    connection_id: str
    display_name: str
    score: int = 0
    # Index of the last question this player answered, guards against re-scoring
    answered_question: Optional[int] = None

    def to_dict(self):
        return {'name': self.display_name, 'score': self.score}


@dataclass
class Room:
    id: str
    questions: Tuple[Question, ...]
    players: List[Player] = field(default_factory=list)
    current_question_index: int = 0
    status: str = WAITING
    created_at: float = field(default_factory=time.time)

    @property
    def current_question(self) -> Optional[Question]:
        if 0 <= self.current_question_index < len(self.questions):
            return self.questions[self.current_question_index]
        return None

    def find_player(self, connection_id: str) -> Optional[Player]:
        for p in self.players:
            if p.connection_id == connection_id:
                return p
        return None

    def remove_player(self, connection_id: str) -> Optional[Player]:
        player = self.find_player(connection_id)
        if player is not None:
            self.players.remove(player)
        return player

    def roster(self):
        return [p.to_dict() for p in self.players]

    def to_dict(self):
        """Lobby summary used by the room list."""
        return {
            'id': self.id,
            'players': self.roster(),
            'playerCount': len(self.players),
        }
