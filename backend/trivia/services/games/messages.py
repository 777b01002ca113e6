"""Socket.IO event names and payload builders for the trivia game."""

from typing import Iterable, List

from trivia.models import Player, Room

ROOMS = 'game:rooms'
JOIN = 'game:join'
LEAVE = 'game:leave'
PLAYERS = 'game:players'
START = 'game:start'
QUESTION = 'game:question'
ANSWER = 'game:answer'
RESULT = 'game:result'
SCORES = 'game:scores'
END = 'game:end'


def rooms_payload(rooms: Iterable[Room]):
    return {'rooms': [room.to_dict() for room in rooms]}


def players_payload(room: Room):
    return {'players': room.roster()}


def scores_payload(room: Room):
    return {'players': room.roster()}


def question_payload(room: Room, duration: float, reveal_answer: bool = False):
    """Payload shared by ``game:start`` and ``game:question``."""
    return {
        'question': room.current_question.to_dict(reveal_answer=reveal_answer),
        'questionNumber': room.current_question_index + 1,
        'totalQuestions': len(room.questions),
        'duration': duration,
    }


def result_payload(correct: bool, player: Player):
    return {'correct': correct, 'score': player.score}


def end_payload(leaderboard: List[dict]):
    return {'leaderboard': leaderboard}
