from typing import Iterable, List

from trivia.models import Player, Room


def score_answer(room: Room, player: Player, answer: int, points: int) -> bool:
    """Apply scoring for one answer to the room's current question.

    Awards ``points`` when ``answer`` matches the correct option and marks the
    question as answered for this player. Returns whether the answer was correct.
    """
    question = room.current_question
    correct = question is not None and answer == question.correct_option_index
    if correct:
        player.score += points
    player.answered_question = room.current_question_index
    return correct


def has_answered_current(room: Room, player: Player) -> bool:
    return player.answered_question == room.current_question_index


def build_leaderboard(players: Iterable[Player]) -> List[dict]:
    # sorted() is stable, so tied players keep roster order
    return [p.to_dict() for p in sorted(players, key=lambda p: p.score, reverse=True)]
