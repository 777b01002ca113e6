from dataclasses import dataclass


def _as_bool(value) -> bool:
    # Config values may arrive as raw env strings such as 'false' or '0'
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)


@dataclass(frozen=True)
class GameSettings:
    auto_start_delay: float = 3
    question_duration: float = 15
    room_cleanup_delay: float = 60
    min_players: int = 2
    max_players: int = 4
    questions_per_game: int = 10
    points_per_correct_answer: int = 10
    reveal_correct_answer: bool = False

    @classmethod
    def from_config(cls, cfg) -> 'GameSettings':
        """Build settings from a Flask config mapping, falling back to defaults."""
        defaults = cls()
        return cls(
            auto_start_delay=float(cfg.get('AUTO_START_DELAY_SEC', defaults.auto_start_delay)),
            question_duration=float(cfg.get('QUESTION_DURATION_SEC', defaults.question_duration)),
            room_cleanup_delay=float(cfg.get('ROOM_CLEANUP_DELAY_SEC', defaults.room_cleanup_delay)),
            min_players=int(cfg.get('MIN_PLAYERS', defaults.min_players)),
            max_players=int(cfg.get('MAX_PLAYERS_PER_ROOM', defaults.max_players)),
            questions_per_game=int(cfg.get('QUESTIONS_PER_GAME', defaults.questions_per_game)),
            points_per_correct_answer=int(cfg.get('POINTS_PER_CORRECT_ANSWER', defaults.points_per_correct_answer)),
            reveal_correct_answer=_as_bool(cfg.get('REVEAL_CORRECT_ANSWER', defaults.reveal_correct_answer)),
        )
