import os


def _flag(name, default='0'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma separated list of origins allowed for CORS and Socket.IO
    CLIENT_URL = os.environ.get('CLIENT_URL') or 'http://localhost:4321'
    PORT = int(os.environ.get('PORT', '3001'))
    # Game clock (seconds)
    AUTO_START_DELAY_SEC = int(os.environ.get('AUTO_START_DELAY_SEC', '3'))
    QUESTION_DURATION_SEC = int(os.environ.get('QUESTION_DURATION_SEC', '15'))
    ROOM_CLEANUP_DELAY_SEC = int(os.environ.get('ROOM_CLEANUP_DELAY_SEC', '60'))
    # Room sizing
    MIN_PLAYERS = int(os.environ.get('MIN_PLAYERS', '2'))
    MAX_PLAYERS_PER_ROOM = int(os.environ.get('MAX_PLAYERS_PER_ROOM', '4'))
    QUESTIONS_PER_GAME = int(os.environ.get('QUESTIONS_PER_GAME', '10'))
    POINTS_PER_CORRECT_ANSWER = int(os.environ.get('POINTS_PER_CORRECT_ANSWER', '10'))
    # Legacy clients read correctAnswer from the question payload. Off by default.
    REVEAL_CORRECT_ANSWER = _flag('REVEAL_CORRECT_ANSWER')
