import heapq
import itertools
import os
import random
import sys
from collections import defaultdict

import pytest

# Ensure the backend root (containing the `trivia` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from trivia import create_app, socketio
from trivia.services.games import GameService, GameSettings


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CLIENT_URL = 'http://localhost:4321'
    AUTO_START_DELAY_SEC = 3
    QUESTION_DURATION_SEC = 15
    ROOM_CLEANUP_DELAY_SEC = 60
    MIN_PLAYERS = 2
    MAX_PLAYERS_PER_ROOM = 4
    QUESTIONS_PER_GAME = 10
    POINTS_PER_CORRECT_ANSWER = 10
    REVEAL_CORRECT_ANSWER = False


class ManualScheduler:
    """Timer scheduler driven by an explicit clock."""

    def __init__(self):
        self.now = 0.0
        self._timers = []
        self._seq = itertools.count()

    def call_later(self, delay, callback, *args):
        heapq.heappush(self._timers, (self.now + delay, next(self._seq), callback, args))

    def advance(self, seconds):
        target = self.now + seconds
        while self._timers and self._timers[0][0] <= target:
            due, _, callback, args = heapq.heappop(self._timers)
            self.now = due
            callback(*args)
        self.now = target

    @property
    def pending(self):
        return len(self._timers)


class RecordingBroadcaster:
    def __init__(self):
        self.events = []
        self.subscriptions = defaultdict(set)

    def to_room(self, room_id, event, payload):
        self.events.append(('room', room_id, event, payload))

    def to_all(self, event, payload):
        self.events.append(('all', None, event, payload))

    def to_connection(self, connection_id, event, payload):
        self.events.append(('connection', connection_id, event, payload))

    def subscribe(self, connection_id, room_id):
        self.subscriptions[room_id].add(connection_id)

    def unsubscribe(self, connection_id, room_id):
        self.subscriptions[room_id].discard(connection_id)

    def named(self, event):
        return [e for e in self.events if e[2] == event]

    def last(self, event):
        matches = self.named(event)
        return matches[-1] if matches else None

    def clear(self):
        self.events.clear()


@pytest.fixture()
def scheduler():
    return ManualScheduler()


@pytest.fixture()
def broadcaster():
    return RecordingBroadcaster()


@pytest.fixture()
def make_service(scheduler, broadcaster):
    def _make(**kwargs):
        kwargs.setdefault('settings', GameSettings())
        kwargs.setdefault('rng', random.Random(7))
        return GameService(broadcaster, scheduler, **kwargs)
    return _make


@pytest.fixture()
def service(make_service):
    return make_service()


@pytest.fixture()
def flask_app(scheduler):
    application = create_app(TestConfig, scheduler=scheduler, rng=random.Random(7))
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app):
    clients = []

    def _connect():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        clients.append(test_client)
        return test_client

    yield _connect
    for test_client in clients:
        if test_client.is_connected():
            test_client.disconnect()
