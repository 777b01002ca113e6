from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the trivia game server!'})


@main.route('/api/health')
def health():
    stats = current_app.extensions['trivia'].stats()
    return jsonify({'status': 'ok', **stats})


@main.route('/api/game/rooms')
def list_rooms():
    """Open rooms, same shape as the ``game:rooms`` socket event."""
    return jsonify(current_app.extensions['trivia'].lobby_snapshot())
