from flask import current_app, request
from trivia import socketio
from trivia.services.games import messages

MAX_NAME_LENGTH = 32


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _service():
    return current_app.extensions['trivia']


def _clean_name(value) -> str:
    if not isinstance(value, str):
        return ''
    return value.strip()[:MAX_NAME_LENGTH]


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    sid = _get_sid()
    _service().disconnect(sid)
    current_app.logger.info(f"[disconnected] sid={sid} reason={reason}")


def handle_rooms(data=None):
    _service().send_lobby(_get_sid())


def handle_join(data=None):
    name = _clean_name(data.get('name') if isinstance(data, dict) else None)
    _service().join(_get_sid(), name)


def handle_answer(data=None):
    answer = data.get('answer') if isinstance(data, dict) else None
    # bool is an int subclass; True must not count as option 1
    if not isinstance(answer, int) or isinstance(answer, bool):
        current_app.logger.warning(f"[drop] sid={_get_sid()} event={messages.ANSWER} payload={data!r}")
        return
    _service().answer(_get_sid(), answer)


def handle_leave(data=None):
    _service().leave(_get_sid())


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register the trivia Socket.IO event handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event(messages.ROOMS, handle_rooms, namespace=namespace)
    socketio.on_event(messages.JOIN, handle_join, namespace=namespace)
    socketio.on_event(messages.ANSWER, handle_answer, namespace=namespace)
    socketio.on_event(messages.LEAVE, handle_leave, namespace=namespace)
