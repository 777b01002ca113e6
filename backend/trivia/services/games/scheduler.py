import logging


class BackgroundScheduler:
    """Run a callback after a delay on a Socket.IO background task.

    Uses ``socketio.sleep`` so the wait cooperates with eventlet/gevent as
    well as plain threads. There is no cancellation: callbacks are expected
    to re-check room state when they fire.
    """

    def __init__(self, socketio, logger=None):
        self.socketio = socketio
        self.logger = logger or logging.getLogger(__name__)

    def call_later(self, delay: float, callback, *args) -> None:
        def _worker():
            self.socketio.sleep(delay)
            try:
                callback(*args)
            except Exception:
                self.logger.exception(f"[timer-error] callback={getattr(callback, '__name__', callback)} args={args}")

        self.socketio.start_background_task(_worker)
