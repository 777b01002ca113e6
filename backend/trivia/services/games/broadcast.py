class SocketIOBroadcaster:
    """Deliver game events through Flask-SocketIO.

    Emits are fire-and-forget; nothing here waits for client acks.
    """

    def __init__(self, socketio, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def to_room(self, room_id: str, event: str, payload) -> None:
        self.socketio.emit(event, payload, to=room_id, namespace=self.namespace)

    def to_all(self, event: str, payload) -> None:
        self.socketio.emit(event, payload, namespace=self.namespace)

    def to_connection(self, connection_id: str, event: str, payload) -> None:
        self.socketio.emit(event, payload, to=connection_id, namespace=self.namespace)

    def subscribe(self, connection_id: str, room_id: str) -> None:
        self.socketio.server.enter_room(connection_id, room_id, namespace=self.namespace)

    def unsubscribe(self, connection_id: str, room_id: str) -> None:
        self.socketio.server.leave_room(connection_id, room_id, namespace=self.namespace)
