import os

from trivia import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # Use SocketIO server to enable websockets in dev
    socketio.run(app, host=os.environ.get('HOST', '0.0.0.0'), port=app.config['PORT'], debug=True)
