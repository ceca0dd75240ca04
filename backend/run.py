from gameroom import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # Werkzeug dev server; put a real WSGI server in front for production
    socketio.run(app, host=app.config['HOST'], port=app.config['PORT'], allow_unsafe_werkzeug=True)
