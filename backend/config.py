import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma-separated list of origins allowed to open a socket
    CORS_ALLOWED_ORIGINS = [o.strip() for o in os.environ.get('CORS_ALLOWED_ORIGINS', 'http://localhost:3000').split(',') if o.strip()]
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '4000'))
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    # Empty rooms stay allocated unless this is enabled
    REAP_EMPTY_ROOMS = os.environ.get('REAP_EMPTY_ROOMS', '0') == '1'
    # Send the drawing word to guessers too (old clients hid it themselves)
    DRAW_GUESS_REVEAL_WORD = os.environ.get('DRAW_GUESS_REVEAL_WORD', '0') == '1'
