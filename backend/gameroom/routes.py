from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the game room server!'})

@main.route('/rooms')
def list_rooms():
    """Room ids, player counts and status per game kind. Never includes words."""
    return jsonify(current_app.extensions['gameroom'].summary())
