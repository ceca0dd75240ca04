"""Inbound request records and outbound event values.

Socket payloads arrive as loosely-typed JSON. The ``parse_*`` helpers turn
them into small records or return ``None`` when the payload is unusable, so
the game engines only ever see validated input.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

BOARD_SIZE = 9

# Outbound event names
PLAYER_ASSIGNMENT = 'playerAssignment'
GAME_STATE = 'gameState'
ROOM_FULL = 'roomFull'
DRAW = 'draw'
CORRECT_GUESS = 'correctGuess'

# Marks an event sent with no argument at all; None is sent as null
NO_PAYLOAD = object()


@dataclass
class MoveRequest:
    room_id: str
    index: int


@dataclass
class DrawRequest:
    room_id: str
    data: Any


@dataclass
class GuessRequest:
    room_id: str
    text: str


@dataclass
class Outbound:
    """One event to deliver after a state change.

    By default the event goes to the whole room group. ``to_sender`` limits
    it to the connection that triggered it. When ``private_to`` is set, that
    connection gets ``private_payload`` and everyone else gets ``payload``.
    """
    event: str
    payload: Any = NO_PAYLOAD
    to_sender: bool = False
    private_to: Optional[str] = None
    private_payload: Any = None


@dataclass
class Result:
    accepted: bool
    events: List[Outbound] = field(default_factory=list)


def ignored() -> Result:
    return Result(accepted=False)


def parse_room_id(data) -> Optional[str]:
    # bool is an int subclass; "true" is not a room
    if isinstance(data, bool):
        return None
    if isinstance(data, int):
        return str(data)
    if isinstance(data, str) and data:
        return data
    return None


def parse_move(data) -> Optional[MoveRequest]:
    if not isinstance(data, dict):
        return None
    room_id = parse_room_id(data.get('roomId'))
    index = data.get('index')
    if room_id is None or isinstance(index, bool) or not isinstance(index, int):
        return None
    if not 0 <= index < BOARD_SIZE:
        return None
    return MoveRequest(room_id=room_id, index=index)


def parse_draw(data) -> Optional[DrawRequest]:
    if not isinstance(data, dict):
        return None
    room_id = parse_room_id(data.get('roomId'))
    if room_id is None:
        return None
    return DrawRequest(room_id=room_id, data=data.get('data'))


def parse_guess(data) -> Optional[GuessRequest]:
    if not isinstance(data, dict):
        return None
    room_id = parse_room_id(data.get('roomId'))
    text = data.get('guess')
    if room_id is None or not isinstance(text, str):
        return None
    return GuessRequest(room_id=room_id, text=text)
