from typing import Any, Optional

from flask_socketio import SocketIO, join_room

from gameroom.messages import NO_PAYLOAD


def group_key(kind: str, room_id: str) -> str:
    return f"{kind}:{room_id}"


class SocketIOChannel:
    """Broadcast groups and point-to-point sends over Flask-SocketIO.

    A connection's identity is its Socket.IO sid, which is also the name of
    its private room, so ``send`` addresses a sid or a group the same way.
    """

    def __init__(self, socketio: SocketIO, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def join_group(self, sid: str, key: str) -> None:
        join_room(key, sid=sid, namespace=self.namespace)

    def send(self, target: str, event: str, payload: Any = NO_PAYLOAD, skip: Optional[str] = None) -> None:
        args = () if payload is NO_PAYLOAD else (payload,)
        self.socketio.emit(event, *args, to=target, namespace=self.namespace, skip_sid=skip)
