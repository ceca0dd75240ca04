"""Wires socket events to rooms and game engines.

Socket.IO may run each inbound event on its own thread, so every public
handler holds the coordinator lock from room lookup through dispatch. A room
is never observed half-updated, and the events of one action are sent before
the next action touches any room.
"""

import functools
import threading
from typing import Dict, Iterable, Set, Tuple

from gameroom.channel import group_key
from gameroom.messages import CORRECT_GUESS, Outbound, Result, parse_draw, parse_guess, parse_move, parse_room_id


def serialized(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


class SessionCoordinator:
    def __init__(self, registry, channel, engines, logger, reap_empty_rooms: bool = False):
        self.registry = registry
        self.channel = channel
        self.engines = {engine.kind: engine for engine in engines}
        self.logger = logger
        self.reap_empty_rooms = reap_empty_rooms
        # sid -> rooms that sid currently plays in
        self._memberships: Dict[str, Set[Tuple[str, str]]] = {}
        self._lock = threading.Lock()

    # ---- connection lifecycle ----

    @serialized
    def connect(self, sid: str) -> None:
        self._memberships.setdefault(sid, set())
        self.logger.info(f"[connect] sid={sid}")

    @serialized
    def disconnect(self, sid: str) -> None:
        memberships = self._memberships.pop(sid, set())
        for kind, room_id in sorted(memberships):
            room = self.registry.get(kind, room_id)
            if room is None:
                continue
            result = self.engines[kind].leave(room, sid)
            self._dispatch(kind, room_id, sid, result.events)
            self.logger.info(f"[disconnect] sid={sid} kind={kind} room={room_id} players={len(room.players)} status={room.status}")
            if self.reap_empty_rooms and not room.players:
                self.registry.discard(kind, room_id)
                self.logger.info(f"[reap] kind={kind} room={room_id}")
        if not memberships:
            self.logger.info(f"[disconnect] sid={sid}")

    # ---- tic-tac-toe ----

    @serialized
    def join_tictactoe(self, sid: str, data) -> None:
        self._join('tictactoe', sid, data)

    @serialized
    def make_move(self, sid: str, data) -> None:
        request = parse_move(data)
        if request is None:
            return self._ignore('makeMove', sid, 'bad payload')
        room = self.registry.get('tictactoe', request.room_id)
        if room is None:
            return self._ignore('makeMove', sid, f"unknown room={request.room_id}")
        result = self.engines['tictactoe'].move(room, sid, request.index)
        self._apply('tictactoe', request.room_id, sid, result, f"[move] sid={sid} room={request.room_id} index={request.index}")

    @serialized
    def restart_tictactoe(self, sid: str, data) -> None:
        room_id = parse_room_id(data)
        room = self.registry.get('tictactoe', room_id) if room_id is not None else None
        if room is None:
            return self._ignore('restartTicTacToe', sid, f"unknown room={room_id}")
        result = self.engines['tictactoe'].restart(room, sid)
        self._apply('tictactoe', room_id, sid, result, f"[restart] sid={sid} room={room_id}")

    # ---- draw & guess ----

    @serialized
    def join_draw_guess(self, sid: str, data) -> None:
        self._join('drawguess', sid, data)

    @serialized
    def draw(self, sid: str, data) -> None:
        request = parse_draw(data)
        room = self.registry.get('drawguess', request.room_id) if request is not None else None
        if room is None:
            return self._ignore('draw', sid, 'bad payload or unknown room')
        result = self.engines['drawguess'].relay(room, sid, request.data)
        if not result.accepted:
            return self._ignore('draw', sid, 'not the drawer')
        self._dispatch('drawguess', request.room_id, sid, result.events)

    @serialized
    def guess(self, sid: str, data) -> None:
        request = parse_guess(data)
        room = self.registry.get('drawguess', request.room_id) if request is not None else None
        if room is None:
            return self._ignore('guess', sid, 'bad payload or unknown room')
        result = self.engines['drawguess'].guess(room, sid, request.text)
        self._apply('drawguess', request.room_id, sid, result, f"[guess] sid={sid} room={request.room_id}")
        if any(out.event == CORRECT_GUESS for out in result.events):
            self.logger.info(f"[round] room={request.room_id} winner={sid} next_drawer={room.current_drawer}")

    # ---- internals ----

    def _join(self, kind: str, sid: str, data) -> None:
        room_id = parse_room_id(data)
        if room_id is None:
            return self._ignore(f"join:{kind}", sid, 'bad room id')
        room = self.registry.get_or_create(kind, room_id)
        result = self.engines[kind].join(room, sid)
        if result.accepted:
            self.channel.join_group(sid, group_key(kind, room_id))
            self._memberships.setdefault(sid, set()).add((kind, room_id))
            self.logger.info(f"[join] sid={sid} kind={kind} room={room_id} players={len(room.players)} status={room.status}")
        else:
            self.logger.info(f"[join] sid={sid} kind={kind} room={room_id} rejected=full")
        self._dispatch(kind, room_id, sid, result.events)

    def _apply(self, kind: str, room_id: str, sid: str, result: Result, message: str) -> None:
        if not result.accepted:
            return self._ignore(kind, sid, f"rejected room={room_id}")
        self.logger.info(message)
        self._dispatch(kind, room_id, sid, result.events)

    def _dispatch(self, kind: str, room_id: str, sid: str, events: Iterable[Outbound]) -> None:
        group = group_key(kind, room_id)
        for out in events:
            if out.to_sender:
                self.channel.send(sid, out.event, out.payload)
            elif out.private_to is not None:
                self.channel.send(group, out.event, out.payload, skip=out.private_to)
                self.channel.send(out.private_to, out.event, out.private_payload)
            else:
                self.channel.send(group, out.event, out.payload)

    def _ignore(self, event: str, sid: str, reason: str) -> None:
        self.logger.debug(f"[ignored] event={event} sid={sid} reason={reason}")

    @serialized
    def summary(self) -> dict:
        return {
            kind: [self.engines[kind].summary(room) for _, room in self.registry.rooms(kind)]
            for kind in self.registry.kinds
        }
