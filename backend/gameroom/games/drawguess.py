import random
from dataclasses import dataclass, field
from typing import List, Optional

from gameroom.messages import (
    CORRECT_GUESS, DRAW, GAME_STATE, ROOM_FULL,
    Outbound, Result, ignored,
)

WORDS = ('apple', 'house', 'tree', 'car', 'dog', 'sun', 'book')

WAITING = 'waiting'
PLAYING = 'playing'


@dataclass
class Guess:
    player: str
    guess: str


@dataclass
class DrawGuessRoom:
    room_id: str
    players: List[str] = field(default_factory=list)
    current_drawer: Optional[str] = None
    word: Optional[str] = None
    guesses: List[Guess] = field(default_factory=list)
    status: str = WAITING

    def to_dict(self, hide_word: bool = False) -> dict:
        return {
            'roomId': self.room_id,
            'players': list(self.players),
            'currentDrawer': self.current_drawer,
            'word': None if hide_word else self.word,
            'guesses': [{'player': g.player, 'guess': g.guess} for g in self.guesses],
            'status': self.status,
        }


class DrawGuessEngine:
    """Rotating-drawer guessing game.

    A round runs while at least ``min_players`` are present: one random
    player draws a random word and everyone else guesses. A correct guess or
    the drawer leaving starts the next round. Unless ``reveal_word`` is set,
    only the drawer's copy of the state carries the word.
    """

    kind = 'drawguess'
    capacity = 10
    min_players = 3

    def __init__(self, rng: Optional[random.Random] = None, reveal_word: bool = False, words=WORDS):
        self.rng = rng or random.Random()
        self.reveal_word = reveal_word
        self.words = tuple(words)

    def new_room(self, room_id: str) -> DrawGuessRoom:
        return DrawGuessRoom(room_id=room_id)

    # ---- snapshots ----

    def snapshot_for(self, room: DrawGuessRoom, sid: str) -> dict:
        return room.to_dict(hide_word=not self.reveal_word and sid != room.current_drawer)

    def _state_event(self, room: DrawGuessRoom) -> Outbound:
        if self.reveal_word or room.current_drawer is None:
            return Outbound(GAME_STATE, room.to_dict())
        return Outbound(
            GAME_STATE,
            room.to_dict(hide_word=True),
            private_to=room.current_drawer,
            private_payload=room.to_dict(),
        )

    # ---- rounds ----

    def start_round(self, room: DrawGuessRoom) -> Result:
        """Deal a new drawer and word, or drop back to waiting below three players."""
        room.guesses = []
        if len(room.players) >= self.min_players:
            room.current_drawer = self.rng.choice(room.players)
            room.word = self.rng.choice(self.words)
            room.status = PLAYING
        else:
            room.current_drawer = None
            room.word = None
            room.status = WAITING
        return Result(True, [self._state_event(room)])

    # ---- actions ----

    def join(self, room: DrawGuessRoom, sid: str) -> Result:
        if sid in room.players:
            return Result(True, [Outbound(GAME_STATE, self.snapshot_for(room, sid), to_sender=True)])
        if len(room.players) >= self.capacity:
            return Result(False, [Outbound(ROOM_FULL, to_sender=True)])
        room.players.append(sid)
        if len(room.players) >= self.min_players and room.current_drawer is None:
            return self.start_round(room)
        return Result(True, [self._state_event(room)])

    def relay(self, room: DrawGuessRoom, sid: str, data) -> Result:
        # strokes are fire-and-forget; nothing is stored for late joiners
        if sid != room.current_drawer:
            return ignored()
        return Result(True, [Outbound(DRAW, data)])

    def guess(self, room: DrawGuessRoom, sid: str, text: str) -> Result:
        if sid not in room.players or sid == room.current_drawer:
            return ignored()
        room.guesses.append(Guess(player=sid, guess=text))
        if room.word is not None and text.lower() == room.word.lower():
            return Result(True, [Outbound(CORRECT_GUESS, sid)] + self.start_round(room).events)
        return Result(True, [self._state_event(room)])

    def leave(self, room: DrawGuessRoom, sid: str) -> Result:
        if sid not in room.players:
            return ignored()
        room.players.remove(sid)
        if sid == room.current_drawer:
            return self.start_round(room)
        if room.current_drawer is not None and len(room.players) < self.min_players:
            # too few guessers left to keep the round going
            return self.start_round(room)
        return Result(True, [self._state_event(room)])

    def summary(self, room: DrawGuessRoom) -> dict:
        return {'roomId': room.room_id, 'players': len(room.players), 'status': room.status}
