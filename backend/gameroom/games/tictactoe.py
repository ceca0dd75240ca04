from dataclasses import dataclass, field
from typing import Dict, List, Optional

from gameroom.messages import (
    BOARD_SIZE, GAME_STATE, PLAYER_ASSIGNMENT, ROOM_FULL,
    Outbound, Result, ignored,
)

X = 'X'
O = 'O'
ROLES = (X, O)
DRAW_RESULT = 'draw'

# Wire values for `status`
WAITING = 'waiting'
PLAYING = 'playing'
FINISHED = 'finished'

WIN_PATTERNS = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


def _empty_board() -> List[Optional[str]]:
    return [None] * BOARD_SIZE


@dataclass
class TicTacToeRoom:
    room_id: str
    players: List[str] = field(default_factory=list)
    roles: Dict[str, str] = field(default_factory=dict)
    board: List[Optional[str]] = field(default_factory=_empty_board)
    current_player: str = X
    status: str = WAITING
    scores: Dict[str, int] = field(default_factory=lambda: {X: 0, O: 0})

    def to_dict(self, winner: Optional[str] = None) -> dict:
        payload = {
            'roomId': self.room_id,
            'players': list(self.players),
            'roles': dict(self.roles),
            'board': list(self.board),
            'currentPlayer': self.current_player,
            'status': self.status,
            'scores': dict(self.scores),
        }
        if winner is not None:
            payload['winner'] = winner
        return payload


def check_winner(board: List[Optional[str]]) -> Optional[str]:
    """Return the role holding a full line, scanning rows, columns, diagonals."""
    for a, b, c in WIN_PATTERNS:
        if board[a] and board[a] == board[b] == board[c]:
            return board[a]
    return None


class TicTacToeEngine:
    kind = 'tictactoe'
    capacity = 2

    def new_room(self, room_id: str) -> TicTacToeRoom:
        return TicTacToeRoom(room_id=room_id)

    def join(self, room: TicTacToeRoom, sid: str) -> Result:
        """Seat ``sid`` in the first free role.

        A lone joiner only gets their own snapshot; the join that fills the
        room starts play and broadcasts to both players.
        """
        if sid in room.roles:
            return Result(True, [
                Outbound(PLAYER_ASSIGNMENT, room.roles[sid], to_sender=True),
                Outbound(GAME_STATE, room.to_dict(), to_sender=True),
            ])
        if len(room.players) >= self.capacity:
            return Result(False, [Outbound(ROOM_FULL, to_sender=True)])

        role = next(r for r in ROLES if r not in room.roles.values())
        room.players.append(sid)
        room.roles[sid] = role
        events = [Outbound(PLAYER_ASSIGNMENT, role, to_sender=True)]

        if len(room.players) == self.capacity:
            if any(room.board):
                # leftovers from a round abandoned by a previous opponent
                room.board = _empty_board()
                room.current_player = X
            room.status = PLAYING
            events.append(Outbound(GAME_STATE, room.to_dict()))
        else:
            events.append(Outbound(GAME_STATE, room.to_dict(), to_sender=True))
        return Result(True, events)

    def move(self, room: TicTacToeRoom, sid: str, index: int) -> Result:
        if room.status != PLAYING or room.board[index] is not None:
            return ignored()
        role = room.roles.get(sid)
        if role is None or role != room.current_player:
            return ignored()

        room.board[index] = role
        room.current_player = O if role == X else X

        winner = check_winner(room.board)
        if winner:
            room.status = FINISHED
            room.scores[winner] = room.scores.get(winner, 0) + 1
            return Result(True, [Outbound(GAME_STATE, room.to_dict(winner=winner))])
        if all(room.board):
            room.status = FINISHED
            return Result(True, [Outbound(GAME_STATE, room.to_dict(winner=DRAW_RESULT))])
        return Result(True, [Outbound(GAME_STATE, room.to_dict())])

    def restart(self, room: TicTacToeRoom, sid: str) -> Result:
        if sid not in room.roles:
            return ignored()
        room.board = _empty_board()
        room.current_player = X
        room.status = PLAYING if len(room.players) == self.capacity else WAITING
        return Result(True, [Outbound(GAME_STATE, room.to_dict())])

    def leave(self, room: TicTacToeRoom, sid: str) -> Result:
        if sid not in room.roles:
            return ignored()
        room.players.remove(sid)
        del room.roles[sid]
        if len(room.players) < self.capacity:
            room.status = WAITING
        return Result(True, [Outbound(GAME_STATE, room.to_dict())])

    def summary(self, room: TicTacToeRoom) -> dict:
        return {'roomId': room.room_id, 'players': len(room.players), 'status': room.status}
