"""Game engines: tic-tac-toe and draw & guess.

Each engine validates an action against a room and mutates it in place,
returning a ``Result`` describing what to broadcast. Engines never touch
sockets or keep a reference to the room, keeping transport concerns in the
coordinator.
"""

from .drawguess import DrawGuessEngine, DrawGuessRoom, WORDS
from .tictactoe import TicTacToeEngine, TicTacToeRoom

__all__ = [
    'DrawGuessEngine',
    'DrawGuessRoom',
    'TicTacToeEngine',
    'TicTacToeRoom',
    'WORDS',
]
