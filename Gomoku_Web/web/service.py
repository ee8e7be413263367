"""Service layer holding the server's single Game behind a lock."""

import threading

from ..Game import Game
from ..ai.heuristic import AIDifficulty
from ..utils.logger import log_event


class GameService:
    """
    Owns one Game for the lifetime of the server process.

    Every read and every play-plus-snapshot sequence runs under one lock, so
    concurrent requests never observe a half-applied move.
    """

    def __init__(self, board_size=15, ai_enabled=True, ai_difficulty=AIDifficulty.NORMAL, game=None):
        self.game = game if game is not None else Game(board_size=board_size, ai_difficulty=ai_difficulty)
        self.ai_enabled = ai_enabled
        self._lock = threading.Lock()

    def state(self):
        with self._lock:
            return self.game.snapshot()

    def play(self, x, y):
        """Apply a move (and the computer's reply, if enabled); return the new snapshot."""
        with self._lock:
            game = self.game
            color = game.turn
            game.play((x, y))
            log_event(f"Move {game.moves}: {color.name.title()} ({x}, {y})")

            if self.ai_enabled and not game.finished:
                reply = game.ai_move()
                if reply is not None:
                    log_event(f"Move {game.moves}: White ({reply.x}, {reply.y}) [computer]")

            if game.finished:
                log_event(f"Winner: {game.winner.name.title()} line={[tuple(p) for p in game.winning_line]}")
            return game.snapshot()
