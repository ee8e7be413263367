"""Turn management and end-of-game state for a single five-in-a-row game."""

from .Board import Board, Point, Stone
from .ai import heuristic
from .ai.heuristic import AIDifficulty
from .engine import referee, win_detector


class Game:
    def __init__(self, board_size=15, ai_difficulty=AIDifficulty.NORMAL):
        self.board = Board(size=board_size)
        self.turn = Stone.BLACK  # black starts
        self.winner = Stone.EMPTY
        self.moves = 0
        self.winning_line = None
        self.ai_difficulty = AIDifficulty(ai_difficulty)

    @property
    def finished(self):
        return self.winner != Stone.EMPTY

    def play(self, p):
        """
        Place the current player's stone at p.
        Returns the five highlighted points if the move wins, else None.
        Raises GameError subclasses without touching any state.
        """
        referee.check_turn(self.turn, self.winner)
        p = Point(*p)
        self.board.set(p, self.turn)
        self.moves += 1

        line = win_detector.find_winning_line(self.board, p, self.turn)
        if line is not None:
            # Turn stays on the winner; it no longer changes.
            self.winner = self.turn
            self.winning_line = line
            return line

        self.turn = self.turn.opposite()
        return None

    def ai_move(self):
        """Let the computer play White's turn. Returns the point played or None."""
        if self.finished or self.turn != Stone.WHITE:
            return None
        move = heuristic.choose_move(self.board, Stone.WHITE, self.ai_difficulty)
        if move is None:
            return None
        self.play(move)
        return move

    def snapshot(self):
        line = None
        if self.winning_line is not None:
            line = [[p.x, p.y] for p in self.winning_line]
        return {
            "size": self.board.size,
            "turn": int(self.turn),
            "moves": self.moves,
            "board": self.board.rows(),
            "winner": int(self.winner),
            "winning_line": line,
        }
