"""Player interface for human or computer controllers."""

from .ai import heuristic
from .ai.heuristic import AIDifficulty


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, board):
        """Return (x, y) for next move."""
        raise NotImplementedError


class HumanPlayer(Player):
    prompt = "Enter move as 'x y' (0-indexed): "

    def __init__(self, color, read=input):
        super().__init__(color)
        self.read = read

    def next_move(self, board):
        raw = self.read(self.prompt).strip()
        try:
            x_str, y_str = raw.split()
            return int(x_str), int(y_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc


class ComputerPlayer(Player):
    def __init__(self, color, difficulty=AIDifficulty.NORMAL):
        super().__init__(color)
        self.difficulty = AIDifficulty(difficulty)

    def next_move(self, board):
        move = heuristic.choose_move(board, self.color, self.difficulty)
        if move is None:
            raise ValueError("No empty cell left to play")
        return move
