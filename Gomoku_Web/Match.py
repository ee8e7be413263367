"""Console game loop: alternate two players over a Game until someone wins."""

from .Board import Stone
from .utils.logger import log_event


class Match:
    def __init__(self, game, black_player, white_player, logger=log_event, renderer=None, max_rejections=10):
        self.game = game
        self.players = {Stone.BLACK: black_player, Stone.WHITE: white_player}
        self.logger = logger
        self.renderer = renderer
        self.max_rejections = max_rejections

    def play(self):
        """Run the game. Returns the winning Stone, or Stone.EMPTY if the board fills up."""
        game = self.game
        rejections = 0
        while not game.finished:
            if game.board.is_full():
                self.logger("Result: Draw (board full)")
                return Stone.EMPTY

            if self.renderer:
                self.renderer(game)

            color = game.turn
            player = self.players[color]
            try:
                move = player.next_move(game.board)
                game.play(move)
            except ValueError as exc:
                rejections += 1
                self.logger(f"Rejected move: {color.name.title()} {exc}")
                if rejections >= self.max_rejections:
                    raise
                continue

            rejections = 0
            self.logger(f"Move {game.moves}: {color.glyph} {tuple(move)}")

        if self.renderer:
            self.renderer(game)
        self.logger(f"Winner: {game.winner.name.title()}")
        return game.winner
