"""Entry point: load config, then serve the HTTP API or start a console game."""

from pathlib import Path

import yaml

from .Board import Stone
from .Game import Game
from .Match import Match
from .Player import ComputerPlayer, HumanPlayer
from .utils.cli import parse_args
from .utils.logger import configure, log_event


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "board_size": 15,
    "host": "127.0.0.1",
    "port": 8080,
    "ai_enabled": True,
    "ai_difficulty": "normal",
    "log_level": "INFO",
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Gomoku_Web/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Read settings YAML over the defaults; a missing file yields the defaults."""
    path = resolve_project_path(path)
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            settings.update(yaml.safe_load(f) or {})
    except FileNotFoundError:
        pass
    return settings


def merge_args(settings, args):
    """Command-line flags take precedence over the settings file."""
    merged = dict(settings)
    if args.board_size is not None:
        merged["board_size"] = args.board_size
    if args.host:
        merged["host"] = args.host
    if args.port is not None:
        merged["port"] = args.port
    if args.difficulty:
        merged["ai_difficulty"] = args.difficulty
    if args.no_ai:
        merged["ai_enabled"] = False
    if args.log_level:
        merged["log_level"] = args.log_level
    return merged


def serve(settings):
    import uvicorn

    from .web.app import create_app
    from .web.service import GameService

    service = GameService(
        board_size=settings["board_size"],
        ai_enabled=bool(settings["ai_enabled"]),
        ai_difficulty=settings["ai_difficulty"],
    )
    app = create_app(service)
    log_event(
        f"Serving {settings['board_size']}x{settings['board_size']} board on "
        f"http://{settings['host']}:{settings['port']} (ai={'on' if service.ai_enabled else 'off'})"
    )
    uvicorn.run(app, host=settings["host"], port=int(settings["port"]), log_level=str(settings["log_level"]).lower())


def play_console(settings):
    game = Game(board_size=settings["board_size"], ai_difficulty=settings["ai_difficulty"])
    black = HumanPlayer(color=Stone.BLACK)
    white = ComputerPlayer(color=Stone.WHITE, difficulty=settings["ai_difficulty"])
    match = Match(game, black, white, renderer=lambda g: print(g.board.render()))
    result = match.play()
    outcome = {Stone.BLACK: "Black wins", Stone.WHITE: "White wins", Stone.EMPTY: "Draw"}
    print(outcome.get(result, "Unknown result"))
    return result


def main(argv=None):
    args = parse_args(argv)
    settings = merge_args(load_settings(args.settings), args)
    configure(settings["log_level"])

    if args.mode == "console":
        play_console(settings)
    else:
        serve(settings)


if __name__ == "__main__":
    main()
