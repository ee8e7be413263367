"""CLI options for board size, server address, opponent and config path."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gomoku web server (five in a row)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--board-size", type=int, help="Board size (default from settings)")
    parser.add_argument("--host", help="Address to bind the HTTP server to")
    parser.add_argument("--port", type=int, help="Port for the HTTP server")
    parser.add_argument(
        "--difficulty",
        choices=["easy", "normal"],
        default=None,
        help="Computer opponent level (default from settings)",
    )
    parser.add_argument("--no-ai", action="store_true", help="Disable the computer reply to moves (two humans)")
    parser.add_argument(
        "--mode",
        choices=["serve", "console"],
        default="serve",
        help="Serve the HTTP API or play against the computer in the terminal",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)
