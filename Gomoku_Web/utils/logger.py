"""Lightweight logging utilities for games and the web server."""

import logging

LOGGER_NAME = "Gomoku_Web"
_log = logging.getLogger(LOGGER_NAME)


def configure(level="INFO"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def log_event(message, level=logging.INFO):
    _log.log(level, message)
