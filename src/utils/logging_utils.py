"""Logger setup shared by the solver and the puzzle generator."""

from __future__ import annotations

import logging

from src import config

# Common logger name for the whole package.
LOGGER_NAME = "dungeon_puzzles"


def get_logger(name: str = "") -> logging.Logger:
    """
    Return the package logger, or a child of it when `name` is given.

    The first call attaches a console handler at `config.LOG_LEVEL` unless the
    application has already configured one.
    """
    root = logging.getLogger(LOGGER_NAME)

    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))

    if name:
        return root.getChild(name)
    return root
