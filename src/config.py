"""Shared settings for the solver and the puzzle generator.

Values can be overridden through environment variables so that tests and
tools can tune the solver without touching code.
"""

from __future__ import annotations

import os
from typing import Optional


def _env_bool(key: str, default: bool) -> bool:
    raw = os.environ.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(key: str) -> Optional[int]:
    raw = os.environ.get(key, "").strip()
    if not raw:
        return None
    return int(raw)


# ==== Logging ==============================================================

LOG_LEVEL: str = os.environ.get("PUZZLE_LOG_LEVEL", "INFO").upper()

# ==== Solver ===============================================================

# Record solver steps in the global tracer.
TRACE_ENABLED: bool = _env_bool("PUZZLE_TRACE_ENABLED", True)

# Maximum number of assignments tried per solve (None = unbounded).
SOLVER_NODE_LIMIT: Optional[int] = _env_int("PUZZLE_SOLVER_NODE_LIMIT")

# ==== Puzzle layout ========================================================

# Side length of the square grid elements are scattered on.
GRID_SIZE: int = 10

# Blocks start inside BLOCK_GRID_SIZE; targets are offset by TARGET_OFFSET.
BLOCK_GRID_SIZE: int = 8
TARGET_OFFSET: int = 2

# Memory symbols are laid out in rows of this width.
MEMORY_GRID_WIDTH: int = 3

MEMORY_SYMBOLS = (
    "circle",
    "square",
    "triangle",
    "diamond",
    "star",
    "hexagon",
    "cross",
    "moon",
    "sun",
)

TILE_COLORS = (
    "red",
    "blue",
    "green",
    "yellow",
    "purple",
    "orange",
    "white",
    "black",
)
