"""Puzzle data types shared by the generator, the validator and downstream systems."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple, Union

ElementState = Union[bool, str, Dict[str, Any]]


class PuzzleType(str, Enum):
    PRESSURE_PLATE = "pressure_plate"
    LEVER_SEQUENCE = "lever_sequence"
    BLOCK_PUSHING = "block_pushing"
    TIMED_CHALLENGE = "timed_challenge"
    MEMORY_PATTERN = "memory_pattern"
    COLOR_MATCHING = "color_matching"


@dataclass(frozen=True)
class PuzzleTemplate:
    """Generation bounds for one archetype."""

    type: PuzzleType
    min_elements: int
    max_elements: int
    min_complexity: int
    max_complexity: int
    time_limit_range: Tuple[float, float] = (0.0, 0.0)
    max_attempts_range: Tuple[int, int] = (0, 0)


@dataclass
class PuzzleElement:
    id: str
    element_type: str
    position: Tuple[int, int]
    state: ElementState
    interactable: bool = True


@dataclass
class Puzzle:
    """
    A generated puzzle and its solution.

    `solution` lists element ids; order only matters for sequence archetypes
    (lever and memory puzzles). `time_limit` is in seconds with 0 meaning no
    limit, and `max_attempts` of 0 means unlimited.
    """

    id: str
    type: PuzzleType
    difficulty: int
    solution: List[str]
    element_count: int
    elements: List[PuzzleElement]
    time_limit: float = 0.0
    max_attempts: int = 0
    hint_text: str = ""
    description: str = ""
    reward_type: str = ""

    def element_ids(self) -> List[str]:
        return [element.id for element in self.elements]


@dataclass
class GenerationParams:
    difficulty: float = 0.0
    depth: int = 0
    genre_id: str = ""
    custom: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not 0.0 <= self.difficulty <= 1.0:
            raise ValueError(f"difficulty must be in [0, 1], got {self.difficulty}")
        if self.depth < 0:
            raise ValueError(f"depth must be non-negative, got {self.depth}")

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "GenerationParams":
        return cls(
            difficulty=float(raw.get("difficulty", 0.0)),
            depth=int(raw.get("depth", 0)),
            genre_id=str(raw.get("genre_id", raw.get("genreID", "")) or ""),
            custom=dict(raw.get("custom") or {}),
        )
