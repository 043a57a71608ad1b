"""Standard generation bounds for each puzzle archetype."""

from typing import Dict

from .types import PuzzleTemplate, PuzzleType


def default_templates() -> Dict[PuzzleType, PuzzleTemplate]:
    return {
        PuzzleType.PRESSURE_PLATE: PuzzleTemplate(
            type=PuzzleType.PRESSURE_PLATE,
            min_elements=2,
            max_elements=8,
            min_complexity=1,
            max_complexity=7,
            time_limit_range=(0.0, 60.0),
            max_attempts_range=(0, 5),
        ),
        PuzzleType.LEVER_SEQUENCE: PuzzleTemplate(
            type=PuzzleType.LEVER_SEQUENCE,
            min_elements=3,
            max_elements=6,
            min_complexity=2,
            max_complexity=10,
            time_limit_range=(0.0, 45.0),
            max_attempts_range=(0, 10),
        ),
        PuzzleType.BLOCK_PUSHING: PuzzleTemplate(
            type=PuzzleType.BLOCK_PUSHING,
            min_elements=1,
            max_elements=4,
            min_complexity=3,
            max_complexity=8,
            time_limit_range=(0.0, 120.0),
            max_attempts_range=(0, 0),
        ),
        PuzzleType.TIMED_CHALLENGE: PuzzleTemplate(
            type=PuzzleType.TIMED_CHALLENGE,
            min_elements=3,
            max_elements=10,
            min_complexity=4,
            max_complexity=9,
            time_limit_range=(10.0, 30.0),
            max_attempts_range=(0, 3),
        ),
        PuzzleType.MEMORY_PATTERN: PuzzleTemplate(
            type=PuzzleType.MEMORY_PATTERN,
            min_elements=4,
            max_elements=9,
            min_complexity=2,
            max_complexity=8,
            time_limit_range=(0.0, 30.0),
            max_attempts_range=(0, 5),
        ),
        PuzzleType.COLOR_MATCHING: PuzzleTemplate(
            type=PuzzleType.COLOR_MATCHING,
            min_elements=3,
            max_elements=6,
            min_complexity=2,
            max_complexity=7,
            time_limit_range=(0.0, 45.0),
            max_attempts_range=(0, 8),
        ),
    }
