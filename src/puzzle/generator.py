"""Seeded generation of dungeon logic puzzles.

Every archetype except the timed challenge is described by an
`ArchetypePolicy`: how its elements look, where they are placed, and how the
solution is drawn from them. A single builder turns a policy plus a template
into a `Puzzle`. Timed challenges reuse the pressure plate or lever policy and
then add a time limit.

Solutions only reference elements the builder created, so generated puzzles
are solvable by construction.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from src import config
from src.utils.logging_utils import get_logger

from .errors import ConfigurationError, ValidationError
from .templates import default_templates
from .types import (
    ElementState,
    GenerationParams,
    Puzzle,
    PuzzleElement,
    PuzzleTemplate,
    PuzzleType,
)
from .validator import validate

logger = get_logger("puzzle")

Position = Tuple[int, int]
StateRule = Callable[[random.Random, int], ElementState]
PositionRule = Callable[[random.Random, int], Position]
SolutionRule = Callable[[random.Random, List[PuzzleElement], int], Tuple[List[str], str]]

EARLY_TYPES = (PuzzleType.PRESSURE_PLATE, PuzzleType.LEVER_SEQUENCE)
MID_TYPES = EARLY_TYPES + (PuzzleType.MEMORY_PATTERN, PuzzleType.COLOR_MATCHING)
LATE_TYPES = (
    PuzzleType.PRESSURE_PLATE,
    PuzzleType.LEVER_SEQUENCE,
    PuzzleType.BLOCK_PUSHING,
    PuzzleType.TIMED_CHALLENGE,
    PuzzleType.MEMORY_PATTERN,
    PuzzleType.COLOR_MATCHING,
)

# Timed challenges are built on top of one of these.
TIMED_BASE_TYPES = (PuzzleType.PRESSURE_PLATE, PuzzleType.LEVER_SEQUENCE)


# ---- element rules ---------------------------------------------------------

def _scatter(size: int, offset: int = 0) -> PositionRule:
    def _position(rng: random.Random, index: int) -> Position:
        return (rng.randrange(size) + offset, rng.randrange(size) + offset)

    return _position


def _grid_position(rng: random.Random, index: int) -> Position:
    width = config.MEMORY_GRID_WIDTH
    return (index % width, index // width)


def _constant(value) -> StateRule:
    return lambda rng, index: value


def _flag(key: str) -> StateRule:
    return lambda rng, index: {key: False}


def _palette_symbol(rng: random.Random, index: int) -> ElementState:
    return config.MEMORY_SYMBOLS[index % len(config.MEMORY_SYMBOLS)]


def _random_color(rng: random.Random, index: int) -> ElementState:
    return rng.choice(config.TILE_COLORS)


@dataclass(frozen=True)
class ElementSpec:
    id_prefix: str
    element_type: str
    state: StateRule
    position: PositionRule
    interactable: bool = True

    def build(self, rng: random.Random, index: int) -> PuzzleElement:
        position = self.position(rng, index)
        return PuzzleElement(
            id=f"{self.id_prefix}_{index}",
            element_type=self.element_type,
            position=position,
            state=self.state(rng, index),
            interactable=self.interactable,
        )


# ---- solution rules --------------------------------------------------------

def _distinct_picks(
    base: int, hint: str, rng: random.Random, elements: List[PuzzleElement], difficulty: int
) -> Tuple[List[str], str]:
    """Pick distinct elements in random order; the order is the sequence for levers."""
    length = min(base + difficulty // 2, len(elements))
    picks = rng.sample(range(len(elements)), length)
    return [elements[i].id for i in picks], hint.format(count=length)


def _every_element(
    rng: random.Random, elements: List[PuzzleElement], difficulty: int
) -> Tuple[List[str], str]:
    return [e.id for e in elements], f"Push {len(elements)} blocks onto their targets"


def _pattern_with_repeats(
    rng: random.Random, elements: List[PuzzleElement], difficulty: int
) -> Tuple[List[str], str]:
    length = min(2 + difficulty // 3, len(elements))
    solution = [rng.choice(elements).id for _ in range(length)]
    return solution, f"Remember and repeat the pattern of {length} symbols"


def _matching_colors(
    rng: random.Random, elements: List[PuzzleElement], difficulty: int
) -> Tuple[List[str], str]:
    colors = config.TILE_COLORS
    num_colors = min(1 + difficulty // 3, len(colors))
    target_colors = rng.sample(colors, num_colors)

    solution = [e.id for e in elements if e.state in target_colors]
    if not solution:
        # No tile drew a target color: require the first tile's color instead.
        fallback = elements[0].state
        target_colors.append(fallback)
        solution = [e.id for e in elements if e.state == fallback]

    return solution, f"Activate all {', '.join(target_colors)} tiles"


@dataclass(frozen=True)
class ArchetypePolicy:
    id_prefix: str
    element: ElementSpec
    solution: SolutionRule
    description: str
    reward_type: str = "door"
    max_attempts: Callable[[int], int] = lambda difficulty: 0
    # Elements generated alongside `element`, one per primary element, and
    # appended after all of them. They never appear in the solution.
    companion: Optional[ElementSpec] = None


POLICIES: Dict[PuzzleType, ArchetypePolicy] = {
    PuzzleType.PRESSURE_PLATE: ArchetypePolicy(
        id_prefix="pressure",
        element=ElementSpec("plate", "pressure_plate", _constant(False), _scatter(config.GRID_SIZE)),
        solution=partial(_distinct_picks, 1, "Step on {count} pressure plates to unlock the door"),
        description="Ancient pressure plates guard this passage",
    ),
    PuzzleType.LEVER_SEQUENCE: ArchetypePolicy(
        id_prefix="lever",
        element=ElementSpec("lever", "lever", _constant("off"), _scatter(config.GRID_SIZE)),
        solution=partial(_distinct_picks, 2, "Activate {count} levers in the correct sequence"),
        description="The levers must be pulled in a specific order",
        max_attempts=lambda difficulty: 5 + difficulty,
    ),
    PuzzleType.BLOCK_PUSHING: ArchetypePolicy(
        id_prefix="block",
        element=ElementSpec(
            "block", "pushable_block", _flag("on_target"), _scatter(config.BLOCK_GRID_SIZE)
        ),
        companion=ElementSpec(
            "target",
            "block_target",
            _flag("occupied"),
            _scatter(config.BLOCK_GRID_SIZE, offset=config.TARGET_OFFSET),
            interactable=False,
        ),
        solution=_every_element,
        description="Heavy blocks must be positioned precisely",
        reward_type="chest",
    ),
    PuzzleType.MEMORY_PATTERN: ArchetypePolicy(
        id_prefix="memory",
        element=ElementSpec("symbol", "memory_symbol", _palette_symbol, _grid_position),
        solution=_pattern_with_repeats,
        description="Watch carefully and repeat the pattern",
        max_attempts=lambda difficulty: 3 + difficulty // 2,
    ),
    PuzzleType.COLOR_MATCHING: ArchetypePolicy(
        id_prefix="color",
        element=ElementSpec("tile", "colored_tile", _random_color, _scatter(config.GRID_SIZE)),
        solution=_matching_colors,
        description="Match the correct colors to proceed",
    ),
}


class Generator:
    """Creates puzzles deterministically from a seed and generation parameters."""

    def __init__(self, templates: Optional[Mapping[PuzzleType, PuzzleTemplate]] = None) -> None:
        self.templates: Dict[PuzzleType, PuzzleTemplate] = dict(
            templates if templates is not None else default_templates()
        )

    def template_for(self, puzzle_type: PuzzleType) -> PuzzleTemplate:
        template = self.templates.get(puzzle_type)
        if template is None:
            raise ConfigurationError(f"no template for puzzle type: {puzzle_type}")
        return template

    def generate(self, seed: int, params: GenerationParams) -> Puzzle:
        rng = random.Random(seed)

        puzzle_type = self.select_puzzle_type(rng, params)
        template = self.template_for(puzzle_type)
        difficulty = self.calculate_difficulty(params)
        logger.debug(
            "Generating %s puzzle (seed=%d, difficulty=%d)", puzzle_type.value, seed, difficulty
        )

        if puzzle_type == PuzzleType.TIMED_CHALLENGE:
            puzzle = self._build_timed(rng, template, difficulty)
        else:
            puzzle = self._build(rng, _policy_for(puzzle_type), puzzle_type, template, difficulty)

        try:
            validate(puzzle)
        except ValidationError as exc:
            logger.warning("Generated %s puzzle failed validation: %s", puzzle_type.value, exc)
            raise
        return puzzle

    def validate(self, puzzle: Puzzle) -> None:
        validate(puzzle)

    def select_puzzle_type(self, rng: random.Random, params: GenerationParams) -> PuzzleType:
        # Early game: simple puzzles only.
        if params.difficulty < 0.3 or params.depth < 3:
            return rng.choice(EARLY_TYPES)
        if params.difficulty < 0.7 or params.depth < 7:
            return rng.choice(MID_TYPES)
        return rng.choice(LATE_TYPES)

    def calculate_difficulty(self, params: GenerationParams) -> int:
        """Map params onto the 1-10 scale: up to 6 from difficulty, up to 4 from depth."""
        base = params.difficulty * 6.0
        depth_bonus = min(params.depth * 0.3, 4.0)
        difficulty = int(base + depth_bonus + 1.0)
        return max(1, min(difficulty, 10))

    @staticmethod
    def element_count(template: PuzzleTemplate, difficulty: int) -> int:
        spread = template.max_elements - template.min_elements
        return template.min_elements + int(spread * difficulty / 10.0)

    def _build(
        self,
        rng: random.Random,
        policy: ArchetypePolicy,
        puzzle_type: PuzzleType,
        template: PuzzleTemplate,
        difficulty: int,
    ) -> Puzzle:
        count = self.element_count(template, difficulty)
        puzzle_id = f"{policy.id_prefix}_{rng.getrandbits(63)}"

        primary: List[PuzzleElement] = []
        companions: List[PuzzleElement] = []
        for index in range(count):
            primary.append(policy.element.build(rng, index))
            if policy.companion is not None:
                companions.append(policy.companion.build(rng, index))

        solution, hint = policy.solution(rng, primary, difficulty)
        elements = primary + companions

        return Puzzle(
            id=puzzle_id,
            type=puzzle_type,
            difficulty=difficulty,
            solution=solution,
            element_count=len(elements),
            elements=elements,
            time_limit=0.0,
            max_attempts=policy.max_attempts(difficulty),
            hint_text=hint,
            description=policy.description,
            reward_type=policy.reward_type,
        )

    def _build_timed(self, rng: random.Random, template: PuzzleTemplate, difficulty: int) -> Puzzle:
        base_type = TIMED_BASE_TYPES[1] if rng.random() < 0.5 else TIMED_BASE_TYPES[0]
        puzzle = self._build(rng, _policy_for(base_type), PuzzleType.TIMED_CHALLENGE, template, difficulty)

        low, high = template.time_limit_range
        time_limit = low + rng.random() * (high - low)
        # Harder puzzles get less time.
        puzzle.time_limit = time_limit * (1.0 - difficulty / 20.0)

        puzzle.hint_text = f"{puzzle.hint_text} (Time Limit: {puzzle.time_limit:.0f}s)"
        puzzle.description = "Time is of the essence - " + puzzle.description.lower()
        return puzzle


def _policy_for(puzzle_type: PuzzleType) -> ArchetypePolicy:
    policy = POLICIES.get(puzzle_type)
    if policy is None:
        raise ConfigurationError(f"unsupported puzzle type: {puzzle_type}")
    return policy
