"""Procedural dungeon puzzle generation and validation."""

from .errors import ConfigurationError, ValidationError
from .generator import Generator
from .templates import default_templates
from .types import GenerationParams, Puzzle, PuzzleElement, PuzzleTemplate, PuzzleType
from .validator import validate

__all__ = [
    "Generator",
    "GenerationParams",
    "Puzzle",
    "PuzzleElement",
    "PuzzleTemplate",
    "PuzzleType",
    "default_templates",
    "validate",
    "ValidationError",
    "ConfigurationError",
]
