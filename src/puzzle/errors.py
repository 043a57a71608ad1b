"""Exceptions raised by puzzle generation and validation."""


class ValidationError(ValueError):
    """A puzzle violates a structural invariant."""


class ConfigurationError(RuntimeError):
    """The generator's archetype table is out of sync with PuzzleType."""
