"""
config.py - Board configuration for the Connect Four engine
"""

from numbers import Integral

from connect4engine.utils import DEFAULT_WIDTH, DEFAULT_HEIGHT


class ConfigurationError(ValueError):
    """Raised when a game is configured with unusable dimensions."""


class GameConfig:
    """
    Board dimensions for one game, fixed at construction.

    Args:
        width: Number of columns (default 7)
        height: Number of rows (default 6)

    Raises:
        ConfigurationError: if either dimension is not a positive integer
    """

    __slots__ = ('_width', '_height')

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT):
        self._width = self._validate('width', width)
        self._height = self._validate('height', height)

    @staticmethod
    def _validate(name: str, value) -> int:
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise ConfigurationError(f"{name} must be positive, got {value}")
        return int(value)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cells(self) -> int:
        return self._width * self._height

    def __eq__(self, other):
        if not isinstance(other, GameConfig):
            return NotImplemented
        return (self._width, self._height) == (other._width, other._height)

    def __hash__(self):
        return hash((self._width, self._height))

    def __repr__(self):
        return f"GameConfig(width={self._width}, height={self._height})"
