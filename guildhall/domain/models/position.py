"""
Position value object for Guildhall.

A point on the bounded 2D game map. Coordinates are integers with
``0 <= x <= 1024`` and ``0 <= y <= 512``; every write goes through the same
bounds check.
"""

from __future__ import annotations

import math

from guildhall.domain.constants import MAX_X, MAX_Y, MIN_X, MIN_Y
from guildhall.domain.exceptions import InvalidCoordinateError
from guildhall.domain.models.base import ValueObject, validate_range


class Position(ValueObject):
    """
    Bounded map coordinate.

    Attributes
    ----------
    x : int
        Horizontal coordinate in [0, 1024]
    y : int
        Vertical coordinate in [0, 512]
    """

    INVALID_X = f"[ERROR] The x coordinate must be between {MIN_X} and {MAX_X}."
    INVALID_Y = f"[ERROR] The y coordinate must be between {MIN_Y} and {MAX_Y}."

    __hash__ = None  # mutable via setters

    def __init__(self, x: int, y: int) -> None:
        self._x = 0
        self._y = 0
        self.x = x
        self.y = y

    @property
    def x(self) -> int:
        return self._x

    @x.setter
    def x(self, value: int) -> None:
        validate_range(
            value, MIN_X, MAX_X, "x",
            message=self.INVALID_X,
            error_code="INVALID_X",
            error_cls=InvalidCoordinateError,
        )
        self._x = value

    @property
    def y(self) -> int:
        return self._y

    @y.setter
    def y(self, value: int) -> None:
        validate_range(
            value, MIN_Y, MAX_Y, "y",
            message=self.INVALID_Y,
            error_code="INVALID_Y",
            error_cls=InvalidCoordinateError,
        )
        self._y = value

    @staticmethod
    def is_within_bounds(x: int, y: int) -> bool:
        """Return ``True`` if (*x*, *y*) lies on the map. Never raises."""
        return MIN_X <= x <= MAX_X and MIN_Y <= y <= MAX_Y

    @staticmethod
    def distance(p1: Position, p2: Position) -> float:
        """Return the Euclidean distance between two positions."""
        return math.sqrt((p2.x - p1.x) ** 2 + (p2.y - p1.y) ** 2)

    def __repr__(self) -> str:
        return f"Position(x={self._x}, y={self._y})"
