"""Two- and three-dimensional vectors in screen coordinates (y grows downwards)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from mobakit.mathlib import random_range

_EQUALITY_EPSILON = 1.0e-6


class Vector2:
    """A mutable 2D vector whose equality tolerates tiny differences."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    # directions
    @classmethod
    def up(cls) -> "Vector2":
        return cls(0.0, -1.0)

    @classmethod
    def down(cls) -> "Vector2":
        return cls(0.0, 1.0)

    @classmethod
    def left(cls) -> "Vector2":
        return cls(-1.0, 0.0)

    @classmethod
    def right(cls) -> "Vector2":
        return cls(1.0, 0.0)

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def identity(cls) -> "Vector2":
        return cls(1.0, 1.0)

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __pos__(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        if isinstance(scalar, Vector2):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector2":
        if isinstance(scalar, Vector2):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return (self - other).sqr_magnitude() < _EQUALITY_EPSILON

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError("Out of Vector2 range")

    def __setitem__(self, index: int, value: float) -> None:
        if index == 0:
            self.x = float(value)
        elif index == 1:
            self.y = float(value)
        else:
            raise IndexError("Out of Vector2 range")

    def rotate(self, by: Union[float, "Vector2"]) -> "Vector2":
        """Rotate by an angle in degrees, or by the angle a direction vector points to."""
        degrees = by.angle_degree() if isinstance(by, Vector2) else by
        radians = math.radians(degrees)
        sin = math.sin(radians)
        cos = math.cos(radians)
        return Vector2(cos * self.x - sin * self.y, sin * self.x + cos * self.y)

    def angle_radian(self) -> float:
        """Angle in radians measured clockwise from the up direction."""
        return math.atan2(self.x, -self.y)

    def angle_degree(self) -> float:
        """Angle in degrees measured clockwise from the up direction."""
        return self.angle_radian() * 180.0 / math.pi

    @classmethod
    def random(cls, start: float, end: float) -> "Vector2":
        """A vector whose components are drawn uniformly from ``[start, end]``."""
        start, end = float(start), float(end)
        return cls(random_range(start, end), random_range(start, end))

    @classmethod
    def from_radian(cls, radian: float) -> "Vector2":
        return cls(math.cos(radian), math.sin(radian))

    @classmethod
    def from_degree(cls, degree: float) -> "Vector2":
        return cls.from_radian(degree * (math.pi / 180.0))

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    @staticmethod
    def distance(a: "Vector2", b: "Vector2") -> float:
        return (a - b).magnitude()

    @staticmethod
    def squared_distance(a: "Vector2", b: "Vector2") -> float:
        return (a.x - b.x) * (a.x - b.x) + (a.y - b.y) * (a.y - b.y)

    def normalized(self) -> "Vector2":
        """Unit vector in the same direction; a zero vector is returned unchanged."""
        magnitude = self.magnitude()
        if magnitude > 0.0:
            return self / magnitude
        return Vector2(self.x, self.y)


@dataclass
class Vector3:
    """A plain 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0