"""Transforms, outline polygons and a renderer that collects line draws."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mobakit.vector import Vector2

OPAQUE = 255


@dataclass
class Transform:
    """Position, scale and rotation; ``rotation`` is the direction pointing up."""

    position: Vector2 = field(default_factory=Vector2.zero)
    scale: Vector2 = field(default_factory=Vector2.identity)
    rotation: Vector2 = field(default_factory=Vector2.zero)


class Renderer:
    """Collects coloured line-drawing commands.

    ``lines`` holds ``((x1, y1), (x2, y2), color)`` entries in draw order;
    subclasses may override the methods to draw onto a real surface.
    """

    def __init__(self) -> None:
        self.color: tuple[int, int, int, int] = (0, 0, 0, OPAQUE)
        self.lines: list[tuple[tuple[int, int], tuple[int, int], tuple[int, int, int, int]]] = []

    def set_draw_color(self, r: int, g: int, b: int, a: int) -> None:
        self.color = (r, g, b, a)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self.lines.append(((x1, y1), (x2, y2), self.color))


@dataclass
class Polygon:
    """A closed outline given by its points in local space."""

    points: list[Vector2] = field(default_factory=list)

    def drawable_points(self, transform: Transform) -> list[Vector2]:
        """Points scaled, rotated and moved into world space by ``transform``."""
        angle = transform.rotation.angle_degree()
        return [
            Vector2(transform.scale.x * p.x, transform.scale.y * p.y).rotate(angle)
            + transform.position
            for p in self.points
        ]

    def draw(self, renderer: Renderer, transform: Transform, color: Any) -> None:
        """Draw the closed outline with an opaque version of ``color``."""
        renderer.set_draw_color(color.r, color.g, color.b, OPAQUE)
        points = self.drawable_points(transform)
        for start, end in zip(points, points[1:] + points[:1]):
            renderer.draw_line(int(start.x), int(start.y), int(end.x), int(end.y))

    @staticmethod
    def draw_line(renderer: Renderer, v1: Vector2, v2: Vector2, color: Any) -> None:
        """Draw a single opaque line between two points."""
        renderer.set_draw_color(color.r, color.g, color.b, OPAQUE)
        renderer.draw_line(int(v1.x), int(v1.y), int(v2.x), int(v2.y))


class Circle(Polygon):
    """A unit circle approximated by ``sample`` points, starting at the top."""

    def __init__(self, sample: int) -> None:
        super().__init__(
            [Vector2.up().rotate(360.0 * i / sample) for i in range(sample)]
        )


class Square(Polygon):
    """A unit-radius square standing on its side."""

    def __init__(self) -> None:
        super().__init__([Vector2.up().rotate(angle) for angle in (45, 135, 225, 315)])


class Hexagon(Polygon):
    """A unit-radius hexagon with a vertex at the top."""

    def __init__(self) -> None:
        super().__init__(
            [Vector2.up().rotate(angle) for angle in (0, 60, 120, 180, 240, 300)]
        )