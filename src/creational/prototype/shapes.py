"""Shape prototypes forming a closed family discriminated on ``kind``.

Area and perimeter are pure functions of a shape's own fields. Dimension
setters clamp negative input to zero, while a triangle whose sides are not
strictly positive or violate the triangle inequality is rejected outright,
both at construction and in ``set_sides``.
"""

from __future__ import annotations

import math
from abc import abstractmethod
from typing import Annotated, Literal

from pydantic import Field, field_validator

from creational.domain import ValueModel

from .base import Prototype

Channel = Annotated[int, Field(ge=0, le=255)]
Length = Annotated[float, Field(ge=0.0)]
Side = Annotated[float, Field(gt=0.0)]


def _clamp_channel(value: int) -> int:
    return max(0, min(255, value))


def is_valid_triangle(side1: float, side2: float, side3: float) -> bool:
    """Return True when the three lengths form a non-degenerate triangle."""

    return (
        side1 > 0
        and side2 > 0
        and side3 > 0
        and side1 + side2 > side3
        and side1 + side3 > side2
        and side2 + side3 > side1
    )


class Position(ValueModel):
    x: float = 0.0
    y: float = 0.0


class Color(ValueModel):
    r: Channel = 0
    g: Channel = 0
    b: Channel = 0


class Shape(Prototype):
    """Fields and behaviour common to every shape variant."""

    position: Position = Field(default_factory=Position)
    color: Color = Field(default_factory=Color)
    visible: bool = True

    @abstractmethod
    def area(self) -> float: ...

    @abstractmethod
    def perimeter(self) -> float: ...

    def set_position(self, x: float, y: float) -> None:
        self.position = Position(x=x, y=y)

    def set_color(self, r: int, g: int, b: int) -> None:
        self.color = Color(r=_clamp_channel(r), g=_clamp_channel(g), b=_clamp_channel(b))

    def set_visible(self, visible: bool) -> None:
        self.visible = visible


class Circle(Shape):
    kind: Literal["circle"] = "circle"
    radius: Length

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius

    def set_radius(self, radius: float) -> None:
        self.radius = max(0.0, radius)


class Rectangle(Shape):
    kind: Literal["rectangle"] = "rectangle"
    width: Length
    height: Length

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    def set_dimensions(self, width: float, height: float) -> None:
        self.width = max(0.0, width)
        self.height = max(0.0, height)


class Triangle(Shape):
    kind: Literal["triangle"] = "triangle"
    sides: tuple[Side, Side, Side]

    @field_validator("sides")
    @classmethod
    def ensure_triangle_inequality(
        cls, value: tuple[float, float, float]
    ) -> tuple[float, float, float]:
        a, b, c = value
        if not is_valid_triangle(a, b, c):
            msg = f"Sides {a}, {b}, {c} violate the triangle inequality"
            raise ValueError(msg)
        return value

    @property
    def side1(self) -> float:
        return self.sides[0]

    @property
    def side2(self) -> float:
        return self.sides[1]

    @property
    def side3(self) -> float:
        return self.sides[2]

    def area(self) -> float:
        # Heron's formula
        a, b, c = self.sides
        s = (a + b + c) / 2
        return math.sqrt(s * (s - a) * (s - b) * (s - c))

    def perimeter(self) -> float:
        return sum(self.sides)

    def set_sides(self, side1: float, side2: float, side3: float) -> None:
        self.sides = (side1, side2, side3)


AnyShape = Circle | Rectangle | Triangle


__all__ = [
    "AnyShape",
    "Circle",
    "Color",
    "Position",
    "Rectangle",
    "Shape",
    "Triangle",
    "is_valid_triangle",
]
