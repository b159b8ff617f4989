"""Plane and solid geometry helpers: angles, areas, volumes and roots."""

from __future__ import annotations

import math

PI_PRECISE = 3.14159
PI_ROUGH = 3.14


def _require_positive(**values: float) -> None:
    for name, value in values.items():
        if value <= 0:
            raise ValueError(f"{name} must be a positive number, got {value}")


def polygon_angle_sum(sides: int) -> int:
    """Sum of the interior angles, in degrees, of a polygon with ``sides`` sides."""
    if sides < 3:
        raise ValueError("a polygon must have 3 or more sides")
    return (sides - 2) * 180


def regular_polygon_interior_angle(sides: int) -> float:
    """Measure of each interior angle of a regular polygon, in degrees."""
    return polygon_angle_sum(sides) / sides


def is_valid_triangle(angle1: float, angle2: float, angle3: float) -> bool:
    """True if the three angles are all positive and add up to 180 degrees."""
    angles = (angle1, angle2, angle3)
    return sum(angles) == 180 and all(angle > 0 for angle in angles)


def circle_area(radius: float) -> float:
    """Area of a circle; a negative radius is rejected."""
    if radius < 0:
        raise ValueError("radius cannot be negative")
    return PI_PRECISE * radius * radius


def rectangle_area(length: float, breadth: float) -> float:
    """Area of a rectangle; negative dimensions are rejected."""
    if length < 0 or breadth < 0:
        raise ValueError("length and breadth must be non-negative")
    return length * breadth


def square_area(side: float) -> float:
    """Area of a square with the given side length."""
    return side * side


def hypotenuse(a: float, b: float) -> float:
    """Hypotenuse of a right triangle with legs ``a`` and ``b``."""
    _require_positive(a=a, b=b)
    return math.sqrt(a * a + b * b)


def missing_side(hypotenuse: float, known_side: float) -> float:
    """The other leg of a right triangle given its hypotenuse and one leg."""
    _require_positive(hypotenuse=hypotenuse, known_side=known_side)
    if known_side >= hypotenuse:
        raise ValueError("hypotenuse must be greater than the known side")
    return math.sqrt(hypotenuse * hypotenuse - known_side * known_side)


def cube_volume(side: int) -> int:
    """Volume of a cube with an integer side length."""
    return side * side * side


def cylinder_volume(radius: float, height: float) -> float:
    """Volume of a cylinder, using pi rounded to 3.14."""
    return PI_ROUGH * radius * radius * height


def circle_circumference(radius: float) -> float:
    """Circumference of a circle, using pi rounded to 3.14."""
    return 2 * PI_ROUGH * radius


def cuboid_volume(length: float, width: float, height: float) -> float:
    """Volume of a cuboid."""
    return length * width * height


def square(number: float) -> float:
    """The number multiplied by itself."""
    return number * number


def square_root(number: float) -> float:
    """Square root of a non-negative number."""
    if number < 0:
        raise ValueError("cannot calculate the square root of a negative number")
    return math.sqrt(number)


def cube(number: int) -> int:
    """The number raised to the third power."""
    result = 1
    for _ in range(3):
        result *= number
    return result