"""Text patterns: star pyramids and multiplication tables."""

from __future__ import annotations


def pyramid(rows: int) -> list[str]:
    """Lines of a centred star pyramid with ``rows`` rows."""
    return [" " * (rows - row) + "*" * (2 * row - 1) for row in range(1, rows + 1)]


def multiplication_table(number: int, upto: int) -> list[str]:
    """Lines ``number x i = product`` for i from 1 to ``upto``."""
    return [f"{number} x {i} = {number * i}" for i in range(1, upto + 1)]