"""Small everyday calculators for geometry, series, finance, physics and more."""

__version__ = "0.1.0"

__all__ = [
    "calculator",
    "classify",
    "cli",
    "finance",
    "geometry",
    "patterns",
    "physics",
    "series",
    "vending",
]