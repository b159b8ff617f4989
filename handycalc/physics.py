"""Small physics and chemistry formulas: gases, circuits, solutions, temperature."""

from __future__ import annotations

from collections.abc import Iterable

GAS_CONSTANT = 8.314


def ideal_gas_pressure(volume: float, moles: float, temperature: float) -> float:
    """Pressure from the ideal gas law P = nRT / V."""
    if volume <= 0 or temperature <= 0:
        raise ValueError("volume and temperature must be greater than zero")
    return moles * GAS_CONSTANT * temperature / volume


def ohm_current(voltage: float, resistance: float) -> float:
    """Current through a resistance by Ohm's law I = V / R."""
    if resistance == 0:
        raise ZeroDivisionError("resistance cannot be zero")
    return voltage / resistance


def series_resistance(resistances: Iterable[float]) -> float:
    """Total resistance of resistors connected in series."""
    return float(sum(resistances, 0.0))


def raoult_total_pressure(x1: float, p1_pure: float, p2_pure: float) -> float:
    """Total vapour pressure of a two-component ideal solution."""
    if not 0 <= x1 <= 1:
        raise ValueError("mole fraction must be between 0 and 1")
    return x1 * p1_pure + (1.0 - x1) * p2_pure


def fahrenheit_to_celsius(temperature: float) -> float:
    """Convert a Fahrenheit temperature to Celsius."""
    return (temperature - 32) * 5 / 9


def celsius_to_fahrenheit(temperature: float) -> float:
    """Convert a Celsius temperature to Fahrenheit."""
    return temperature * 9 / 5 + 32