"""
Unit-tagged physical quantities.

Every profile sample and surface value in a sounding carries its unit as a
type, so a pressure can never be compared against a temperature by accident.
Quantities of the same unit order normally; mixing units raises TypeError.
The bare float is only recovered with ``unpack`` at the comparison site.

Classes
-------
HectoPascal
    Pressure [hPa]
Celsius
    Temperature, wet bulb and dew point [C]
Kelvin
    Equivalent potential temperature [K]
Knots
    Wind speed [kt]
PaPS
    Pressure vertical velocity [Pa/s]
Meters
    Geopotential height and station elevation [m]
"""

import math
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True, order=True)
class Quantity:
    """Base class for a float tagged with a physical unit."""

    value: float

    symbol = ""

    def unpack(self) -> float:
        """Bare numeric value."""
        return float(self.value)

    def __str__(self) -> str:
        return f"{self.value:g} {self.symbol}".rstrip()


@dataclass(frozen=True, order=True)
class HectoPascal(Quantity):
    symbol = "hPa"


@dataclass(frozen=True, order=True)
class Celsius(Quantity):
    symbol = "C"


@dataclass(frozen=True, order=True)
class Kelvin(Quantity):
    symbol = "K"


@dataclass(frozen=True, order=True)
class Knots(Quantity):
    symbol = "kt"


@dataclass(frozen=True, order=True)
class PaPS(Quantity):
    symbol = "Pa/s"


@dataclass(frozen=True, order=True)
class Meters(Quantity):
    symbol = "m"


Number = Union[int, float]


def unpack(value: Union[Quantity, Number]) -> float:
    """
    Unwrap a quantity (or plain number) to a float.

    Parameters
    ----------
    value : Quantity or float
        Value to unwrap

    Returns
    -------
    float
        The bare numeric value
    """
    if isinstance(value, Quantity):
        return value.unpack()
    return float(value)


def coerce(value, unit: Optional[type]):
    """
    Wrap a raw sample into ``unit``.

    ``None`` and NaN become ``None`` (absent). Plain numbers are wrapped,
    quantities of the right unit pass through, and quantities of any other
    unit raise TypeError. With ``unit=None`` the value stays a plain float.
    """
    if value is None:
        return None

    if isinstance(value, Quantity):
        if unit is None or type(value) is not unit:
            expected = unit.__name__ if unit is not None else "a plain number"
            raise TypeError(
                f"Expected {expected}, got {type(value).__name__}({value.value})"
            )
        return None if math.isnan(value.value) else value

    value = float(value)
    if math.isnan(value):
        return None
    return unit(value) if unit is not None else value
