"""
resunits.units.conversion
=========================

SI conversion factors for the unit systems used in simulation decks.

Each table is an immutable `ConversionConstants` value. The unit-system
factories take one as an argument, so nothing here is mutable global state;
build a variant with `dataclasses.replace` when a deck needs different
constants.
"""
from __future__ import annotations

from dataclasses import dataclass
from math import isfinite

# ---------------------------------------------------------------------------
# Prefixes & base quantities (SI)
# ---------------------------------------------------------------------------
MILLI = 1e-3
CENTI = 1e-2

METER = 1.0
KILOGRAM = 1.0
SECOND = 1.0
PASCAL = 1.0

MINUTE = 60.0 * SECOND
HOUR = 60.0 * MINUTE
DAY = 24.0 * HOUR

# ---------------------------------------------------------------------------
# Derived quantities
# ---------------------------------------------------------------------------
GRAVITY = 9.80665                                  # standard, m/s²
ATM = 101325.0 * PASCAL
BARSA = 1e5 * PASCAL

INCH = 2.54 * CENTI * METER
FEET = 12.0 * INCH
POUND = 0.45359237 * KILOGRAM
LBF = POUND * GRAVITY                              # pound-force
PSIA = LBF / (INCH * INCH)

POISE = 0.1 * PASCAL * SECOND
# 1 D: 1 cm³/s of 1 cP fluid through 1 cm² under 1 atm/cm
DARCY = (CENTI * POISE) * (CENTI * METER) ** 3 / SECOND / (
    (CENTI * METER) ** 2 * (ATM / (CENTI * METER))
)
MILLIDARCY = MILLI * DARCY


@dataclass(frozen=True, slots=True)
class ConversionConstants:
    """SI factors for the base dimensions of one unit system."""

    name: str
    pressure: float
    length: float
    time: float
    mass: float
    permeability: float

    def __post_init__(self) -> None:
        for field in ("pressure", "length", "time", "mass", "permeability"):
            value = getattr(self, field)
            if not isfinite(value):
                raise ValueError(f"{self.name}.{field} must be a finite number, got {value!r}")


METRIC = ConversionConstants(
    name="Metric",
    pressure=BARSA,
    length=METER,
    time=DAY,
    mass=KILOGRAM,
    permeability=MILLIDARCY,
)

FIELD = ConversionConstants(
    name="Field",
    pressure=PSIA,
    length=FEET,
    time=DAY,
    mass=POUND,
    permeability=MILLIDARCY,
)


__all__ = [
    "ConversionConstants",
    "METRIC",
    "FIELD",
    "BARSA",
    "PSIA",
    "FEET",
    "POUND",
    "DAY",
    "DARCY",
    "MILLIDARCY",
]
