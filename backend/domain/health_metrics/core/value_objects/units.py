"""Measurement unit toggles offered by the health form."""

from enum import Enum


class HeightUnit(str, Enum):
    """Unit the height was entered in."""

    CM = "cm"
    FT = "ft"  # feet + inches


class WeightUnit(str, Enum):
    """Unit the weight was entered in."""

    KG = "kg"
    LB = "lb"
