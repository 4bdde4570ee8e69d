"""BiometricInput value object - normalized user biometrics."""

from dataclasses import dataclass

from .activity_level import ActivityLevel
from .sex import Sex


@dataclass(frozen=True)
class BiometricInput:
    """User biometrics in canonical metric units.

    Callers build this through the application validator, which rejects
    non-positive or out-of-range values. The engine itself does not re-check
    them: degenerate input produces degenerate output.

    Attributes:
        height_cm: Height in centimeters
        weight_kg: Body weight in kilograms
        age_years: Age in years
        sex: Biological sex
        activity_level: Physical activity level
    """

    height_cm: float
    weight_kg: float
    age_years: int
    sex: Sex
    activity_level: ActivityLevel
