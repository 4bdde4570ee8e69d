"""HealthMetrics value object - result of a metrics calculation."""

from dataclasses import dataclass
from typing import Tuple

from .bmi_category import BMICategory


@dataclass(frozen=True)
class HealthMetrics:
    """Rounded health metrics for one set of biometrics.

    Attributes:
        bmi: Body Mass Index, 1 decimal
        category: BMI category (from the unrounded BMI)
        bmr: Basal metabolic rate, kcal/day
        daily_calories: TDEE, kcal/day
        ideal_weight_range: Healthy weight band in kg (min, max)
        color: Presentation hint of the category
    """

    bmi: float
    category: BMICategory
    bmr: int
    daily_calories: int
    ideal_weight_range: Tuple[int, int]
    color: str

    def __str__(self) -> str:
        return f"BMI {self.bmi} ({self.category.value}), {self.daily_calories} kcal/day"
