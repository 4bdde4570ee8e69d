"""BMICategory value objects - WHO BMI classification."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class BMICategory(str, Enum):
    """BMI classification determining the calorie adjustment.

    - UNDERWEIGHT: surplus (+500 kcal/day) for weight gain
    - NORMAL: maintenance at TDEE
    - OVERWEIGHT: deficit (-500 kcal/day) for weight loss
    - OBESE: larger deficit (-750 kcal/day)
    """

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"

    def calorie_adjustment(self, calories: float) -> float:
        """Apply the category calorie adjustment to daily calories.

        Args:
            calories: Daily energy expenditure (kcal/day)

        Returns:
            float: Adjusted calories target

        Example:
            >>> BMICategory.OBESE.calorie_adjustment(2500)
            1750
        """
        adjustments = {
            BMICategory.UNDERWEIGHT: +500,
            BMICategory.NORMAL: 0,
            BMICategory.OVERWEIGHT: -500,
            BMICategory.OBESE: -750,
        }
        return calories + adjustments[self]


@dataclass(frozen=True)
class BMICategoryDefinition:
    """Static definition of one BMI category.

    Attributes:
        category: Category label
        low: Inclusive lower BMI bound
        high: Exclusive upper BMI bound (inf for the last category)
        color: Presentation hint for clients
        description: Short description
        recommendations: Generic recommendations for the category
    """

    category: BMICategory
    low: float
    high: float
    color: str
    description: str
    recommendations: Tuple[str, ...]

    def contains(self, bmi: float) -> bool:
        """Check whether a BMI value falls in [low, high)."""
        return self.low <= bmi < self.high

    @property
    def is_unbounded(self) -> bool:
        return math.isinf(self.high)
