"""MealPlan value object - one meal slot of a daily plan."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class MealPlan:
    """A meal slot with its calorie share and suggested foods.

    Attributes:
        name: Slot name (Breakfast, Lunch, Dinner, Snack)
        calories: Calories for the slot, kcal
        foods: Suggested foods, in serving order
        timing: Suggested clock time (e.g. "7:00 AM")
    """

    name: str
    calories: int
    foods: Tuple[str, ...]
    timing: str
