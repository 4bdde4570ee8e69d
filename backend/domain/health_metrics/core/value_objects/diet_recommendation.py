"""DietRecommendation value object - calorie-adjusted daily plan."""

from dataclasses import dataclass
from typing import Tuple

from .macro_split import MacroSplit
from .meal_plan import MealPlan


@dataclass(frozen=True)
class DietRecommendation:
    """Daily diet plan derived from health metrics.

    Attributes:
        daily_calories: Adjusted calorie target (not the raw TDEE)
        macros: Protein/carbs/fat split of the target
        meals: Breakfast, Lunch, Dinner and Snack, in that order
        foods: Catalog foods compatible with the restrictions
        restrictions: Dietary restrictions the plan was filtered with
    """

    daily_calories: int
    macros: MacroSplit
    meals: Tuple[MealPlan, ...]
    foods: Tuple[str, ...]
    restrictions: Tuple[str, ...]

    @property
    def protein_g(self) -> int:
        return self.macros.protein_g

    @property
    def carbs_g(self) -> int:
        return self.macros.carbs_g

    @property
    def fats_g(self) -> int:
        return self.macros.fat_g

    def meal_calories_total(self) -> int:
        """Sum of the per-meal calories (may drift from daily_calories)."""
        return sum(meal.calories for meal in self.meals)
