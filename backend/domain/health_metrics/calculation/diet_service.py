"""DietService - calorie-adjusted diet recommendation."""

from typing import Optional, Sequence, Tuple

from ..core.ports.calculators import IDietGenerator
from ..core.reference_data import ReferenceData
from ..core.rounding import round_half_up
from ..core.value_objects.diet_recommendation import DietRecommendation
from ..core.value_objects.health_metrics import HealthMetrics
from ..core.value_objects.macro_split import MacroSplit
from ..core.value_objects.meal_plan import MealPlan

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


class DietService(IDietGenerator):
    """Generate a daily diet plan from health metrics.

    Steps:
        1. Start from the TDEE of the metrics (daily_calories)
        2. Adjust by BMI category: Underweight +500, Normal 0,
           Overweight -500, Obese -750
        3. Split the target into macros: protein 25%, carbs 45%, fat 30%
           (4/4/9 kcal per gram)
        4. Share the target across Breakfast 25%, Lunch 35%, Dinner 30%,
           Snack 10%

    Every figure is rounded on its own, so meal calories may not add up
    exactly to the daily target. The drift is at most one kcal per meal and
    is left as is.

    Degenerate metrics (zero, negative or NaN calories) still produce a
    structurally complete recommendation.
    """

    def __init__(self, reference_data: Optional[ReferenceData] = None) -> None:
        self._reference_data = reference_data or ReferenceData()

    def calculate_target_calories(self, metrics: HealthMetrics) -> float:
        """Apply the BMI category adjustment to the TDEE."""
        return metrics.category.calorie_adjustment(metrics.daily_calories)

    def calculate_macros(self, calories_target: float) -> MacroSplit:
        """Split a calorie target into macronutrient grams.

        Example:
            >>> DietService().calculate_macros(2546)
            MacroSplit(protein_g=159, carbs_g=286, fat_g=85)
        """
        ratios = self._reference_data.macro_ratios
        return MacroSplit(
            protein_g=round_half_up(calories_target * ratios.protein / KCAL_PER_G_PROTEIN),
            carbs_g=round_half_up(calories_target * ratios.carbs / KCAL_PER_G_CARBS),
            fat_g=round_half_up(calories_target * ratios.fat / KCAL_PER_G_FAT),
        )

    def build_meals(self, calories_target: float) -> Tuple[MealPlan, ...]:
        """Build one MealPlan per meal slot, in slot order."""
        return tuple(
            MealPlan(
                name=slot.name,
                calories=round_half_up(calories_target * slot.share),
                foods=slot.foods,
                timing=slot.timing,
            )
            for slot in self._reference_data.meal_slots
        )

    def suitable_foods(self, restrictions: Sequence[str]) -> Tuple[str, ...]:
        """Catalog food names compatible with at least one restriction.

        An empty restriction list means no filtering. "all" keeps every
        catalog food.
        """
        catalog = self._reference_data.food_catalog
        if not restrictions:
            return tuple(food.name for food in catalog)

        wanted = tuple(restrictions)
        return tuple(food.name for food in catalog if food.is_suitable_for(wanted))

    def generate(
        self,
        metrics: HealthMetrics,
        restrictions: Sequence[str] = (),
    ) -> DietRecommendation:
        """Generate the diet recommendation.

        Args:
            metrics: Health metrics (TDEE and BMI category are used)
            restrictions: Dietary restriction tags (e.g. "vegetarian")

        Returns:
            DietRecommendation: Adjusted target, macros, four meals,
            filtered foods and the restrictions echoed back

        Example:
            >>> plan = DietService().generate(metrics)  # Normal, TDEE 2546
            >>> plan.daily_calories, plan.protein_g, plan.carbs_g, plan.fats_g
            (2546, 159, 286, 85)
        """
        calories_target = self.calculate_target_calories(metrics)

        return DietRecommendation(
            daily_calories=calories_target,
            macros=self.calculate_macros(calories_target),
            meals=self.build_meals(calories_target),
            foods=self.suitable_foods(restrictions),
            restrictions=tuple(restrictions),
        )
