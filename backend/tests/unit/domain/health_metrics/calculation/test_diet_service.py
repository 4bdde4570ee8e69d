"""Unit tests for DietService."""

import math

import pytest

from domain.health_metrics.calculation.diet_service import DietService
from domain.health_metrics.core.reference_data import FOOD_CATALOG
from domain.health_metrics.core.value_objects import BMICategory, HealthMetrics


def make_metrics(daily_calories=2546, category=BMICategory.NORMAL):
    return HealthMetrics(
        bmi=24.2,
        category=category,
        bmr=1643,
        daily_calories=daily_calories,
        ideal_weight_range=(53, 72),
        color="text-green-600",
    )


class TestDietService:
    """Test diet recommendation generation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = DietService()

    def test_reference_plan(self):
        """Test plan for Normal category at 2546 kcal."""
        plan = self.service.generate(make_metrics())

        assert plan.daily_calories == 2546
        assert plan.protein_g == 159
        assert plan.carbs_g == 286
        assert plan.fats_g == 85

    def test_reference_meals(self):
        """Test meal calories, names and timings."""
        plan = self.service.generate(make_metrics())

        assert [(m.name, m.calories, m.timing) for m in plan.meals] == [
            ("Breakfast", 637, "7:00 AM"),
            ("Lunch", 891, "12:30 PM"),
            ("Dinner", 764, "7:00 PM"),
            ("Snack", 255, "3:30 PM"),
        ]

    def test_rounding_drift_is_preserved(self):
        """Test meal calories are not reconciled with the target."""
        plan = self.service.generate(make_metrics())

        assert plan.meal_calories_total() == 2547
        assert abs(plan.meal_calories_total() - plan.daily_calories) <= len(plan.meals)

    def test_meal_foods(self):
        """Test fixed foods per slot."""
        plan = self.service.generate(make_metrics())

        assert plan.meals[0].foods == ("Greek Yogurt with Berries", "Almonds", "Oatmeal")
        assert plan.meals[3].foods == ("Mixed Nuts", "Fruit")

    @pytest.mark.parametrize(
        "category,expected",
        [
            (BMICategory.UNDERWEIGHT, 2500),
            (BMICategory.NORMAL, 2000),
            (BMICategory.OVERWEIGHT, 1500),
            (BMICategory.OBESE, 1250),
        ],
    )
    def test_target_adjusted_by_category(self, category, expected):
        """Test category calorie adjustment."""
        plan = self.service.generate(make_metrics(daily_calories=2000, category=category))

        assert plan.daily_calories == expected

    def test_target_ordering(self):
        """Test Obese < Overweight < Normal < Underweight at equal TDEE."""
        targets = [
            self.service.generate(make_metrics(category=c)).daily_calories
            for c in (
                BMICategory.OBESE,
                BMICategory.OVERWEIGHT,
                BMICategory.NORMAL,
                BMICategory.UNDERWEIGHT,
            )
        ]

        assert targets == sorted(targets)
        assert len(set(targets)) == 4

    def test_overweight_plan(self):
        """Test plan for overweight sedentary male (TDEE 2196)."""
        plan = self.service.generate(
            make_metrics(daily_calories=2196, category=BMICategory.OVERWEIGHT)
        )

        assert plan.daily_calories == 1696
        assert (plan.protein_g, plan.carbs_g, plan.fats_g) == (106, 191, 57)

    @pytest.mark.parametrize("calories", [1200, 1696, 2546, 3265])
    def test_macro_calories_match_target(self, calories):
        """Test macro kcal stay within rounding tolerance of the target."""
        macros = self.service.calculate_macros(calories)

        assert abs(macros.total_calories() - calories) <= 4 + 4 + 9

    def test_all_foods_without_restrictions(self):
        """Test empty restrictions return the full catalog."""
        plan = self.service.generate(make_metrics())

        assert plan.foods == tuple(food.name for food in FOOD_CATALOG)
        assert plan.restrictions == ()

    def test_vegan_filter(self):
        """Test vegan excludes animal foods."""
        plan = self.service.generate(make_metrics(), ["vegan"])

        assert "Chicken Breast" not in plan.foods
        assert "Salmon" not in plan.foods
        assert "Greek Yogurt" not in plan.foods
        assert "Quinoa" in plan.foods
        assert plan.restrictions == ("vegan",)

    def test_combined_restrictions_match_any_tag(self):
        """Test a food is kept when any restriction applies."""
        foods = self.service.suitable_foods(["vegan", "pescatarian"])

        assert "Salmon" in foods
        assert "Greek Yogurt" in foods
        assert "Quinoa" in foods
        assert "Chicken Breast" not in foods

    def test_combined_restrictions_case_insensitive(self):
        """Test vegan + nut_free keeps almonds (vegan) and chicken (nut free)."""
        foods = self.service.suitable_foods(["Vegan", "NUT_FREE"])

        assert "Almonds" in foods
        assert "Chicken Breast" in foods

    def test_all_restriction_keeps_catalog(self):
        """Test "all" returns every catalog food."""
        plan = self.service.generate(make_metrics(), ["all"])

        assert plan.foods == tuple(food.name for food in FOOD_CATALOG)
        assert plan.restrictions == ("all",)

    def test_unknown_restriction_filters_everything(self):
        """Test unknown tag matches no food."""
        assert self.service.suitable_foods(["carnivore"]) == ()

    def test_pescatarian_keeps_salmon(self):
        """Test pescatarian tag."""
        foods = self.service.suitable_foods(["pescatarian"])

        assert "Salmon" in foods
        assert "Chicken Breast" not in foods

    def test_zero_calories_structurally_valid(self):
        """Test zero TDEE still yields four meals."""
        plan = self.service.generate(make_metrics(daily_calories=0))

        assert plan.daily_calories == 0
        assert len(plan.meals) == 4
        assert plan.macros.total_calories() == 0

    def test_negative_calories_do_not_raise(self):
        """Test negative target passes through."""
        plan = self.service.generate(
            make_metrics(daily_calories=100, category=BMICategory.OBESE)
        )

        assert plan.daily_calories == -650
        assert len(plan.meals) == 4

    def test_nan_calories_do_not_raise(self):
        """Test NaN TDEE yields NaN figures without errors."""
        plan = self.service.generate(make_metrics(daily_calories=math.nan))

        assert math.isnan(plan.daily_calories)
        assert math.isnan(plan.protein_g)
        assert len(plan.meals) == 4
