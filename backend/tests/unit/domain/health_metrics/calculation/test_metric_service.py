"""Unit tests for MetricService."""

import math

import pytest

from domain.health_metrics.calculation.metric_service import MetricService
from domain.health_metrics.core.value_objects import (
    ActivityLevel,
    BiometricInput,
    BMICategory,
    Sex,
)


def make_input(
    height_cm=170.0,
    weight_kg=70.0,
    age_years=25,
    sex=Sex.MALE,
    activity_level=ActivityLevel.MODERATE,
):
    return BiometricInput(
        height_cm=height_cm,
        weight_kg=weight_kg,
        age_years=age_years,
        sex=sex,
        activity_level=activity_level,
    )


class TestMetricService:
    """Test BMI, BMR, TDEE and ideal weight calculation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = MetricService()

    def test_calculate_bmi(self):
        """Test BMI formula."""
        # 70 / 1.7^2 = 24.2214...
        assert self.service.calculate_bmi(170, 70) == pytest.approx(24.2214, abs=1e-4)

    def test_calculate_bmr_male(self):
        """Test Mifflin-St Jeor for male."""
        # 10*70 + 6.25*170 - 5*25 + 5 = 1642.5
        assert self.service.calculate_bmr(170, 70, 25, Sex.MALE) == 1642.5

    def test_calculate_bmr_female(self):
        """Test Mifflin-St Jeor for female."""
        # 10*60 + 6.25*165 - 5*30 - 161 = 1320.25
        assert self.service.calculate_bmr(165, 60, 30, Sex.FEMALE) == 1320.25

    def test_male_female_difference(self):
        """Test sex constant difference is 166 kcal."""
        male = self.service.calculate_bmr(170, 70, 25, Sex.MALE)
        female = self.service.calculate_bmr(170, 70, 25, Sex.FEMALE)

        assert male - female == 166

    def test_calculate_tdee_with_enum(self):
        """Test TDEE with ActivityLevel."""
        assert self.service.calculate_tdee(1000, ActivityLevel.ACTIVE) == pytest.approx(1725)

    def test_calculate_tdee_with_token(self):
        """Test TDEE with raw string token."""
        assert self.service.calculate_tdee(1000, "very_active") == pytest.approx(1900)

    def test_calculate_tdee_unknown_token_falls_back_to_sedentary(self):
        """Test unknown activity uses multiplier 1.2 without raising."""
        assert self.service.calculate_tdee(1000, "marathoner") == pytest.approx(1200)

    def test_ideal_weight_range(self):
        """Test healthy band for 170 cm."""
        # 18.5 * 2.89 = 53.465, 24.9 * 2.89 = 71.961
        assert self.service.ideal_weight_range(170) == (53, 72)

    def test_calculate_reference_male(self):
        """Test full metrics for the reference male."""
        metrics = self.service.calculate(make_input())

        assert metrics.bmi == 24.2
        assert metrics.category == BMICategory.NORMAL
        assert metrics.bmr == 1643
        assert metrics.daily_calories == 2546
        assert metrics.ideal_weight_range == (53, 72)
        assert metrics.color == "text-green-600"

    def test_calculate_female_light(self):
        """Test full metrics for a lightly active female."""
        metrics = self.service.calculate(
            make_input(
                height_cm=165,
                weight_kg=60,
                age_years=30,
                sex=Sex.FEMALE,
                activity_level=ActivityLevel.LIGHT,
            )
        )

        assert metrics.bmi == 22.0
        assert metrics.bmr == 1320
        # 1320.25 * 1.375 = 1815.34
        assert metrics.daily_calories == 1815

    @pytest.mark.parametrize(
        "height,weight,expected",
        [
            (170, 50, BMICategory.UNDERWEIGHT),
            (170, 70, BMICategory.NORMAL),
            (180, 90, BMICategory.OVERWEIGHT),
            (170, 100, BMICategory.OBESE),
        ],
    )
    def test_calculate_categories(self, height, weight, expected):
        """Test category assignment across the table."""
        metrics = self.service.calculate(make_input(height_cm=height, weight_kg=weight))

        assert metrics.category == expected

    def test_category_uses_unrounded_bmi(self):
        """Test BMI 24.96 displays as 25.0 but stays Normal."""
        # 72.13 / 1.7^2 = 24.958...
        metrics = self.service.calculate(make_input(weight_kg=72.13))

        assert metrics.bmi == 25.0
        assert metrics.category == BMICategory.NORMAL

    @pytest.mark.parametrize("height_cm", [150, 165, 170, 185, 200])
    def test_bmi_strictly_increases_with_weight(self, height_cm):
        """Test heavier means higher BMI at fixed height."""
        weights = [45, 60, 70, 90, 120]

        bmis = [self.service.calculate_bmi(height_cm, w) for w in weights]

        assert all(a < b for a, b in zip(bmis, bmis[1:]))

    @pytest.mark.parametrize("weight_kg", [50, 70, 95, 130])
    def test_bmi_strictly_decreases_with_height(self, weight_kg):
        """Test taller means lower BMI at fixed weight."""
        heights = [150, 160, 170, 180, 195]

        bmis = [self.service.calculate_bmi(h, weight_kg) for h in heights]

        assert all(a > b for a, b in zip(bmis, bmis[1:]))

    def test_tdee_not_below_bmr(self):
        """Test TDEE is at least BMR for every activity level."""
        for level in ActivityLevel:
            metrics = self.service.calculate(make_input(activity_level=level))

            assert metrics.daily_calories >= metrics.bmr

    def test_degenerate_input_does_not_raise(self):
        """Test negative weight still produces metrics."""
        metrics = self.service.calculate(make_input(weight_kg=-70))

        assert metrics.bmi < 0
        assert metrics.category == BMICategory.NORMAL

    def test_nan_input_does_not_raise(self):
        """Test NaN weight produces NaN metrics with fallback category."""
        metrics = self.service.calculate(make_input(weight_kg=math.nan))

        assert math.isnan(metrics.bmi)
        assert math.isnan(metrics.bmr)
        assert metrics.category == BMICategory.NORMAL

    def test_zero_height_raises(self):
        """Test zero height is a caller error."""
        with pytest.raises(ZeroDivisionError):
            self.service.calculate(make_input(height_cm=0))
