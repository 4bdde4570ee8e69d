"""MetricService - BMI, BMR, TDEE and ideal weight calculation."""

import logging
from typing import Optional, Tuple, Union

from ..core.ports.calculators import IBMIClassifier, IMetricCalculator
from ..core.reference_data import ReferenceData
from ..core.rounding import round_half_up
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.biometric_input import BiometricInput
from ..core.value_objects.health_metrics import HealthMetrics
from ..core.value_objects.sex import Sex
from .bmi_classifier import BMIClassifier

logger = logging.getLogger("domain.health_metrics.calculation")

IDEAL_BMI_LOW = 18.5
IDEAL_BMI_HIGH = 24.9


class MetricService(IMetricCalculator):
    """Calculate body metrics from normalized biometrics.

    BMI:
        weight(kg) / height(m)^2

    BMR (Mifflin-St Jeor):
        Men:   10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    TDEE:
        BMR × PAL multiplier (sedentary 1.2 ... very_active 1.9)

    Ideal weight band:
        BMI 18.5 to 24.9 at the given height

    Inputs are expected to be validated by the caller. Non-positive values are
    not rejected here; a zero height raises ZeroDivisionError from the BMI
    formula.
    """

    def __init__(
        self,
        reference_data: Optional[ReferenceData] = None,
        classifier: Optional[IBMIClassifier] = None,
    ) -> None:
        self._reference_data = reference_data or ReferenceData()
        self._classifier = classifier or BMIClassifier(self._reference_data)

    def calculate_bmi(self, height_cm: float, weight_kg: float) -> float:
        """Calculate unrounded Body Mass Index.

        Example:
            >>> round(MetricService().calculate_bmi(170, 70), 2)
            24.22
        """
        height_m = height_cm / 100
        return weight_kg / (height_m * height_m)

    def calculate_bmr(
        self, height_cm: float, weight_kg: float, age: int, sex: Union[Sex, str]
    ) -> float:
        """Calculate unrounded BMR with Mifflin-St Jeor.

        Any sex other than male uses the female constant.

        Example:
            >>> MetricService().calculate_bmr(170, 70, 25, Sex.MALE)
            1642.5
        """
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age

        if sex == Sex.MALE:
            return base + 5
        return base - 161

    def calculate_tdee(self, bmr: float, activity_level: Union[ActivityLevel, str]) -> float:
        """Calculate unrounded TDEE from BMR and activity level.

        Unknown activity tokens use the sedentary multiplier (1.2) instead of
        failing, so the calculation stays total.

        Example:
            >>> round(MetricService().calculate_tdee(1642.5, ActivityLevel.MODERATE), 3)
            2545.875
        """
        token = activity_level.value if isinstance(activity_level, ActivityLevel) else activity_level
        multipliers = self._reference_data.activity_multipliers

        multiplier = multipliers.get(token)
        if multiplier is None:
            logger.debug(
                "Unknown activity level, using fallback multiplier",
                extra={
                    "activity_level": token,
                    "fallback": self._reference_data.fallback_activity,
                },
            )
            multiplier = multipliers[self._reference_data.fallback_activity]

        return bmr * multiplier

    def ideal_weight_range(self, height_cm: float) -> Tuple[int, int]:
        """Healthy weight band (kg) for a height, rounded to whole kg.

        Example:
            >>> MetricService().ideal_weight_range(170)
            (53, 72)
        """
        height_m = height_cm / 100
        squared = height_m * height_m
        return (
            round_half_up(IDEAL_BMI_LOW * squared),
            round_half_up(IDEAL_BMI_HIGH * squared),
        )

    def calculate(self, biometrics: BiometricInput) -> HealthMetrics:
        """Calculate rounded health metrics.

        The category is chosen from the unrounded BMI, so a BMI of 24.96
        reports as 25.0 while staying Normal.

        Args:
            biometrics: Normalized user biometrics

        Returns:
            HealthMetrics: BMI (1 decimal), category, BMR and TDEE (kcal),
            ideal weight band and category color

        Example:
            >>> metrics = MetricService().calculate(BiometricInput(
            ...     height_cm=170, weight_kg=70, age_years=25,
            ...     sex=Sex.MALE, activity_level=ActivityLevel.MODERATE,
            ... ))
            >>> (metrics.bmi, metrics.bmr, metrics.daily_calories)
            (24.2, 1643, 2546)
        """
        bmi = self.calculate_bmi(biometrics.height_cm, biometrics.weight_kg)
        bmr = self.calculate_bmr(
            biometrics.height_cm,
            biometrics.weight_kg,
            biometrics.age_years,
            biometrics.sex,
        )
        tdee = self.calculate_tdee(bmr, biometrics.activity_level)
        definition = self._classifier.classify(bmi)

        return HealthMetrics(
            bmi=round_half_up(bmi, 1),
            category=definition.category,
            bmr=round_half_up(bmr),
            daily_calories=round_half_up(tdee),
            ideal_weight_range=self.ideal_weight_range(biometrics.height_cm),
            color=definition.color,
        )
