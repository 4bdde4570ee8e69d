"""HealthOrchestrator - coordinates the health metrics engine."""

import logging
from typing import Optional, Sequence, Tuple

from domain.health_metrics.core.ports.calculators import (
    IDietGenerator,
    IMedicalAdvisor,
    IMetricCalculator,
)
from domain.health_metrics.core.reference_data import ReferenceData
from domain.health_metrics.core.value_objects import (
    BiometricInput,
    BMICategoryDefinition,
    HealthAssessment,
    HealthMetrics,
)

logger = logging.getLogger(__name__)


class HealthOrchestrator:
    """
    Orchestrates calculation services for a health assessment.

    Flow:
    1. Calculate BMI, BMR, TDEE and ideal weight from biometrics
    2. Look up the BMI category guidance
    3. Generate the calorie-adjusted diet plan (optional)
    4. Match medical conditions to advisories (independent of BMI)
    """

    def __init__(
        self,
        metric_calculator: IMetricCalculator,
        diet_generator: IDietGenerator,
        medical_advisor: IMedicalAdvisor,
        reference_data: Optional[ReferenceData] = None,
    ):
        self._metric_calculator = metric_calculator
        self._diet_generator = diet_generator
        self._medical_advisor = medical_advisor
        self._reference_data = reference_data or ReferenceData()

    def calculate_metrics(self, biometrics: BiometricInput) -> HealthMetrics:
        """Calculate health metrics only."""
        return self._metric_calculator.calculate(biometrics)

    def category_definitions(self) -> Tuple[BMICategoryDefinition, ...]:
        """All BMI category definitions, in classification order."""
        return self._reference_data.bmi_categories

    def assess(
        self,
        biometrics: BiometricInput,
        medical_conditions: Sequence[str] = (),
        dietary_restrictions: Sequence[str] = (),
        include_diet: bool = True,
    ) -> HealthAssessment:
        """
        Run the full engine for one user.

        Args:
            biometrics: Validated biometrics in metric units
            medical_conditions: Free-text medical conditions
            dietary_restrictions: Dietary restriction tags
            include_diet: Whether to generate the diet plan

        Returns:
            HealthAssessment with metrics, category guidance, diet plan and
            medical advisories
        """
        # Step 1: Body metrics
        metrics = self._metric_calculator.calculate(biometrics)

        # Step 2: Category guidance
        definition = self._reference_data.category_definition(metrics.category)

        # Step 3: Diet plan from TDEE and category
        diet = None
        if include_diet:
            diet = self._diet_generator.generate(metrics, dietary_restrictions)

        # Step 4: Medical advisories (independent of the plan)
        advisories = self._medical_advisor.match(medical_conditions)

        logger.info(
            "Health assessment completed",
            extra={
                "category": metrics.category.value,
                "daily_calories": metrics.daily_calories,
                "diet_target": diet.daily_calories if diet else None,
                "advisories": len(advisories),
            },
        )

        return HealthAssessment(
            metrics=metrics,
            category_definition=definition,
            diet=diet,
            medical_advisories=advisories,
        )
