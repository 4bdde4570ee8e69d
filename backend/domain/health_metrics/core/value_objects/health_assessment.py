"""HealthAssessment value object - merged engine output."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .bmi_category import BMICategoryDefinition
from .diet_recommendation import DietRecommendation
from .health_metrics import HealthMetrics


@dataclass(frozen=True)
class HealthAssessment:
    """Metrics, category guidance, diet plan and medical advisories.

    Attributes:
        metrics: Calculated health metrics
        category_definition: Definition of the matched BMI category
        diet: Diet plan, None when diet generation was not requested
        medical_advisories: Condition-specific advisories, possibly empty
    """

    metrics: HealthMetrics
    category_definition: BMICategoryDefinition
    diet: Optional[DietRecommendation]
    medical_advisories: Tuple[str, ...]

    @property
    def recommendations(self) -> Tuple[str, ...]:
        """Generic recommendations of the BMI category."""
        return self.category_definition.recommendations
