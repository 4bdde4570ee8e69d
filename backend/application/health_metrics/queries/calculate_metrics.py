"""CalculateHealthMetricsQuery - metrics only (real-time BMI calculator)."""

from dataclasses import dataclass

from domain.health_metrics.core.value_objects import HealthAssessment

from ..orchestrators.health_orchestrator import HealthOrchestrator
from ..validation import HealthFormData, validate_health_form


@dataclass(frozen=True)
class CalculateHealthMetricsQuery:
    """Query to calculate health metrics without a diet plan.

    Attributes:
        form: Raw health form
    """

    form: HealthFormData


class CalculateHealthMetricsQueryHandler:
    """Handler for CalculateHealthMetricsQuery."""

    def __init__(self, orchestrator: HealthOrchestrator):
        self._orchestrator = orchestrator

    def handle(self, query: CalculateHealthMetricsQuery) -> HealthAssessment:
        """
        Validate the form and calculate metrics.

        Returns:
            HealthAssessment without diet plan or advisories

        Raises:
            InvalidBiometricInputError: If the form fails validation
        """
        biometrics = validate_health_form(query.form)
        return self._orchestrator.assess(biometrics, include_diet=False)
