"""GenerateDietPlanQuery - metrics, diet plan and medical advisories."""

from dataclasses import dataclass
from typing import Sequence, Union

from domain.health_metrics.core.value_objects import HealthAssessment

from ..orchestrators.health_orchestrator import HealthOrchestrator
from ..validation import HealthFormData, parse_conditions, validate_health_form


@dataclass(frozen=True)
class GenerateDietPlanQuery:
    """Query to generate a complete health assessment.

    Attributes:
        form: Raw health form
        medical_conditions: Comma-separated string or list of conditions
        dietary_restrictions: Comma-separated string or list of tags
    """

    form: HealthFormData
    medical_conditions: Union[str, Sequence[str], None] = None
    dietary_restrictions: Union[str, Sequence[str], None] = None


class GenerateDietPlanQueryHandler:
    """Handler for GenerateDietPlanQuery."""

    def __init__(self, orchestrator: HealthOrchestrator):
        self._orchestrator = orchestrator

    def handle(self, query: GenerateDietPlanQuery) -> HealthAssessment:
        """
        Validate the form and run the full engine.

        Returns:
            HealthAssessment with diet plan and medical advisories

        Raises:
            InvalidBiometricInputError: If the form fails validation
        """
        biometrics = validate_health_form(query.form)
        return self._orchestrator.assess(
            biometrics,
            medical_conditions=parse_conditions(query.medical_conditions),
            dietary_restrictions=parse_conditions(query.dietary_restrictions),
        )
