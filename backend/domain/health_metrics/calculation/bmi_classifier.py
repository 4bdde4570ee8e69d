"""BMIClassifier - map BMI values to categories."""

import logging
from typing import Optional

from ..core.ports.calculators import IBMIClassifier
from ..core.reference_data import ReferenceData
from ..core.value_objects.bmi_category import BMICategory, BMICategoryDefinition

logger = logging.getLogger("domain.health_metrics.classifier")


class BMIClassifier(IBMIClassifier):
    """Classify BMI values into WHO categories.

    Categories are scanned in table order (Underweight, Normal, Overweight,
    Obese) and each covers the half-open interval [low, high):

        Underweight  [0, 18.5)
        Normal       [18.5, 25)
        Overweight   [25, 30)
        Obese        [30, inf)

    A value outside every interval (negative or NaN BMI from degenerate
    input) resolves to the Normal definition instead of raising.
    """

    def __init__(self, reference_data: Optional[ReferenceData] = None) -> None:
        self._reference_data = reference_data or ReferenceData()
        self._fallback = self._reference_data.category_definition(BMICategory.NORMAL)

    def classify(self, bmi: float) -> BMICategoryDefinition:
        """Return the category definition containing ``bmi``.

        Example:
            >>> BMIClassifier().classify(25.0).category
            <BMICategory.OVERWEIGHT: 'Overweight'>
        """
        for definition in self._reference_data.bmi_categories:
            if definition.contains(bmi):
                return definition

        logger.debug("BMI outside every category, using Normal", extra={"bmi": bmi})
        return self._fallback
