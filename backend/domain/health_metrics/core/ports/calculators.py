"""Calculator ports - interfaces for the health metrics engine."""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

from ..value_objects.biometric_input import BiometricInput
from ..value_objects.bmi_category import BMICategoryDefinition
from ..value_objects.diet_recommendation import DietRecommendation
from ..value_objects.health_metrics import HealthMetrics


class IMetricCalculator(ABC):
    """Port for BMI/BMR/TDEE/ideal weight calculation."""

    @abstractmethod
    def calculate(self, biometrics: BiometricInput) -> HealthMetrics:
        """Calculate rounded health metrics from normalized biometrics.

        Args:
            biometrics: Height, weight, age, sex and activity level

        Returns:
            HealthMetrics: BMI, category, BMR, TDEE and ideal weight band
        """
        pass


class IBMIClassifier(ABC):
    """Port for BMI classification."""

    @abstractmethod
    def classify(self, bmi: float) -> BMICategoryDefinition:
        """Map a BMI value to its category definition.

        Args:
            bmi: Body Mass Index

        Returns:
            BMICategoryDefinition: Matching category (never raises)
        """
        pass


class IDietGenerator(ABC):
    """Port for diet recommendation generation."""

    @abstractmethod
    def generate(
        self,
        metrics: HealthMetrics,
        restrictions: Sequence[str] = (),
    ) -> DietRecommendation:
        """Build a calorie-adjusted daily plan.

        Args:
            metrics: Calculated health metrics
            restrictions: Dietary restriction tags

        Returns:
            DietRecommendation: Target calories, macros, meals and foods
        """
        pass


class IMedicalAdvisor(ABC):
    """Port for condition-specific dietary advice."""

    @abstractmethod
    def match(self, conditions: Sequence[str]) -> Tuple[str, ...]:
        """Collect advisories for the given medical conditions.

        Args:
            conditions: Free-text medical conditions

        Returns:
            Tuple of advisory strings, empty when nothing matches
        """
        pass
