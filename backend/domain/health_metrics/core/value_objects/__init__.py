"""Value objects for health metrics domain."""

from .activity_level import ActivityLevel
from .biometric_input import BiometricInput
from .bmi_category import BMICategory, BMICategoryDefinition
from .diet_recommendation import DietRecommendation
from .health_assessment import HealthAssessment
from .health_metrics import HealthMetrics
from .macro_split import MacroSplit
from .meal_plan import MealPlan
from .sex import Sex
from .units import HeightUnit, WeightUnit

__all__ = [
    "ActivityLevel",
    "Sex",
    "BiometricInput",
    "BMICategory",
    "BMICategoryDefinition",
    "HealthMetrics",
    "MacroSplit",
    "MealPlan",
    "DietRecommendation",
    "HealthAssessment",
    "HeightUnit",
    "WeightUnit",
]
