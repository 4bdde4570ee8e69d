"""Calculation services for health metrics."""

from .bmi_classifier import BMIClassifier
from .diet_service import DietService
from .medical_advisory_service import MedicalAdvisoryService
from .metric_service import MetricService
from .unit_converter import height_to_cm, weight_to_kg

__all__ = [
    "BMIClassifier",
    "MetricService",
    "DietService",
    "MedicalAdvisoryService",
    "height_to_cm",
    "weight_to_kg",
]
