"""Ports for health metrics domain."""

from .calculators import (
    IBMIClassifier,
    IDietGenerator,
    IMedicalAdvisor,
    IMetricCalculator,
)

__all__ = [
    "IMetricCalculator",
    "IBMIClassifier",
    "IDietGenerator",
    "IMedicalAdvisor",
]
