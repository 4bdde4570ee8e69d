"""Domain exceptions for health metrics."""

from .domain_errors import HealthMetricsDomainError, InvalidBiometricInputError

__all__ = [
    "HealthMetricsDomainError",
    "InvalidBiometricInputError",
]
