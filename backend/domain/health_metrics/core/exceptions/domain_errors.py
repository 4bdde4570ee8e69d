"""Domain exceptions for health metrics."""

from typing import List


class HealthMetricsDomainError(Exception):
    """Base exception for health metrics domain errors."""

    pass


class InvalidBiometricInputError(HealthMetricsDomainError):
    """Raised when health form data fails validation.

    The calculation services never raise it: it is produced by the caller-side
    validator before biometrics reach the engine.
    """

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)
