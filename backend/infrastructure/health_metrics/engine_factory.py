"""Factory for the health metrics engine singletons."""

from typing import Optional

from application.health_metrics.orchestrators.health_orchestrator import (
    HealthOrchestrator,
)
from domain.health_metrics.calculation import (
    BMIClassifier,
    DietService,
    MedicalAdvisoryService,
    MetricService,
)
from domain.health_metrics.core.reference_data import ReferenceData
from infrastructure.config import get_advisory_deduplicate


# Singleton instances
_reference_data: Optional[ReferenceData] = None
_health_orchestrator: Optional[HealthOrchestrator] = None


def get_reference_data() -> ReferenceData:
    """
    Get singleton reference data.

    Built once on first call and shared read-only afterwards.

    Returns:
        ReferenceData singleton
    """
    global _reference_data
    if _reference_data is None:
        _reference_data = ReferenceData()
    return _reference_data


def create_health_orchestrator(
    reference_data: Optional[ReferenceData] = None,
) -> HealthOrchestrator:
    """
    Wire calculation services into a HealthOrchestrator.

    Environment Variables:
        ADVISORY_DEDUPLICATE: Emit each advisory group once ('1') or once
            per matching condition ('0', default)

    Args:
        reference_data: Tables to inject (defaults to the shared singleton)

    Returns:
        HealthOrchestrator ready to use
    """
    data = reference_data or get_reference_data()
    classifier = BMIClassifier(data)

    return HealthOrchestrator(
        metric_calculator=MetricService(data, classifier),
        diet_generator=DietService(data),
        medical_advisor=MedicalAdvisoryService(
            data, deduplicate=get_advisory_deduplicate()
        ),
        reference_data=data,
    )


def get_health_orchestrator() -> HealthOrchestrator:
    """
    Get singleton health orchestrator.

    Lazy initialization on first call.

    Returns:
        HealthOrchestrator singleton
    """
    global _health_orchestrator
    if _health_orchestrator is None:
        _health_orchestrator = create_health_orchestrator()
    return _health_orchestrator


def reset_health_engine() -> None:
    """
    Reset singleton instances.

    Useful for testing to ensure clean state (e.g. after changing env vars).
    """
    global _reference_data, _health_orchestrator
    _reference_data = None
    _health_orchestrator = None
