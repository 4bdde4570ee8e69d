"""Orchestrators for health metrics application layer."""

from application.health_metrics.orchestrators.health_orchestrator import (
    HealthOrchestrator,
)

__all__ = ["HealthOrchestrator"]
