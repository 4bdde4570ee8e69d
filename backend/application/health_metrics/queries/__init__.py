"""CQRS Queries for health metrics domain."""

from application.health_metrics.queries.calculate_metrics import (
    CalculateHealthMetricsQuery,
    CalculateHealthMetricsQueryHandler,
)
from application.health_metrics.queries.generate_diet_plan import (
    GenerateDietPlanQuery,
    GenerateDietPlanQueryHandler,
)

__all__ = [
    "CalculateHealthMetricsQuery",
    "CalculateHealthMetricsQueryHandler",
    "GenerateDietPlanQuery",
    "GenerateDietPlanQueryHandler",
]
