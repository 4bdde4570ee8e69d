"""Health metrics GraphQL resolvers."""

from graphql_api.resolvers.health_metrics.queries import HealthMetricsQueries

__all__ = [
    "HealthMetricsQueries",
]
