"""GraphQL context factory for dependency injection.

Provides the dependencies GraphQL resolvers need:
- Orchestrators (health assessment workflow)
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from application.health_metrics.orchestrators.health_orchestrator import (
    HealthOrchestrator,
)


class HealthGraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    This context is injected into all GraphQL resolvers via the
    `info` parameter. Resolvers access dependencies using
    `info.context.get("service_name")`.

    Attributes:
        health_orchestrator: Orchestrator for health metrics and diet plans
        request: FastAPI request object
    """

    def __init__(
        self,
        health_orchestrator: HealthOrchestrator,
        request: Optional[Request] = None,
    ) -> None:
        """Initialize GraphQL context with all dependencies."""
        super().__init__()
        self.health_orchestrator = health_orchestrator
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name (for resolver compatibility).

        Args:
            key: Dependency name (e.g., "health_orchestrator")

        Returns:
            Dependency instance or None if not found

        Example:
            >>> context = info.context
            >>> orchestrator = context.get("health_orchestrator")
        """
        return getattr(self, key, None)


def create_context(
    health_orchestrator: HealthOrchestrator,
    request: Optional[Request] = None,
) -> HealthGraphQLContext:
    """Create GraphQL context with all dependencies.

    Args:
        health_orchestrator: Health orchestrator instance
        request: FastAPI request (optional)

    Returns:
        HealthGraphQLContext with all dependencies

    Example:
        >>> from graphql_api.context import create_context
        >>> context = create_context(
        ...     health_orchestrator=get_health_orchestrator(),
        ... )
    """
    return HealthGraphQLContext(
        health_orchestrator=health_orchestrator,
        request=request,
    )
