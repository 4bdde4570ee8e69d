from __future__ import annotations

# Standard library
import datetime
import logging as _logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Final, Any

# Third-party
import strawberry
from dotenv import load_dotenv
from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

# Seed env vars from backend/.env before config is read
_ENV_FILE = Path(__file__).parent / ".env"
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE)

# Local application imports
from graphql_api.resolvers.health_metrics import HealthMetricsQueries  # noqa: E402
from graphql_api.context import create_context  # noqa: E402
from graphql_api.schema import create_schema  # noqa: E402
from infrastructure.config import (  # noqa: E402
    get_advisory_deduplicate,
    get_app_version,
    get_log_level,
)
from infrastructure.health_metrics.engine_factory import (  # noqa: E402
    get_health_orchestrator,
)

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = get_log_level()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

# Versione letta da env (Docker build ARG -> ENV APP_VERSION)
APP_VERSION = get_app_version()


@strawberry.type
class Query:
    @strawberry.field
    def server_time(self) -> str:
        return datetime.datetime.utcnow().isoformat() + "Z"

    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field(description="Health metrics and diet queries")  # type: ignore[misc]
    def health_metrics(self) -> HealthMetricsQueries:
        """Health metrics queries (CQRS).

        Example:
            query {
              healthMetrics {
                bmiCategories { category minBmi maxBmi }
                healthAssessment(input: {...}) { medicalAdvisories }
              }
            }
        """
        return HealthMetricsQueries()


schema = create_schema()

# Explicit export per mypy/tests
__all__: list[str] = []


@asynccontextmanager
async def lifespan(_: FastAPI) -> Any:  # pragma: no cover osservabilità
    """Application lifecycle manager.

    Builds the health engine once at startup so the reference tables are
    validated before the first request.
    """
    logger = _logging.getLogger("startup")
    logger.info(
        "startup.config",
        extra={
            "version": APP_VERSION,
            "log_level": _LOG_LEVEL,
            "advisory_deduplicate": get_advisory_deduplicate(),
        },
    )
    get_health_orchestrator()

    logger.info("lifespan.ready", extra={"status": "serving"})
    yield
    logger.info("lifespan.shutdown", extra={"status": "cleanup"})


app = FastAPI(
    title="Health Metrics Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


# ============================================
# GraphQL Context Setup
# ============================================


def get_graphql_context() -> Any:
    """Create GraphQL context with all dependencies.

    Returns dict-like context for resolver dependency injection.
    The orchestrator is a process-wide singleton (stateless, read-only tables).
    """
    return create_context(health_orchestrator=get_health_orchestrator())


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")


# REST API: health form endpoints
from api.health import router as health_router  # noqa: E402

app.include_router(health_router)
