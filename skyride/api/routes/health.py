"""Health check and metrics endpoints."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from skyride import __version__
from skyride.api.dependencies import SessionStoreDep, SettingsDep
from skyride.api.models.health import ComponentHealth, HealthResponse
from skyride.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    _settings: SettingsDep,
    session_store: SessionStoreDep,
) -> HealthResponse:
    """Report service health and the status of the session store."""
    logger.debug("health_check_request")
    try:
        await session_store.list_ids(limit=1)
        store_health = ComponentHealth(name="session_store", status="healthy")
    except Exception as e:
        store_health = ComponentHealth(
            name="session_store", status="unhealthy", message=str(e)
        )

    return HealthResponse(
        status=store_health.status,
        version=__version__,
        components=[store_health],
    )


async def metrics() -> Response:
    """Prometheus metrics in text exposition format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
