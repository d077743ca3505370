"""API route registration."""

from fastapi import APIRouter, FastAPI

from skyride.observability.logging import get_logger

logger = get_logger(__name__)


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all routes."""
    router = APIRouter(prefix="/v1")

    from skyride.api.routes.conversations import router as conversations_router

    router.include_router(conversations_router, tags=["Conversations"])

    logger.debug("v1_router_created", routes=["conversations"])
    return router


def register_routes(app: FastAPI, metrics_path: str | None = "/metrics") -> None:
    """Register all routes with the FastAPI application.

    Args:
        app: FastAPI application instance
        metrics_path: Where to expose Prometheus metrics, None to disable
    """
    app.include_router(create_v1_router())

    from skyride.api.routes.health import metrics
    from skyride.api.routes.health import router as health_router

    app.include_router(health_router, tags=["Health"])
    if metrics_path:
        app.add_api_route(metrics_path, metrics, methods=["GET"], tags=["Health"])

    logger.info("routes_registered", metrics_path=metrics_path)
