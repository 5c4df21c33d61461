# This file builds the FastAPI application and registers all API routers.
# It exists so startup wiring, middleware, and error handling are configured in one place.
# The store client, rate client, and upload store are constructed here once and placed on `app.state`.
# Request IDs, timing headers, and Prometheus metrics are added for every request.

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint

from legit_city.api.api_config import ApiConfig, get_api_config
from legit_city.api.db_access import DatabaseClient
from legit_city.api.error_handlers import register_error_handlers
from legit_city.api.file_store import UploadStore
from legit_city.api.routers.announcements import router as announcements_router
from legit_city.api.routers.auth import router as auth_router
from legit_city.api.routers.health import router as health_router
from legit_city.api.routers.offerings import router as offerings_router
from legit_city.api.routers.pages import router as pages_router
from legit_city.api.routers.plans import router as plans_router
from legit_city.api.routers.subscriptions import router as subscriptions_router
from legit_city.api.routers.work import router as work_router
from legit_city.api.schemas.common import ErrorResponse
from legit_city.api.services.currency_service import CurrencyRateClient
from legit_city.common.logging import configure_logging

logger = logging.getLogger(__name__)

UPLOADS_PATH = "/uploads"
UNMATCHED_PATH_LABEL = "unmatched"

API_HTTP_REQUESTS_TOTAL = Counter(
    "api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method"],
)


def _path_label(request: Request) -> str:
    """Route template for metrics labels, so ids and unknown paths never add series."""

    route = request.scope.get("route")
    template = getattr(route, "path_format", None)
    if template:
        return template
    if request.url.path.startswith(f"{UPLOADS_PATH}/"):
        return UPLOADS_PATH
    return UNMATCHED_PATH_LABEL


def create_app(
    *,
    config: ApiConfig | None = None,
    db: DatabaseClient | None = None,
    rates: CurrencyRateClient | None = None,
    uploads: UploadStore | None = None,
) -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    config = config or get_api_config()
    db = db or DatabaseClient(database_url=config.database_url, pool_size=config.db_pool_size)
    rates = rates or CurrencyRateClient(
        base_currency=config.base_currency,
        rates_url=config.exchange_rate_url,
        timeout_seconds=config.exchange_rate_timeout_seconds,
    )
    uploads = uploads or UploadStore(config.uploads_dir)
    uploads.ensure_root()

    app = FastAPI(
        title=config.api_name,
        description=(
            "Backend for the Legit City portal: accounts, plans with currency conversion, "
            "services, announcements, work uploads, and subscriptions."
        ),
        version=config.app_version,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        openapi_tags=[
            {"name": "auth", "description": "Registration and login."},
            {"name": "plans", "description": "Plan catalog priced in the base currency."},
            {"name": "services", "description": "Service catalog."},
            {"name": "announcements", "description": "Admin announcements."},
            {"name": "work", "description": "Uploaded work artifacts."},
            {"name": "subscriptions", "description": "User subscriptions to services or plans."},
            {"name": "health", "description": "Service liveness, readiness, and version metadata."},
        ],
    )
    app.state.config = config
    app.state.db = db
    app.state.rates = rates
    app.state.uploads = uploads

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials="*" not in config.allowed_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"

            if config.enable_request_logging:
                logger.info(
                    "%s %s -> %s in %.2fms (request_id=%s)",
                    request.method,
                    request.url.path,
                    status_code,
                    duration_ms,
                    request_id,
                )

            return response
        finally:
            duration_s = time.perf_counter() - started
            path_label = _path_label(request)
            API_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.on_event("startup")
    def startup_checks() -> None:
        app.state.db_connected_at_startup = db.can_connect()
        if app.state.db_connected_at_startup:
            logger.info("Connected to database")
        else:
            logger.error("Database connection failed at startup")

    @app.on_event("shutdown")
    def release_pool() -> None:
        db.dispose()

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(plans_router)
    app.include_router(offerings_router)
    app.include_router(announcements_router)
    app.include_router(work_router)
    app.include_router(subscriptions_router)
    app.include_router(pages_router)

    app.mount(UPLOADS_PATH, StaticFiles(directory=uploads.root), name="uploads")
    if config.public_dir.is_dir():
        app.mount("/", StaticFiles(directory=config.public_dir), name="public")

    return app
