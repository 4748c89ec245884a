"""FastAPI application factory for the deployment demo service.

This module composes the health, deployment and info routers and maps
routing and system facility failures to generic status responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from bluegreen.config import AppSettings
from bluegreen.domain import DeploymentIdentity
from bluegreen.system import (
    ClockPort,
    HostnamePort,
    HostnameResolutionError,
    ProcessMetricsPort,
    ProcessMetricsUnavailableError,
    system_utc_now,
)

from .routers import api_create_deployment_router, api_create_health_router, api_create_info_router

logger = logging.getLogger(__name__)


def create_api_application(
    settings: AppSettings,
    process_metrics_service: ProcessMetricsPort,
    hostname_service: HostnamePort,
    clock: ClockPort | None = None,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings captured at startup.
        process_metrics_service: Process metrics service used by `/info`.
        hostname_service: Hostname service used by `/`.
        clock: Optional UTC clock; defaults to the system clock.

    Returns:
        FastAPI: Framework application instance with all routes registered.

    Raises:
        ValueError: Raised when settings are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = FastAPI(title="Blue-Green Demo", version=settings.version, redirect_slashes=False)
    identity = DeploymentIdentity(
        version=settings.version,
        color=settings.color,
        environment=settings.node_env,
    )

    application.include_router(api_create_health_router())
    application.include_router(
        api_create_deployment_router(
            identity=identity,
            hostname_service=hostname_service,
            clock=clock if clock is not None else system_utc_now,
        )
    )
    application.include_router(api_create_info_router(process_metrics_service=process_metrics_service))

    application.add_exception_handler(status.HTTP_405_METHOD_NOT_ALLOWED, api_handle_method_not_allowed)
    application.add_exception_handler(HostnameResolutionError, api_handle_system_error)
    application.add_exception_handler(ProcessMetricsUnavailableError, api_handle_system_error)

    return application


async def api_handle_method_not_allowed(_request: Request, _error: Exception) -> JSONResponse:
    """Report unsupported methods on known paths as not found.

    Returns:
        JSONResponse: Generic not-found payload.
    """

    return JSONResponse(content={"detail": "Not Found"}, status_code=status.HTTP_404_NOT_FOUND)


async def api_handle_system_error(request: Request, error: Exception) -> JSONResponse:
    """Log host or process facility failures and return a generic internal error.

    Returns:
        JSONResponse: Generic internal error payload without failure detail.
    """

    logger.error("system facility failure for %s %s", request.method, request.url.path, exc_info=error)
    return JSONResponse(
        content={"detail": "Internal Server Error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
