"""Deployment identity router composition for the service root."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from bluegreen.domain import GREETING_MESSAGE, DeploymentIdentity
from bluegreen.system import ClockPort, HostnamePort, system_format_timestamp


def api_create_deployment_router(
    identity: DeploymentIdentity,
    hostname_service: HostnamePort,
    clock: ClockPort,
) -> APIRouter:
    """Create root router reporting which deployment slot served the request.

    Args:
        identity: Version, color and environment captured at startup.
        hostname_service: System-layer hostname service.
        clock: Zero-argument callable returning current UTC time.

    Returns:
        APIRouter: Router exposing `/` endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if identity is None:
        raise ValueError("identity must not be None")
    if hostname_service is None:
        raise ValueError("hostname_service must not be None")
    if clock is None:
        raise ValueError("clock must not be None")

    router = APIRouter(tags=["deployment"])

    @router.get("/")
    def api_deployment_index() -> JSONResponse:
        """Return deployment identity with request-time host and timestamp.

        Returns:
            JSONResponse: Deployment identity payload.

        Raises:
            HostnameResolutionError: Raised when hostname lookup fails.
        """

        payload = {
            "message": GREETING_MESSAGE,
            "version": identity.version,
            "color": identity.color,
            "environment": identity.environment,
            "timestamp": system_format_timestamp(clock()),
            "hostname": hostname_service.system_hostname(),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
