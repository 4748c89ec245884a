"""Process info router composition for runtime diagnostics."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from bluegreen.domain import APPLICATION_NAME, ProcessInfo
from bluegreen.system import ProcessMetricsPort


def api_create_info_router(process_metrics_service: ProcessMetricsPort) -> APIRouter:
    """Create info router exposing interpreter, uptime and memory figures.

    Args:
        process_metrics_service: System-layer process metrics service.

    Returns:
        APIRouter: Router exposing `/info` endpoint.

    Raises:
        ValueError: Raised when process_metrics_service is invalid.
    """

    if process_metrics_service is None:
        raise ValueError("process_metrics_service must not be None")

    router = APIRouter(tags=["info"])

    @router.get("/info")
    def api_process_info() -> JSONResponse:
        """Return a point-in-time process snapshot.

        Returns:
            JSONResponse: Process info payload.

        Raises:
            ProcessMetricsUnavailableError: Raised when process counters cannot be read.
        """

        process_info = ProcessInfo(
            runtime_version=process_metrics_service.system_runtime_version(),
            uptime_seconds=process_metrics_service.system_uptime_seconds(),
            memory=process_metrics_service.system_memory_usage(),
        )
        return JSONResponse(content=api_serialize_process_info(process_info), status_code=status.HTTP_200_OK)

    return router


def api_serialize_process_info(process_info: ProcessInfo) -> dict[str, object]:
    """Serialize one process snapshot to JSON payload.

    The `nodeVersion` key is kept so existing dashboards keep parsing the
    payload; it carries the interpreter label.

    Args:
        process_info: Typed process snapshot.

    Returns:
        dict[str, object]: JSON-safe payload.
    """

    return {
        "app": APPLICATION_NAME,
        "nodeVersion": process_info.runtime_version,
        "uptime": float(process_info.uptime_seconds),
        "memory": process_info.memory.to_payload(),
    }
