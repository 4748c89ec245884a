"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from bluegreen.api import create_api_application
from bluegreen.config import AppSettings, config_load_settings
from bluegreen.system import PsutilProcessMetricsService, SocketHostnameService, system_utc_now


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings if settings is not None else config_load_settings()
    return create_api_application(
        settings=resolved_settings,
        process_metrics_service=PsutilProcessMetricsService(),
        hostname_service=SocketHostnameService(),
        clock=system_utc_now,
    )
