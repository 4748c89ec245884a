"""Main module entrypoint for local runtime execution.

This module validates startup configuration, announces the deployment slot
and launches the FastAPI service.
"""

import logging

import uvicorn

from bluegreen.bootstrap import bootstrap_create_application
from bluegreen.config import AppSettings, config_load_settings


def main() -> None:
    """Start the HTTP server with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    settings = config_load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    application = bootstrap_create_application(settings=settings)
    main_print_startup_banner(settings=settings)
    uvicorn.run(
        application,
        host=settings.bind_host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


def main_print_startup_banner(settings: AppSettings) -> None:
    """Print port, color and version of this deployment slot.

    Args:
        settings: Validated runtime settings.

    Returns:
        None: Prints banner lines to stdout as side effect.
    """

    print(f"Server is running on port {settings.port}")
    print(f"Color: {settings.color}")
    print(f"Version: {settings.version}")


if __name__ == "__main__":
    main()
