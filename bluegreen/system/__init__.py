"""System layer package for process and host facility access."""

from .clock import system_format_timestamp, system_utc_now
from .hostname import SocketHostnameService
from .interfaces import (
    ClockPort,
    HostnamePort,
    HostnameResolutionError,
    ProcessMetricsPort,
    ProcessMetricsUnavailableError,
)
from .process_metrics import PsutilProcessMetricsService, system_describe_runtime

__all__ = [
    "ClockPort",
    "HostnamePort",
    "HostnameResolutionError",
    "ProcessMetricsPort",
    "ProcessMetricsUnavailableError",
    "PsutilProcessMetricsService",
    "SocketHostnameService",
    "system_describe_runtime",
    "system_format_timestamp",
    "system_utc_now",
]
