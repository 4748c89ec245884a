"""Typed interfaces for process and host facility services.

All direct OS and process access must remain in the system package.
"""

from datetime import datetime
from typing import Protocol

from bluegreen.domain import MemoryUsage


class HostnameResolutionError(RuntimeError):
    """Raised when the operating system cannot provide a hostname."""


class ProcessMetricsUnavailableError(RuntimeError):
    """Raised when process counters cannot be read."""


class ProcessMetricsPort(Protocol):
    """Port definition for process runtime metrics."""

    def system_runtime_version(self) -> str:
        """Return a label describing the running interpreter.

        Returns:
            str: Interpreter implementation and version label.
        """

    def system_uptime_seconds(self) -> float:
        """Return seconds elapsed since process start.

        Returns:
            float: Non-negative, non-decreasing process uptime.
        """

    def system_memory_usage(self) -> MemoryUsage:
        """Return current process memory counters.

        Returns:
            MemoryUsage: Memory counters in bytes.

        Raises:
            ProcessMetricsUnavailableError: Raised when process counters are unavailable.
        """


class HostnamePort(Protocol):
    """Port definition for host identity lookup."""

    def system_hostname(self) -> str:
        """Return the current machine hostname.

        Returns:
            str: Non-empty hostname.

        Raises:
            HostnameResolutionError: Raised when hostname cannot be resolved.
        """


class ClockPort(Protocol):
    """Port definition for wall-clock reads."""

    def __call__(self) -> datetime:
        """Return the current timezone-aware UTC time."""
