"""Process metrics service implementation backed by psutil."""

import platform
import time

import psutil

from bluegreen.domain import MemoryUsage

from .interfaces import ProcessMetricsPort, ProcessMetricsUnavailableError


def system_describe_runtime() -> str:
    """Return interpreter implementation and version, e.g. `CPython 3.12.4`."""

    return f"{platform.python_implementation()} {platform.python_version()}"


class PsutilProcessMetricsService(ProcessMetricsPort):
    """Process metrics service reading counters for the current process.

    Uptime is anchored once at construction: the process age at that moment
    plus elapsed monotonic time, so wall-clock adjustments never move it
    backwards.
    """

    def __init__(self, process: psutil.Process | None = None):
        """Initialize process metrics service.

        Args:
            process: Optional psutil process handle; defaults to the current process.

        Raises:
            psutil.Error: Raised when the process handle cannot be created.
        """

        self._process = process if process is not None else psutil.Process()
        self._runtime_version = system_describe_runtime()
        self._anchor_age_seconds = max(0.0, time.time() - self._process.create_time())
        self._anchor_monotonic = time.monotonic()

    def system_runtime_version(self) -> str:
        """Return interpreter label captured at construction.

        Returns:
            str: Interpreter implementation and version label.
        """

        return self._runtime_version

    def system_uptime_seconds(self) -> float:
        """Return seconds elapsed since process start.

        Returns:
            float: Non-negative, non-decreasing process uptime.
        """

        return self._anchor_age_seconds + (time.monotonic() - self._anchor_monotonic)

    def system_memory_usage(self) -> MemoryUsage:
        """Read current memory counters for the process.

        Returns:
            MemoryUsage: Resident and virtual sizes plus platform extras.

        Raises:
            ProcessMetricsUnavailableError: Raised when psutil cannot read process counters.
        """

        try:
            memory_info = self._process.memory_info()
        except psutil.Error as error:
            raise ProcessMetricsUnavailableError("process memory counters unavailable") from error
        return MemoryUsage(
            rss=int(memory_info.rss),
            vms=int(memory_info.vms),
            shared=getattr(memory_info, "shared", None),
            data=getattr(memory_info, "data", None),
        )
