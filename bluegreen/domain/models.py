"""Typed domain models shared across runtime layers.

This module provides simple data contracts for the payload parts reported by
the deployment demo endpoints.
"""

from dataclasses import dataclass
from typing import Final

APPLICATION_NAME: Final[str] = "blue-green-demo"
GREETING_MESSAGE: Final[str] = "Hello from Blue-Green Deployment!"


@dataclass(frozen=True)
class DeploymentIdentity:
    """Deployment slot identity reported by the root endpoint.

    Attributes:
        version: Reported application version.
        color: Deployment color label.
        environment: Runtime environment label.
    """

    version: str
    color: str
    environment: str


@dataclass(frozen=True)
class MemoryUsage:
    """Process memory counters in bytes.

    Attributes:
        rss: Resident set size.
        vms: Virtual memory size.
        shared: Shared memory size when the platform reports it.
        data: Data segment size when the platform reports it.
    """

    rss: int
    vms: int
    shared: int | None = None
    data: int | None = None

    def to_payload(self) -> dict[str, int]:
        """Return counters as JSON payload, omitting unavailable figures."""

        payload = {"rss": self.rss, "vms": self.vms}
        if self.shared is not None:
            payload["shared"] = self.shared
        if self.data is not None:
            payload["data"] = self.data
        return payload


@dataclass(frozen=True)
class ProcessInfo:
    """Point-in-time process snapshot reported by the info endpoint.

    Attributes:
        runtime_version: Interpreter implementation and version.
        uptime_seconds: Seconds since process start.
        memory: Process memory counters.
    """

    runtime_version: str
    uptime_seconds: float
    memory: MemoryUsage
