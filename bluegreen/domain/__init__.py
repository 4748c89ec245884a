"""Domain models used across application layer boundaries."""

from .models import APPLICATION_NAME, GREETING_MESSAGE, DeploymentIdentity, MemoryUsage, ProcessInfo

__all__ = ["APPLICATION_NAME", "GREETING_MESSAGE", "DeploymentIdentity", "MemoryUsage", "ProcessInfo"]
