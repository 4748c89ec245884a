"""Tests for API health endpoint behavior.

These tests validate the deterministic liveness payload used by load
balancer probes.
"""

from fastapi.testclient import TestClient

from bluegreen.api.application import create_api_application
from bluegreen.config import AppSettings
from bluegreen.domain import MemoryUsage


class _ProcessMetricsStub:
    """Minimal process metrics stub for API factory dependency injection."""

    def system_runtime_version(self) -> str:
        return "CPython 3.12.0"

    def system_uptime_seconds(self) -> float:
        return 1.0

    def system_memory_usage(self) -> MemoryUsage:
        return MemoryUsage(rss=1, vms=2)


class _HostnameStub:
    """Minimal hostname stub for API factory dependency injection."""

    def system_hostname(self) -> str:
        return "test-host"


def _build_client() -> TestClient:
    """Create test client over an application with stub services.

    Returns:
        TestClient: Client bound to a freshly created application.
    """

    application = create_api_application(
        AppSettings(_env_file=None),
        _ProcessMetricsStub(),
        _HostnameStub(),
    )
    return TestClient(application)


def test_api_health_returns_exact_healthy_payload() -> None:
    """Return HTTP 200 and exactly the fixed liveness body.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = _build_client()

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
    assert response.headers["content-type"].startswith("application/json")


def test_api_health_payload_is_stable_across_requests() -> None:
    """Return the same body for repeated probes."""

    client = _build_client()

    payloads = [client.get("/health").json() for _ in range(3)]

    assert payloads == [{"status": "healthy"}] * 3


def test_api_health_rejects_other_methods_as_not_found() -> None:
    """Return HTTP 404 for non-GET methods on the health path.

    Raises:
        AssertionError: Raised when method mismatch is not reported as not found.
    """

    client = _build_client()

    response = client.post("/health")

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}


def test_api_health_trailing_slash_returns_not_found() -> None:
    """Return HTTP 404 rather than a redirect for non-exact paths.

    Raises:
        AssertionError: Raised when the trailing-slash path is redirected or served.
    """

    client = _build_client()

    response = client.get("/health/", follow_redirects=False)

    assert response.status_code == 404
    assert "location" not in response.headers
