"""Tests for runtime entrypoint startup behavior."""

import pytest

from bluegreen import main as main_module
from bluegreen.config import AppSettings


def test_main_print_startup_banner_announces_port_color_and_version(capsys: pytest.CaptureFixture[str]) -> None:
    """Print exactly three banner lines describing the slot.

    Args:
        capsys: Pytest stdout capture fixture.
    """

    settings = AppSettings(_env_file=None, port=8080, color="green", version="2.3.1")

    main_module.main_print_startup_banner(settings=settings)

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Server is running on port 8080", "Color: green", "Version: 2.3.1"]


def test_main_runs_uvicorn_with_configured_bind_address(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Bind uvicorn to configured host and port after printing the banner.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        capsys: Pytest stdout capture fixture.
    """

    recorded_calls: list[dict[str, object]] = []

    def _fake_run(application, **kwargs) -> None:
        recorded_calls.append({"application": application, **kwargs})

    for variable_name in ("VERSION", "COLOR", "NODE_ENV", "BIND_HOST", "LOG_LEVEL"):
        monkeypatch.delenv(variable_name, raising=False)
    monkeypatch.setenv("PORT", "3100")
    monkeypatch.setattr(main_module.uvicorn, "run", _fake_run)

    main_module.main()

    assert len(recorded_calls) == 1
    assert recorded_calls[0]["host"] == "0.0.0.0"
    assert recorded_calls[0]["port"] == 3100
    assert recorded_calls[0]["log_level"] == "info"
    assert capsys.readouterr().out.splitlines()[0] == "Server is running on port 3100"
