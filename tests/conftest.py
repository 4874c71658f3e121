"""Shared test fixtures for forge-core.

Provides reusable fixtures for configurations, fake transports, isolated
config environments, output state, and running CLI commands. These
fixtures are automatically discovered by pytest.
"""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from forge_core.client.transport import Transport
from forge_core.models import Configuration
from forge_core.output import OutputFormat, OutputManager, reset_output, set_output


# ---------------------------------------------------------------------------
# Auto-reset global state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager and CLI log handlers after every test.

    Both cache references to sys.stdout/sys.stderr.  When Typer's
    CliRunner redirects those streams during a test, the cached
    references become stale once the test finishes.
    """
    yield
    reset_output()
    logger = logging.getLogger("forge_core")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


# ---------------------------------------------------------------------------
# Configuration and transport fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def configuration() -> Configuration:
    """A configuration pointing at a fake host with known credentials."""
    return Configuration(
        host="https://auth.example.com",
        client_id="my-client-id",
        client_secret="my-client-secret",
    )


@pytest.fixture
def transport() -> MagicMock:
    """A Transport double; configure ``post`` per test."""
    return MagicMock(spec=Transport)


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Forces XDG path resolution with XDG_CONFIG_HOME under tmp_path and
    clears all FORGE_* environment variables so that tests never read
    real user config or credentials.

    Returns:
        The config directory ``forge-core`` files would be read from.
    """
    config_home = tmp_path / "config"
    monkeypatch.setattr("forge_core.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))

    for var in [
        "FORGE_HOST",
        "FORGE_CLIENT_ID",
        "FORGE_CLIENT_SECRET",
        "FORGE_CONFIG",
    ]:
        monkeypatch.delenv(var, raising=False)

    return config_home / "forge-core"


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a PLAIN-format, quiet OutputManager for the duration of a test."""
    output = OutputManager(format=OutputFormat.PLAIN, quiet=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
