"""Shared test fixtures for reqli.

Provides reusable fixtures for managing output state, building mock
transports, and running CLI commands. These fixtures are automatically
discovered by pytest and available to all test modules without explicit
imports.
"""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from reqli.output import OutputFormat, OutputManager, reset_output, set_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time.  When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale
    ("I/O operation on closed file").  Resetting forces a fresh manager
    to be created on next use.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def plain_output() -> OutputManager:
    """Install a PLAIN-format output manager (no escape sequences)."""
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True)
    set_output(output)
    yield output
    reset_output()


@pytest.fixture
def make_rich_output(monkeypatch: pytest.MonkeyPatch) -> Callable[[], OutputManager]:
    """Factory installing a RICH-format output manager that always emits colour.

    Call it inside the test body: the Rich console binds ``sys.stdout``
    when it is created, and capture streams are only final by then.
    """
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("TERM", "xterm-256color")

    def _factory() -> OutputManager:
        output = OutputManager(format=OutputFormat.RICH)
        set_output(output)
        return output

    return _factory


# ---------------------------------------------------------------------------
# HTTP fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """List that :func:`mock_transport` handlers append each request to."""
    return []


@pytest.fixture
def mock_transport(
    recorded_requests: list[httpx.Request],
) -> Callable[..., httpx.MockTransport]:
    """Factory for a MockTransport that records requests and returns a canned response.

    Usage::

        transport = mock_transport(200, json={"ok": True})
    """

    def _factory(status_code: int = 200, **response_kwargs) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return httpx.Response(status_code, **response_kwargs)

        return httpx.MockTransport(handler)

    return _factory


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner.

    Returns a CliRunner instance that captures stdout/stderr and
    provides a consistent interface for invoking Typer apps in tests.
    """
    from typer.testing import CliRunner

    return CliRunner()
