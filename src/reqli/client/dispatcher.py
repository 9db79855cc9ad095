"""Asynchronous request dispatcher backed by :class:`httpx.AsyncClient`.

:class:`Dispatcher` owns a single client configured with the fixed default
headers from :class:`~reqli.models.ClientSettings` and sends exactly one
request per command:

* :class:`~reqli.models.GetCommand` -- a GET with no body.
* :class:`~reqli.models.PostCommand` -- a POST with a compact JSON object
  built from the ``key=value`` pairs.

The request is sent in streaming mode: :meth:`Dispatcher.dispatch` returns
as soon as the status line and headers arrive and leaves the body to be
read by the renderer. Every received response is returned, whatever its
status code. Only transport failures become
:class:`~reqli.exceptions.TransportError`.

There are no retries, and timeouts and redirects follow the httpx
defaults.

Example::

    async with Dispatcher() as dispatcher:
        response = await dispatcher.dispatch(GetCommand(url="https://example.com"))
"""

from __future__ import annotations

import json
from typing import Optional

import httpx

from reqli.exceptions import TransportError
from reqli.models import ClientSettings, Command, GetCommand, PostCommand
from reqli.output import get_output


class Dispatcher:
    """Send one command over HTTP and hand back the raw response.

    Must be used as an async context manager; the underlying
    :class:`httpx.AsyncClient` is created on enter and closed on exit.

    Args:
        settings: Fixed client settings. Defaults to :class:`ClientSettings`.
        transport: Optional transport passed to :class:`httpx.AsyncClient`,
            e.g. :class:`httpx.MockTransport` in tests.
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> Dispatcher:
        self._client = httpx.AsyncClient(
            headers=self._settings.default_headers(),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def build_request(self, command: Command) -> httpx.Request:
        """Build the :class:`httpx.Request` for *command* without sending it.

        Default headers are merged in by the client, so the returned request
        is exactly what goes on the wire.
        """
        assert self._client is not None, "Client not initialised -- use as async context manager"

        if isinstance(command, GetCommand):
            return self._client.build_request("GET", command.url)

        if isinstance(command, PostCommand):
            content = json.dumps(
                command.json_body(), ensure_ascii=False, separators=(",", ":")
            )
            return self._client.build_request(
                "POST",
                command.url,
                content=content.encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )

        raise TypeError(f"Unsupported command: {command!r}")

    async def dispatch(self, command: Command) -> httpx.Response:
        """Send *command* and return the response once its headers arrive.

        The caller owns the returned response and must read and close it
        (``await response.aread()`` / ``await response.aclose()``).

        Raises:
            TransportError: On DNS, connection, timeout or TLS failures.
        """
        assert self._client is not None, "Client not initialised -- use as async context manager"

        request = self.build_request(command)
        self._print_request(request)

        try:
            response = await self._client.send(request, stream=True)
        except httpx.TransportError as exc:
            raise TransportError(f"Request to {request.url} failed: {exc}") from exc

        get_output().debug(
            f"Received {response.status_code} {response.reason_phrase} "
            f"({response.http_version})"
        )
        return response

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _print_request(self, request: httpx.Request) -> None:
        """Write the outgoing request line, headers and body to the debug stream."""
        output = get_output()
        if not output.is_verbose:
            return

        output.debug(f"{request.method} {request.url}")
        for key, value in request.headers.multi_items():
            output.debug(f"  Header: {key}: {value}")
        if request.content:
            output.debug(f"  Body: {request.content.decode('utf-8')}")
