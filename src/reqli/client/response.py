"""Response renderer -- maps an :class:`httpx.Response` to stdout.

The layout is fixed, since scripts scrape it::

    HTTP/1.1 200 OK
    <blank>
    content-type: application/json
    content-length: 17
    <blank>
    <body>

The status line is blue and header names are green. The body is
highlighted when the declared content type is ``application/json`` or
``text/html`` and printed verbatim otherwise.

See Also:
    :mod:`reqli.client.highlight` -- the highlighter used for the body.
    :mod:`reqli.output` -- the output manager that owns stdout.
"""

from __future__ import annotations

from typing import Optional

import httpx
from rich.text import Text

from reqli.client.highlight import highlight_lines
from reqli.exceptions import RenderError, TransportError
from reqli.models import ClientSettings
from reqli.output import get_output

HIGHLIGHTED_TYPES = {
    "application/json": "json",
    "text/html": "html",
}
"""Content types that are highlighted, mapped to the syntax extension."""


async def render_response(
    response: httpx.Response,
    settings: Optional[ClientSettings] = None,
) -> None:
    """Print the status line, headers and body of *response*.

    Reads the body if it has not been read yet.

    Args:
        response: The response returned by the dispatcher.
        settings: Client settings providing the highlight theme.

    Raises:
        TransportError: If the connection fails while the body is read.
    """
    settings = settings or ClientSettings()

    print_status(response)
    print_headers(response)

    try:
        await response.aread()
    except httpx.TransportError as exc:
        raise TransportError(f"Failed to read response body: {exc}") from exc

    print_body(response.headers.get("content-type"), response.text, settings.theme)


def print_status(response: httpx.Response) -> None:
    """Print e.g. ``HTTP/1.1 404 Not Found`` followed by a blank line."""
    output = get_output()
    status = f"{response.http_version} {response.status_code} {response.reason_phrase}"
    output.print_text(Text(status.rstrip(), style="blue"))
    output.print_blank()


def print_headers(response: httpx.Response) -> None:
    """Print one ``name: value`` line per header, then a blank line."""
    output = get_output()
    for name, value in response.headers.multi_items():
        output.print_text(Text.assemble((name, "green"), f": {value}"))
    output.print_blank()


def print_body(content_type: Optional[str], body: str, theme: str) -> None:
    """Print *body*, highlighted when *content_type* calls for it.

    A malformed content type or a missing syntax definition is reported as
    a warning and the body is printed raw.
    """
    output = get_output()
    try:
        extension = HIGHLIGHTED_TYPES.get(parse_media_type(content_type) or "")
        lines = highlight_lines(body, extension, theme) if extension else None
    except RenderError as exc:
        output.warning(f"{exc}; printing body without highlighting")
        lines = None

    if lines is None:
        output.print_data(body)
        return

    for line in lines:
        output.print_text(line)


def parse_media_type(value: Optional[str]) -> Optional[str]:
    """Return the lower-cased ``type/subtype`` of a Content-Type header value.

    Parameters such as ``charset`` are dropped. ``None`` means no header.

    Raises:
        RenderError: If the value is not of the form ``type/subtype``.
    """
    if value is None:
        return None

    media_type = value.split(";", 1)[0].strip().lower()
    main, sep, sub = media_type.partition("/")
    if not sep or not main or not sub or "/" in sub or " " in media_type:
        raise RenderError(f"Invalid content type {value!r}")
    return media_type
