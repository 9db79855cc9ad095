"""HTTP client module for reqli.

Provides the request dispatcher and the response renderer:

Classes:
    :class:`Dispatcher` -- sends one command through :class:`httpx.AsyncClient`.

Functions:
    :func:`render_response` -- prints status line, headers and body.

Example::

    from reqli.client import Dispatcher, render_response

    async with Dispatcher() as dispatcher:
        response = await dispatcher.dispatch(command)
        try:
            await render_response(response)
        finally:
            await response.aclose()
"""

from reqli.client.dispatcher import Dispatcher
from reqli.client.response import render_response

__all__ = ["Dispatcher", "render_response"]
