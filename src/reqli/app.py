"""Typer application and CLI entry point for reqli.

This module wires the argument model, the dispatcher and the renderer
into two sub-commands::

    reqli get <url>
    reqli post <url> [key=value ...]

Global options (``--version``, ``--verbose``, ``--no-color``) are handled
by :func:`main_callback`, which installs the output manager before any
sub-command runs.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers and invokes the Typer app;
anything that escapes a command is reported on stderr with a non-zero exit.

See Also:
    :mod:`reqli.arguments`: Semantic validation of the command arguments.
    :mod:`reqli.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import asyncio
import signal
import sys
from typing import Any, Callable, Optional

import typer

from reqli import __version__
from reqli.arguments import build_get_command, build_post_command
from reqli.client import Dispatcher, render_response
from reqli.exceptions import ReqliError
from reqli.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INTERRUPTED
from reqli.models import Command
from reqli.output import OutputManager, debug, error, set_output


app = typer.Typer(
    name="reqli",
    help="Send HTTP requests and pretty-print the response.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"reqli {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Print the outgoing request to stderr."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Initialises the global :class:`~reqli.output.OutputManager` from the
    CLI flags.
    """
    set_output(OutputManager(no_color=no_color, verbose=verbose))


@app.command("get")
def get_command(
    url: str = typer.Argument(..., help="Absolute URL to request."),
) -> None:
    """Send a GET request and print the response."""
    _execute(lambda: build_get_command(url))


@app.command("post")
def post_command(
    url: str = typer.Argument(..., help="Absolute URL to request."),
    body: Optional[list[str]] = typer.Argument(
        None,
        metavar="[KEY=VALUE]...",
        help="JSON body fields; a repeated key keeps its last value.",
    ),
) -> None:
    """Send a POST request with a JSON body and print the response."""
    _execute(lambda: build_post_command(url, body or []))


def _execute(build: Callable[[], Command]) -> None:
    """Build the command, send it, and print the response.

    :class:`~reqli.exceptions.ReqliError` is reported on stderr and turned
    into ``typer.Exit`` with the error's exit code. Validation happens in
    *build*, so an invalid argument never reaches the network.
    """
    try:
        command = build()
        debug(f"Parsed command: {command!r}")
        asyncio.run(_send(command))
    except ReqliError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


async def _send(command: Command) -> None:
    """Dispatch *command* and render the response it produces."""
    async with Dispatcher() as dispatcher:
        response = await dispatcher.dispatch(command)
        try:
            await render_response(response)
        finally:
            await response.aclose()


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``reqli`` console script.

    Unhandled :class:`~reqli.exceptions.ReqliError` instances cause a
    clean exit with the error's ``exit_code``. Any other exception is
    reported on stderr and exits with :data:`EXIT_GENERIC_FAILURE`.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as exc:
        if isinstance(exc, ReqliError):
            error(str(exc))
            sys.exit(exc.exit_code)
        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
