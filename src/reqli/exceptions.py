"""Exception hierarchy for reqli.

All exceptions inherit from :class:`ReqliError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`reqli.exit_codes`.
CLI commands catch ``ReqliError``, print the message to stderr and exit
with the error's code.

Subclass hierarchy::

    ReqliError (exit 1)
    +-- InvalidUsageError      (exit 2)
    |   +-- InvalidUrlError
    |   +-- InvalidKeyValueError
    +-- TransportError         (exit 6)
    +-- RenderError            (exit 1)
"""

from reqli.exit_codes import (
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
)


class ReqliError(Exception):
    """Base exception for all reqli errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(ReqliError):
    """Raised for invalid CLI arguments, before any network activity."""

    exit_code = EXIT_INVALID_USAGE


class InvalidUrlError(InvalidUsageError):
    """Raised when a URL is malformed or lacks a scheme or host."""


class InvalidKeyValueError(InvalidUsageError):
    """Raised when a POST body token is not of the form ``key=value``."""


class TransportError(ReqliError):
    """Raised on network-level failures (DNS, connection refused, timeout, TLS).

    HTTP error statuses are never reported through this exception; a 404 or
    500 response is rendered like any other.
    """

    exit_code = EXIT_CONNECTION_ERROR


class RenderError(ReqliError):
    """Raised when a response cannot be highlighted.

    Covers an unparseable ``Content-Type`` value and a failed syntax lookup.
    The renderer recovers from it by printing the raw body.
    """

    exit_code = EXIT_GENERIC_FAILURE
