"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~reqli.exceptions.ReqliError` subclass. A response
with a non-2xx HTTP status is still a successful invocation and exits with
:data:`EXIT_SUCCESS`.

Example::

    $ reqli get not-a-url
    Error: Invalid URL 'not-a-url': ...
    $ echo $?
    2   # EXIT_INVALID_USAGE -- nothing was sent
"""

EXIT_SUCCESS = 0
"""The request was sent and the response printed."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments (bad URL or ``key=value`` token)."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, connection refused, TLS)."""

EXIT_INTERRUPTED = 130
"""The process was interrupted with Ctrl-C."""
