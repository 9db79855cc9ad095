"""Argument model -- turns raw CLI values into typed commands.

Typer handles the syntactic layer (subcommand names, argument counts,
``--help``). This module adds the semantic validation Typer cannot do:

* :func:`parse_url` -- the target must be an absolute URL with a scheme
  and a host.
* :func:`parse_kv_pair` -- each POST body token must be ``key=value``.

Both raise subclasses of :class:`~reqli.exceptions.InvalidUsageError`, so
a bad invocation exits with code 2 before anything touches the network.
"""

from __future__ import annotations

from typing import Iterable

import httpx

from reqli.exceptions import InvalidKeyValueError, InvalidUrlError
from reqli.models import GetCommand, KeyValue, PostCommand


def parse_url(value: str) -> str:
    """Validate *value* as an absolute URL and return it in normalised form.

    Args:
        value: The URL string given on the command line.

    Returns:
        The URL as re-serialised by :class:`httpx.URL`.

    Raises:
        InvalidUrlError: If the URL is malformed or has no scheme or host.
    """
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise InvalidUrlError(f"Invalid URL {value!r}: {exc}") from exc

    if not url.scheme:
        raise InvalidUrlError(f"Invalid URL {value!r}: missing scheme (e.g. https://)")
    if not url.host:
        raise InvalidUrlError(f"Invalid URL {value!r}: missing host")
    return str(url)


def parse_kv_pair(token: str) -> KeyValue:
    """Split a ``key=value`` token at its first ``=``.

    The value may be empty (``b=``) and may itself contain ``=``
    (``q=a=b`` gives key ``q``, value ``a=b``).

    Raises:
        InvalidKeyValueError: If the token has no ``=`` or an empty key.
    """
    key, sep, value = token.partition("=")
    if not sep:
        raise InvalidKeyValueError(
            f"Failed to parse {token!r}: expected key=value"
        )
    if not key:
        raise InvalidKeyValueError(f"Failed to parse {token!r}: empty key")
    return KeyValue(key=key, value=value)


def build_get_command(url: str) -> GetCommand:
    """Build a :class:`GetCommand` from the raw URL argument."""
    return GetCommand(url=parse_url(url))


def build_post_command(url: str, tokens: Iterable[str] = ()) -> PostCommand:
    """Build a :class:`PostCommand` from the raw URL and body tokens.

    The URL is validated first, so a bad URL is reported even when the
    body tokens are also malformed.
    """
    valid_url = parse_url(url)
    pairs = tuple(parse_kv_pair(token) for token in tokens)
    return PostCommand(url=valid_url, pairs=pairs)
