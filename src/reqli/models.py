"""Canonical Pydantic models shared across all reqli modules.

The models fall into two groups:

**Command models** -- produced by :mod:`reqli.arguments` from the CLI
arguments and consumed by the dispatcher:
    :class:`KeyValue`, :class:`GetCommand`, :class:`PostCommand` and the
    :data:`Command` union.

**Settings** -- the fixed configuration of the tool:
    :class:`ClientSettings`.

All models are frozen; a command is built once per invocation and never
mutated afterwards.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from reqli import __version__


# --- Commands ---


class KeyValue(BaseModel):
    """One ``key=value`` token from the command line.

    Example::

        KeyValue(key="name", value="alice")
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1, description="Field name, never empty")
    value: str = Field(default="", description="Field value, may be empty")


class GetCommand(BaseModel):
    """A GET request to an absolute URL. Never carries a body."""

    model_config = ConfigDict(frozen=True)

    method: Literal["GET"] = "GET"
    url: str


class PostCommand(BaseModel):
    """A POST request whose JSON body is built from ``key=value`` pairs.

    ``pairs`` keeps every token in command-line order, duplicates included.
    Duplicates collapse only when :meth:`json_body` builds the mapping.
    """

    model_config = ConfigDict(frozen=True)

    method: Literal["POST"] = "POST"
    url: str
    pairs: tuple[KeyValue, ...] = ()

    def json_body(self) -> dict[str, str]:
        """Return the request body mapping; the last occurrence of a key wins."""
        body: dict[str, str] = {}
        for pair in self.pairs:
            body[pair.key] = pair.value
        return body


Command = Union[GetCommand, PostCommand]


# --- Settings ---


class ClientSettings(BaseModel):
    """Fixed settings applied to every request and rendered response.

    There is no configuration file; the defaults below are the
    configuration. Tests construct instances with other values.
    """

    model_config = ConfigDict(frozen=True)

    powered_by: str = Field(
        default="Python",
        description="Value of the X-Powered-By marker header",
    )
    user_agent: str = Field(
        default=f"reqli/{__version__}",
        description="User-Agent sent with every request",
    )
    theme: str = Field(
        default="monokai",
        description="Pygments style used to highlight JSON and HTML bodies",
    )

    def default_headers(self) -> dict[str, str]:
        """Headers sent on every request regardless of the subcommand."""
        return {
            "X-Powered-By": self.powered_by,
            "User-Agent": self.user_agent,
        }
