"""Syntax highlighting of response bodies for the terminal.

The theme and the lexers are loaded lazily on first use and cached for the
lifetime of the process; both are read-only once built, so repeated
renders never reload them.

Highlighting tokenises the whole body in a single pass, so lexer state
(an open string, a ``<script>`` block) carries across line boundaries,
and then splits the result back into lines. Each input line produces
exactly one output :class:`~rich.text.Text` line.
"""

from __future__ import annotations

from functools import lru_cache

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound
from rich.syntax import Syntax, SyntaxTheme
from rich.text import Text

from reqli.exceptions import RenderError


@lru_cache(maxsize=None)
def get_theme(name: str) -> SyntaxTheme:
    """Return the cached Rich syntax theme for a Pygments style *name*."""
    return Syntax.get_theme(name)


@lru_cache(maxsize=None)
def find_lexer(extension: str) -> Lexer:
    """Return the cached lexer for a file *extension* such as ``json``.

    Raises:
        RenderError: If Pygments has no lexer for the extension.
    """
    try:
        return get_lexer_for_filename(
            f"response.{extension}", stripnl=False, ensurenl=True
        )
    except ClassNotFound as exc:
        raise RenderError(f"No syntax definition for extension {extension!r}") from exc


def highlight_lines(body: str, extension: str, theme: str) -> list[Text]:
    """Highlight *body* and return one styled line per input line.

    Args:
        body: Decoded response text.
        extension: File extension selecting the syntax (``json``, ``html``).
        theme: Pygments style name.

    Returns:
        Styled lines without their trailing newlines. An empty body gives
        an empty list.

    Raises:
        RenderError: If no lexer matches *extension*.
    """
    if not body:
        return []

    syntax = Syntax(
        body,
        find_lexer(extension),
        theme=get_theme(theme),
        background_color="default",
    )
    text = syntax.highlight(body)
    return list(text.split("\n"))
