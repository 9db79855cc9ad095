"""reqli -- a small httpie-style HTTP client for the terminal.

``reqli`` sends a single GET or POST request and pretty-prints the
response: the status line, the headers and a syntax-highlighted body for
JSON and HTML payloads.

Typical usage::

    reqli get https://httpbin.org/get
    reqli post https://httpbin.org/post name=alice role=admin

Modules:
    app: Typer application and CLI entry point.
    arguments: Parsing of URLs and ``key=value`` tokens into commands.
    models: Pydantic models for commands and fixed client settings.
    client: Request dispatch, response rendering and highlighting.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "1.0.0"
