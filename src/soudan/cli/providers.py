"""Provider factory functions for CLI.

Centralizes creation of settings and the chat endpoint.
Hides configuration details from command implementations.
"""

from rich.console import Console
from rich.markup import escape

from ..chat.config import ChatSettings, load_settings
from ..chat.endpoint import HttpChatEndpoint

# Default console for output
_console = Console()


def get_settings(
    endpoint_url: str | None = None,
    timeout: float | None = None,
    log_level: str | None = None,
    console: Console | None = None,
) -> ChatSettings:
    """Load settings, exiting with a message when they are invalid.

    Args:
        endpoint_url: Endpoint override from the command line
        timeout: Timeout override from the command line
        log_level: Log level override from the command line
        console: Optional Rich console for output

    Raises:
        SystemExit: If a setting fails validation
    """
    import typer

    con = console or _console
    try:
        return load_settings(endpoint_url=endpoint_url, timeout=timeout, log_level=log_level)
    except ValueError as e:
        con.print(f"[red]Error: invalid configuration[/red]\n[dim]{escape(str(e))}[/dim]")
        raise typer.Exit(code=1)


def get_endpoint(settings: ChatSettings) -> HttpChatEndpoint:
    """Create the HTTP chat endpoint described by ``settings``."""
    return HttpChatEndpoint(str(settings.endpoint_url), timeout=settings.timeout)
