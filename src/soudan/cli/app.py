"""Main CLI application using Typer."""
import asyncio

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ..chat.controller import ConversationController
from ..chat.models import Turn
from ..ui.formatting import render_transcript, turn_label
from .providers import get_endpoint, get_settings

# Create Typer app
app = typer.Typer(
    name="soudan",
    help="Terminal consultation-room chat client",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


def _print_turn(turn: Turn) -> None:
    style = "yellow" if turn.is_user else "green"
    console.print(Panel(
        escape(turn.content),
        title=turn_label(turn),
        title_align="right" if turn.is_user else "left",
        border_style=style,
    ))


@app.command(name="tui")
def tui_command(
    endpoint_url: str | None = typer.Option(
        None,
        "--endpoint",
        "-e",
        help="Chat endpoint URL (default: $SOUDAN_ENDPOINT_URL)"
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        "-t",
        help="Request timeout in seconds (default: none)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch interactive TUI chat interface."""
    settings = get_settings(endpoint_url, timeout, log_level, console)

    async def _tui():
        from ..ui import run_textual_tui

        endpoint = get_endpoint(settings)
        await run_textual_tui(endpoint=endpoint, log_level=settings.log_level)

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass
    console.print("\n[dim]Goodbye![/dim]")


@app.command()
def ask(
    message: str = typer.Argument(..., help="Message to send"),
    endpoint_url: str | None = typer.Option(
        None,
        "--endpoint",
        "-e",
        help="Chat endpoint URL (default: $SOUDAN_ENDPOINT_URL)"
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        "-t",
        help="Request timeout in seconds (default: none)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print request tracing"
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print the transcript as plain text instead of panels"
    ),
):
    """Send one message and print the resulting conversation."""
    if not message.strip():
        console.print("[red]Error: message is empty[/red]")
        raise typer.Exit(code=1)

    settings = get_settings(endpoint_url, timeout, console=console)

    def _trace(level: str, component: str, text: str) -> None:
        console.print(f"[dim]{level.upper():<7} \\[{component}] {escape(text)}[/dim]")

    async def _ask():
        async with get_endpoint(settings) as endpoint:
            controller = ConversationController(endpoint)
            if verbose:
                endpoint.set_debug_callback(_trace)
                controller.set_debug_callback(_trace)

            with console.status("[dim]...[/dim]"):
                task = controller.submit(message)
                if task is not None:
                    await task

            if plain:
                console.print(render_transcript(controller.history), markup=False, highlight=False)
                return
            for turn in controller.history:
                _print_turn(turn)

    asyncio.run(_ask())


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
