"""Main CLI application using Typer."""
import asyncio
import contextlib
from collections.abc import Sequence

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from ..conversation import ConversationController, DraftChanged, SendRequested
from ..errors import EchoChatError
from ..store import Message, MessageStore
from ..ui.widgets import format_message_time
from .providers import get_log_level, get_reply_delay, get_store

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="echochat",
    help="Minimal echo chat with a simulated delayed responder",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

REPLY_DELAY_HELP = "Seconds before the echo reply (default: $ECHOCHAT_REPLY_DELAY or 5)"


def _load_config(reply_delay: float | None) -> tuple[MessageStore, float]:
    """Resolve store and delay, exiting with an error message on bad config."""
    try:
        return get_store(), get_reply_delay(reply_delay)
    except EchoChatError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


def _messages_table(messages: Sequence[Message]) -> Table:
    table = Table(title="Conversation")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Direction", style="magenta")
    table.add_column("Time", style="dim")
    table.add_column("Text", style="green")

    for msg in messages:
        table.add_row(str(msg.id), msg.direction, format_message_time(msg), msg.text)
    return table


def _send_draft(controller: ConversationController, text: str) -> None:
    controller.submit_event(DraftChanged(text))
    controller.submit_event(SendRequested())


@app.command()
def send(
    text: str = typer.Argument(..., help="Message to send"),
    reply_delay: float | None = typer.Option(
        None,
        "--reply-delay",
        "-r",
        help=REPLY_DELAY_HELP
    ),
):
    """Send one message, wait for its echo and print the conversation."""
    store, delay = _load_config(reply_delay)

    async def _send():
        controller = ConversationController(store, reply_delay=delay)
        try:
            _send_draft(controller, text)
            if not controller.state.messages:
                console.print("[yellow]Nothing to send: message is empty.[/yellow]")
                raise typer.Exit(code=1)

            with console.status(f"[dim]Waiting {delay:g}s for reply...[/dim]"):
                await controller.wait_for_replies()
        finally:
            controller.dispose()

        console.print(_messages_table(store.snapshot()))

    asyncio.run(_send())


async def _print_replies(store: MessageStore) -> None:
    """Print incoming messages as they are appended to the store."""
    last_id = 0
    async for snapshot in store.messages.updates():
        if not snapshot:
            last_id = 0
            continue
        for msg in snapshot:
            if msg.id > last_id and msg.is_incoming:
                console.print(f"[bold green]{msg.text}[/bold green] [dim]{format_message_time(msg)}[/dim]")
        last_id = snapshot[-1].id


@app.command()
def chat(
    reply_delay: float | None = typer.Option(
        None,
        "--reply-delay",
        "-r",
        help=REPLY_DELAY_HELP
    ),
):
    """Interactive line-oriented chat in the terminal."""
    store, delay = _load_config(reply_delay)

    async def _chat():
        controller = ConversationController(store, reply_delay=delay)
        printer = asyncio.create_task(_print_replies(store))

        console.print("[bold cyan]Echo Chat[/bold cyan]")
        console.print("[dim]Type 'exit', 'quit', or 'q' to leave; '/clear' resets the conversation[/dim]\n")

        try:
            while True:
                try:
                    user_input = await asyncio.to_thread(
                        console.input, "[bold yellow]You:[/bold yellow] "
                    )
                except EOFError:
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                command = user_input.strip().lower()
                if command in ("exit", "quit", "q"):
                    console.print("[dim]Goodbye![/dim]")
                    break
                if command == "/clear":
                    store.reset()
                    console.print("[dim]Conversation cleared.[/dim]")
                    continue

                _send_draft(controller, user_input)
        finally:
            controller.dispose()
            printer.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await printer

    try:
        asyncio.run(_chat())
    except KeyboardInterrupt:
        console.print("\n[dim]Goodbye![/dim]")


@app.command(name="tui")
def tui_command(
    reply_delay: float | None = typer.Option(
        None,
        "--reply-delay",
        "-r",
        help=REPLY_DELAY_HELP
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive TUI chat interface."""
    store, delay = _load_config(reply_delay)
    try:
        level = get_log_level(log_level)
    except EchoChatError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    async def _tui():
        from ..ui import run_textual_tui

        await run_textual_tui(store=store, reply_delay=delay, log_level=level)

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass
    console.print("[dim]Goodbye![/dim]")


if __name__ == "__main__":
    app()
