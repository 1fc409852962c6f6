from __future__ import annotations

import json
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tgobjects.cli.payload_utils import describe_resolved, read_payload, shorten
from tgobjects.config import get_settings
from tgobjects.core.errors import ObjectsError
from tgobjects.logging_config import setup_logging
from tgobjects.objects.update import UPDATE_TYPES, Update, UpdateKind

app = typer.Typer(help="Inspect Bot API update payloads", rich_markup_mode=None)
console = Console()
LOGGER = logging.getLogger(__name__)


def _load_update(source: str) -> Update:
    try:
        return Update(read_payload(source))
    except (OSError, json.JSONDecodeError) as exc:
        console.print(f"[red]Cannot read payload from {source}: {exc}[/red]")
        raise typer.Exit(code=1) from exc
    except ObjectsError as exc:
        console.print(f"[red]Malformed payload: {exc}[/red]")
        raise typer.Exit(code=1) from exc


@app.callback()
def main(log_level: Optional[str] = typer.Option(None, "--log-level", help="Overrides TGOBJECTS_LOG_LEVEL")) -> None:
    settings = get_settings()
    setup_logging(log_level or settings.log_level, settings.log_file)


@app.command()
def inspect(source: str = typer.Argument(..., help="JSON file with one update, or - for stdin")) -> None:
    update = _load_update(source)
    try:
        kind = update.classify()
        chat = update.get_chat()
        message = update.get_message()
        has_command = update.has_command()
    except ObjectsError as exc:
        console.print(f"[red]Malformed payload: {exc}[/red]")
        raise typer.Exit(code=1) from exc

    table = Table(title=f"Update {update.get('update_id', '-')}")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Kind", kind or "-")
    table.add_row("Legacy kind", update.find_type(UPDATE_TYPES) or "-")
    table.add_row("Status", "ok" if update.get_status() else "-")
    table.add_row("Chat id", str(chat.get("id", "-")))
    table.add_row("Text", shorten(message.get("text") or message.get("query")))
    table.add_row("Command", "yes" if has_command else "no")
    console.print(table)
    LOGGER.debug("Inspected update from %s", source)


@app.command()
def fields(source: str = typer.Argument(..., help="JSON file with one update, or - for stdin")) -> None:
    update = _load_update(source)
    table = Table(title="Top-level fields")
    table.add_column("Field")
    table.add_column("Resolution")
    table.add_column("Type")
    for key in update.keys():
        try:
            resolution, type_name = describe_resolved(update.resolve(key))
        except ObjectsError as exc:
            resolution, type_name = "error", str(exc)
        table.add_row(str(key), resolution, type_name)
    console.print(table)


@app.command()
def kinds() -> None:
    lines = [kind.value for kind in UpdateKind if kind is not UpdateKind.WEB_APP_DATA]
    lines.append(f"{UpdateKind.WEB_APP_DATA.value} (derived from message content)")
    console.print(Panel.fit("\n".join(lines), title="Update kinds", style="cyan"))


if __name__ == "__main__":
    app()
