"""CLI for inspecting envelopes and the wire naming table."""

import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .codec import parse_request, parse_response
from .config import settings
from .errors import DeserializationError
from .models.request import RequestEnvelope
from .models.response import ResponseEnvelope
from .naming import WIRE_SCHEMAS, WireSchema, draft_schemas

app = typer.Typer(help="Alexa request/response envelope tools")
console = Console()

logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    source = Path(path)
    if not source.exists():
        console.print(f"[red]File not found: {source}[/red]")
        raise typer.Exit(1)
    return source.read_text()


def _text(value: Enum | str | None) -> str:
    if value is None:
        return "-"
    return value.value if isinstance(value, Enum) else value


def _request_panel(envelope: RequestEnvelope) -> Panel:
    lines = [
        f"[bold]{envelope.request.type}[/bold]",
        f"Version: {envelope.version}",
        f"Request ID: {envelope.request.request_id or '-'}",
        f"Locale: {_text(envelope.request.locale)}",
    ]
    if envelope.intent_name:
        lines.append(f"Intent: {envelope.intent_name}")
    if envelope.session is not None:
        lines.append(f"Session: {envelope.session.session_id} (new={envelope.session.new})")
    else:
        lines.append("Session: none")
    if envelope.context is not None:
        lines.append(f"Interfaces: {', '.join(envelope.context.interfaces()) or '-'}")
    return Panel.fit("\n".join(lines), title="request")


def _slot_table(envelope: RequestEnvelope) -> Table | None:
    intent = envelope.intent
    if intent is None or not intent.slots:
        return None
    table = Table(title="Slots")
    table.add_column("Name", style="cyan")
    table.add_column("Value")
    table.add_column("Confirmation")
    table.add_column("Resolved")
    for slot in intent.slots.values():
        resolved = ", ".join(value.name for value in slot.resolved_values())
        table.add_row(slot.name, slot.value or "-", _text(slot.confirmation_status), resolved or "-")
    return table


def _response_panel(envelope: ResponseEnvelope) -> Panel:
    body = envelope.response
    speech = body.output_speech
    lines = [
        f"Version: {envelope.version}",
        f"Speech: {(speech.text or speech.ssml) if speech else '-'}",
        f"Card: {_text(body.card.type) if body.card else '-'}",
        f"Reprompt: {'yes' if body.reprompt else 'no'}",
        f"Directives: {', '.join(d.type for d in body.directives or []) or '-'}",
        f"shouldEndSession: {'absent' if body.should_end_session is None else body.should_end_session}",
    ]
    return Panel.fit("\n".join(lines), title="response")


@app.command()
def parse(
    path: str = typer.Argument(..., help="JSON file to parse, or - for stdin"),
    response: bool = typer.Option(False, "--response", help="Parse a response envelope instead of a request"),
    echo: bool = typer.Option(False, "--echo", help="Print the re-serialized envelope"),
):
    """Parse a request (or response) envelope and summarize it."""
    raw = _read(path)

    try:
        envelope: RequestEnvelope | ResponseEnvelope = (
            parse_response(raw) if response else parse_request(raw)
        )
    except DeserializationError as e:
        console.print(f"[red]Invalid envelope at {e.path}: {e.reason}[/red]")
        for error_path, reason in e.errors[1:]:
            console.print(f"  [red]{error_path}: {reason}[/red]")
        raise typer.Exit(1)

    if isinstance(envelope, ResponseEnvelope):
        console.print(_response_panel(envelope))
    else:
        console.print(_request_panel(envelope))
        slots = _slot_table(envelope)
        if slots is not None:
            console.print(slots)

    if echo:
        console.print_json(data=envelope.to_wire(), indent=settings.cli_indent)


def _schema_table(name: str, schema: WireSchema) -> Table:
    title = f"{name} (extensible)" if schema.extensible else name
    table = Table(title=title)
    table.add_column("Wire name", style="cyan")
    table.add_column("Field")
    for wire_name, field_name in schema.fields.items():
        table.add_row(wire_name, field_name)
    return table


@app.command()
def fields(
    structure: str = typer.Argument(None, help="Structure to show (default: list all)"),
):
    """Show the wire naming table."""
    if structure is None:
        table = Table(title="Structures")
        table.add_column("Structure", style="cyan")
        table.add_column("Fields", justify="right")
        table.add_column("Extensible")
        for name, schema in WIRE_SCHEMAS.items():
            table.add_row(name, str(len(schema.fields)), "yes" if schema.extensible else "no")
        console.print(table)
        return

    schema = WIRE_SCHEMAS.get(structure)
    if schema is None:
        console.print(f"[red]Unknown structure: {structure}[/red]")
        raise typer.Exit(1)
    console.print(_schema_table(structure, schema))


@app.command()
def draft(
    path: str = typer.Argument(..., help="Example JSON document, or - for stdin"),
    name: str = typer.Option("Root", "--name", "-n", help="Structure name for the top-level object"),
    as_json: bool = typer.Option(False, "--json", help="Print drafts as JSON"),
):
    """Derive draft naming-table entries from an example payload."""
    try:
        example: Any = json.loads(_read(path))
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON: {e}[/red]")
        raise typer.Exit(1)

    if not isinstance(example, dict):
        console.print("[red]Example must be a JSON object[/red]")
        raise typer.Exit(1)

    drafts = draft_schemas(example, name)
    logger.debug(f"Drafted {len(drafts)} structures from {path}")

    if as_json:
        console.print_json(
            data={structure: dict(schema.fields) for structure, schema in drafts.items()},
            indent=settings.cli_indent,
        )
        return

    for structure, schema in drafts.items():
        console.print(_schema_table(structure, schema))
        if structure in WIRE_SCHEMAS:
            console.print(f"[green]{structure} is already in the naming table[/green]")


if __name__ == "__main__":
    app()
