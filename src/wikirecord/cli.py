"""Command line interface for WikiRecord."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import List, Optional

import requests
import typer
from rich.console import Console
from rich.table import Table

from wikirecord.config import AppConfig
from wikirecord.errors import InvalidRecordTypeError
from wikirecord.loader import WikiLoader
from wikirecord.models import ExtractedRecord
from wikirecord.sink import import_record, request_from_record
from wikirecord.web.app import app as web_app


console = Console()
app = typer.Typer(help="WikiRecord - build structured records from Wikipedia articles")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _join_name(words: List[str]) -> str:
    return " ".join(words).strip()


def _fetch_record(name: str, config: AppConfig) -> Optional[ExtractedRecord]:
    loader = WikiLoader(config)
    try:
        return asyncio.run(loader.load(name))
    except requests.RequestException as exc:
        console.print(f"[red]Could not reach Wikipedia: {exc}[/red]")
        raise typer.Exit(code=1) from exc


def _record_table(record: ExtractedRecord) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field")
    table.add_column("Value")

    table.add_row("Name", record.title)
    table.add_row("Born", record.birth_date or "")
    table.add_row("Died", record.death_date or "")
    if record.coordinate is not None:
        table.add_row("Latitude", f"{record.coordinate.latitude:.6f}")
        table.add_row("Longitude", f"{record.coordinate.longitude:.6f}")
    if record.alias_list:
        table.add_row("Did you find..?", "\n".join(record.alias_list))
    return table


@app.command()
def lookup(
    name: List[str] = typer.Argument(..., help="Wikipedia article name"),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Extract a record from one Wikipedia article."""
    _setup_logging(verbose)
    article = _join_name(name)
    if not article:
        raise typer.BadParameter("Article name must not be empty")

    record = _fetch_record(article, AppConfig.from_env())
    if record is None:
        console.print("[yellow]Data not found[/yellow]")
        raise typer.Exit(code=1)

    if as_json:
        console.print_json(json.dumps(record.to_dict(), ensure_ascii=False))
        return
    console.print(_record_table(record))


@app.command("import")
def import_command(
    name: List[str] = typer.Argument(..., help="Wikipedia article name"),
    record_type: str = typer.Option(..., "--type", help="Record type: thing, event or medium"),
    record_subtype: Optional[str] = typer.Option(None, "--subtype", help="Record subtype"),
    born: Optional[str] = typer.Option(None, help="Override the birth date"),
    died: Optional[str] = typer.Option(None, help="Override the death date"),
    latitude: Optional[float] = typer.Option(None, help="Override the latitude"),
    longitude: Optional[float] = typer.Option(None, help="Override the longitude"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Append the record to this JSON lines file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Extract a record and hand it to the import sink."""
    _setup_logging(verbose)
    config = AppConfig.from_env()
    article = _join_name(name)
    if not article:
        raise typer.BadParameter("Article name must not be empty")

    record = _fetch_record(article, config)
    if record is None:
        console.print("[yellow]Data not found[/yellow]")
        raise typer.Exit(code=1)

    try:
        request = request_from_record(record, record_type, record_subtype)
    except InvalidRecordTypeError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if born is not None:
        request.birth_date = born
    if died is not None:
        request.death_date = died
    if latitude is not None:
        request.latitude = latitude
    if longitude is not None:
        request.longitude = longitude

    try:
        payload = import_record(request, output or config.import_path)
    except InvalidRecordTypeError as exc:
        raise typer.BadParameter(str(exc)) from exc

    console.print(f"Imported [bold]{payload['title']}[/bold] as {payload['record_type']}/{payload['record_subtype']}")


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
) -> None:
    """Start the HTTP interface."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    console.print(f"Starting web interface on http://{host}:{port}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )


if __name__ == "__main__":  # pragma: no cover
    app()
