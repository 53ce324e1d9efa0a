import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import typer
from pymonad.either import Either
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from toolz import pipe

from radio_streams.adapters.directory_scanner import scan_directory
from radio_streams.adapters.m3u_loader import M3UStreamLoader, collect_streams
from radio_streams.config import Settings, resolve_settings
from radio_streams.domain.errors import ConfigError, StreamError
from radio_streams.domain.models import Stream
from radio_streams.i18n import get_message, set_lang
from radio_streams.logger_config import setup_logger

console = Console()
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="radio-streams",
    help="Browse the internet radio catalog stored in .m3u playlists.",
    add_completion=False,
)

state = {"lang": None}


@app.callback()
def main_callback(
    lang: Optional[str] = typer.Option(
        None,
        "--lang",
        help=get_message("help_lang"),
        show_default=False,
    ),
):
    """Browse the internet radio catalog stored in .m3u playlists."""
    state["lang"] = lang
    if lang:
        set_lang(lang)
        logger.info(f"Language explicitly set to: {lang}")


# --- Helper Functions ---


def _handle_error(error) -> None:
    """Displays a formatted error message and exits the application."""
    console.print(f"[bold red]{get_message('error')}:[/bold red] {escape(error.message)}")
    raise typer.Exit(code=1)


def _apply_settings(settings: Settings) -> Settings:
    setup_logger(settings.log_level, stream=sys.stderr)
    if settings.lang and not state["lang"]:
        set_lang(settings.lang)
    return settings


def _resolve(directory: Optional[Path], config_file: Optional[Path]) -> Either[ConfigError, Settings]:
    return resolve_settings(directory, config_file).map(_apply_settings)


def _render_table(streams: List[Stream]) -> None:
    table = Table(title=get_message("table_title"))
    table.add_column(get_message("column_name"), style="bold")
    table.add_column(get_message("column_url"), overflow="fold")
    for stream in streams:
        table.add_row(escape(stream.name), escape(stream.url))
    console.print(table)
    console.print(f"[bold green]✓ {get_message('streams_loaded', count=len(streams))}[/bold green]")


# --- CLI Commands ---


@app.command(name="list")
def list_streams(
    directory: Optional[Path] = typer.Argument(
        None, help=get_message("help_directory"), show_default=False
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help=get_message("help_config"), show_default=False
    ),
    as_json: bool = typer.Option(False, "--json", help=get_message("help_json")),
):
    """Lists every radio station of the catalog."""
    logger.info("Command 'list' initiated.")

    def load(settings: Settings) -> Either[StreamError, List[Stream]]:
        if not as_json:
            console.print(f"📻 {get_message('loading_streams', directory=escape(str(settings.streams_directory)))}")
        return M3UStreamLoader(settings.streams_directory).load_streams()

    def on_success(streams: List[Stream]) -> None:
        if as_json:
            typer.echo(json.dumps([stream.to_dict() for stream in streams], indent=2, ensure_ascii=False))
        else:
            _render_table(streams)

    pipe(
        _resolve(directory, config_file),
        lambda e: e.bind(load),
        lambda e: e.either(_handle_error, on_success),
    )


@app.command(name="check")
def check_streams(
    directory: Optional[Path] = typer.Argument(
        None, help=get_message("help_directory"), show_default=False
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help=get_message("help_config"), show_default=False
    ),
):
    """Validates the playlists and reports how many stations they hold."""
    logger.info("Command 'check' initiated.")

    def check(settings: Settings) -> Either[StreamError, Tuple[int, int]]:
        directory = settings.streams_directory
        return scan_directory(directory).bind(
            lambda files: collect_streams(directory, files).map(lambda streams: (len(streams), len(files)))
        )

    def on_success(counts: Tuple[int, int]) -> None:
        count, files = counts
        console.print(f"[bold green]✓ {get_message('check_passed', count=count, files=files)}[/bold green]")

    pipe(
        _resolve(directory, config_file),
        lambda e: e.bind(check),
        lambda e: e.either(_handle_error, on_success),
    )


if __name__ == "__main__":
    app()
