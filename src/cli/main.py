"""Menagerie CLI (Typer).

Wiring lives here and only here: the chosen encoding picks the serializer,
the serializer goes into the storage service, the storage service into the
pipeline. No container, just constructors.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.json_serializer import JsonSerializer
from adapters.xml_serializer import XmlSerializer
from cli.ui_components import build_entities_table, print_banner
from core.config import AppSettings
from core.domain.factory import ANIMAL_FACTORY, SHAPE_FACTORY, VariantFactory
from core.domain.formats import OutputTarget, SerializationFormat
from core.errors import MenagerieError
from core.interfaces.serializer import EntitySerializer
from core.services.showcase import AnimalService, ShapeService
from core.services.storage import FileStorageService

app = typer.Typer(
    no_args_is_help=True,
    help="Save, reload and display animals or shapes as JSON or XML.",
)

_console = Console(soft_wrap=True)
_err_console = Console(stderr=True, soft_wrap=True)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _bootstrap() -> AppSettings:
    settings = AppSettings()
    _configure_logging(settings.log_level)
    if settings.show_banner:
        print_banner(_console)
    return settings


def build_serializer(fmt: SerializationFormat, factory: VariantFactory) -> EntitySerializer:
    if fmt is SerializationFormat.XML:
        return XmlSerializer(factory)
    return JsonSerializer(factory)


@contextlib.contextmanager
def _exit_on_failure() -> Iterator[None]:
    try:
        yield
    except (MenagerieError, OSError) as exc:
        logger.debug("Run aborted", exc_info=exc)
        _err_console.print(f"[bold red]Ошибка:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


@app.command()
def animals(
    format_: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Serialization format: json or xml (anything else falls back to json).",
    ),
    summary: bool = typer.Option(False, "--summary", help="Print a table of the reloaded animals."),
) -> None:
    """Save Dog, Cat and Cow to animals.<ext>, reload them and print their sounds."""

    settings = _bootstrap()
    if format_ is None:
        format_ = typer.prompt(
            "Выберите формат для сохранения животных (json / xml)",
            default="",
            show_default=False,
        )

    fmt = SerializationFormat.parse(format_)
    if fmt is None:
        _console.print("Неверный формат. Используется JSON по умолчанию.", markup=False)
        fmt = SerializationFormat.default()

    storage = FileStorageService(build_serializer(fmt, ANIMAL_FACTORY))
    service = AnimalService(storage, data_dir=settings.data_dir, console=_console)
    with _exit_on_failure():
        loaded = service.run()

    if summary:
        _console.print(build_entities_table(loaded, title="Животные"))


@app.command()
def shapes(
    format_: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Serialization format: json or xml (anything else falls back to json).",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to render: console or file (anything else falls back to console).",
    ),
    summary: bool = typer.Option(False, "--summary", help="Print a table of the reloaded shapes."),
) -> None:
    """Save Circle, Square and Triangle to shapes.<ext>, reload them and render them."""

    settings = _bootstrap()
    if format_ is None:
        format_ = typer.prompt(
            "Выберите формат сериализации (json/xml)", default="", show_default=False
        )
    if output is None:
        output = typer.prompt(
            "Куда вывести результат? (console/file)", default="", show_default=False
        )

    fmt = SerializationFormat.from_choice(format_)
    target = OutputTarget.from_choice(output)

    storage = FileStorageService(build_serializer(fmt, SHAPE_FACTORY))
    service = ShapeService(
        storage,
        data_dir=settings.data_dir,
        render_filename=settings.render_filename,
        console=_console,
    )
    with _exit_on_failure():
        loaded = service.run(target)

    if summary:
        _console.print(build_entities_table(loaded, title="Фигуры"))
    _console.print("\nГотово.", markup=False)


def run() -> None:
    """Console-script entry point (`menagerie`)."""

    # Cyrillic names break on cp1252 Windows consoles.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()
