"""Save → load → display pipelines for both systems.

This module holds the only orchestration logic in the project. It is kept
free of prompts and option parsing so the CLI, tests or any future entry
point can drive it with explicit collaborators:

- a `FileStorageService` wrapping the chosen serializer,
- an `OutputSink` (or the render path) for displayed entities,
- a rich `Console` for status messages.

Nothing here catches errors: an unknown tag, a malformed file or an I/O
failure aborts the run and surfaces to the caller.
"""

from __future__ import annotations

import contextlib
import logging
from pathlib import Path
from typing import ContextManager

from rich.console import Console

from adapters.outputs import ConsoleOutput, FileOutput
from core.domain.animals import Animal, Cat, Cow, Dog
from core.domain.formats import OutputTarget
from core.domain.shapes import Circle, Shape, Square, Triangle
from core.interfaces.output import OutputSink
from core.services.storage import FileStorageService

logger = logging.getLogger(__name__)


def default_animals() -> list[Animal]:
    return [Dog(), Cat(), Cow()]


def default_shapes() -> list[Shape]:
    return [Circle(), Square(), Triangle()]


class AnimalService:
    """Saves the fixed animal list, reloads it and prints every animal."""

    def __init__(
        self,
        storage: FileStorageService,
        *,
        data_dir: Path = Path("."),
        output: OutputSink | None = None,
        console: Console | None = None,
    ) -> None:
        self.storage = storage
        self.data_dir = data_dir
        self.output = output or ConsoleOutput()
        self.console = console or Console(soft_wrap=True)

    @property
    def data_path(self) -> Path:
        return self.data_dir / f"animals{self.storage.serializer.extension}"

    def run(self) -> list[Animal]:
        animals = default_animals()
        path = self.data_path

        self.storage.save(animals, path)
        self.console.print(f"Файл сохранён по пути: {path.resolve()}", markup=False)
        self.console.print("Животные сохранены.\n", markup=False)

        loaded = self.storage.load(path)
        logger.info("Loaded %d animals from %s", len(loaded), path)

        self.console.print("Загруженные животные:", markup=False)
        for animal in loaded:
            animal.display(self.output)
        return loaded


class ShapeService:
    """Saves the fixed shape list, reloads it and renders every shape.

    Rendering goes to the console sink or, for `OutputTarget.FILE`, to a file
    sink that is opened right before the first shape and closed after the
    last one even if a display call fails.
    """

    def __init__(
        self,
        storage: FileStorageService,
        *,
        data_dir: Path = Path("."),
        render_filename: str = "render.txt",
        output: OutputSink | None = None,
        console: Console | None = None,
    ) -> None:
        self.storage = storage
        self.data_dir = data_dir
        self.render_path = data_dir / render_filename
        self.output = output or ConsoleOutput()
        self.console = console or Console(soft_wrap=True)

    @property
    def data_path(self) -> Path:
        return self.data_dir / f"shapes{self.storage.serializer.extension}"

    def _open_output(self, target: OutputTarget) -> ContextManager[OutputSink]:
        if target is OutputTarget.FILE:
            return FileOutput(self.render_path)
        return contextlib.nullcontext(self.output)

    def run(self, target: OutputTarget = OutputTarget.CONSOLE) -> list[Shape]:
        shapes = default_shapes()
        data_path = self.data_path

        self.storage.save(shapes, data_path)
        self.console.print(f"Фигуры сохранены в файл: {data_path.resolve()}", markup=False)

        loaded = self.storage.load(data_path)
        logger.info("Loaded %d shapes from %s", len(loaded), data_path)

        with self._open_output(target) as output:
            for shape in loaded:
                shape.display(output)

        if target is OutputTarget.FILE:
            self.console.print(f"Рендер сохранён в файл: {self.render_path.resolve()}", markup=False)
        return loaded
