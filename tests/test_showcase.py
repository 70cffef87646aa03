from __future__ import annotations

import pytest

from adapters.json_serializer import JsonSerializer
from adapters.xml_serializer import XmlSerializer
from core.domain.animals import Cat, Cow, Dog
from core.domain.factory import ANIMAL_FACTORY, SHAPE_FACTORY
from core.domain.formats import OutputTarget
from core.domain.shapes import Circle, Shape, Square, Triangle
from core.errors import UnknownVariantError
from core.services import showcase
from core.services.showcase import AnimalService, ShapeService
from core.services.storage import FileStorageService

CIRCLE = "   ***   \n *     * \n *     * \n   ***   "
SQUARE = "*****\n*   *\n*   *\n*****"
TRIANGLE = "  *  \n * * \n*****"

EXPECTED_SHAPE_LINES = [
    "Фигура: Круг",
    CIRCLE,
    "Фигура: Квадрат",
    SQUARE,
    "Фигура: Треугольник",
    TRIANGLE,
]


class StubStorage:
    """Storage that saves nothing and loads a fixed list."""

    def __init__(self, loaded, extension=".json"):
        self.loaded = loaded
        self.saved = []
        self.serializer = type("Serializer", (), {"extension": extension})()

    def save(self, entities, path):
        self.saved.append((list(entities), path))

    def load(self, path):
        return list(self.loaded)


@pytest.mark.parametrize("serializer_cls", [JsonSerializer, XmlSerializer])
def test_animal_pipeline(tmp_path, recording_output, status_console, status_buffer, serializer_cls):
    serializer = serializer_cls(ANIMAL_FACTORY)
    path = tmp_path / f"animals{serializer.extension}"
    service = AnimalService(
        FileStorageService(serializer),
        data_dir=tmp_path,
        output=recording_output,
        console=status_console,
    )

    loaded = service.run()

    assert loaded == [Dog(), Cat(), Cow()]
    assert recording_output.lines == ["Собака: Гав-гав", "Кошка: Мяу", "Корова: Мууу"]
    assert path.exists()
    status = status_buffer.getvalue()
    assert f"Файл сохранён по пути: {path.resolve()}" in status
    assert "Животные сохранены." in status
    assert "Загруженные животные:" in status


@pytest.mark.parametrize("serializer_cls", [JsonSerializer, XmlSerializer])
def test_shape_pipeline_console(tmp_path, recording_output, status_console, serializer_cls):
    serializer = serializer_cls(SHAPE_FACTORY)
    service = ShapeService(
        FileStorageService(serializer),
        data_dir=tmp_path,
        output=recording_output,
        console=status_console,
    )

    loaded = service.run(OutputTarget.CONSOLE)

    assert loaded == [Circle(), Square(), Triangle()]
    assert recording_output.lines == EXPECTED_SHAPE_LINES
    assert (tmp_path / f"shapes{serializer.extension}").exists()
    assert not (tmp_path / "render.txt").exists()


def test_shape_pipeline_file(tmp_path, recording_output, status_console, status_buffer):
    service = ShapeService(
        FileStorageService(XmlSerializer(SHAPE_FACTORY)),
        data_dir=tmp_path,
        output=recording_output,
        console=status_console,
    )

    service.run(OutputTarget.FILE)

    render = tmp_path / "render.txt"
    assert recording_output.lines == []
    assert render.read_text(encoding="utf-8") == "\n".join(EXPECTED_SHAPE_LINES) + "\n"
    assert f"Рендер сохранён в файл: {render.resolve()}" in status_buffer.getvalue()
    assert (tmp_path / "shapes.xml").exists()


def test_shape_pipeline_custom_render_filename(tmp_path, status_console):
    service = ShapeService(
        FileStorageService(JsonSerializer(SHAPE_FACTORY)),
        data_dir=tmp_path,
        render_filename="out.txt",
        console=status_console,
    )

    service.run(OutputTarget.FILE)

    assert (tmp_path / "out.txt").read_text(encoding="utf-8").startswith("Фигура: Круг\n")


class Broken(Shape):
    name = "Сломанная"
    pattern = ""

    def display(self, output):
        raise RuntimeError("cannot render")


def test_render_file_closed_when_display_fails(tmp_path, monkeypatch, status_console):
    opened = []

    class TrackingFileOutput(showcase.FileOutput):
        def __init__(self, path):
            super().__init__(path)
            opened.append(self)

    monkeypatch.setattr(showcase, "FileOutput", TrackingFileOutput)
    service = ShapeService(
        StubStorage([Circle(), Broken(), Square()]), data_dir=tmp_path, console=status_console
    )

    with pytest.raises(RuntimeError, match="cannot render"):
        service.run(OutputTarget.FILE)

    assert len(opened) == 1
    assert opened[0].closed
    assert (tmp_path / "render.txt").read_text(encoding="utf-8") == f"Фигура: Круг\n{CIRCLE}\n"


def test_unknown_tag_aborts_before_display(tmp_path, recording_output, status_console):
    serializer = JsonSerializer(ANIMAL_FACTORY)

    class TamperingStorage(FileStorageService):
        def save(self, entities, path):
            super().save(entities, path)
            path.write_text('[{"Type":"Dog"},{"Type":"Bird"}]', encoding="utf-8")

    service = AnimalService(
        TamperingStorage(serializer),
        data_dir=tmp_path,
        output=recording_output,
        console=status_console,
    )

    with pytest.raises(UnknownVariantError):
        service.run()

    assert recording_output.lines == []


def test_storage_is_pass_through(tmp_path):
    storage = FileStorageService(JsonSerializer(ANIMAL_FACTORY))
    path = tmp_path / "animals.json"

    storage.save([Cow(), Dog()], path)

    assert storage.load(path) == [Cow(), Dog()]
    assert storage.load(path) == storage.serializer.deserialize(path)
