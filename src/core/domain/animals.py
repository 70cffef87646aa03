"""Animal system: Dog, Cat and Cow."""

from __future__ import annotations

from typing import ClassVar

from core.domain.variant import Variant
from core.interfaces.output import OutputSink


class Animal(Variant):
    sound: ClassVar[str]

    def display(self, output: OutputSink) -> None:
        output.write_line(f"{self.name}: {self.sound}")


class Dog(Animal):
    name = "Собака"
    sound = "Гав-гав"


class Cat(Animal):
    name = "Кошка"
    sound = "Мяу"


class Cow(Animal):
    name = "Корова"
    sound = "Мууу"
