"""Shape system: Circle, Square and Triangle rendered as ASCII art."""

from __future__ import annotations

from typing import ClassVar

from core.domain.variant import Variant
from core.interfaces.output import OutputSink


class Shape(Variant):
    pattern: ClassVar[str]

    def render(self) -> str:
        return self.pattern

    def display(self, output: OutputSink) -> None:
        output.write_line(f"Фигура: {self.name}")
        output.write_line(self.render())


class Circle(Shape):
    name = "Круг"
    pattern = "   ***   \n *     * \n *     * \n   ***   "


class Square(Shape):
    name = "Квадрат"
    pattern = "*****\n*   *\n*   *\n*****"


class Triangle(Shape):
    name = "Треугольник"
    pattern = "  *  \n * * \n*****"
