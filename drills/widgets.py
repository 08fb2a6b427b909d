"""A small text GUI of labels, buttons and windows."""

from __future__ import annotations

import abc
import argparse
import io
from typing import TextIO


def _lines(text: str) -> list[str]:
    """Split text into lines on newlines, dropping a final empty line."""
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _center(text: str, width: int) -> str:
    """Center text, putting any odd padding character on the right."""
    pad = max(0, width - len(text))
    left = pad // 2
    return " " * left + text + " " * (pad - left)


class Widget(abc.ABC):
    """Something that can be drawn as text."""

    @abc.abstractmethod
    def width(self) -> int:
        """Natural width of the widget."""

    @abc.abstractmethod
    def draw_into(self, buffer: TextIO) -> None:
        """Draw the widget into a text buffer."""

    def draw(self) -> None:
        """Draw the widget on standard output."""
        buffer = io.StringIO()
        self.draw_into(buffer)
        print(buffer.getvalue())


class Label(Widget):
    """Plain text, possibly over several lines."""

    def __init__(self, label: str) -> None:
        self.label = label

    def width(self) -> int:
        return max((len(line) for line in _lines(self.label)), default=0)

    def draw_into(self, buffer: TextIO) -> None:
        buffer.write(f"{self.label}\n")


class Button(Widget):
    """A label with a border around it."""

    def __init__(self, label: str) -> None:
        self.label = Label(label)

    def width(self) -> int:
        return self.label.width() + 8

    def draw_into(self, buffer: TextIO) -> None:
        width = self.width()
        inner = io.StringIO()
        self.label.draw_into(inner)
        buffer.write(f"+{'-' * width}+\n")
        for line in _lines(inner.getvalue()):
            buffer.write(f"|{_center(line, width)}|\n")
        buffer.write(f"+{'-' * width}+\n")


class Window(Widget):
    """A titled frame holding other widgets, one below another."""

    def __init__(self, title: str) -> None:
        self.title = title
        self.widgets: list[Widget] = []

    def add_widget(self, widget: Widget) -> None:
        """Append a widget to the window."""
        self.widgets.append(widget)

    def _inner_width(self) -> int:
        return max(
            len(self.title),
            max((widget.width() for widget in self.widgets), default=0),
        )

    def width(self) -> int:
        return self._inner_width() + 4

    def draw_into(self, buffer: TextIO) -> None:
        inner = io.StringIO()
        for widget in self.widgets:
            widget.draw_into(inner)
        width = self._inner_width()
        buffer.write(f"+-{'-' * width}-+\n")
        buffer.write(f"| {_center(self.title, width)} |\n")
        buffer.write(f"+={'=' * width}=+\n")
        for line in _lines(inner.getvalue()):
            buffer.write(f"| {line.ljust(width)} |\n")
        buffer.write(f"+-{'-' * width}-+\n")


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Draw a sample window.").parse_args(argv)
    window = Window("Text GUI Demo 1.23")
    window.add_widget(Label("This is a small text GUI demo."))
    window.add_widget(Button("Click me!"))
    window.draw()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())