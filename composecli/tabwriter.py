"""Aligns tab-separated cells into columns, and prints tabbed sections."""

from __future__ import annotations

from collections.abc import Callable
from typing import TextIO


class TabWriter:
    """Buffers tab-separated text and writes it out with aligned columns.

    A cell is text terminated by a tab; the text after the last tab of a line
    is not part of a column. Consecutive lines sharing a column form a block
    whose cells are padded to the widest cell plus ``padding``, and to at
    least ``minwidth``.
    """

    def __init__(
        self,
        out: TextIO,
        minwidth: int,
        tabwidth: int,
        padding: int,
        padchar: str,
    ) -> None:
        if len(padchar) != 1:
            raise ValueError("padchar must be a single character")
        self.out = out
        self.minwidth = minwidth
        self.tabwidth = tabwidth
        self.padding = padding
        self.padchar = padchar
        self._buffer: list[str] = []

    def write(self, text: str) -> int:
        """Buffer text; nothing is written until flush."""
        self._buffer.append(text)
        return len(text)

    def flush(self) -> None:
        """Write out all buffered text, aligned, and empty the buffer."""
        text = "".join(self._buffer)
        self._buffer.clear()
        if not text:
            return
        lines = [line.split("\t") for line in text.split("\n")]
        parts: list[str] = []
        self._format(parts, lines, [], 0, len(lines))
        self.out.write("".join(parts))

    def __enter__(self) -> TabWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.flush()

    def _padding(self, textw: int, cellw: int) -> str:
        if self.padchar == "\t":
            if self.tabwidth == 0:
                return ""
            cellw = -(-cellw // self.tabwidth) * self.tabwidth
            return "\t" * -(-(cellw - textw) // self.tabwidth)
        return self.padchar * (cellw - textw)

    def _format(
        self,
        parts: list[str],
        lines: list[list[str]],
        widths: list[int],
        line0: int,
        line1: int,
    ) -> None:
        column = len(widths)
        current = line0
        while current < line1:
            if column >= len(lines[current]) - 1:
                current += 1
                continue
            self._write_lines(parts, lines, widths, line0, current)
            line0 = current
            width = self.minwidth
            while current < line1 and column < len(lines[current]) - 1:
                width = max(width, len(lines[current][column]) + self.padding)
                current += 1
            widths.append(width)
            self._format(parts, lines, widths, line0, current)
            widths.pop()
            line0 = current
        self._write_lines(parts, lines, widths, line0, line1)

    def _write_lines(
        self,
        parts: list[str],
        lines: list[list[str]],
        widths: list[int],
        line0: int,
        line1: int,
    ) -> None:
        for number in range(line0, line1):
            for j, cell in enumerate(lines[number]):
                parts.append(cell)
                if j < len(widths):
                    parts.append(self._padding(len(cell), widths[j]))
            if number + 1 < len(lines):
                parts.append("\n")


def print_pretty_section(
    out: TextIO, printer: Callable[[TabWriter], None], *args: str
) -> None:
    """Print the headers given in ``args`` and the rows ``printer`` writes, aligned."""
    writer = TabWriter(out, 20, 1, 3, " ")
    writer.write("\t".join(args) + "\n")
    printer(writer)
    writer.flush()