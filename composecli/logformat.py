"""Formats container log lines with aligned, coloured per-container prefixes."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from composecli.colors import ColorFunc, monochrome, next_color


@dataclass
class _Presenter:
    colors: ColorFunc
    name: str
    prefix: str = ""

    def set_prefix(self, width: int) -> None:
        self.prefix = self.colors(f"{self.name:<{width}} | ")


class LogConsumer:
    """Writes log messages from containers, each line behind the container's prefix.

    ``cancelled`` is called before each log message; once it returns True,
    log messages are dropped.
    """

    def __init__(
        self,
        writer: TextIO,
        color: bool,
        prefix: bool,
        cancelled: Callable[[], bool] | None = None,
    ) -> None:
        self.writer = writer
        self.color = color
        self.prefix = prefix
        self.cancelled = cancelled
        self.width = 0
        self._presenters: dict[str, _Presenter] = {}
        self._lock = threading.RLock()

    def register(self, name: str) -> None:
        """Announce a container; gives it a colour and realigns all prefixes."""
        self._register(name)

    def _register(self, name: str) -> _Presenter:
        presenter = _Presenter(colors=next_color() if self.color else monochrome, name=name)
        with self._lock:
            self._presenters[name] = presenter
            if self.prefix:
                self.width = max(len(p.name) for p in self._presenters.values()) + 1
                for p in self._presenters.values():
                    p.set_prefix(self.width)
        return presenter

    def _presenter(self, container: str) -> _Presenter:
        with self._lock:
            presenter = self._presenters.get(container)
            if presenter is None:
                presenter = self._register(container)
            return presenter

    def log(self, container: str, service: str, message: str) -> None:
        """Write each line of the message behind the container's prefix."""
        if self.cancelled is not None and self.cancelled():
            return
        presenter = self._presenter(container)
        for line in message.split("\n"):
            self.writer.write(f"{presenter.prefix}{line}\n")

    def status(self, container: str, msg: str) -> None:
        """Write a status message about the container in its colour."""
        presenter = self._presenter(container)
        self.writer.write(presenter.colors(f"{container} {msg}\n"))