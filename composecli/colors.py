"""ANSI colouring of console text and the rotating palette used for services."""

from __future__ import annotations

import itertools
import sys
import threading
from collections.abc import Callable
from functools import partial

ColorFunc = Callable[[str], str]

NEVER = "never"
"""Never use ANSI codes."""
ALWAYS = "always"
"""Always use ANSI codes."""
AUTO = "auto"
"""Use ANSI codes when standard output is a terminal."""

_NAMES = ("grey", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


def monochrome(text: str) -> str:
    """Return the text unchanged."""
    return text


def _ansi(code: str) -> str:
    return f"\033[{code}m"


def ansi_color(code: str, text: str) -> str:
    """Wrap the text in the ANSI code and a reset."""
    return f"{_ansi(code)}{text}{_ansi('0')}"


_COLORS: dict[str, ColorFunc] = {}
for _index, _name in enumerate(_NAMES):
    _COLORS[_name] = partial(ansi_color, str(30 + _index))
    _COLORS[f"intense_{_name}"] = partial(ansi_color, f"{30 + _index};1")

_RAINBOW: tuple[ColorFunc, ...] = tuple(
    _COLORS[name]
    for name in (
        "cyan",
        "yellow",
        "green",
        "magenta",
        "blue",
        "intense_cyan",
        "intense_yellow",
        "intense_green",
        "intense_magenta",
        "intense_blue",
    )
)

_cycle = itertools.cycle(_RAINBOW)
_lock = threading.Lock()
_monochrome_only = False


def use_ansi(ansi: str) -> bool:
    """Tell whether the given mode asks for ANSI codes on standard output."""
    if ansi == ALWAYS:
        return True
    if ansi == AUTO:
        isatty = getattr(sys.stdout, "isatty", None)
        return bool(isatty and isatty())
    return False


def set_ansi_mode(ansi: str) -> None:
    """Switch the palette to monochrome when the mode does not allow ANSI codes."""
    global _monochrome_only
    if not use_ansi(ansi):
        _monochrome_only = True


def next_color() -> ColorFunc:
    """Return the next colour function of the palette, cycling forever."""
    if _monochrome_only:
        return monochrome
    with _lock:
        return next(_cycle)