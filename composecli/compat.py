"""Rewrite standalone command lines into the plugin's argument layout."""

from __future__ import annotations

from collections.abc import Sequence

PLUGIN_NAME = "compose"

_COMPLETION_COMMANDS = frozenset({"__complete", "__completeNoDesc"})
_BOOL_FLAGS = frozenset({"--debug", "-D", "--verbose", "--tls", "--tlsverify"})
_STRING_FLAGS = frozenset(
    {"--tlscacert", "--tlscert", "--tlskey", "--host", "-H", "--context", "--log-level"}
)
_RENAMED = {
    "--verbose": "--debug",
    # the host CLI dropped -h to avoid confusion with -H
    "-h": "--help",
    "--version": "version",
    "-v": "version",
}


class MissingFlagArgumentError(ValueError):
    """A top-level flag that takes a value was given none."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"flag needs an argument: '{flag}'")


def convert(args: Sequence[str]) -> list[str]:
    """Turn standalone arguments into plugin arguments.

    Top-level flags of the host CLI are moved in front of the plugin name;
    everything from the first non-flag argument on is kept as it is.
    """
    root_flags: list[str] = []
    command = [PLUGIN_NAME]
    remaining = iter(args)
    for arg in remaining:
        if arg in _COMPLETION_COMMANDS:
            command.insert(0, arg)
            continue
        if arg and not arg.startswith("-"):
            if arg != PLUGIN_NAME:
                command.append(arg)
            command.extend(remaining)
            break

        arg = _RENAMED.get(arg, arg)

        if arg in _BOOL_FLAGS:
            root_flags.append(arg)
            continue
        if arg in _STRING_FLAGS:
            value = next(remaining, None)
            if value is None:
                raise MissingFlagArgumentError(arg)
            root_flags.extend((arg, value))
            continue
        command.append(arg)
    return root_flags + command