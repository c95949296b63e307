"""Flags of the create and up commands, version printing and config escaping."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TextIO, TypeVar

from composecli.api import RECREATE_DIVERGED, RECREATE_FORCE, RECREATE_NEVER
from composecli.output import JSON

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

_Text = TypeVar("_Text", str, bytes)


@dataclass
class CreateFlags:
    """Command-line flags shared by the create and up commands."""

    build: bool = False
    no_build: bool = False
    pull: str = "missing"
    pull_changed: bool = False
    remove_orphans: bool = False
    ignore_orphans: bool = False
    force_recreate: bool = False
    no_recreate: bool = False
    recreate_deps: bool = False
    no_inherit: bool = False
    time_changed: bool = False
    timeout: int = 10
    quiet_pull: bool = False

    def recreate_strategy(self) -> str:
        """Return the strategy applied to existing containers of the services."""
        if self.no_recreate:
            return RECREATE_NEVER
        if self.force_recreate:
            return RECREATE_FORCE
        return RECREATE_DIVERGED

    def dependencies_recreate_strategy(self) -> str:
        """Return the strategy applied to containers of dependency services."""
        if self.no_recreate:
            return RECREATE_NEVER
        if self.recreate_deps:
            return RECREATE_FORCE
        return RECREATE_DIVERGED

    def timeout_seconds(self) -> timedelta | None:
        """Return the shutdown timeout if it was set on the command line, else None."""
        if self.time_changed:
            return timedelta(seconds=self.timeout)
        return None


@dataclass
class UpFlags:
    """Command-line flags of the up command."""

    detach: bool = False
    no_start: bool = False
    no_deps: bool = False
    cascade_stop: bool = False
    exit_code_from: str = ""
    scale: list[str] = field(default_factory=list)
    no_color: bool = False
    no_prefix: bool = False
    attach_dependencies: bool = False
    attach: list[str] = field(default_factory=list)
    wait: bool = False


def validate_flags(up: UpFlags, create: CreateFlags) -> None:
    """Check that the up and create flags go together.

    ``--exit-code-from`` turns on cascade stop and ``--wait`` turns on
    detached mode. Raises ValueError for incompatible combinations.
    """
    if up.exit_code_from:
        up.cascade_stop = True
    if up.wait:
        if up.attach_dependencies or up.cascade_stop or up.attach:
            raise ValueError(
                "--wait cannot be combined with --abort-on-container-exit, "
                "--attach or --attach-dependencies"
            )
        up.detach = True
    if create.build and create.no_build:
        raise ValueError("--build and --no-build are incompatible")
    if up.detach and (up.attach_dependencies or up.cascade_stop or up.attach):
        raise ValueError(
            "--detach cannot be combined with --abort-on-container-exit, "
            "--attach or --attach-dependencies"
        )
    if create.force_recreate and create.no_recreate:
        raise ValueError("--force-recreate and --no-recreate are incompatible")
    if create.recreate_deps and create.no_recreate:
        raise ValueError("--always-recreate-deps and --no-recreate are incompatible")


def parse_scale(scale: str) -> tuple[str, int]:
    """Parse a ``SERVICE=NUM`` scale option into the service name and replica count."""
    parts = scale.split("=")
    if len(parts) != 2:
        raise ValueError(
            f"invalid --scale option {json.dumps(scale, ensure_ascii=False)}. "
            "Should be SERVICE=NUM"
        )
    name, count = parts
    if not _INTEGER_RE.fullmatch(count):
        raise ValueError(f"invalid replica count {json.dumps(count, ensure_ascii=False)}")
    replicas = int(count)
    if replicas < 0:
        raise ValueError(f"invalid replica count {json.dumps(count, ensure_ascii=False)}")
    return name, replicas


def run_version(version: str, short: bool, fmt: str, out: TextIO) -> None:
    """Print the tool version: bare number, JSON object or a full sentence."""
    if short:
        out.write(version.removeprefix("v") + "\n")
        return
    if fmt == JSON:
        out.write('{"version":' + json.dumps(version, ensure_ascii=False) + "}\n")
        return
    out.write(f"Docker Compose version {version}\n")


def escape_dollar_sign(content: _Text) -> _Text:
    """Double every dollar sign so the output is not interpolated again."""
    if isinstance(content, bytes):
        return content.replace(b"$", b"$$")
    return content.replace("$", "$$")