"""Listing commands: containers, projects, processes and images."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Callable, Iterable
from typing import TextIO

from composecli.api import (
    ContainerProcSummary,
    ContainerSummary,
    ImageSummary,
    ImagesOptions,
    ListOptions,
    PortPublisher,
    PsOptions,
    Service,
    Stack,
)
from composecli.errors import NotImplementedApiError
from composecli.output import PRETTY, print_formatted
from composecli.tabwriter import TabWriter

_SHORT_ID_LENGTH = 12
_SIZE_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
_ELLIPSIS = "…"


def parse_ps_filter(filter_value: str) -> list[str]:
    """Parse a ``KEY=VAL`` ps filter and return the statuses it selects.

    Only the ``status`` key is supported; ``source`` raises
    NotImplementedApiError and any other key raises ValueError.
    """
    if not filter_value:
        return []
    key, sep, value = filter_value.partition("=")
    if not sep:
        raise ValueError("arguments to --filter should be in form KEY=VAL")
    if key == "status":
        return [value]
    if key == "source":
        raise NotImplementedApiError()
    raise ValueError(f"unknown filter {key}")


def filter_by_status(
    containers: Iterable[ContainerSummary], statuses: Iterable[str]
) -> list[ContainerSummary]:
    """Keep the containers whose state is one of the statuses."""
    wanted = set(statuses)
    return [c for c in containers if c.state in wanted]


def _char_width(ch: str) -> int:
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def ellipsis(text: str, max_width: int) -> str:
    """Shorten the text to a display width, ending it with an ellipsis if cut."""
    if max_width <= 0:
        return ""
    if max_width == 1:
        return text[:1]
    widths: list[int] = []
    total = 0
    for ch in text:
        total += _char_width(ch)
        widths.append(total)
    if total <= max_width:
        return text
    limit = max_width - 1
    kept = sum(1 for w in widths if w <= limit)
    return text[:kept] + _ELLIPSIS


def _join_host_port(host: str, port: int) -> str:
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def _form_group(key: str, first: int, last: int) -> str:
    parts = key.split("/")
    group_type = parts[0]
    ip = ""
    if len(parts) > 1:
        ip = parts[0]
        group_type = parts[1]
    group = str(first)
    if first != last:
        group = f"{group}-{last}"
    if ip:
        group = f"{ip}:{group}"
    return f"{group}/{group_type}"


def displayable_ports(container: ContainerSummary) -> str:
    """Render the container's published ports, grouping consecutive ones."""
    if container.publishers is None:
        return ""

    ports = sorted(
        (
            (pub.target_port & 0xFFFF, pub.url, pub.published_port & 0xFFFF, pub.protocol)
            for pub in container.publishers
        )
    )
    groups: dict[str, list[int]] = {}
    result: list[str] = []
    host_mappings: list[str] = []
    for private, ip, public, protocol in ports:
        key = protocol
        if ip:
            if public != private:
                host = _join_host_port(ip, public)
                host_mappings.append(f"{host}->{private}/{protocol}")
                continue
            key = f"{ip}/{protocol}"
        group = groups.get(key)
        if group is None:
            groups[key] = [private, private]
            continue
        if private == group[1] + 1:
            group[1] = private
            continue
        result.append(_form_group(key, group[0], group[1]))
        groups[key] = [private, private]
    result.extend(_form_group(key, first, last) for key, (first, last) in groups.items())
    return ", ".join(host_mappings + result)


_QUOTE_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(text: str) -> str:
    parts = ['"']
    for ch in text:
        if ch in _QUOTE_ESCAPES:
            parts.append(_QUOTE_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif ord(ch) < 0x80:
            parts.append(f"\\x{ord(ch):02x}")
        elif ord(ch) < 0x10000:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(f"\\U{ord(ch):08x}")
    parts.append('"')
    return "".join(parts)


def _container_status(container: ContainerSummary) -> str:
    if container.state == "running" and container.health:
        return f"{container.state} ({container.health})"
    if container.state in ("exited", "dead"):
        return f"{container.state} ({container.exit_code})"
    return container.state


def _ps_rows(containers: list[ContainerSummary]) -> Callable[[TabWriter], None]:
    def write(w: TabWriter) -> None:
        for c in containers:
            command = _quote(ellipsis(c.command, 20))
            w.write(
                f"{c.name}\t{command}\t{c.service}\t{_container_status(c)}\t"
                f"{displayable_ports(c)}\n"
            )

    return write


def run_ps(
    backend: Service,
    project_name: str,
    services: Iterable[str] | None,
    all_containers: bool,
    statuses: Iterable[str] | None,
    quiet: bool,
    show_services: bool,
    fmt: str,
    out: TextIO,
) -> None:
    """List the project's containers on ``out``.

    Raises ValueError when a requested service has no container.
    """
    services = list(services or [])
    containers = list(
        backend.ps(project_name, PsOptions(all=all_containers, services=services))
    )
    known = {c.service for c in containers}
    for service in services:
        if service not in known:
            raise ValueError(f"no such service: {service}")

    statuses = list(statuses or [])
    if statuses:
        containers = filter_by_status(containers, statuses)

    containers.sort(key=lambda c: c.name)

    if quiet:
        for c in containers:
            out.write(f"{c.id}\n")
        return

    if show_services:
        names = list(dict.fromkeys(c.service for c in containers))
        out.write("\n".join(names) + "\n")
        return

    print_formatted(
        containers, fmt, out, _ps_rows(containers),
        "NAME", "COMMAND", "SERVICE", "STATUS", "PORTS",
    )


def view_from_stack_list(stacks: Iterable[Stack]) -> list[dict[str, str]]:
    """Turn stacks into rows of name, status with reason, and config files."""
    return [
        {
            "Name": s.name,
            "Status": f"{s.status} {s.reason}".strip(),
            "ConfigFiles": s.config_files,
        }
        for s in stacks
    ]


def _matches_any(patterns: list[str], name: str) -> bool:
    for pattern in patterns:
        try:
            if re.search(pattern, name):
                return True
        except re.error:
            continue
    return False


def run_list(
    backend: Service,
    all_projects: bool,
    quiet: bool,
    name_filters: Iterable[str] | None,
    fmt: str,
    out: TextIO,
) -> None:
    """List compose projects on ``out``, keeping those whose name matches a filter."""
    stacks = list(backend.list(ListOptions(all=all_projects)))
    if quiet:
        for s in stacks:
            out.write(f"{s.name}\n")
        return

    patterns = list(name_filters or [])
    if patterns:
        stacks = [s for s in stacks if _matches_any(patterns, s.name)]

    view = view_from_stack_list(stacks)

    def write(w: TabWriter) -> None:
        for row in view:
            w.write(f"{row['Name']}\t{row['Status']}\t{row['ConfigFiles']}\n")

    print_formatted(view, fmt, out, write, "NAME", "STATUS", "CONFIG FILES")


def ps_printer(out: TextIO, printer: Callable[[TabWriter], None], *args: str) -> None:
    """Print the headers in ``args`` and the rows ``printer`` writes, in narrow columns."""
    writer = TabWriter(out, 5, 1, 3, " ")
    writer.write("\t".join(args) + "\n")
    printer(writer)
    writer.flush()


def run_top(
    backend: Service,
    project_name: str,
    services: Iterable[str] | None,
    out: TextIO,
) -> None:
    """Print the processes of each container, containers ordered by name."""
    containers: list[ContainerProcSummary] = sorted(
        backend.top(project_name, list(services or [])), key=lambda c: c.name
    )
    for container in containers:
        out.write(f"{container.name}\n")

        def write(w: TabWriter, container: ContainerProcSummary = container) -> None:
            for proc in container.processes:
                w.write("".join(f"{p}\t" for p in proc) + "\n")
            w.write("\n")

        ps_printer(out, write, *container.titles)


def truncate_id(image_id: str) -> str:
    """Drop any ``algorithm:`` prefix and keep the first 12 characters."""
    _, sep, rest = image_id.partition(":")
    if sep:
        image_id = rest
    return image_id[:_SHORT_ID_LENGTH]


def human_size(size: float) -> str:
    """Render a size in decimal units with three significant digits, as in "1.5MB"."""
    value = float(size)
    unit = 0
    while value >= 1000 and unit < len(_SIZE_UNITS) - 1:
        value /= 1000
        unit += 1
    return f"{value:.3g}{_SIZE_UNITS[unit]}"


def run_images(
    backend: Service,
    project_name: str,
    services: Iterable[str] | None,
    quiet: bool,
    out: TextIO,
) -> None:
    """List the images used by the project's containers on ``out``."""
    images: list[ImageSummary] = list(
        backend.images(project_name, ImagesOptions(services=list(services or [])))
    )

    if quiet:
        ids: list[str] = []
        for img in images:
            _, sep, rest = img.id.partition(":")
            image_id = rest if sep else img.id
            if image_id not in ids:
                ids.append(image_id)
        for image_id in ids:
            out.write(f"{image_id}\n")
        return

    images.sort(key=lambda i: i.container_name)

    def write(w: TabWriter) -> None:
        for img in images:
            repo = img.repository or "<none>"
            tag = img.tag or "<none>"
            w.write(
                f"{img.container_name}\t{repo}\t{tag}\t{truncate_id(img.id)}\t"
                f"{human_size(img.size)}\n"
            )

    print_formatted(
        images, PRETTY, out, write,
        "Container", "Repository", "Tag", "Image Id", "Size",
    )