"""Option records, result records and the service interface of a compose backend."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import IntEnum
from typing import Any, Protocol, runtime_checkable

# Stack states
STARTING = "Starting"
RUNNING = "Running"
UPDATING = "Updating"
REMOVING = "Removing"
UNKNOWN = "Unknown"
FAILED = "Failed"

# Recreate strategies
RECREATE_DIVERGED = "diverged"
RECREATE_FORCE = "force"
RECREATE_NEVER = "never"

SEPARATOR = "-"
"""Separator used when composing resource names; "_" in compatibility mode."""


@runtime_checkable
class LogConsumer(Protocol):
    """Receives log lines and status messages from service containers."""

    def log(self, container: str, service: str, message: str) -> None:
        """Handle a log message from a container."""

    def status(self, container: str, msg: str) -> None:
        """Handle a status message about a container."""

    def register(self, container: str) -> None:
        """Announce a container whose output will follow."""


@dataclass
class BuildOptions:
    """Options of the build operation."""

    pull: bool = False
    progress: str = ""
    args: dict[str, str | None] = field(default_factory=dict)
    no_cache: bool = False
    quiet: bool = False
    services: list[str] = field(default_factory=list)
    sshs: list[Any] = field(default_factory=list)


@dataclass
class CreateOptions:
    """Options of the create operation."""

    services: list[str] = field(default_factory=list)
    remove_orphans: bool = False
    ignore_orphans: bool = False
    recreate: str = ""
    recreate_dependencies: str = ""
    inherit: bool = False
    timeout: timedelta | None = None
    quiet_pull: bool = False


@dataclass
class StartOptions:
    """Options of the start operation."""

    project: Any = None
    attach: LogConsumer | None = None
    attach_to: list[str] = field(default_factory=list)
    cascade_stop: bool = False
    exit_code_from: str = ""
    wait: bool = False
    services: list[str] = field(default_factory=list)


@dataclass
class RestartOptions:
    """Options of the restart operation."""

    project: Any = None
    timeout: timedelta | None = None
    services: list[str] = field(default_factory=list)


@dataclass
class StopOptions:
    """Options of the stop operation."""

    project: Any = None
    timeout: timedelta | None = None
    services: list[str] = field(default_factory=list)


@dataclass
class UpOptions:
    """Options of the up operation: a create step followed by a start step."""

    create: CreateOptions = field(default_factory=CreateOptions)
    start: StartOptions = field(default_factory=StartOptions)


@dataclass
class DownOptions:
    """Options of the down operation."""

    remove_orphans: bool = False
    project: Any = None
    timeout: timedelta | None = None
    images: str = ""
    volumes: bool = False


@dataclass
class ConvertOptions:
    """Options of the convert operation."""

    format: str = ""
    output: str = ""


@dataclass
class PushOptions:
    """Options of the push operation."""

    ignore_failures: bool = False


@dataclass
class PullOptions:
    """Options of the pull operation."""

    quiet: bool = False
    ignore_failures: bool = False


@dataclass
class ImagesOptions:
    """Options of the images operation."""

    services: list[str] = field(default_factory=list)


@dataclass
class KillOptions:
    """Options of the kill operation."""

    remove_orphans: bool = False
    project: Any = None
    services: list[str] = field(default_factory=list)
    signal: str = ""


@dataclass
class RemoveOptions:
    """Options of the remove operation."""

    project: Any = None
    dry_run: bool = False
    volumes: bool = False
    force: bool = False
    services: list[str] = field(default_factory=list)


@dataclass
class RunOptions:
    """Options of the run and exec operations."""

    project: Any = None
    name: str = ""
    service: str = ""
    command: list[str] = field(default_factory=list)
    entrypoint: list[str] = field(default_factory=list)
    detach: bool = False
    auto_remove: bool = False
    tty: bool = False
    interactive: bool = False
    working_dir: str = ""
    user: str = ""
    environment: list[str] = field(default_factory=list)
    labels: dict[str, str] = field(default_factory=dict)
    privileged: bool = False
    use_network_aliases: bool = False
    no_deps: bool = False
    quiet_pull: bool = False
    index: int = 0

    def environment_map(self) -> dict[str, str | None]:
        """Map each KEY=VALUE entry to its value; a bare KEY maps to None."""
        result: dict[str, str | None] = {}
        for entry in self.environment:
            key, sep, value = entry.partition("=")
            result[key] = value if sep else None
        return result


@dataclass
class Event:
    """A container runtime event."""

    timestamp: datetime
    service: str = ""
    container: str = ""
    status: str = ""
    attributes: dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        stamp = self.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")
        attrs = ", ".join(f"{k}={v}" for k, v in self.attributes.items())
        return f"{stamp} container {self.status} {self.container} ({attrs})\n"


@dataclass
class EventsOptions:
    """Options of the events operation."""

    services: list[str] = field(default_factory=list)
    consumer: Callable[[Event], None] | None = None


@dataclass
class PortOptions:
    """Options of the port operation."""

    protocol: str = ""
    index: int = 0


@dataclass
class ListOptions:
    """Options of the list operation."""

    all: bool = False


@dataclass
class PsOptions:
    """Options of the ps operation."""

    project: Any = None
    all: bool = False
    services: list[str] = field(default_factory=list)


@dataclass
class CopyOptions:
    """Options of the copy operation."""

    source: str = ""
    destination: str = ""
    all: bool = False
    index: int = 0
    follow_link: bool = False
    copy_uid_gid: bool = False


@dataclass(order=True)
class PortPublisher:
    """A published port; ordered by URL, target port, published port, protocol."""

    url: str = ""
    target_port: int = 0
    published_port: int = 0
    protocol: str = ""


@dataclass
class ContainerSummary:
    """High-level description of a container."""

    id: str = ""
    name: str = ""
    command: str = ""
    project: str = ""
    service: str = ""
    state: str = ""
    health: str = ""
    exit_code: int = 0
    publishers: list[PortPublisher] | None = None


@dataclass
class ContainerProcSummary:
    """Processes running in a container, as rows under titles."""

    id: str = ""
    name: str = ""
    processes: list[list[str]] = field(default_factory=list)
    titles: list[str] = field(default_factory=list)


@dataclass
class ImageSummary:
    """Description of a container image."""

    id: str = ""
    container_name: str = ""
    repository: str = ""
    tag: str = ""
    size: int = 0


@dataclass
class ServiceStatus:
    """Status of a service."""

    id: str = ""
    name: str = ""
    replicas: int = 0
    desired: int = 0
    ports: list[str] = field(default_factory=list)
    publishers: list[PortPublisher] = field(default_factory=list)


@dataclass
class LogOptions:
    """Options of the logs operation."""

    project: Any = None
    services: list[str] = field(default_factory=list)
    tail: str = ""
    since: str = ""
    until: str = ""
    follow: bool = False
    timestamps: bool = False


@dataclass
class PauseOptions:
    """Options of the pause and unpause operations."""

    services: list[str] = field(default_factory=list)
    project: Any = None


@dataclass
class Stack:
    """Name and state of a compose application."""

    id: str = ""
    name: str = ""
    status: str = ""
    config_files: str = ""
    reason: str = ""


class ContainerEventType(IntEnum):
    """Kinds of events collected from containers."""

    LOG = 0
    ATTACH = 1
    STOPPED = 2
    EXIT = 3
    USER_CANCEL = 4


@dataclass
class ContainerEvent:
    """An event collected on a container.

    ``container`` is the name without the project prefix, for display only.
    """

    type: ContainerEventType
    container: str = ""
    service: str = ""
    line: str = ""
    exit_code: int = 0
    restarting: bool = False


class Service(Protocol):
    """Operations a compose backend provides."""

    def build(self, project: Any, options: BuildOptions) -> None:
        """Build service images."""

    def push(self, project: Any, options: PushOptions) -> None:
        """Push service images."""

    def pull(self, project: Any, options: PullOptions) -> None:
        """Pull service images."""

    def create(self, project: Any, options: CreateOptions) -> None:
        """Create service containers."""

    def start(self, project_name: str, options: StartOptions) -> None:
        """Start service containers."""

    def restart(self, project_name: str, options: RestartOptions) -> None:
        """Restart service containers."""

    def stop(self, project_name: str, options: StopOptions) -> None:
        """Stop service containers."""

    def up(self, project: Any, options: UpOptions) -> None:
        """Create and start service containers."""

    def down(self, project_name: str, options: DownOptions) -> None:
        """Stop and remove containers and networks."""

    def logs(self, project_name: str, consumer: LogConsumer, options: LogOptions) -> None:
        """Send container output to a consumer."""

    def ps(self, project_name: str, options: PsOptions) -> list[ContainerSummary]:
        """List containers."""

    def list(self, options: ListOptions) -> list[Stack]:
        """List projects."""

    def convert(self, project: Any, options: ConvertOptions) -> bytes:
        """Render the project model in the backend's format."""

    def kill(self, project_name: str, options: KillOptions) -> None:
        """Force stop service containers."""

    def run_one_off_container(self, project: Any, options: RunOptions) -> int:
        """Run a one-off container and return its exit code."""

    def remove(self, project_name: str, options: RemoveOptions) -> None:
        """Remove stopped service containers."""

    def exec(self, project_name: str, options: RunOptions) -> int:
        """Run a command in a running container and return its exit code."""

    def copy(self, project_name: str, options: CopyOptions) -> None:
        """Copy files between a container and the local filesystem."""

    def pause(self, project_name: str, options: PauseOptions) -> None:
        """Pause services."""

    def unpause(self, project_name: str, options: PauseOptions) -> None:
        """Unpause services."""

    def top(self, project_name: str, services: list[str]) -> list[ContainerProcSummary]:
        """List processes running in containers."""

    def events(self, project_name: str, options: EventsOptions) -> None:
        """Stream container events to a consumer."""

    def port(
        self, project_name: str, service: str, port: int, options: PortOptions
    ) -> tuple[str, int]:
        """Return the public address and port bound to a private port."""

    def images(self, project_name: str, options: ImagesOptions) -> list[ImageSummary]:
        """List images used by created containers."""


def get_image_name_or_default(image: str, service_name: str, project_name: str) -> str:
    """Return the service image, or the default name built images are tagged with."""
    if image:
        return image
    return f"{project_name}{SEPARATOR}{service_name}"