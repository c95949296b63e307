"""A compose service that delegates each operation to a replaceable function."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from composecli.api import (
    BuildOptions,
    ContainerProcSummary,
    ContainerSummary,
    ConvertOptions,
    CopyOptions,
    CreateOptions,
    DownOptions,
    EventsOptions,
    ImageSummary,
    ImagesOptions,
    KillOptions,
    ListOptions,
    LogConsumer,
    LogOptions,
    PauseOptions,
    PortOptions,
    PsOptions,
    PullOptions,
    PushOptions,
    RemoveOptions,
    RestartOptions,
    RunOptions,
    Service,
    Stack,
    StartOptions,
    StopOptions,
    UpOptions,
)
from composecli.errors import NotImplementedApiError

Interceptor = Callable[[Any], None]
"""Called with the project before an operation that takes a project runs."""

_OPERATIONS = (
    "build",
    "push",
    "pull",
    "create",
    "start",
    "restart",
    "stop",
    "up",
    "down",
    "logs",
    "ps",
    "list",
    "convert",
    "kill",
    "run_one_off_container",
    "remove",
    "exec",
    "copy",
    "pause",
    "unpause",
    "top",
    "events",
    "port",
    "images",
)


class ServiceProxy:
    """Implements the service operations by calling the ``<operation>_fn`` attributes.

    Any attribute left as None makes its operation raise NotImplementedApiError.
    Interceptors see the project before build, push, pull, create, up, convert
    and run_one_off_container.
    """

    def __init__(self) -> None:
        self.build_fn: Callable[[Any, BuildOptions], None] | None = None
        self.push_fn: Callable[[Any, PushOptions], None] | None = None
        self.pull_fn: Callable[[Any, PullOptions], None] | None = None
        self.create_fn: Callable[[Any, CreateOptions], None] | None = None
        self.start_fn: Callable[[str, StartOptions], None] | None = None
        self.restart_fn: Callable[[str, RestartOptions], None] | None = None
        self.stop_fn: Callable[[str, StopOptions], None] | None = None
        self.up_fn: Callable[[Any, UpOptions], None] | None = None
        self.down_fn: Callable[[str, DownOptions], None] | None = None
        self.logs_fn: Callable[[str, LogConsumer, LogOptions], None] | None = None
        self.ps_fn: Callable[[str, PsOptions], list[ContainerSummary]] | None = None
        self.list_fn: Callable[[ListOptions], list[Stack]] | None = None
        self.convert_fn: Callable[[Any, ConvertOptions], bytes] | None = None
        self.kill_fn: Callable[[str, KillOptions], None] | None = None
        self.run_one_off_container_fn: Callable[[Any, RunOptions], int] | None = None
        self.remove_fn: Callable[[str, RemoveOptions], None] | None = None
        self.exec_fn: Callable[[str, RunOptions], int] | None = None
        self.copy_fn: Callable[[str, CopyOptions], None] | None = None
        self.pause_fn: Callable[[str, PauseOptions], None] | None = None
        self.unpause_fn: Callable[[str, PauseOptions], None] | None = None
        self.top_fn: Callable[[str, list[str]], list[ContainerProcSummary]] | None = None
        self.events_fn: Callable[[str, EventsOptions], None] | None = None
        self.port_fn: Callable[[str, str, int, PortOptions], tuple[str, int]] | None = None
        self.images_fn: Callable[[str, ImagesOptions], list[ImageSummary]] | None = None
        self._interceptors: list[Interceptor] = []

    def with_service(self, service: Service) -> ServiceProxy:
        """Delegate every operation to the matching method of ``service``."""
        for name in _OPERATIONS:
            setattr(self, f"{name}_fn", getattr(service, name))
        return self

    def with_interceptor(self, *args: Interceptor) -> ServiceProxy:
        """Add interceptors, run in the order given."""
        self._interceptors.extend(args)
        return self

    @staticmethod
    def _require(fn: Callable[..., Any] | None) -> Callable[..., Any]:
        if fn is None:
            raise NotImplementedApiError()
        return fn

    def _intercepted(self, fn: Callable[..., Any] | None, project: Any) -> Callable[..., Any]:
        fn = self._require(fn)
        for interceptor in self._interceptors:
            interceptor(project)
        return fn

    def build(self, project: Any, options: BuildOptions) -> None:
        """Build service images."""
        return self._intercepted(self.build_fn, project)(project, options)

    def push(self, project: Any, options: PushOptions) -> None:
        """Push service images."""
        return self._intercepted(self.push_fn, project)(project, options)

    def pull(self, project: Any, options: PullOptions) -> None:
        """Pull service images."""
        return self._intercepted(self.pull_fn, project)(project, options)

    def create(self, project: Any, options: CreateOptions) -> None:
        """Create service containers."""
        return self._intercepted(self.create_fn, project)(project, options)

    def start(self, project_name: str, options: StartOptions) -> None:
        """Start service containers."""
        return self._require(self.start_fn)(project_name, options)

    def restart(self, project_name: str, options: RestartOptions) -> None:
        """Restart service containers."""
        return self._require(self.restart_fn)(project_name, options)

    def stop(self, project_name: str, options: StopOptions) -> None:
        """Stop service containers."""
        return self._require(self.stop_fn)(project_name, options)

    def up(self, project: Any, options: UpOptions) -> None:
        """Create and start service containers."""
        return self._intercepted(self.up_fn, project)(project, options)

    def down(self, project_name: str, options: DownOptions) -> None:
        """Stop and remove containers and networks."""
        return self._require(self.down_fn)(project_name, options)

    def logs(self, project_name: str, consumer: LogConsumer, options: LogOptions) -> None:
        """Send container output to a consumer."""
        return self._require(self.logs_fn)(project_name, consumer, options)

    def ps(self, project_name: str, options: PsOptions) -> list[ContainerSummary]:
        """List containers."""
        return self._require(self.ps_fn)(project_name, options)

    def list(self, options: ListOptions) -> list[Stack]:
        """List projects."""
        return self._require(self.list_fn)(options)

    def convert(self, project: Any, options: ConvertOptions) -> bytes:
        """Render the project model in the backend's format."""
        return self._intercepted(self.convert_fn, project)(project, options)

    def kill(self, project_name: str, options: KillOptions) -> None:
        """Force stop service containers."""
        return self._require(self.kill_fn)(project_name, options)

    def run_one_off_container(self, project: Any, options: RunOptions) -> int:
        """Run a one-off container and return its exit code."""
        return self._intercepted(self.run_one_off_container_fn, project)(project, options)

    def remove(self, project_name: str, options: RemoveOptions) -> None:
        """Remove stopped service containers."""
        return self._require(self.remove_fn)(project_name, options)

    def exec(self, project_name: str, options: RunOptions) -> int:
        """Run a command in a running container and return its exit code."""
        return self._require(self.exec_fn)(project_name, options)

    def copy(self, project_name: str, options: CopyOptions) -> None:
        """Copy files between a container and the local filesystem."""
        return self._require(self.copy_fn)(project_name, options)

    def pause(self, project_name: str, options: PauseOptions) -> None:
        """Pause services."""
        return self._require(self.pause_fn)(project_name, options)

    def unpause(self, project_name: str, options: PauseOptions) -> None:
        """Unpause services."""
        return self._require(self.unpause_fn)(project_name, options)

    def top(self, project_name: str, services: list[str]) -> list[ContainerProcSummary]:
        """List processes running in containers."""
        return self._require(self.top_fn)(project_name, services)

    def events(self, project_name: str, options: EventsOptions) -> None:
        """Stream container events to a consumer."""
        return self._require(self.events_fn)(project_name, options)

    def port(
        self, project_name: str, service: str, port: int, options: PortOptions
    ) -> tuple[str, int]:
        """Return the public address and port bound to a private port."""
        return self._require(self.port_fn)(project_name, service, port, options)

    def images(self, project_name: str, options: ImagesOptions) -> list[ImageSummary]:
        """List images used by created containers."""
        return self._require(self.images_fn)(project_name, options)