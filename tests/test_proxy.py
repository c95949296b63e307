import pytest

from composecli.api import (
    BuildOptions,
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
    LogOptions,
    PauseOptions,
    PortOptions,
    PsOptions,
    PullOptions,
    PushOptions,
    RemoveOptions,
    RestartOptions,
    RunOptions,
    Stack,
    StartOptions,
    StopOptions,
    UpOptions,
)
from composecli.errors import NotImplementedApiError, is_not_implemented
from composecli.proxy import ServiceProxy

PROJECT = object()

PROJECT_CALLS = [
    ("build", (PROJECT, BuildOptions())),
    ("push", (PROJECT, PushOptions())),
    ("pull", (PROJECT, PullOptions())),
    ("create", (PROJECT, CreateOptions())),
    ("up", (PROJECT, UpOptions())),
    ("convert", (PROJECT, ConvertOptions())),
    ("run_one_off_container", (PROJECT, RunOptions())),
]

NAME_CALLS = [
    ("start", ("demo", StartOptions())),
    ("restart", ("demo", RestartOptions())),
    ("stop", ("demo", StopOptions())),
    ("down", ("demo", DownOptions())),
    ("logs", ("demo", None, LogOptions())),
    ("ps", ("demo", PsOptions())),
    ("list", (ListOptions(),)),
    ("kill", ("demo", KillOptions())),
    ("remove", ("demo", RemoveOptions())),
    ("exec", ("demo", RunOptions())),
    ("copy", ("demo", CopyOptions())),
    ("pause", ("demo", PauseOptions())),
    ("unpause", ("demo", PauseOptions())),
    ("top", ("demo", ["web"])),
    ("events", ("demo", EventsOptions())),
    ("port", ("demo", "web", 80, PortOptions())),
    ("images", ("demo", ImagesOptions())),
]

ALL_CALLS = PROJECT_CALLS + NAME_CALLS


class RecordingService:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def method(*args):
            self.calls.append((name, args))
            return (name, args)

        return method


@pytest.mark.parametrize("name,args", ALL_CALLS)
def test_unset_operation_raises_not_implemented(name, args):
    proxy = ServiceProxy()
    with pytest.raises(NotImplementedApiError) as info:
        getattr(proxy, name)(*args)
    assert is_not_implemented(info.value)


@pytest.mark.parametrize("name,args", ALL_CALLS)
def test_with_service_delegates_every_operation(name, args):
    service = RecordingService()
    proxy = ServiceProxy().with_service(service)
    result = getattr(proxy, name)(*args)
    assert result == (name, args)
    assert service.calls == [(name, args)]


def test_with_service_returns_same_proxy():
    proxy = ServiceProxy()
    assert proxy.with_service(RecordingService()) is proxy


@pytest.mark.parametrize("name,args", PROJECT_CALLS)
def test_interceptors_see_project(name, args):
    seen = []
    proxy = ServiceProxy().with_service(RecordingService())
    proxy.with_interceptor(lambda p: seen.append(("first", p)), lambda p: seen.append(("second", p)))
    getattr(proxy, name)(*args)
    assert seen == [("first", PROJECT), ("second", PROJECT)]


@pytest.mark.parametrize("name,args", NAME_CALLS)
def test_interceptors_not_run_for_name_operations(name, args):
    seen = []
    proxy = ServiceProxy().with_service(RecordingService()).with_interceptor(seen.append)
    getattr(proxy, name)(*args)
    assert seen == []


def test_interceptors_not_run_when_not_implemented():
    seen = []
    proxy = ServiceProxy().with_interceptor(seen.append)
    with pytest.raises(NotImplementedApiError):
        proxy.build(PROJECT, BuildOptions())
    assert seen == []


def test_with_interceptor_accumulates_in_order():
    seen = []
    proxy = ServiceProxy().with_service(RecordingService())
    returned = proxy.with_interceptor(lambda p: seen.append(1))
    returned.with_interceptor(lambda p: seen.append(2))
    proxy.up(PROJECT, UpOptions())
    assert returned is proxy
    assert seen == [1, 2]


def test_single_override_keeps_others_unimplemented():
    proxy = ServiceProxy()
    stacks = [Stack(name="demo")]
    proxy.list_fn = lambda options: stacks
    assert proxy.list(ListOptions(all=True)) == stacks
    with pytest.raises(NotImplementedApiError):
        proxy.ps("demo", PsOptions())


def test_override_after_with_service_replaces_delegate():
    proxy = ServiceProxy().with_service(RecordingService())
    containers = [ContainerSummary(id="abc123", name="ABC")]
    proxy.ps_fn = lambda name, options: containers
    assert proxy.ps("demo", PsOptions()) == containers


def test_port_and_images_results_pass_through():
    proxy = ServiceProxy()
    proxy.port_fn = lambda name, service, port, options: ("0.0.0.0", port)
    images = [ImageSummary(id="sha256:abc", container_name="c1")]
    proxy.images_fn = lambda name, options: images
    assert proxy.port("demo", "web", 8080, PortOptions()) == ("0.0.0.0", 8080)
    assert proxy.images("demo", ImagesOptions()) == images


def test_errors_from_delegate_propagate():
    proxy = ServiceProxy()

    def failing(name, options):
        raise RuntimeError("boom")

    proxy.stop_fn = failing
    with pytest.raises(RuntimeError, match="boom"):
        proxy.stop("demo", StopOptions())