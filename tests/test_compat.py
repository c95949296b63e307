import pytest

from composecli.compat import MissingFlagArgumentError, convert


@pytest.mark.parametrize(
    "args, want",
    [
        (["up"], ["compose", "up"]),
        (
            ["--context", "foo", "-f", "compose.yaml", "up"],
            ["--context", "foo", "compose", "-f", "compose.yaml", "up"],
        ),
        (["--host", "tcp://1.2.3.4", "up"], ["--host", "tcp://1.2.3.4", "compose", "up"]),
        (["--verbose"], ["--debug", "compose"]),
        (["--version"], ["compose", "version"]),
        (["-v"], ["compose", "version"]),
        (["-h"], ["compose", "--help"]),
        (["psql", "-h", "postgres"], ["compose", "psql", "-h", "postgres"]),
        (
            ["exec", "mongo", "mongo", "--host", "mongo"],
            ["compose", "exec", "mongo", "mongo", "--host", "mongo"],
        ),
        (["--log-level", "INFO", "up"], ["--log-level", "INFO", "compose", "up"]),
        (
            ["--project-directory", "", "ps"],
            ["compose", "--project-directory", "", "ps"],
        ),
    ],
    ids=[
        "compose only",
        "with context",
        "with host",
        "compose --verbose",
        "compose --version",
        "compose -v",
        "help",
        "issues/1962",
        "issues/8648",
        "issues/12",
        "empty string argument",
    ],
)
def test_convert(args, want):
    assert convert(args) == want


def test_plugin_name_not_repeated():
    assert convert(["compose", "up"]) == ["compose", "up"]


def test_completion_command_goes_first():
    assert convert(["__complete", "up"]) == ["__complete", "compose", "up"]


def test_missing_flag_argument():
    with pytest.raises(MissingFlagArgumentError) as info:
        convert(["--context"])
    assert str(info.value) == "flag needs an argument: '--context'"
    assert info.value.flag == "--context"


def test_input_not_modified():
    args = ["--tls", "up", "-d"]
    assert convert(args) == ["--tls", "compose", "up", "-d"]
    assert args == ["--tls", "up", "-d"]