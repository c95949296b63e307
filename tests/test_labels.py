import pytest

from composecli.labels import COMPOSE_VERSION, VERSION, compose_version


def test_plain_release_version():
    assert compose_version("v2.11.0") == "2.11.0"


def test_leading_v_is_optional():
    assert compose_version("2.11.0") == compose_version("v2.11.0")


def test_missing_segments_padded():
    assert compose_version("1.2") == "1.2.0"


def test_extra_segments_dropped():
    assert compose_version("3.4.5.6") == compose_version("3.4.5")


@pytest.mark.parametrize("suffix", ["-rc.1", "-beta", "+build.7", "-3-gabcdef.m"])
def test_prerelease_and_metadata_ignored(suffix):
    assert compose_version("v2.11.0" + suffix) == compose_version("v2.11.0")


@pytest.mark.parametrize("bad", ["dev", "", "v", "1..2", "x1.2.3"])
def test_unparsable_gives_empty(bad):
    assert compose_version(bad) == ""


def test_module_version_follows_function():
    assert COMPOSE_VERSION == compose_version(VERSION)