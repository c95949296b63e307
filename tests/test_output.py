import io

import pytest

from composecli.errors import ParsingFailedError, is_parsing_failed
from composecli.jsonfmt import to_standard_json
from composecli.output import JSON, PRETTY, TEMPLATE_LEGACY_JSON, print_formatted

TEST_LIST = [
    {"Name": "myName1", "Status": "myStatus1"},
    {"Name": "myName2", "Status": "myStatus2"},
]


def _writer(w):
    for item in TEST_LIST:
        w.write(f"{item['Name']}\t{item['Status']}\n")


def _print(fmt, obj=TEST_LIST):
    out = io.StringIO()
    print_formatted(obj, fmt, out, _writer, "NAME", "STATUS")
    return out.getvalue()


def test_pretty():
    assert _print(PRETTY) == (
        "NAME                STATUS\nmyName1             myStatus1\nmyName2             myStatus2\n"
    )


def test_empty_format_is_pretty():
    assert _print("") == _print(PRETTY)


def test_json():
    assert _print(JSON) == (
        '[{"Name":"myName1","Status":"myStatus1"},{"Name":"myName2","Status":"myStatus2"}]\n'
    )


def test_format_is_case_insensitive():
    assert _print("JSON") == _print(JSON)


def test_legacy_template_json():
    assert _print(TEMPLATE_LEGACY_JSON) == (
        '{"Name":"myName1","Status":"myStatus1"}\n{"Name":"myName2","Status":"myStatus2"}\n'
    )


def test_json_of_single_object_is_indented():
    obj = {"Name": "myName1"}
    assert _print(JSON, obj) == to_standard_json(obj) + "\n"


def test_unknown_format_raises():
    with pytest.raises(ParsingFailedError) as info:
        _print("xml")
    assert is_parsing_failed(info.value)
    assert 'format value "xml" could not be parsed' in str(info.value)