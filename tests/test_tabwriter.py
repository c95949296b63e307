import io

from composecli.tabwriter import TabWriter, print_pretty_section


def _rows(rows):
    def printer(w):
        for row in rows:
            w.write("\t".join(row) + "\n")

    return printer


def test_pretty_section_matches_known_layout():
    out = io.StringIO()
    print_pretty_section(
        out,
        _rows([("myName1", "myStatus1"), ("myName2", "myStatus2")]),
        "NAME",
        "STATUS",
    )
    assert out.getvalue() == (
        "NAME                STATUS\nmyName1             myStatus1\nmyName2             myStatus2\n"
    )


def test_columns_are_aligned():
    out = io.StringIO()
    w = TabWriter(out, 0, 1, 2, " ")
    w.write("a\tbb\tc\n")
    w.write("longer-cell\tx\ty\n")
    w.write("m\tverylongvalue\tz\n")
    w.flush()
    lines = out.getvalue().splitlines()
    assert len(lines) == 3
    second = {line.index(token) for line, token in zip(lines, ("bb", "x", "verylongvalue"))}
    third = {line.rindex(token) for line, token in zip(lines, ("c", "y", "z"))}
    assert len(second) == 1
    assert len(third) == 1
    assert second.pop() == len("longer-cell") + 2


def test_minwidth_is_respected():
    out = io.StringIO()
    w = TabWriter(out, 12, 1, 1, " ")
    w.write("a\tb\n")
    w.flush()
    assert out.getvalue().index("b") == 12


def test_flush_empties_buffer():
    out = io.StringIO()
    w = TabWriter(out, 0, 1, 1, " ")
    w.write("a\tb\n")
    w.flush()
    first = out.getvalue()
    w.flush()
    assert out.getvalue() == first


def test_tab_padding():
    out = io.StringIO()
    w = TabWriter(out, 0, 8, 1, "\t")
    w.write("a\tb\n")
    w.flush()
    assert out.getvalue() == "a\tb\n"


def test_line_without_tabs_ends_a_block():
    out = io.StringIO()
    w = TabWriter(out, 0, 1, 1, " ")
    w.write("aaaaaaaaaa\tb\nplain\nc\td\n")
    w.flush()
    lines = out.getvalue().splitlines()
    assert lines[1] == "plain"
    assert lines[2].index("d") < lines[0].index("b")


def test_context_manager_flushes():
    out = io.StringIO()
    with TabWriter(out, 0, 1, 1, " ") as w:
        w.write("k\tv\n")
    assert out.getvalue().startswith("k")
    assert out.getvalue().endswith("v\n")