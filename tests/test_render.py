"""
Tests for status formatting and in-place repainting.
"""
import io
from pathlib import Path

import pytest
from rmount.render import describe, format_line, Cursor, Renderer, GREEN, RED, YELLOW, RESET
from rmount.types import HostEntry, MountSpec, MountState


def test_describe_every_state():
    assert describe(MountState.pending()) == ("...", None)
    assert describe(MountState.mounted()) == ("OK", GREEN)
    assert describe(MountState.mounted("dry-run")) == ("OK (dry-run)", GREEN)
    assert describe(MountState.already_correct()) == ("OK", GREEN)
    assert describe(MountState.failed("boom")) == ("boom", RED)
    text, color = describe(MountState.already_wrong_source("Desert-Wind.local:/somedir"))
    assert color == YELLOW
    assert '"Desert-Wind.local:/somedir"' in text


def test_wrong_source_line_contains_exact_source():
    src = "Desert-Wind.local:/somedir"
    text, _ = format_line("zephyr", MountState.already_wrong_source(src))
    assert src in text
    assert text.startswith("zephyr: ")


@pytest.mark.parametrize("name", ["a", "dir", "x" * 40, "y" * 120])
@pytest.mark.parametrize(
    "state",
    [
        MountState.pending(),
        MountState.mounted(),
        MountState.failed("e" * 300),
        MountState.already_wrong_source("h" * 200 + ":/p"),
    ],
)
def test_lines_never_exceed_budget(name, state):
    text, _ = format_line(name, state)
    assert len(text) <= 79


def test_missing_mount_point_line_is_cut_at_79():
    message = (
        "sshfs: bad mount point `/home/someuser/remote/dir': No such file or directory\n"
    )
    text, color = format_line("dir", MountState.failed(message))
    assert color == RED
    assert len(text) == 79
    assert text == "dir: sshfs: bad mount point `/home/someuser/remote/dir': No such file or direct"
    assert not text.endswith("...")


def test_failure_shows_first_line_only():
    text, _ = format_line("h", MountState.failed("line one\nline two"))
    assert text == "h: line one"


def test_cursor_relative_moves():
    out = io.StringIO()
    c = Cursor(5, out)
    c.go_to(2)
    assert out.getvalue() == "\033[3A"
    c.bumped()
    c.go_to(3)
    assert out.getvalue() == "\033[3A"
    c.go_to(4)
    assert out.getvalue() == "\033[3A\033[1B"
    c.max_out()
    assert out.getvalue() == "\033[3A\033[1B\033[1B"
    assert c.y == 5


def entries(*states):
    return [
        HostEntry(MountSpec(f"h{i}", Path(f"/r/h{i}"), None, f"h{i}"), i, s)
        for i, s in enumerate(states)
    ]


def test_first_draw_and_targeted_update():
    out = io.StringIO()
    r = Renderer(out, color=False)
    es = entries(MountState.pending(), MountState.pending(), MountState.already_correct())
    r.draw_all(es)
    assert out.getvalue() == "h0: ...\nh1: ...\nh2: OK\n"

    out.seek(0)
    out.truncate()
    es[1].state = MountState.mounted()
    r.update(es[1])
    # up two rows from below the block, repaint, fall back to row 2
    assert out.getvalue() == "\033[2A\rh1: OK\033[K\n"
    assert r.cursor.y == 2

    r.finish()
    assert out.getvalue().endswith("\033[1B")
    assert r.cursor.y == 3


def test_color_wraps_line():
    out = io.StringIO()
    r = Renderer(out, color=True)
    r.draw_all(entries(MountState.failed("bad"), MountState.pending()))
    assert out.getvalue() == f"{RED}h0: bad{RESET}\nh1: ...\n"


def test_not_live_appends_lines():
    out = io.StringIO()
    r = Renderer(out, color=False, live=False)
    es = entries(MountState.pending())
    r.draw_all(es)
    es[0].state = MountState.mounted()
    r.update(es[0])
    r.finish()
    assert out.getvalue() == "h0: ...\nh0: OK\n"


def test_tabs_in_diagnostic_stay_within_budget():
    text, _ = format_line("h", MountState.failed("\t".join(["sshfs: err"] * 12)))
    assert "\t" not in text
    assert len(text.expandtabs()) <= 79


def test_escape_sequences_in_diagnostic_are_neutralized():
    text, _ = format_line("h", MountState.failed("\x1b[2Jboom\rsshfs: gone"))
    assert "\x1b" not in text
    assert "\r" not in text
    assert text == "h: [2Jboomsshfs: gone"


def test_wide_names_fit_in_columns():
    from wcwidth import wcswidth

    text, _ = format_line("日本" * 30, MountState.pending())
    assert wcswidth(text) <= 79
