"""
render.py
Live status display: one line per host, repainted in place.

- describe(): state -> (text, color), pure
- format_line(): "<name>: <text>" cut to the column budget (no ellipsis)
- Cursor: owns the row the terminal cursor sits on, relative to the block
- Renderer: first full draw, then one targeted repaint per state change
"""

from __future__ import annotations
import sys
from typing import List, Optional, TextIO, Tuple
from .types import HostEntry, MountState, Status
from .util import shorten

GREEN = "\033[32m"
RED = "\033[31m"
YELLOW = "\033[33m"
RESET = "\033[0m"
ERASE_EOL = "\033[K"

DEFAULT_WIDTH = 79


def describe(state: MountState) -> Tuple[str, Optional[str]]:
    s = state.status
    if s is Status.PENDING:
        return "...", None
    if s is Status.MOUNTED and state.detail:
        return f"OK ({state.detail})", GREEN
    if s is Status.MOUNTED or s is Status.ALREADY_CORRECT:
        return "OK", GREEN
    if s is Status.FAILED:
        return state.detail or "failed", RED
    if s is Status.ALREADY_WRONG_SOURCE:
        return f'already mounted, but wrong source? "{state.detail}"', YELLOW
    raise ValueError(f"unknown status: {s!r}")


def format_line(
    name: str, state: MountState, width: int = DEFAULT_WIDTH
) -> Tuple[str, Optional[str]]:
    text, color = describe(state)
    # only the first line of a multi-line diagnostic is shown
    text = text.split("\n", 1)[0]
    return shorten(f"{name}: {text}", width), color


class Cursor:
    """
    Tracks the cursor row within the display block. Row `rows` is the line
    just below the block, which is where the cursor sits after the first draw.
    """

    def __init__(self, rows: int, out: TextIO):
        self.rows = rows
        self.y = rows
        self.out = out

    def go_to(self, y: int) -> None:
        if y < self.y:
            self.out.write(f"\033[{self.y - y}A")
        elif y > self.y:
            self.out.write(f"\033[{y - self.y}B")
        self.y = y

    def bumped(self) -> None:
        """A newline was written and the real cursor fell one row."""
        self.y += 1

    def max_out(self) -> None:
        self.go_to(self.rows)


class Renderer:
    def __init__(
        self,
        out: TextIO | None = None,
        width: int = DEFAULT_WIDTH,
        color: bool = True,
        live: bool = True,
    ):
        self.out = out or sys.stdout
        self.width = width
        self.color = color
        self.live = live
        self.cursor: Optional[Cursor] = None

    def paint(self, entry: HostEntry) -> str:
        text, color = format_line(entry.spec.name, entry.state, self.width)
        if self.color and color:
            return f"{color}{text}{RESET}"
        return text

    def draw_all(self, entries: List[HostEntry]) -> None:
        for e in entries:
            self.out.write(self.paint(e) + "\n")
        self.cursor = Cursor(len(entries), self.out)
        self.out.flush()

    def update(self, entry: HostEntry) -> None:
        if not self.live or self.cursor is None:
            self.out.write(self.paint(entry) + "\n")
            self.out.flush()
            return
        self.cursor.go_to(entry.row)
        self.out.write("\r" + self.paint(entry) + ERASE_EOL + "\n")
        self.cursor.bumped()
        self.out.flush()

    def finish(self) -> None:
        if self.live and self.cursor is not None:
            self.cursor.max_out()
        self.out.flush()
