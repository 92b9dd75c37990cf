"""
util.py
Cross-cutting utilities:
- Process execution (list of args) with dry-run support and captured output
- Sanitizing and display-width cutting of status lines (wcwidth)
"""

from __future__ import annotations
import logging, re, shlex, subprocess
from wcwidth import wcwidth

log = logging.getLogger(__name__)

CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def run(cmd: list[str], env=None, dry=False) -> tuple[int, str, str]:
    """
    Execute a command and wait for it.
    - Returns (rc, stdout, stderr), both decoded with replacement.
    - OSError (missing executable, permissions) propagates to the caller.
    """
    if dry:
        print("[dry-run]", " ".join(shlex.quote(c) for c in cmd))
        return 0, "", ""
    log.debug("running %s", " ".join(shlex.quote(c) for c in cmd))
    proc = subprocess.run(cmd, capture_output=True, env=env, stdin=subprocess.DEVNULL)
    log.debug("%s exited with %d", cmd[0], proc.returncode)
    return (
        proc.returncode,
        proc.stdout.decode("utf-8", "replace"),
        proc.stderr.decode("utf-8", "replace"),
    )


def sanitize(s: str) -> str:
    """Tabs become spaces; other C0/C1 control characters are dropped."""
    return CONTROL_CHARS.sub("", s.replace("\t", " "))


def shorten(s: str, width: int) -> str:
    """First line of s, cut (no ellipsis) so it fits in width columns."""
    s = sanitize(s.split("\n", 1)[0])
    out = []
    used = 0
    for ch in s:
        # combining and zero-width characters report 0
        w = max(wcwidth(ch), 0)
        if used + w > width:
            break
        out.append(ch)
        used += w
    return "".join(out)
