"""
mounttable.py
Already-mounted classification:
- Read the live mount table from `mount` output (source on dir ...)
- Classify each MountSpec as pending, already correct, or wrong source

Source strings are compared verbatim; no DNS or alias resolution. A mount of
the same host under another name is reported as a wrong source and left to
the operator.
"""

from __future__ import annotations
import logging, re
from pathlib import Path
from typing import Dict, List, Optional
from .types import Config, MountSpec, MountState
from .util import run

log = logging.getLogger(__name__)

MOUNT_LINE = re.compile(r"^(\S+) on (\S+) ")


def parse_mount_output(text: str) -> Dict[Path, str]:
    table: Dict[Path, str] = {}
    for line in text.splitlines():
        m = MOUNT_LINE.match(line)
        if m:
            # later mounts on the same point shadow earlier ones
            table[Path(m.group(2))] = m.group(1)
    return table


def read_mount_table(cfg: Config) -> Optional[Dict[Path, str]]:
    """Return {local_dir: source}, or None when the table can't be read."""
    try:
        rc, out, err = run(cfg.list_command)
    except OSError as e:
        log.warning("cannot run %s: %s", cfg.list_command[0], e)
        return None
    if rc != 0:
        log.warning(
            "%s exited with status %d: %s", cfg.list_command[0], rc, err.strip()
        )
        return None
    return parse_mount_output(out)


def classify(spec: MountSpec, table: Optional[Dict[Path, str]]) -> MountState:
    if not table:
        return MountState.pending()
    actual = table.get(spec.local_dir)
    if actual is None:
        return MountState.pending()
    if actual == spec.source:
        return MountState.already_correct()
    return MountState.already_wrong_source(actual)


def check_all(
    specs: List[MountSpec], table: Optional[Dict[Path, str]]
) -> List[MountState]:
    return [classify(s, table) for s in specs]
