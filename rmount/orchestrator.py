"""
orchestrator.py
Coordinates one run with concurrency:
  - Initializing: classify every spec against the live mount table, draw
  - Running: one worker per pending entry, all submitted at once; the calling
    thread consumes completions in whatever order they arrive and repaints
  - Done: every entry holds a terminal state
"""

from __future__ import annotations
import concurrent.futures, logging, sys
from collections import Counter
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO
from .types import Config, HostEntry, MountSpec, MountState
from .mounttable import check_all, read_mount_table
from .mounter import Launcher
from .tracker import StatusTracker
from .render import Renderer

log = logging.getLogger(__name__)


class Phase(Enum):
    INITIALIZING = "initializing"
    RUNNING = "running"
    DONE = "done"


class Orchestrator:
    def __init__(
        self,
        specs: List[MountSpec],
        table: Optional[Dict[Path, str]],
        launcher: Callable[[MountSpec], MountState],
        renderer: Renderer,
        on_done: Optional[Callable[[List[HostEntry]], None]] = None,
    ):
        self.specs = list(specs)
        self.table = table
        self.launcher = launcher
        self.renderer = renderer
        self.on_done = on_done
        self.phase = Phase.INITIALIZING
        self.tracker: Optional[StatusTracker] = None
        self.entries: List[HostEntry] = []
        self.launched = 0

    def initialize(self) -> None:
        states = check_all(self.specs, self.table)
        self.tracker = StatusTracker(states)
        self.entries = [HostEntry(s, i, st) for i, (s, st) in enumerate(zip(self.specs, states))]
        self.renderer.draw_all(self.entries)

    def complete(self, index: int, state: MountState) -> None:
        self.tracker.set(index, state)
        entry = self.entries[index]
        entry.state = self.tracker.get(index)
        self.renderer.update(entry)

    def attempt(self, spec: MountSpec) -> MountState:
        try:
            return self.launcher(spec)
        except Exception as e:
            log.debug("%s: launcher raised", spec.name, exc_info=True)
            return MountState.failed(str(e) or type(e).__name__)

    def consume(self, pending: List[int]) -> None:
        ex = concurrent.futures.ThreadPoolExecutor(max_workers=len(pending))
        try:
            futs = {ex.submit(self.attempt, self.entries[i].spec): i for i in pending}
            for f in concurrent.futures.as_completed(futs):
                self.complete(futs[f], f.result())
        except BaseException:
            # don't block on in-flight mount commands before reporting
            ex.shutdown(wait=False, cancel_futures=True)
            raise
        ex.shutdown()

    def run(self) -> List[HostEntry]:
        self.initialize()
        self.phase = Phase.RUNNING
        pending = self.tracker.pending_indices()
        self.launched = len(pending)
        try:
            if pending:
                self.consume(pending)
        finally:
            # leave the cursor below the block even on Ctrl-C
            self.renderer.finish()
        self.phase = Phase.DONE
        if self.on_done:
            self.on_done(self.entries)
        return self.entries


def use_color(cfg: Config, out: TextIO) -> bool:
    if cfg.color == "always":
        return True
    if cfg.color == "never":
        return False
    return out.isatty()


def print_plan(specs: List[MountSpec], table: Optional[Dict[Path, str]]) -> None:
    """Human-readable summary for --list."""
    states = check_all(specs, table)
    print(f"{'NAME':<16} {'DIRECTORY':<32} {'SOURCE':<32} {'STATUS':<20}")
    for s, st in zip(specs, states):
        status = st.status.value
        if st.detail:
            status += f" ({st.detail})"
        print(f"{s.name:<16} {str(s.local_dir):<32} {s.source:<32} {status:<20}")


def run_plan(
    cfg: Config,
    specs: List[MountSpec],
    list_only: bool,
    dry: bool,
    out: TextIO | None = None,
) -> int:
    out = out or sys.stdout
    table = read_mount_table(cfg)

    if list_only:
        print_plan(specs, table)
        return 0

    renderer = Renderer(
        out,
        width=cfg.width,
        color=use_color(cfg, out),
        # dry-run prints commands, which would break in-place repaints
        live=out.isatty() and not dry,
    )
    orch = Orchestrator(specs, table, Launcher(cfg, dry=dry), renderer)
    entries = orch.run()

    counts = Counter(e.state.status.value for e in entries)
    log.info(
        "%d entries, %d launched: %s",
        len(entries),
        orch.launched,
        ", ".join(f"{k}={v}" for k, v in sorted(counts.items())) or "nothing to do",
    )
    return 0
