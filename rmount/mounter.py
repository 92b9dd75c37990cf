"""
mounter.py
Remote mount recipe: one external invocation per pending entry.

    <tool> -o opt ... <user@host:path> <local_dir>

A single attempt is the whole contract; failures are recorded, never retried.
"""

from __future__ import annotations
import logging
from .types import Config, MountSpec, MountState
from .util import run

log = logging.getLogger(__name__)


def build_mount_cmd(cfg: Config, spec: MountSpec) -> list[str]:
    cmd = [cfg.mount_tool]
    for opt in cfg.mount_options:
        cmd += ["-o", opt]
    cmd += [spec.source, str(spec.local_dir)]
    return cmd


def failure_message(cfg: Config, spec: MountSpec, rc: int, out: str, err: str) -> str:
    msg = err.strip() or out.strip()
    if msg:
        return msg
    if not spec.local_dir.is_dir():
        return f"mount point {spec.local_dir} does not exist"
    return f"{cfg.mount_tool} exited with status {rc}"


def launch(cfg: Config, spec: MountSpec, dry: bool = False) -> MountState:
    """Run the mount tool for spec and block until it exits."""
    cmd = build_mount_cmd(cfg, spec)
    try:
        rc, out, err = run(cmd, dry=dry)
    except OSError as e:
        log.debug("%s: could not start %s: %s", spec.name, cfg.mount_tool, e)
        return MountState.failed(f"{cfg.mount_tool}: {e.strerror or e}")
    if dry:
        return MountState.mounted("dry-run")
    if rc == 0:
        return MountState.mounted()
    log.debug("%s: %s failed with status %d", spec.name, cfg.mount_tool, rc)
    return MountState.failed(failure_message(cfg, spec, rc, out, err))


class Launcher:
    """Binds a Config (and dry-run flag) so workers only need the spec."""

    def __init__(self, cfg: Config, dry: bool = False):
        self.cfg = cfg
        self.dry = dry

    def __call__(self, spec: MountSpec) -> MountState:
        return launch(self.cfg, spec, dry=self.dry)
