"""
config.py
Load settings from TOML (Python 3.11+ tomllib) and the hosts file.
Settings search order:
  1) explicit --config path (must exist)
  2) $XDG_CONFIG_HOME/rmount.toml (~/.config/rmount.toml)
  3) /etc/rmount.toml
No settings file at all means built-in defaults.

Hosts file: one `name=[user@]host[:remote_path]` per line, `#` comments.
"""

from __future__ import annotations
import logging, os, re, tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional
from .types import Config, MountSpec

log = logging.getLogger(__name__)

DEFAULT_REMOTE_ROOT = "~/remote"
HOSTS_FILE_NAME = ".hosts"
HOST_LINE = re.compile(r"^([-A-Za-z0-9_][-A-Za-z0-9_.]*)=(.*)$")


def _gv(d: Dict[str, Any], path: list[str], default=None):
    cur = d
    for k in path:
        if not isinstance(cur, dict) or k not in cur:
            return default
        cur = cur[k]
    return cur


def _load_toml(path: Path) -> Dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def default_config_paths() -> list[Path]:
    xdg = os.environ.get("XDG_CONFIG_HOME") or str(Path("~/.config").expanduser())
    return [Path(xdg) / "rmount.toml", Path("/etc/rmount.toml")]


def find_config(path_arg: str | None) -> Optional[Path]:
    """Pick the settings path based on CLI arg and availability."""
    if path_arg:
        # User explicitly specified a config - it must exist
        p = Path(path_arg)
        if not p.exists():
            raise FileNotFoundError(f"Specified config file does not exist: {path_arg}")
        return p
    for p in default_config_paths():
        if p.exists():
            return p
    return None


def load_config(path: Optional[Path]) -> Config:
    cfg = _load_toml(path) if path else {}

    def gv(keys, default=None):
        return _gv(cfg, keys, default)

    remote_root = Path(gv(["paths", "remote_root"], DEFAULT_REMOTE_ROOT)).expanduser().resolve()
    hosts_file = gv(["paths", "hosts_file"])
    log_file = gv(["logging", "file"])
    color = gv(["display", "color"], "auto")
    if color not in ("auto", "always", "never"):
        raise ValueError(f"display.color must be auto, always or never, got {color!r}")
    options = gv(["mount", "options"], ["ServerAliveCountMax=3", "ServerAliveInterval=10"])
    list_command = gv(["mount", "list_command"], ["mount"])
    if isinstance(list_command, str):
        list_command = list_command.split()

    return Config(
        remote_root=remote_root,
        hosts_file=(
            Path(hosts_file).expanduser().resolve() if hosts_file else remote_root / HOSTS_FILE_NAME
        ),
        mount_tool=gv(["mount", "tool"], "sshfs"),
        mount_options=list(options),
        list_command=list(list_command),
        width=int(gv(["display", "width"], 79)),
        color=color,
        log_level=str(gv(["logging", "level"], "WARNING")).upper(),
        log_file=Path(log_file).expanduser() if log_file else None,
    )


def parse_remote(value: str) -> tuple[Optional[str], str, Optional[str]]:
    """Split `[user@]host[:remote_path]` into (user, host, remote_path)."""
    head, _, path = value.partition(":")
    user, at, host = head.partition("@")
    if not at:
        user, host = None, head
    return user or None, host, path or None


def parse_hosts(lines, remote_root: Path, origin: str = "<hosts>") -> List[MountSpec]:
    """
    Build the MountSpec table from hosts-file lines.
    Bad lines and duplicate names are reported and skipped, never fatal.
    """
    # `mount` reports absolute paths
    root = Path(remote_root).expanduser().resolve()
    specs: List[MountSpec] = []
    seen: set[str] = set()
    for lineno, raw in enumerate(lines, 1):
        line = raw.rstrip("\n").split("#", 1)[0].strip()
        if not line:
            continue
        m = HOST_LINE.match(line)
        if not m:
            log.warning("bad line %d in %s: %r", lineno, origin, line)
            continue
        name, value = m.group(1), m.group(2).strip()
        user, host, remote_path = parse_remote(value)
        if not host:
            log.warning("line %d in %s: no host given for %s", lineno, origin, name)
            continue
        if name in seen:
            log.warning("line %d in %s: duplicate entry %s skipped", lineno, origin, name)
            continue
        seen.add(name)
        local_dir = root / name
        if not local_dir.is_dir():
            log.warning("mount point %s does not exist", local_dir)
        specs.append(MountSpec(name, local_dir, user, host, remote_path))
    return specs


def load_hosts(cfg: Config) -> List[MountSpec]:
    with open(cfg.hosts_file, "r", encoding="utf-8") as f:
        return parse_hosts(f, cfg.remote_root, origin=str(cfg.hosts_file))
