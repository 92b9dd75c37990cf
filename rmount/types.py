"""
types.py
Dataclasses used across modules: Config, MountSpec, MountState, HostEntry.

MountSpec and MountState are frozen; the only mutable piece of a run is the
state slot held by the StatusTracker (mirrored on each HostEntry).
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, List


@dataclass
class Config:
    # paths
    remote_root: Path
    hosts_file: Path
    # mount
    mount_tool: str = "sshfs"
    mount_options: List[str] = field(
        default_factory=lambda: ["ServerAliveCountMax=3", "ServerAliveInterval=10"]
    )
    list_command: List[str] = field(default_factory=lambda: ["mount"])
    # display
    width: int = 79
    color: str = "auto"
    # logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None


@dataclass(frozen=True)
class MountSpec:
    name: str
    local_dir: Path
    user: Optional[str]
    host: str
    remote_path: Optional[str] = None

    @property
    def source(self) -> str:
        """Expected source string, e.g. ``user@host:/path`` or ``host:``."""
        who = f"{self.user}@" if self.user else ""
        return f"{who}{self.host}:{self.remote_path or ''}"


class Status(Enum):
    PENDING = "pending"
    MOUNTED = "mounted"
    FAILED = "failed"
    ALREADY_CORRECT = "already_correct"
    ALREADY_WRONG_SOURCE = "already_wrong_source"


@dataclass(frozen=True)
class MountState:
    status: Status
    # failure message for FAILED, actual source for ALREADY_WRONG_SOURCE,
    # optional note for MOUNTED ("dry-run")
    detail: Optional[str] = None

    @classmethod
    def pending(cls) -> "MountState":
        return cls(Status.PENDING)

    @classmethod
    def mounted(cls, note: Optional[str] = None) -> "MountState":
        return cls(Status.MOUNTED, note)

    @classmethod
    def failed(cls, message: str) -> "MountState":
        return cls(Status.FAILED, message)

    @classmethod
    def already_correct(cls) -> "MountState":
        return cls(Status.ALREADY_CORRECT)

    @classmethod
    def already_wrong_source(cls, actual_source: str) -> "MountState":
        return cls(Status.ALREADY_WRONG_SOURCE, actual_source)

    @property
    def terminal(self) -> bool:
        return self.status is not Status.PENDING


@dataclass
class HostEntry:
    spec: MountSpec
    row: int
    state: MountState
