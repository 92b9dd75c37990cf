"""
Pytest configuration and shared fixtures.
"""
import stat
import pytest
from pathlib import Path
from rmount.types import Config, MountSpec


@pytest.fixture
def remote_root(tmp_path):
    root = tmp_path / "remote"
    root.mkdir()
    return root


@pytest.fixture
def sample_config(remote_root):
    """Create a sample configuration object for testing."""
    return Config(
        remote_root=remote_root,
        hosts_file=remote_root / ".hosts",
        mount_tool="sshfs",
        mount_options=["ServerAliveCountMax=3", "ServerAliveInterval=10"],
        list_command=["mount"],
        width=79,
        color="never",
        log_level="WARNING",
    )


@pytest.fixture
def make_spec(remote_root):
    def make(name, host, user=None, remote_path=None, create=True):
        local_dir = remote_root / name
        if create:
            local_dir.mkdir(exist_ok=True)
        return MountSpec(name, local_dir, user, host, remote_path)
    return make


@pytest.fixture
def fake_tool(tmp_path):
    """Write an executable shell script and return its path."""
    def make(name, body):
        p = tmp_path / "bin" / name
        p.parent.mkdir(exist_ok=True)
        p.write_text("#!/bin/sh\n" + body + "\n")
        p.chmod(p.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(p)
    return make
