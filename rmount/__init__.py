"""
rmount package
- Mount a set of remote filesystems concurrently and show live per-host status.
"""
__all__ = ["cli", "config", "orchestrator", "mounttable", "mounter", "tracker", "render", "logsetup", "util", "types"]
__version__ = "0.1.0"
