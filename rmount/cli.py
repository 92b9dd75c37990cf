#!/usr/bin/env python3
"""
cli.py
Command-line interface for rmount.
Parses arguments, loads settings and the hosts file, and invokes the orchestrator.
"""
from __future__ import annotations
import argparse, logging, sys
from pathlib import Path
from .config import find_config, load_config, load_hosts, HOSTS_FILE_NAME
from .logsetup import setup_logging
from .orchestrator import run_plan

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_arguments(args) -> None:
    """Validate CLI arguments and provide helpful error messages."""
    if args.width is not None and args.width < 10:
        print(f"❌ Error: --width must be at least 10, got {args.width}")
        print(f"💡 Hint: the default is 79 columns")
        sys.exit(1)


def main(argv=None) -> int:
    try:
        ap = argparse.ArgumentParser(
            prog="rmount",
            description="rmount: mount every configured remote filesystem at once, with live status",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="\nHosts file lines look like: name=[user@]host[:remote_path]",
        )
        ap.add_argument(
            "--config",
            default=None,
            help="path to rmount.toml (default: ~/.config/rmount.toml then /etc/rmount.toml)",
        )
        ap.add_argument("--hosts", default=None, help=f"hosts file (default: <remote-root>/{HOSTS_FILE_NAME})")
        ap.add_argument("--remote-root", default=None, help="directory holding the mount points (default: ~/remote)")
        ap.add_argument("--list", action="store_true", help="show hosts and their current mount status, mount nothing")
        ap.add_argument("--dry-run", action="store_true", help="show commands without executing")
        color = ap.add_mutually_exclusive_group()
        color.add_argument("--color", dest="color", action="store_const", const="always", help="always color output")
        color.add_argument("--no-color", dest="color", action="store_const", const="never", help="never color output")
        ap.add_argument("--width", type=int, default=None, help="display width in columns (default: 79)")
        ap.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="logging level (default: WARNING)")
        ap.add_argument("-v", "--verbose", action="store_true", help="same as --log-level INFO")

        args = ap.parse_args(argv)

        # Validate arguments early
        validate_arguments(args)

        # Find and load settings with error handling
        cfg_path = None
        try:
            cfg_path = find_config(args.config)
            cfg = load_config(cfg_path)
        except FileNotFoundError as e:
            print(f"❌ Error: {e}")
            print(f"💡 Hint: Check the path, or drop --config to use built-in defaults")
            return 1
        except Exception as e:
            print(f"❌ Error: Invalid configuration file {cfg_path}: {e}")
            print(f"💡 Hint: Check TOML syntax and the [paths], [mount], [display] and [logging] tables")
            return 1

        # CLI overrides
        if args.remote_root:
            cfg.remote_root = Path(args.remote_root).expanduser().resolve()
            if not args.hosts:
                cfg.hosts_file = cfg.remote_root / HOSTS_FILE_NAME
        if args.hosts:
            cfg.hosts_file = Path(args.hosts).expanduser().resolve()
        if args.color:
            cfg.color = args.color
        if args.width is not None:
            cfg.width = args.width
        if args.log_level:
            cfg.log_level = args.log_level
        elif args.verbose:
            cfg.log_level = "INFO"

        setup_logging(
            cfg.log_level,
            color={"always": True, "never": False}.get(cfg.color),
            log_file=cfg.log_file,
        )

        try:
            specs = load_hosts(cfg)
        except FileNotFoundError:
            print(f"❌ Error: hosts file not found: {cfg.hosts_file}")
            print(f"💡 Hint: Create it with one 'name=[user@]host[:path]' per line, or pass --hosts")
            return 1
        except OSError as e:
            print(f"❌ Error: cannot read hosts file {cfg.hosts_file}: {e}")
            return 1

        return run_plan(cfg, specs, args.list, args.dry_run)

    except KeyboardInterrupt:
        print(f"\n\n⚡ Interrupted by user. Mount commands already running will still finish before exit.")
        return 130
    except Exception as e:
        logging.getLogger(__name__).debug("unexpected error", exc_info=True)
        print(f"❌ Unexpected error: {e}")
        print(f"💡 Hint: Run with --list or --dry-run first to check configuration")
        return 1


if __name__ == "__main__":
    sys.exit(main())
