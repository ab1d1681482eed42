#!/usr/bin/env python3
"""
Project-level CLI launcher.

Usage:
    python link2clash_cli.py <command> [options]
"""

from link2clash.cli.main import main


if __name__ == "__main__":
    raise SystemExit(main())
