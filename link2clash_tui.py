#!/usr/bin/env python3
"""
link2clash TUI launcher.

Usage:
    python link2clash_tui.py
    python link2clash_tui.py --endpoint http://127.0.0.1:7625/api/convert
"""

from __future__ import annotations

import argparse
import logging
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="link2clash-tui", description="link2clash Textual TUI")
    parser.add_argument("--endpoint", help="Conversion endpoint URL (default: LINK2CLASH_ENDPOINT or local engine)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds (default: wait indefinitely)")
    parser.add_argument("--group-name", help="Proxy group name in the composed document (default: PROXY)")
    parser.add_argument("--status-seconds", type=float, help="How long status messages stay visible (default: 2.2)")
    parser.add_argument(
        "--keep-stale",
        action="store_true",
        help="Apply responses that arrive after a clear or a newer submit",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Logging level (default: LINK2CLASH_LOG_LEVEL or info)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        from link2clash.tui.app import Link2ClashTUI
        from textual.logging import TextualHandler
    except ImportError:
        print("error: Textual is not installed. Run `pip install textual rich`.", file=sys.stderr)
        return 1

    from link2clash.app.config import AppConfig
    from link2clash.errors import ConfigError

    try:
        config = AppConfig.from_env()
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.endpoint:
        config.endpoint = args.endpoint
    if args.timeout is not None:
        config.request_timeout = args.timeout
    if args.group_name:
        config.group_name = args.group_name
    if args.status_seconds is not None:
        config.status_seconds = args.status_seconds
    if args.keep_stale:
        config.discard_stale_responses = False
    if args.log_level:
        config.log_level = args.log_level

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        handlers=[TextualHandler()],
    )

    app = Link2ClashTUI(config=config)
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
