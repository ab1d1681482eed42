"""
link2clash CLI
==============
Headless command surface: convert links through the engine, or compose a
configuration document from saved engine output.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Callable, Mapping, Optional, TextIO

import httpx

from link2clash.app.config import AppConfig
from link2clash.app.controller import (
    CONVERSION_DONE,
    ConversionCallbacks,
    ConversionOrchestrator,
)
from link2clash.app.events import AppEvent, CopyTarget, DocumentState, EventType, SubmitIntent
from link2clash.clipboard import ClipboardService, SystemClipboard
from link2clash.compose import DocumentComposer
from link2clash.engine import ConversionClient
from link2clash.errors import ConfigError
from link2clash.models import error_rows

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the root CLI parser."""
    parser = argparse.ArgumentParser(prog="link2clash", description="Proxy link to Clash config CLI")
    parser.add_argument("--endpoint", help="Conversion endpoint URL (default: LINK2CLASH_ENDPOINT or local engine)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds (default: wait indefinitely)")
    parser.add_argument("--group-name", help="Proxy group name in the composed document (default: PROXY)")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Logging level (default: LINK2CLASH_LOG_LEVEL or info)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # convert
    convert_parser = subparsers.add_parser("convert", help="Convert proxy links through the engine")
    convert_parser.add_argument("source", nargs="?", default="-", help="File with one link per line ('-' for stdin)")
    convert_parser.add_argument("--document", action="store_true", help="Print the composed config instead of the raw panels")
    convert_parser.add_argument(
        "--copy",
        choices=[target.value for target in CopyTarget],
        help="Copy one result to the system clipboard",
    )
    convert_parser.set_defaults(handler=handle_convert)

    # compose
    compose_parser = subparsers.add_parser("compose", help="Compose a config from saved proxies/groups output")
    compose_parser.add_argument("proxies", help="File with proxy entry lines")
    compose_parser.add_argument("groups", help="File with group-reference lines")
    compose_parser.set_defaults(handler=handle_compose)

    return parser


def _print(msg: str, out: TextIO) -> None:
    out.write(msg + "\n")
    out.flush()


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).expanduser().read_text(encoding="utf-8")


def build_config(args: argparse.Namespace, environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Environment config with command-line overrides applied."""
    config = AppConfig.from_env(environ)
    if args.endpoint:
        config.endpoint = args.endpoint
    if args.timeout is not None:
        config.request_timeout = args.timeout
    if args.group_name:
        config.group_name = args.group_name
    if args.log_level:
        config.log_level = args.log_level
    return config


async def _run_convert(
    args: argparse.Namespace,
    config: AppConfig,
    client_factory: Callable[[], httpx.AsyncClient],
    out: TextIO,
    err: TextIO,
) -> int:
    try:
        raw_input = _read_source(args.source)
    except OSError as exc:
        _print(f"error: cannot read {args.source}: {exc}", err)
        return 1

    logger.debug("Converting %d line(s) via %s", len(raw_input.splitlines()), config.endpoint)
    statuses: list[str] = []

    def on_event(event: AppEvent) -> None:
        if event.event_type == EventType.STATUS:
            statuses.append(event.message)
            _print(f"status: {event.message}", err)

    async with client_factory() as http:
        orchestrator = ConversionOrchestrator(
            client=ConversionClient(http, config.endpoint, timeout=config.request_timeout),
            composer=DocumentComposer(config.group_name),
            callbacks=ConversionCallbacks(on_event=on_event),
            discard_stale_responses=config.discard_stale_responses,
        )
        orchestrator.clipboard = ClipboardService([SystemClipboard()], notify=orchestrator.notify)
        await orchestrator.dispatch(SubmitIntent(raw_input))

        if CONVERSION_DONE not in statuses:
            return 1

        state = orchestrator.state
        for row in error_rows(list(state.last_errors)):
            _print(f"error: {row}", err)

        if args.document:
            if state.document.state != DocumentState.POPULATED:
                _print("error: nothing to compose; proxies or groups output is empty", err)
                return 1
            out.write(state.document.text)
            out.flush()
        else:
            _print("# proxies", out)
            _print(state.proxy_lines, out)
            _print("# proxy-groups", out)
            _print(state.group_lines, out)

        if args.copy:
            copied = await orchestrator.copy(CopyTarget(args.copy))
            if not copied:
                return 1
    return 0


def handle_convert(
    args: argparse.Namespace,
    config: AppConfig,
    client_factory: Callable[[], httpx.AsyncClient],
    out: TextIO,
    err: TextIO,
) -> int:
    """Send links to the engine and print the results."""
    return asyncio.run(_run_convert(args, config, client_factory, out, err))


def handle_compose(
    args: argparse.Namespace,
    config: AppConfig,
    client_factory: Callable[[], httpx.AsyncClient],  # noqa: ARG001
    out: TextIO,
    err: TextIO,
) -> int:
    """Compose a config document from two saved output files."""
    try:
        proxies = Path(args.proxies).expanduser().read_text(encoding="utf-8")
        groups = Path(args.groups).expanduser().read_text(encoding="utf-8")
    except OSError as exc:
        _print(f"error: {exc}", err)
        return 1

    # Saved files usually end with a newline the engine never emits.
    proxies = proxies.rstrip("\n")
    groups = groups.rstrip("\n")
    if not proxies or not groups:
        _print("error: both proxies and groups files must be non-empty", err)
        return 1

    out.write(DocumentComposer(config.group_name).compose(proxies, groups))
    out.flush()
    return 0


def configure_logging(level: str) -> None:
    """Send log records to stderr so stdout stays pipeable."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(
    argv: Optional[list[str]] = None,
    client_factory: Callable[[], httpx.AsyncClient] = httpx.AsyncClient,
    out: TextIO = sys.stdout,
    err: TextIO = sys.stderr,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """
    CLI entrypoint.

    Args:
        argv: Optional argv override for testing.
        client_factory: Dependency-injection hook for tests.
        out: Output stream.
        err: Status and error stream.
        environ: Environment override for testing.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args, environ)
    except ConfigError as exc:
        _print(f"error: {exc}", err)
        return 2

    configure_logging(config.log_level)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help(file=out)
        return 2

    return int(handler(args, config, client_factory, out, err))


if __name__ == "__main__":
    raise SystemExit(main())
