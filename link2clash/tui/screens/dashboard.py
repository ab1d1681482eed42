"""
Dashboard screen shell for the central TUI layout.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, Static, TextArea

from link2clash.tui.widgets import ErrorReporter, StatusBar


class DashboardShell(Container):
    """Main dashboard shell: actions, input, output panels, document and status."""

    def compose(self) -> ComposeResult:
        with Horizontal(id="actions"):
            yield Button("Convert", id="convert", classes="-primary")
            yield Button("Clear", id="clear")
            yield Button("Copy proxies (F2)", id="copy-proxies")
            yield Button("Copy groups (F3)", id="copy-groups")
            yield Button("Copy config (F4)", id="copy-document")
        with Horizontal(id="panes"):
            with Vertical(id="input-pane"):
                yield Static("Links (one per line)", classes="label")
                yield TextArea(id="input")
            with Vertical(id="output-pane"):
                yield Static("proxies", classes="label")
                yield TextArea(id="proxies", read_only=True)
                yield Static("proxy-groups", classes="label")
                yield TextArea(id="groups", read_only=True)
                yield ErrorReporter(id="errors")
            with Vertical(id="document-pane"):
                yield Static("Config", classes="label")
                yield TextArea(id="document", read_only=True)
        yield StatusBar(id="status")
