"""
Textual TUI App
===============
Paste proxy links, convert them through the engine, and copy the results.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import httpx
from textual.app import App, ComposeResult
from textual.widgets import Button, Footer, Header, TextArea

from link2clash.app import (
    AppConfig,
    ConversionCallbacks,
    ConversionOrchestrator,
    CopyIntent,
    CopyTarget,
    EventType,
    Intent,
    SubmitIntent,
)
from link2clash.app.events import AppEvent
from link2clash.clipboard import (
    ClipboardService,
    ClipboardStrategy,
    SystemClipboard,
    TerminalClipboard,
)
from link2clash.compose import DocumentComposer
from link2clash.engine import ConversionClient
from link2clash.tui.screens.dashboard import DashboardShell
from link2clash.tui.styles import APP_CSS
from link2clash.tui.widgets import ErrorReporter, StatusBar

logger = logging.getLogger(__name__)

CONVERT_LABEL = "Convert"
CONVERTING_LABEL = "Converting..."


class Link2ClashTUI(App):
    """Terminal dashboard for link-to-Clash conversion."""

    CSS = APP_CSS
    TITLE = "link2clash"

    BINDINGS = [
        ("ctrl+r", "convert", "Convert"),
        ("ctrl+l", "clear", "Clear"),
        ("f2", "copy_proxies", "Copy proxies"),
        ("f3", "copy_groups", "Copy groups"),
        ("f4", "copy_document", "Copy config"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        clipboard_strategies: Optional[Sequence[ClipboardStrategy]] = None,
    ):
        super().__init__()
        self.config = config or AppConfig()
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient()

        self.orchestrator = ConversionOrchestrator(
            client=ConversionClient(
                self._http,
                self.config.endpoint,
                timeout=self.config.request_timeout,
            ),
            composer=DocumentComposer(self.config.group_name),
            callbacks=ConversionCallbacks(on_event=self._emit_event),
            discard_stale_responses=self.config.discard_stale_responses,
        )
        if clipboard_strategies is None:
            clipboard_strategies = [SystemClipboard(), TerminalClipboard(self)]
        self.orchestrator.clipboard = ClipboardService(
            clipboard_strategies,
            notify=self.orchestrator.notify,
        )

    def compose(self) -> ComposeResult:
        yield Header()
        yield DashboardShell(id="root")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#status", StatusBar).dismiss_after = self.config.status_seconds
        self.query_one("#document", TextArea).load_text(self.orchestrator.state.document.text)
        self.query_one("#input", TextArea).focus()
        logger.info("link2clash ready; endpoint %s", self.config.endpoint)

    async def on_unmount(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    def _emit_event(self, event: AppEvent) -> None:
        if event.event_type == EventType.LOADING:
            button = self.query_one("#convert", Button)
            button.disabled = event.loading
            button.label = CONVERTING_LABEL if event.loading else CONVERT_LABEL
        elif event.event_type == EventType.PANELS:
            self.query_one("#proxies", TextArea).load_text(event.proxy_lines)
            self.query_one("#groups", TextArea).load_text(event.group_lines)
        elif event.event_type == EventType.ERRORS:
            self.query_one("#errors", ErrorReporter).show_errors(list(event.errors))
        elif event.event_type == EventType.DOCUMENT:
            self.query_one("#document", TextArea).load_text(event.text)
        elif event.event_type == EventType.STATUS:
            logger.debug("status: %s", event.message)
            self.query_one("#status", StatusBar).notify_status(event.message)

    def _submit_intent(self, intent: Intent) -> None:
        # Intents run as workers on the app loop; events land back here synchronously.
        self.run_worker(self.orchestrator.dispatch(intent), group="intents")

    def action_convert(self) -> None:
        if self.orchestrator.state.loading:
            return
        raw_input = self.query_one("#input", TextArea).text
        self._submit_intent(SubmitIntent(raw_input))

    def action_clear(self) -> None:
        self.query_one("#input", TextArea).load_text("")
        self.orchestrator.clear_all()

    def action_copy_proxies(self) -> None:
        self._submit_intent(CopyIntent(CopyTarget.PROXIES))

    def action_copy_groups(self) -> None:
        self._submit_intent(CopyIntent(CopyTarget.GROUPS))

    def action_copy_document(self) -> None:
        self._submit_intent(CopyIntent(CopyTarget.DOCUMENT))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "convert":
            self.action_convert()
        elif event.button.id == "clear":
            self.action_clear()
        elif event.button.id == "copy-proxies":
            self.action_copy_proxies()
        elif event.button.id == "copy-groups":
            self.action_copy_groups()
        elif event.button.id == "copy-document":
            self.action_copy_document()
