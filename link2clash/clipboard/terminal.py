"""
Terminal clipboard strategy.

Used when no OS clipboard is reachable (SSH sessions, headless boxes): a
hidden, transient TextArea is mounted with the text, its contents are
selected, and the selection is pushed to the terminal with OSC 52.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from textual.app import App
from textual.widgets import TextArea

from link2clash.clipboard.base import ClipboardStrategy
from link2clash.errors import ClipboardError

HOLDER_CLASS = "clipboard-holder"


class TerminalClipboard(ClipboardStrategy):
    """Synchronous OSC 52 copy through the host app."""

    def __init__(self, host: App):
        self._host = host

    @property
    def name(self) -> str:
        return "terminal"

    @asynccontextmanager
    async def transient_holder(self, text: str) -> AsyncIterator[TextArea]:
        """Mount a hidden holder for ``text``; it is removed on every exit path."""
        holder = TextArea(text, classes=HOLDER_CLASS)
        holder.display = False
        await self._host.screen.mount(holder)
        try:
            yield holder
        finally:
            await holder.remove()

    async def write(self, text: str) -> None:
        try:
            async with self.transient_holder(text) as holder:
                holder.select_all()
                self._host.copy_to_clipboard(holder.selected_text)
        except ClipboardError:
            raise
        except Exception as exc:
            raise ClipboardError(str(exc), strategy=self.name) from exc
