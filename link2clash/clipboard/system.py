"""
System clipboard strategy backed by pyperclip.
"""

from __future__ import annotations

import asyncio

import pyperclip

from link2clash.clipboard.base import ClipboardStrategy
from link2clash.errors import ClipboardError


class SystemClipboard(ClipboardStrategy):
    """Asynchronous write to the OS clipboard."""

    @property
    def name(self) -> str:
        return "system"

    async def write(self, text: str) -> None:
        try:
            # pyperclip blocks on xclip/pbcopy; keep the event loop free.
            await asyncio.to_thread(pyperclip.copy, text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(str(exc), strategy=self.name) from exc
