"""
Clipboard Copy Service
======================
Copies text with the first clipboard strategy that succeeds and reports the
outcome through a status callback. Failures never escape this service.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from link2clash.clipboard.base import ClipboardStrategy
from link2clash.errors import ClipboardError

logger = logging.getLogger(__name__)

NOTHING_TO_COPY = "Nothing to copy."
COPY_FAILED = "Copy failed."


def copied_message(label: str) -> str:
    return f"Copied {label}."


class ClipboardService:
    """
    Ordered-attempt clipboard copy.
    
    Example:
        service = ClipboardService(
            [SystemClipboard(), TerminalClipboard(app)],
            notify=status_bar.notify_status,
        )
        await service.copy(text, "proxies")
    """
    
    def __init__(
        self,
        strategies: Sequence[ClipboardStrategy],
        notify: Callable[[str], None],
    ):
        """
        Args:
            strategies: Primary strategy first, fallbacks after
            notify: Receives every user-facing status message
        """
        self.strategies = list(strategies)
        self._notify = notify
    
    async def copy(self, text: str, label: str) -> bool:
        """
        Copy ``text`` to the clipboard.
        
        Returns:
            True if some strategy succeeded
        """
        if not text.strip():
            self._notify(NOTHING_TO_COPY)
            return False
        
        for strategy in self.strategies:
            try:
                await strategy.write(text)
            except ClipboardError as exc:
                logger.info("Clipboard strategy %s failed: %s", strategy.name, exc)
                continue
            except Exception:
                logger.exception("Clipboard strategy %s raised unexpectedly", strategy.name)
                continue
            logger.debug("Copied %s via %s", label, strategy.name)
            self._notify(copied_message(label))
            return True
        
        logger.warning("No clipboard strategy could copy %s", label)
        self._notify(COPY_FAILED)
        return False
