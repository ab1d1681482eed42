"""
Clipboard Module
================
Ordered clipboard strategies behind a single copy service.
"""

from .base import ClipboardStrategy
from .service import ClipboardService
from .system import SystemClipboard
from .terminal import TerminalClipboard

__all__ = ["ClipboardStrategy", "ClipboardService", "SystemClipboard", "TerminalClipboard"]
