"""
Error Handling Module
=====================
Custom exceptions for the link2clash client.
Provides consistent error codes and messages for every failure the client
recovers from (transport, engine, clipboard, configuration).
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class ErrorCode(Enum):
    """Error codes for the link2clash client."""
    # Conversion errors (E001-E099)
    E001 = "Conversion request failed"
    E002 = "Conversion engine rejected the request"

    # Clipboard errors (E100-E199)
    E100 = "Clipboard write failed"

    # Configuration errors (E200-E299)
    E200 = "Invalid configuration value"


@dataclass(eq=False)
class Link2ClashError(Exception):
    """Base exception for the client with error codes."""
    code: ErrorCode
    message: str
    details: Optional[str] = None

    def __str__(self) -> str:
        base = f"[{self.code.name}] {self.code.value}: {self.message}"
        if self.details:
            base += f" ({self.details})"
        return base


class TransportError(Link2ClashError):
    """The request never produced a usable response."""
    def __init__(self, message: str, details: str = None):
        super().__init__(code=ErrorCode.E001, message=message, details=details)


class EngineError(Link2ClashError):
    """The engine answered with a failure status."""
    def __init__(self, message: str, status_code: int = None):
        super().__init__(
            code=ErrorCode.E002,
            message=message,
            details=f"HTTP {status_code}" if status_code else None
        )
        self.status_code = status_code


class ClipboardError(Link2ClashError):
    """A clipboard strategy could not write the text."""
    def __init__(self, message: str, strategy: str = None):
        super().__init__(code=ErrorCode.E100, message=message, details=strategy)


class ConfigError(Link2ClashError):
    """A configuration value could not be parsed."""
    def __init__(self, key: str, value: str):
        super().__init__(
            code=ErrorCode.E200,
            message=f"{key}={value!r}",
        )
        self.key = key
