"""
Application Module
==================
Core application controller and state.

Key Components:
    - ConversionOrchestrator: Owns UIState and reduces user intents
    - AppConfig: Application configuration
    - Events: Intents in, display events out
"""

from .config import AppConfig
from .controller import ConversionCallbacks, ConversionOrchestrator
from .events import (
    AppEvent,
    ClearIntent,
    CopyIntent,
    CopyTarget,
    DocumentState,
    EventType,
    Intent,
    SubmitIntent,
)
from .state import ComposedDocument, UIState

__all__ = [
    "AppConfig",
    "ConversionCallbacks",
    "ConversionOrchestrator",
    "AppEvent",
    "ClearIntent",
    "CopyIntent",
    "CopyTarget",
    "DocumentState",
    "EventType",
    "Intent",
    "SubmitIntent",
    "ComposedDocument",
    "UIState",
]
