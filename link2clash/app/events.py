"""
Application Event Contracts
===========================
Typed intents (user actions) and display events (orchestrator output) shared
by the TUI and CLI surfaces.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Union

from link2clash.models import ConversionError


class EventType(str, Enum):
    """High-level event categories."""

    LOADING = "loading"
    PANELS = "panels"
    ERRORS = "errors"
    DOCUMENT = "document"
    STATUS = "status"


class DocumentState(str, Enum):
    """Composed document lifecycle states."""

    PLACEHOLDER = "placeholder"
    POPULATED = "populated"


class CopyTarget(str, Enum):
    """Copyable surfaces; the value doubles as the user-facing label."""

    PROXIES = "proxies"
    GROUPS = "groups"
    DOCUMENT = "document"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


# ==================== Intents ====================


@dataclass(frozen=True)
class SubmitIntent:
    """User asked to convert the input text."""

    raw_input: str


@dataclass(frozen=True)
class ClearIntent:
    """User asked to reset every surface."""


@dataclass(frozen=True)
class CopyIntent:
    """User asked to copy one surface to the clipboard."""

    target: CopyTarget


Intent = Union[SubmitIntent, ClearIntent, CopyIntent]


# ==================== Display events ====================


@dataclass(frozen=True)
class LoadingEvent:
    """Submission gate opened or closed."""

    event_type: EventType
    timestamp: str
    loading: bool


@dataclass(frozen=True)
class PanelsEvent:
    """New raw output for the proxies and groups panels."""

    event_type: EventType
    timestamp: str
    proxy_lines: str
    group_lines: str


@dataclass(frozen=True)
class ErrorsEvent:
    """Replacement list for the error surface."""

    event_type: EventType
    timestamp: str
    errors: tuple[ConversionError, ...]


@dataclass(frozen=True)
class DocumentEvent:
    """Composed document replaced wholesale."""

    event_type: EventType
    timestamp: str
    state: DocumentState
    text: str


@dataclass(frozen=True)
class StatusEvent:
    """Transient status message for the user."""

    event_type: EventType
    timestamp: str
    message: str


AppEvent = Union[LoadingEvent, PanelsEvent, ErrorsEvent, DocumentEvent, StatusEvent]


def make_loading_event(loading: bool) -> LoadingEvent:
    return LoadingEvent(event_type=EventType.LOADING, timestamp=_now_iso(), loading=loading)


def make_panels_event(proxy_lines: str, group_lines: str) -> PanelsEvent:
    return PanelsEvent(
        event_type=EventType.PANELS,
        timestamp=_now_iso(),
        proxy_lines=proxy_lines,
        group_lines=group_lines,
    )


def make_errors_event(errors=None) -> ErrorsEvent:
    """Create an errors event; ``None`` becomes an empty list."""
    return ErrorsEvent(
        event_type=EventType.ERRORS,
        timestamp=_now_iso(),
        errors=tuple(errors or ()),
    )


def make_document_event(state: DocumentState, text: str) -> DocumentEvent:
    return DocumentEvent(
        event_type=EventType.DOCUMENT,
        timestamp=_now_iso(),
        state=state,
        text=text,
    )


def make_status_event(message: str) -> StatusEvent:
    return StatusEvent(event_type=EventType.STATUS, timestamp=_now_iso(), message=message)
