"""
UI State
========
Single owned state record for the conversion orchestrator.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from link2clash.app.events import DocumentState
from link2clash.models import ConversionError


@dataclass
class ComposedDocument:
    """Composed document text plus its lifecycle state."""

    state: DocumentState
    text: str


@dataclass
class UIState:
    """
    Everything the orchestrator tracks between user actions.

    Attributes:
        loading: A conversion request is in flight
        proxy_lines: Entries panel text
        group_lines: Group-reference panel text
        last_errors: Errors from the latest completed request or clear
        document: Composed document
        generation: Bumped on every submit and clear; tags requests
    """

    document: ComposedDocument
    loading: bool = False
    proxy_lines: str = ""
    group_lines: str = ""
    last_errors: tuple[ConversionError, ...] = field(default_factory=tuple)
    generation: int = 0
