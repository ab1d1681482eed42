"""
Conversion Orchestrator
=======================
Central controller for the link2clash client.

Owns the single UIState and is the only place it changes. User actions come
in as intents; results go out as display events, so the surfaces (TUI, CLI,
tests) only ever render the values they are handed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from link2clash.app.events import (
    AppEvent,
    ClearIntent,
    CopyIntent,
    CopyTarget,
    DocumentState,
    Intent,
    SubmitIntent,
    make_document_event,
    make_errors_event,
    make_loading_event,
    make_panels_event,
    make_status_event,
)
from link2clash.app.state import ComposedDocument, UIState
from link2clash.clipboard.service import ClipboardService
from link2clash.compose.document import DocumentComposer
from link2clash.engine.client import ConversionClient
from link2clash.errors import EngineError, TransportError
from link2clash.models import ConversionRequest, ConversionResponse

logger = logging.getLogger(__name__)

CONVERSION_DONE = "Conversion done."
NETWORK_ERROR = "Network error."
CLEARED = "Cleared."


@dataclass
class ConversionCallbacks:
    """Callbacks for display updates."""
    on_event: Optional[Callable[[AppEvent], None]] = None


class ConversionOrchestrator:
    """
    Request/response lifecycle for conversions.
    
    Responsibilities:
        - Gate submissions while a request is in flight
        - Fan results out to panels, error surface, document and status
        - Reset every surface on clear
        - Route copy actions to the clipboard service
    
    Example:
        orchestrator = ConversionOrchestrator(
            client=ConversionClient(http, config.endpoint),
            composer=DocumentComposer(),
            callbacks=ConversionCallbacks(on_event=render),
        )
        await orchestrator.dispatch(SubmitIntent("vmess://..."))
    """
    
    def __init__(
        self,
        client: ConversionClient,
        composer: DocumentComposer,
        callbacks: Optional[ConversionCallbacks] = None,
        clipboard: Optional[ClipboardService] = None,
        discard_stale_responses: bool = True,
    ):
        """
        Args:
            client: Conversion endpoint client
            composer: Document composer (also supplies the placeholder)
            callbacks: Receives display events
            clipboard: Copy service used for CopyIntent
            discard_stale_responses: Drop responses overtaken by a later
                submit or clear
        """
        self.client = client
        self.composer = composer
        self.callbacks = callbacks or ConversionCallbacks()
        self.clipboard = clipboard
        self.discard_stale_responses = discard_stale_responses
        self._state = UIState(
            document=ComposedDocument(DocumentState.PLACEHOLDER, composer.reset())
        )
    
    @property
    def state(self) -> UIState:
        return self._state
    
    def _emit(self, event: AppEvent) -> None:
        if self.callbacks.on_event:
            self.callbacks.on_event(event)
    
    def notify(self, message: str) -> None:
        """Emit a status message."""
        self._emit(make_status_event(message))
    
    def _set_loading(self, loading: bool) -> None:
        self._state.loading = loading
        self._emit(make_loading_event(loading))
    
    def _set_errors(self, errors) -> None:
        self._state.last_errors = tuple(errors or ())
        self._emit(make_errors_event(self._state.last_errors))
    
    def _set_document(self, state: DocumentState, text: str) -> None:
        self._state.document = ComposedDocument(state, text)
        self._emit(make_document_event(state, text))
    
    # ==================== Intents ====================
    
    async def dispatch(self, intent: Intent) -> None:
        """Reduce one user intent against the state."""
        if isinstance(intent, SubmitIntent):
            await self.convert(intent.raw_input)
        elif isinstance(intent, ClearIntent):
            self.clear_all()
        elif isinstance(intent, CopyIntent):
            await self.copy(intent.target)
        else:
            raise TypeError(f"Unknown intent: {intent!r}")
    
    async def convert(self, raw_input: str) -> None:
        """
        Run one conversion round trip.
        
        Ignored while another request is in flight. Errors are cleared before
        the request goes out so stale rows never sit next to a new request.
        """
        if self._state.loading:
            logger.info("Conversion already in progress; submit ignored")
            return
        
        self._state.generation += 1
        generation = self._state.generation
        self._set_loading(True)
        self._set_errors([])
        
        try:
            response = await self.client.convert(ConversionRequest(input=raw_input))
        except EngineError as exc:
            logger.info("Engine reported failure: %s", exc.message)
            self._finish_failed(exc.message)
            return
        except TransportError as exc:
            logger.info("Transport failure: %s", exc)
            self._finish_failed(NETWORK_ERROR)
            return
        except Exception:
            logger.exception("Unexpected conversion failure")
            self._finish_failed(NETWORK_ERROR)
            return
        
        if self._is_stale(generation):
            logger.info("Discarding stale conversion response (generation %d)", generation)
            self._set_loading(False)
            return
        
        try:
            self._apply_response(response)
        except Exception:
            logger.exception("Could not apply conversion response")
            self.notify(NETWORK_ERROR)
        finally:
            self._set_loading(False)

    def _apply_response(self, response: ConversionResponse) -> None:
        self._state.proxy_lines = response.proxy_lines
        self._state.group_lines = response.group_lines
        self._emit(make_panels_event(response.proxy_lines, response.group_lines))
        self._set_errors(response.errors)

        # A partial result keeps whatever document is already shown.
        if response.proxy_lines and response.group_lines:
            self._set_document(
                DocumentState.POPULATED,
                self.composer.compose(response.proxy_lines, response.group_lines),
            )

        logger.debug("Conversion finished with %d error(s)", len(response.errors))
        self.notify(CONVERSION_DONE)
    
    def _is_stale(self, generation: int) -> bool:
        return self.discard_stale_responses and generation != self._state.generation
    
    def _finish_failed(self, message: str) -> None:
        # Failures never touch panels, errors or document.
        self.notify(message)
        self._set_loading(False)
    
    def clear_all(self) -> None:
        """
        Reset panels, errors and document.
        
        Works mid-flight; the pending request is not cancelled.
        """
        self._state.generation += 1
        self._state.proxy_lines = ""
        self._state.group_lines = ""
        self._emit(make_panels_event("", ""))
        self._set_errors([])
        self._set_document(DocumentState.PLACEHOLDER, self.composer.reset())
        self.notify(CLEARED)
    
    def text_for(self, target: CopyTarget) -> str:
        """Current text of a copyable surface; the placeholder document counts as empty."""
        if target == CopyTarget.PROXIES:
            return self._state.proxy_lines
        if target == CopyTarget.GROUPS:
            return self._state.group_lines
        if self._state.document.state == DocumentState.PLACEHOLDER:
            return ""
        return self._state.document.text
    
    async def copy(self, target: CopyTarget) -> bool:
        """
        Copy one surface to the clipboard.
        
        Returns:
            True if the text reached the clipboard
        """
        if self.clipboard is None:
            raise RuntimeError("No clipboard service configured")
        return await self.clipboard.copy(self.text_for(target), target.value)
