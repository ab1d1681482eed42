"""
Status and error widgets for the dashboard.
"""

from __future__ import annotations

from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.timer import Timer
from textual.widgets import Static

from link2clash.models import ConversionError, error_rows

DEFAULT_STATUS_SECONDS = 2.2


class StatusBar(Static):
    """Transient status line that hides itself after ``dismiss_after`` seconds."""

    DEFAULT_CSS = """
    StatusBar {
        display: none;
    }
    StatusBar.-visible {
        display: block;
    }
    """

    def __init__(self, dismiss_after: float = DEFAULT_STATUS_SECONDS, **kwargs) -> None:
        super().__init__("", **kwargs)
        self.dismiss_after = dismiss_after
        self.current_message = ""
        self._hide_timer: Optional[Timer] = None

    @property
    def is_shown(self) -> bool:
        return self.has_class("-visible")

    def notify_status(self, message: str) -> None:
        # A pending hide is dropped so the latest message gets the full interval.
        if self._hide_timer is not None:
            self._hide_timer.stop()
        self.current_message = message
        self.update(Text(message))
        self.add_class("-visible")
        self._hide_timer = self.set_timer(self.dismiss_after, self._hide)

    def _hide(self) -> None:
        self._hide_timer = None
        self.remove_class("-visible")


class ErrorReporter(Vertical):
    """Per-line conversion errors; hidden when there are none."""

    DEFAULT_CSS = """
    ErrorReporter {
        display: none;
        height: auto;
    }
    ErrorReporter.-visible {
        display: block;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.rows: list[str] = []

    def compose(self) -> ComposeResult:
        yield Static("Errors", classes="label")
        yield Static("", id="error-rows")

    @property
    def is_shown(self) -> bool:
        return self.has_class("-visible")

    def show_errors(self, errors: Optional[list[ConversionError]]) -> None:
        """Replace the rows; an empty or missing list hides the surface."""
        self.rows = error_rows(errors)
        self.query_one("#error-rows", Static).update(Text("\n".join(self.rows)))
        self.set_class(bool(self.rows), "-visible")
