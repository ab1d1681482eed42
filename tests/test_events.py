"""
Test App Events Module
======================
Unit tests for typed intents and display events.
"""

import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from link2clash.app.events import (
    CopyIntent,
    CopyTarget,
    DocumentState,
    EventType,
    SubmitIntent,
    make_document_event,
    make_errors_event,
    make_loading_event,
    make_panels_event,
    make_status_event,
)
from link2clash.models import ConversionError


def test_events() -> None:
    print("\n" + "=" * 50)
    print("APP EVENTS TEST SUITE")
    print("=" * 50 + "\n")

    loading = make_loading_event(True)
    assert loading.event_type == EventType.LOADING
    assert loading.loading is True
    assert loading.timestamp
    print("✓ loading event")

    panels = make_panels_event("- a", "- b")
    assert panels.event_type == EventType.PANELS
    assert (panels.proxy_lines, panels.group_lines) == ("- a", "- b")
    print("✓ panels event")

    errors = make_errors_event(None)
    assert errors.event_type == EventType.ERRORS
    assert errors.errors == ()
    errors = make_errors_event([ConversionError(1, "bad")])
    assert errors.errors == (ConversionError(1, "bad"),)
    print("✓ errors event normalization")

    document = make_document_event(DocumentState.POPULATED, "proxies:\n")
    assert document.event_type == EventType.DOCUMENT
    assert document.state == DocumentState.POPULATED
    print("✓ document event")

    status = make_status_event("Cleared.")
    assert status.event_type == EventType.STATUS
    assert status.message == "Cleared."
    print("✓ status event")

    assert SubmitIntent("x") == SubmitIntent("x")
    assert CopyIntent(CopyTarget.GROUPS).target.value == "groups"
    print("✓ intents")

    print("\n" + "=" * 50)
    print("ALL APP EVENT TESTS PASSED ✓")
    print("=" * 50 + "\n")


if __name__ == "__main__":
    test_events()
