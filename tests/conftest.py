import asyncio
import sys
from pathlib import Path
from typing import Optional

import pytest

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from link2clash.clipboard.base import ClipboardStrategy
from link2clash.errors import ClipboardError
from link2clash.models import ConversionResponse


class FakeClient:
    """Stands in for ConversionClient; returns or raises a canned outcome."""

    def __init__(self, outcome=None, gate: Optional[asyncio.Event] = None):
        self.outcome = outcome if outcome is not None else ConversionResponse()
        self.gate = gate
        self.requests = []

    async def convert(self, request):
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


class FakeStrategy(ClipboardStrategy):
    """Clipboard strategy that records writes or fails on demand."""

    def __init__(self, name: str = "fake", fail: bool = False):
        self._name = name
        self.fail = fail
        self.writes: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    async def write(self, text: str) -> None:
        if self.fail:
            raise ClipboardError("unavailable", strategy=self._name)
        self.writes.append(text)


@pytest.fixture
def sample_response():
    """Engine answer for ``vmess://x\\nbad-line``."""
    return ConversionResponse.from_payload(
        {
            "proxy_lines": "- name: x",
            "group_lines": "- x",
            "errors": [{"index": 2, "message": "unrecognized scheme", "value": "bad-line"}],
        }
    )
