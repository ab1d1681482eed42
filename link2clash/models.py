"""
Conversion Models
=================
Dataclasses for the conversion endpoint request/response contract.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class ConversionRequest:
    """Raw multi-line user text, forwarded as-is."""
    input: str

    def to_payload(self) -> dict:
        return {"input": self.input}


@dataclass(frozen=True)
class ConversionError:
    """Per-line error reported by the engine."""
    index: int
    message: str
    value: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: dict) -> "ConversionError":
        value = payload.get("value")
        return cls(
            index=int(payload.get("index", 0)),
            message=str(payload.get("message") or ""),
            value=str(value) if value is not None else None,
        )


@dataclass(frozen=True)
class ConversionResponse:
    """
    Successful engine response.

    Attributes:
        proxy_lines: Newline-joined entry lines, opaque to the client
        group_lines: Newline-joined group-reference lines, opaque to the client
        errors: Per-line errors, in engine order
    """
    proxy_lines: str = ""
    group_lines: str = ""
    errors: tuple[ConversionError, ...] = field(default_factory=tuple)

    @classmethod
    def from_payload(cls, payload: Any) -> "ConversionResponse":
        """
        Build a response from a decoded JSON body.

        Absent or null fields fall back to empty values.

        Raises:
            TypeError: If the body is not a JSON object, or an output field
                is present but not a string
        """
        if not isinstance(payload, dict):
            raise TypeError(f"expected JSON object, got {type(payload).__name__}")

        errors = payload.get("errors") or []
        if not isinstance(errors, list):
            raise TypeError(f"errors: expected list, got {type(errors).__name__}")
        return cls(
            proxy_lines=_text_field(payload, "proxy_lines"),
            group_lines=_text_field(payload, "group_lines"),
            errors=tuple(
                ConversionError.from_payload(item)
                for item in errors
                if isinstance(item, dict)
            ),
        )


def _text_field(payload: dict, key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key}: expected string, got {type(value).__name__}")
    return value


def format_error(error: ConversionError) -> str:
    """Render one error row as ``#<index> <message> (<value>)``."""
    value = f" ({error.value})" if error.value else ""
    return f"#{error.index} {error.message}{value}"


def error_rows(errors: Optional[list[ConversionError]]) -> list[str]:
    """Render rows for a whole error list; ``None`` yields no rows."""
    if not errors:
        return []
    return [format_error(error) for error in errors]
