"""Adapter for the remote conversion endpoint."""

from __future__ import annotations

import logging

import httpx

from link2clash.errors import EngineError, TransportError
from link2clash.models import ConversionRequest, ConversionResponse

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Request failed."


class ConversionClient:
    """Wrapper around ``POST /api/convert``."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        endpoint: str,
        timeout: float | None = None,
    ) -> None:
        self._client = client
        self._endpoint = endpoint
        self._timeout = timeout

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def convert(self, request: ConversionRequest) -> ConversionResponse:
        """Send raw input to the engine and decode its answer."""

        try:
            response = await self._client.post(
                self._endpoint,
                json=request.to_payload(),
                timeout=self._timeout,
            )
        except httpx.HTTPError as exc:
            logger.warning("Conversion request failed", exc_info=exc)
            raise TransportError("Conversion request failed", details=str(exc)) from exc

        if response.is_error:
            message = self._failure_message(response)
            logger.error(
                "Conversion engine returned an error",
                extra={"status_code": response.status_code, "engine_message": message},
            )
            raise EngineError(message, status_code=response.status_code)

        try:
            return ConversionResponse.from_payload(response.json())
        except (ValueError, TypeError) as exc:
            logger.error("Malformed conversion response", extra={"raw_response": response.text})
            raise TransportError("Invalid conversion response payload") from exc

    @staticmethod
    def _failure_message(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return GENERIC_FAILURE_MESSAGE
        if isinstance(data, dict) and isinstance(data.get("error"), str) and data["error"]:
            return data["error"]
        return GENERIC_FAILURE_MESSAGE
