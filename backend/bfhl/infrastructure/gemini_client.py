"""Gemini Client: single generateContent call over HTTPS, no retries.

Invariants:
    - Non-2xx response: upstream body logged at ERROR, GeminiAPIError raised
    - Transport failures (connect, DNS, timeout) mapped to GeminiAPIError
    - Body that is not JSON or does not match GenerateContentResponse -> GeminiAPIError
    - API key sent in the x-goog-api-key header, never in the URL
    - One short-lived httpx.AsyncClient per call; nothing shared between requests

Design Decisions:
    - transport is injectable so tests can use httpx.MockTransport
    - Returns raw completion text; word extraction lives in core/extract_answer.py
"""

import logging

import httpx
from pydantic import ValidationError

from bfhl.config import Settings
from bfhl.core.errors import GeminiAPIError
from bfhl.schemas.gemini import GenerateContentResponse, build_generate_request

logger = logging.getLogger(__name__)


class GeminiClient:
    """Calls models/{model}:generateContent and returns the first text part."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiClient":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout_seconds=settings.gemini_timeout_seconds,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate_text(self, prompt: str) -> str:
        """Send prompt, return completion text ("" when the response has none)."""
        response = await self._post(build_generate_request(prompt))
        if not response.is_success:
            self._log_upstream_error(response)
            raise GeminiAPIError(status_code=response.status_code)
        return self._parse(response).first_text()

    async def _post(self, payload: dict) -> httpx.Response:
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport,
            ) as client:
                return await client.post(self.endpoint, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Gemini request failed: {type(e).__name__}: {e}")
            raise GeminiAPIError(f"Gemini API failed: {type(e).__name__}") from e

    def _parse(self, response: httpx.Response) -> GenerateContentResponse:
        try:
            return GenerateContentResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(
                f"Gemini returned malformed payload: {e.error_count()} error(s)",
                extra={"upstream_status": response.status_code},
            )
            raise GeminiAPIError("Gemini API failed: malformed response") from e

    def _log_upstream_error(self, response: httpx.Response) -> None:
        try:
            body = response.json()
        except ValueError:
            body = response.text
        logger.error(
            f"Gemini API Error: {body}",
            extra={"upstream_status": response.status_code},
        )
