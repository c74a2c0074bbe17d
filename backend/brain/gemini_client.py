"""Gemini generateContent client — one POST per call, no retries."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from server import config

logger = logging.getLogger(__name__)


class GeminiError(RuntimeError):
    """Transport failure, non-2xx status or missing configuration."""


class GeminiResponseError(GeminiError):
    """The response envelope has no candidate text."""


def build_request_body(prompt: str) -> dict:
    return {
        "contents": [
            {"parts": [{"text": prompt}]},
        ],
        "generationConfig": {
            "temperature": config.GEMINI_TEMPERATURE,
            "topP": config.GEMINI_TOP_P,
            "topK": config.GEMINI_TOP_K,
        },
    }


def extract_candidate_text(data: Any) -> str:
    """Return candidates[0].content.parts[0].text or raise GeminiResponseError."""
    try:
        text = data["candidates"][0]["content"]["parts"][0].get("text", "")
    except (KeyError, IndexError, TypeError, AttributeError) as exc:
        raise GeminiResponseError(f"Unexpected Gemini response shape: {exc!r}") from exc
    if not isinstance(text, str):
        raise GeminiResponseError("Gemini candidate text is not a string")
    return text


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model or config.GEMINI_MODEL
        self.base_url = (base_url or config.GEMINI_BASE_URL).rstrip("/")
        self.timeout_s = timeout_s if timeout_s is not None else config.GEMINI_TIMEOUT_SECONDS
        self.transport = transport

    @property
    def url(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate_text(self, prompt: str) -> str:
        api_key = self.api_key if self.api_key is not None else config.get_gemini_api_key()
        if not api_key:
            raise GeminiError("GEMINI_API_KEY is not set")

        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": api_key,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s, transport=self.transport) as client:
                resp = await client.post(self.url, headers=headers, json=build_request_body(prompt))
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as exc:
            raise GeminiError(f"Gemini returned HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise GeminiError(f"Gemini request failed: {type(exc).__name__}: {exc}") from exc
        except ValueError as exc:
            raise GeminiResponseError("Gemini response is not JSON") from exc

        if config.DEBUG:
            logger.debug(f"Gemini API response: {data}")
        return extract_candidate_text(data)
