# tests/test_gemini_client.py

from __future__ import annotations

import json

import httpx
import pytest

from brain.gemini_client import (
    GeminiClient,
    GeminiError,
    GeminiResponseError,
    build_request_body,
    extract_candidate_text,
)


def _envelope(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def _client(handler, api_key: str | None = "test-key") -> GeminiClient:
    return GeminiClient(
        api_key=api_key,
        model="gemini-pro",
        base_url="https://gemini.test/v1beta",
        transport=httpx.MockTransport(handler),
    )


def test_request_body_carries_prompt_and_sampling() -> None:
    body = build_request_body("hello")

    assert body["contents"] == [{"parts": [{"text": "hello"}]}]
    assert body["generationConfig"] == {"temperature": 0.2, "topP": 0.8, "topK": 40}


def test_extract_candidate_text_rejects_bad_envelopes() -> None:
    assert extract_candidate_text(_envelope("ok")) == "ok"
    for bad in ({}, {"candidates": []}, {"candidates": [{}]}, [], {"candidates": [{"content": {"parts": [1]}}]}):
        with pytest.raises(GeminiResponseError):
            extract_candidate_text(bad)


@pytest.mark.asyncio
async def test_generate_text_posts_to_generate_content() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_envelope('[{"title": "t"}]'))

    text = await _client(handler).generate_text("prompt text")

    assert text == '[{"title": "t"}]'
    assert len(seen) == 1
    req = seen[0]
    assert req.method == "POST"
    assert str(req.url) == "https://gemini.test/v1beta/models/gemini-pro:generateContent"
    assert req.headers["x-goog-api-key"] == "test-key"
    assert json.loads(req.content)["contents"][0]["parts"][0]["text"] == "prompt text"


@pytest.mark.asyncio
async def test_non_2xx_status_raises() -> None:
    client = _client(lambda request: httpx.Response(429, json={"error": {"message": "quota"}}))

    with pytest.raises(GeminiError, match="429"):
        await client.generate_text("p")


@pytest.mark.asyncio
async def test_transport_error_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GeminiError):
        await _client(handler).generate_text("p")


@pytest.mark.asyncio
async def test_non_json_body_raises_response_error() -> None:
    client = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(GeminiResponseError):
        await client.generate_text("p")


@pytest.mark.asyncio
async def test_missing_api_key_skips_request(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=_envelope("[]"))

    with pytest.raises(GeminiError, match="GEMINI_API_KEY"):
        await _client(handler, api_key=None).generate_text("p")
    assert calls == []


@pytest.mark.asyncio
async def test_api_key_is_read_from_environment_at_call_time(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers["x-goog-api-key"])
        return httpx.Response(200, json=_envelope("ok"))

    client = _client(handler, api_key=None)
    monkeypatch.setenv("GEMINI_API_KEY", "rotated-key")

    assert await client.generate_text("p") == "ok"
    assert seen == ["rotated-key"]
