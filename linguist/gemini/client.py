"""Async HTTP client for the Gemini generateContent API."""

import logging
from typing import Any

import httpx

from linguist.config import GEMINI_API_KEY, GEMINI_BASE_URL, GEMINI_TIMEOUT, TTS_VOICE
from linguist.config import get_model
from linguist.errors import EmptyResponseError, RemoteCallError

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Async client for single-shot generateContent calls.

    Handles:
    - Connection pooling with a lazily created httpx.AsyncClient
    - Text, inline-binary and audio-output requests
    - Normalizing every failure (transport, status, empty output) to RemoteCallError
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        self.api_key = api_key if api_key is not None else GEMINI_API_KEY
        self.base_url = (base_url or GEMINI_BASE_URL).rstrip("/")
        self.timeout = timeout or GEMINI_TIMEOUT
        self._http: httpx.AsyncClient | None = None

    async def _get_http(self) -> httpx.AsyncClient:
        """Lazy-init HTTP client with connection pooling."""
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=self.timeout)
        return self._http

    def _url(self, model: str) -> str:
        return f"{self.base_url}/models/{model}:generateContent"

    async def generate(
        self,
        model: str,
        parts: list[dict[str, Any]],
        generation_config: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        POST one generateContent request and return the decoded JSON body.

        Raises:
            RemoteCallError: On missing key, transport error, timeout or non-200 status.
        """
        if not self.api_key:
            raise RemoteCallError("Gemini API key is not configured (set GEMINI_API_KEY)")

        body: dict[str, Any] = {"contents": [{"parts": parts}]}
        if generation_config:
            body["generationConfig"] = generation_config

        try:
            http = await self._get_http()
            response = await http.post(
                self._url(model),
                json=body,
                headers={"x-goog-api-key": self.api_key},
            )
        except httpx.TimeoutException as e:
            logger.error(f"Gemini request timed out ({model})")
            raise RemoteCallError(f"Request to {model} timed out") from e
        except httpx.HTTPError as e:
            logger.error(f"Gemini request failed ({model}): {e}")
            raise RemoteCallError(f"Request to {model} failed: {e}") from e

        if response.status_code != 200:
            logger.warning(f"Gemini returned {response.status_code}: {response.text[:200]}")
            raise RemoteCallError(f"{model} returned status {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteCallError(f"{model} returned invalid JSON") from e
        if not isinstance(data, dict):
            raise RemoteCallError(f"{model} returned an unexpected response body")
        return data

    async def generate_text(self, prompt: str, model: str | None = None) -> str:
        """Generate text from a plain prompt. Empty output raises RemoteCallError."""
        use_model = model or get_model("translate")
        data = await self.generate(use_model, [{"text": prompt}])
        return _require_text(data, use_model)

    async def generate_with_data(
        self,
        data_b64: str,
        mime_type: str,
        instruction: str,
        model: str | None = None,
    ) -> str:
        """Generate text from an inline base64 payload plus an instruction."""
        use_model = model or get_model("translate")
        parts = [
            {"inlineData": {"mimeType": mime_type, "data": data_b64}},
            {"text": instruction},
        ]
        data = await self.generate(use_model, parts)
        return _require_text(data, use_model)

    async def generate_speech(
        self,
        text: str,
        voice: str | None = None,
        model: str | None = None,
    ) -> str:
        """
        Request audio output for text.

        Returns:
            Base64-encoded raw 16-bit PCM (24kHz mono).
        """
        use_model = model or get_model("speech")
        config = {
            "responseModalities": ["AUDIO"],
            "speechConfig": {
                "voiceConfig": {"prebuiltVoiceConfig": {"voiceName": voice or TTS_VOICE}},
            },
        }
        data = await self.generate(use_model, [{"text": text}], generation_config=config)
        audio = extract_inline_data(data)
        if not audio:
            raise EmptyResponseError("No audio data returned")
        return audio

    async def close(self):
        """Close HTTP client."""
        if self._http:
            await self._http.aclose()
            self._http = None


def _parts(data: dict[str, Any]) -> list[dict[str, Any]]:
    candidates = data.get("candidates") or []
    if not candidates:
        return []
    content = candidates[0].get("content") or {}
    return content.get("parts") or []


def extract_text(data: dict[str, Any]) -> str:
    """Concatenate and trim the text parts of the first candidate."""
    return "".join(part.get("text", "") for part in _parts(data)).strip()


def extract_inline_data(data: dict[str, Any]) -> str | None:
    """First inline base64 payload of the first candidate, if any."""
    for part in _parts(data):
        inline = part.get("inlineData") or part.get("inline_data")
        if inline and inline.get("data"):
            return inline["data"]
    return None


def _require_text(data: dict[str, Any], model: str) -> str:
    text = extract_text(data)
    if not text:
        logger.warning(f"{model} returned an empty response")
        raise EmptyResponseError(f"{model} returned an empty response")
    return text
