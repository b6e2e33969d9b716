"""
Request Orchestrator

Builds task-specific requests for the remote model, normalizes the responses
and records completed operations in the activity log.

Every action follows the same shape:
  build prompt -> one generateContent call -> trimmed text (or audio)
  -> log record (translations only)

Low-level RemoteCallErrors are re-raised with one user-facing message per
action, chained to the original cause.
"""

import binascii
import logging
from typing import Protocol

from linguist.audio.pcm import AudioBuffer, decode_base64_audio
from linguist.config import DOCUMENT_PREVIEW_CHARS, TTS_CHANNELS, TTS_SAMPLE_RATE
from linguist.config import get_model
from linguist.core.languages import AUTO_CODE, SourceLanguage, language_name
from linguist.core.models import AnalyticsView, RecordKind, truncate_preview
from linguist.errors import EmptyResponseError, RemoteCallError
from linguist.gemini import prompts
from linguist.history.log import ActivityLog
from linguist.ingestion.files import PreparedUpload
from linguist.utils.logging import preview

logger = logging.getLogger(__name__)

INSIGHTS_FALLBACK = "Could not generate insights at this time."
INSIGHTS_EMPTY = "No insights available."


class ModelClient(Protocol):
    """The remote capability the orchestrator depends on."""

    async def generate_text(self, prompt: str, model: str | None = None) -> str: ...

    async def generate_with_data(
        self, data_b64: str, mime_type: str, instruction: str, model: str | None = None
    ) -> str: ...

    async def generate_speech(
        self, text: str, voice: str | None = None, model: str | None = None
    ) -> str: ...


class TranslationService:
    """
    Task-typed requests against the remote model.

    Usage:
        service = TranslationService(GeminiClient(), ActivityLog(store))
        text = await service.translate_text("namaste", "ne", "en")
    """

    def __init__(self, client: ModelClient, log: ActivityLog):
        self.client = client
        self.log = log

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    async def translate_text(
        self, text: str, source: SourceLanguage | str, target: str
    ) -> str:
        """
        Translate short text and log it in full.

        Args:
            text: Text to translate
            source: Source language (code, "auto", or SourceLanguage)
            target: Target language code
        """
        src = SourceLanguage.parse(source)
        prompt = prompts.translate_text_prompt(text, src.name, language_name(target))
        logger.info(f"Translating text {src} -> {language_name(target)}: {preview(text)}")

        try:
            translated = await self.client.generate_text(prompt, model=get_model("translate"))
        except RemoteCallError as e:
            logger.error(f"Translation error: {e}")
            raise RemoteCallError("Failed to translate text. Please try again.") from e

        self.log.append(
            source_text=text,
            translated_text=translated,
            source_lang=src.storage_code,
            target_lang=target,
            kind=RecordKind.TEXT,
        )
        return translated

    async def translate_document(
        self, content: str, source: SourceLanguage | str, target: str
    ) -> str:
        """Translate document text keeping its paragraphs; logs a truncated preview."""
        src = SourceLanguage.parse(source)
        prompt = prompts.translate_document_prompt(content, src.name, language_name(target))
        logger.info(
            f"Translating document ({len(content)} chars) {src} -> {language_name(target)}"
        )

        try:
            translated = await self.client.generate_text(prompt, model=get_model("translate"))
        except RemoteCallError as e:
            logger.error(f"Document translation error: {e}")
            raise RemoteCallError("Failed to translate document.") from e

        self._log_document(content, translated, src.storage_code, target)
        return translated

    async def translate_binary(self, payload_b64: str, mime_type: str, target: str) -> str:
        """
        Translate an inline image or document. The model detects the source language.

        No mime-type allow-list is applied; unsupported types fail remotely.
        """
        instruction = prompts.translate_binary_instruction(language_name(target))
        logger.info(f"Translating {mime_type} payload ({len(payload_b64)} b64 chars)")

        try:
            translated = await self.client.generate_with_data(
                payload_b64, mime_type, instruction, model=get_model("translate")
            )
        except RemoteCallError as e:
            logger.error(f"Binary translation error: {e}")
            raise RemoteCallError("Failed to translate document.") from e

        self._log_document(f"[{mime_type}]", translated, AUTO_CODE, target)
        return translated

    async def translate_upload(
        self, upload: PreparedUpload, source: SourceLanguage | str, target: str
    ) -> str:
        """Route a prepared upload to document or binary translation."""
        if upload.is_text:
            return await self.translate_document(upload.text, source, target)
        return await self.translate_binary(upload.payload, upload.mime_type, target)

    async def translate_speech(
        self,
        audio_b64: str,
        mime_type: str,
        source: SourceLanguage | str,
        target: str,
    ) -> tuple[str, str]:
        """
        Transcribe recorded speech, then translate the transcript.

        Returns:
            (transcript, translation); one voice record is logged.
        """
        transcript = await self.transcribe(audio_b64, mime_type)
        if not transcript:
            raise RemoteCallError("No speech detected in the recording.")

        src = SourceLanguage.parse(source)
        prompt = prompts.translate_text_prompt(transcript, src.name, language_name(target))
        try:
            translated = await self.client.generate_text(prompt, model=get_model("translate"))
        except RemoteCallError as e:
            logger.error(f"Speech translation error: {e}")
            raise RemoteCallError("Failed to translate text. Please try again.") from e

        self.log.append(
            source_text=transcript,
            translated_text=translated,
            source_lang=src.storage_code,
            target_lang=target,
            kind=RecordKind.VOICE,
        )
        return transcript, translated

    def _log_document(self, source: str, translated: str, source_lang: str, target: str):
        self.log.append(
            source_text=truncate_preview(source, DOCUMENT_PREVIEW_CHARS),
            translated_text=truncate_preview(translated, DOCUMENT_PREVIEW_CHARS),
            source_lang=source_lang,
            target_lang=target,
            kind=RecordKind.DOCUMENT,
        )

    # ------------------------------------------------------------------
    # Post-processing
    # ------------------------------------------------------------------

    async def refine(self, text: str, mode: prompts.RefineMode) -> str:
        """
        Rewrite already-translated text. Not logged.

        Returns:
            Refined text, or the input unchanged if the model returns nothing.

        Raises:
            ValueError: Unknown mode.
            RemoteCallError: Transport or API failure.
        """
        prompt = prompts.refine_prompt(text, mode)
        try:
            return await self.client.generate_text(prompt, model=get_model("refine"))
        except EmptyResponseError:
            logger.warning(f"Refine ({mode}) returned nothing, keeping original text")
            return text
        except RemoteCallError as e:
            logger.error(f"Refine error: {e}")
            raise RemoteCallError("Failed to refine text.") from e

    # ------------------------------------------------------------------
    # Audio
    # ------------------------------------------------------------------

    async def transcribe(self, audio_b64: str, mime_type: str = "audio/wav") -> str:
        """Verbatim transcription. Not logged; callers feed the text onward."""
        logger.info(f"Transcribing {mime_type} audio ({len(audio_b64)} b64 chars)")
        try:
            return await self.client.generate_with_data(
                audio_b64,
                mime_type,
                prompts.TRANSCRIBE_INSTRUCTION,
                model=get_model("transcribe"),
            )
        except RemoteCallError as e:
            logger.error(f"Transcription error: {e}")
            raise RemoteCallError("Failed to transcribe audio.") from e

    async def synthesize_speech(self, text: str, voice: str | None = None) -> AudioBuffer:
        """Generate speech for text as a decoded 24kHz mono buffer."""
        logger.info(f"Synthesizing speech: {preview(text)}")
        try:
            audio_b64 = await self.client.generate_speech(
                text, voice=voice, model=get_model("speech")
            )
        except RemoteCallError as e:
            logger.error(f"TTS error: {e}")
            raise RemoteCallError("Failed to generate speech.") from e

        try:
            return decode_base64_audio(audio_b64, TTS_SAMPLE_RATE, TTS_CHANNELS)
        except (binascii.Error, ValueError) as e:
            logger.error(f"TTS returned undecodable audio: {e}")
            raise RemoteCallError("Failed to generate speech.") from e

    # ------------------------------------------------------------------
    # Analytics
    # ------------------------------------------------------------------

    async def generate_insights(self, analytics: AnalyticsView | None = None) -> str:
        """Best-effort commentary on usage; never raises for remote failures."""
        view = analytics if analytics is not None else self.log.compute_analytics()
        prompt = prompts.insights_prompt(view.model_dump(mode="json"))
        try:
            return await self.client.generate_text(prompt, model=get_model("insights"))
        except EmptyResponseError:
            return INSIGHTS_EMPTY
        except RemoteCallError as e:
            logger.error(f"Insights error: {e}")
            return INSIGHTS_FALLBACK
