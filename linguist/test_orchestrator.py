"""
Unit tests for linguist.orchestrator module.

The remote client is an AsyncMock; the activity log is backed by an
in-memory store so every test starts empty.
"""

import base64
from unittest.mock import AsyncMock

import numpy as np
import pytest

from linguist.config import get_model
from linguist.core.languages import SourceLanguage
from linguist.core.models import AnalyticsView, RecordKind
from linguist.errors import EmptyResponseError, RemoteCallError
from linguist.history import ActivityLog, MemoryKeyValueStore
from linguist.ingestion import UploadedFile, prepare_upload

from .orchestrator import INSIGHTS_EMPTY, INSIGHTS_FALLBACK, TranslationService


@pytest.fixture
def client():
    client = AsyncMock()
    client.generate_text = AsyncMock(return_value="Hello")
    client.generate_with_data = AsyncMock(return_value="Translated content")
    client.generate_speech = AsyncMock()
    return client


@pytest.fixture
def log():
    return ActivityLog(MemoryKeyValueStore())


@pytest.fixture
def service(client, log):
    return TranslationService(client, log)


class TestTranslateText:
    """Tests for translate_text."""

    @pytest.mark.asyncio
    async def test_returns_translation_and_logs(self, service, client, log):
        result = await service.translate_text("namaste", "ne", "en")

        assert result == "Hello"
        prompt = client.generate_text.call_args.args[0]
        assert "from Nepali to English" in prompt
        assert client.generate_text.call_args.kwargs["model"] == get_model("translate")

        head = log.list()[0]
        assert head.kind is RecordKind.TEXT
        assert head.source_text == "namaste"
        assert head.translated_text == "Hello"
        assert head.source_lang == "ne"
        assert head.target_lang == "en"

    @pytest.mark.asyncio
    async def test_long_text_logged_in_full(self, service, client, log):
        text = "word " * 100
        client.generate_text.return_value = "शब्द " * 100

        await service.translate_text(text, "en", "ne")

        assert log.list()[0].source_text == text
        assert log.list()[0].translated_text == "शब्द " * 100

    @pytest.mark.asyncio
    async def test_auto_source(self, service, client, log):
        await service.translate_text("hola", SourceLanguage.auto(), "en")

        assert "detect the source language" in client.generate_text.call_args.args[0]
        assert log.list()[0].source_lang == "auto"

    @pytest.mark.asyncio
    async def test_failure_is_wrapped_and_not_logged(self, service, client, log):
        cause = RemoteCallError("gemini-2.5-flash returned status 500")
        client.generate_text.side_effect = cause

        with pytest.raises(RemoteCallError, match="Failed to translate text") as exc_info:
            await service.translate_text("namaste", "ne", "en")

        assert exc_info.value.__cause__ is cause
        assert log.list() == []

    @pytest.mark.asyncio
    async def test_empty_response_is_failure(self, service, client, log):
        client.generate_text.side_effect = EmptyResponseError("empty")

        with pytest.raises(RemoteCallError):
            await service.translate_text("namaste", "ne", "en")
        assert log.list() == []


class TestTranslateDocument:
    """Tests for document and binary translation."""

    @pytest.mark.asyncio
    async def test_document_record_truncated(self, service, client, log):
        content = "x" * 500
        client.generate_text.return_value = "y" * 400

        result = await service.translate_document(content, "auto", "ne")

        assert result == "y" * 400
        record = log.list()[0]
        assert record.kind is RecordKind.DOCUMENT
        assert record.source_text == "x" * 100 + "..."
        assert len(record.translated_text) <= 103

    @pytest.mark.asyncio
    async def test_document_auto_detect_prompt(self, service, client):
        await service.translate_document("text", "auto", "ne")
        assert "Detect the source language automatically" in client.generate_text.call_args.args[0]

    @pytest.mark.asyncio
    async def test_document_failure_message(self, service, client):
        client.generate_text.side_effect = RemoteCallError("boom")
        with pytest.raises(RemoteCallError, match="Failed to translate document"):
            await service.translate_document("text", "en", "ne")

    @pytest.mark.asyncio
    async def test_binary_any_mime_type_is_sent(self, service, client, log):
        """No local allow-list: unusual types still reach the model."""
        result = await service.translate_binary("QUJD", "application/x-custom", "si")

        assert result == "Translated content"
        args = client.generate_with_data.call_args.args
        assert args[0] == "QUJD"
        assert args[1] == "application/x-custom"
        assert "Sinhala" in args[2]

        record = log.list()[0]
        assert record.kind is RecordKind.DOCUMENT
        assert record.source_text.startswith("[application/x-custom]")
        assert record.source_lang == "auto"

    @pytest.mark.asyncio
    async def test_upload_text_routes_to_document(self, service, client):
        upload = prepare_upload(UploadedFile.from_bytes("notes.txt", b"Hello world"))

        await service.translate_upload(upload, "en", "ne")

        assert client.generate_text.call_args.args[0].endswith("Hello world")
        client.generate_with_data.assert_not_called()

    @pytest.mark.asyncio
    async def test_upload_pdf_routes_to_binary(self, service, client):
        upload = prepare_upload(UploadedFile.from_bytes("paper.pdf", b"%PDF-1.4"))

        await service.translate_upload(upload, "en", "ne")

        assert client.generate_with_data.call_args.args[1] == "application/pdf"
        assert base64.b64decode(client.generate_with_data.call_args.args[0]) == b"%PDF-1.4"
        client.generate_text.assert_not_called()


class TestTranslateSpeech:
    @pytest.mark.asyncio
    async def test_transcribes_then_translates(self, service, client, log):
        client.generate_with_data.return_value = "namaste"
        client.generate_text.return_value = "hello"

        transcript, translated = await service.translate_speech("UklGRg==", "audio/wav", "ne", "en")

        assert (transcript, translated) == ("namaste", "hello")
        record = log.list()[0]
        assert record.kind is RecordKind.VOICE
        assert record.source_text == "namaste"
        assert len(log.list()) == 1

    @pytest.mark.asyncio
    async def test_empty_transcript(self, service, client, log):
        client.generate_with_data.return_value = ""

        with pytest.raises(RemoteCallError, match="No speech detected"):
            await service.translate_speech("UklGRg==", "audio/wav", "ne", "en")

        client.generate_text.assert_not_called()
        assert log.list() == []


class TestRefine:
    @pytest.mark.asyncio
    async def test_refine_uses_refine_model(self, service, client, log):
        client.generate_text.return_value = "Polished."

        assert await service.refine("polish me", "polish") == "Polished."
        assert client.generate_text.call_args.kwargs["model"] == get_model("refine")
        assert log.list() == []

    @pytest.mark.asyncio
    async def test_empty_result_returns_input(self, service, client):
        client.generate_text.side_effect = EmptyResponseError("empty")
        assert await service.refine("keep me", "formal") == "keep me"

    @pytest.mark.asyncio
    async def test_failure_raises(self, service, client):
        client.generate_text.side_effect = RemoteCallError("network")
        with pytest.raises(RemoteCallError, match="Failed to refine text"):
            await service.refine("text", "casual")

    @pytest.mark.asyncio
    async def test_unknown_mode(self, service, client):
        with pytest.raises(ValueError):
            await service.refine("text", "shout")
        client.generate_text.assert_not_called()


class TestAudio:
    @pytest.mark.asyncio
    async def test_transcribe_not_logged(self, service, client, log):
        client.generate_with_data.return_value = "spoken words"

        assert await service.transcribe("UklGRg==") == "spoken words"
        assert client.generate_with_data.call_args.args[1] == "audio/wav"
        assert log.list() == []

    @pytest.mark.asyncio
    async def test_transcribe_failure(self, service, client):
        client.generate_with_data.side_effect = RemoteCallError("timeout")
        with pytest.raises(RemoteCallError, match="Failed to transcribe audio"):
            await service.transcribe("UklGRg==")

    @pytest.mark.asyncio
    async def test_synthesize_speech_decodes_pcm(self, service, client):
        pcm = np.array([0, 16384, -16384], dtype="<i2").tobytes()
        client.generate_speech.return_value = base64.b64encode(pcm).decode()

        buffer = await service.synthesize_speech("Hello", voice="Kore")

        assert buffer.sample_rate == 24000
        assert buffer.number_of_channels == 1
        np.testing.assert_allclose(buffer.get_channel_data(0), [0.0, 0.5, -0.5])
        assert client.generate_speech.call_args.kwargs["voice"] == "Kore"

    @pytest.mark.asyncio
    async def test_synthesize_malformed_payload(self, service, client):
        """Audio that is not valid base64 is a remote failure."""
        client.generate_speech.return_value = "abc"

        with pytest.raises(RemoteCallError, match="Failed to generate speech") as exc_info:
            await service.synthesize_speech("hi")

        assert isinstance(exc_info.value.__cause__, ValueError)

    @pytest.mark.asyncio
    async def test_synthesize_failure(self, service, client):
        client.generate_speech.side_effect = EmptyResponseError("No audio data returned")
        with pytest.raises(RemoteCallError, match="Failed to generate speech"):
            await service.synthesize_speech("Hello")


class TestInsights:
    @pytest.mark.asyncio
    async def test_insights_from_log(self, service, client, log):
        await service.translate_text("namaste", "ne", "en")
        client.generate_text.return_value = "1. Keep going"

        assert await service.generate_insights() == "1. Keep going"
        prompt = client.generate_text.call_args.args[0]
        assert '"total_count": 1' in prompt
        assert client.generate_text.call_args.kwargs["model"] == get_model("insights")

    @pytest.mark.asyncio
    async def test_insights_failure_returns_fallback(self, service, client):
        client.generate_text.side_effect = RemoteCallError("boom")
        assert await service.generate_insights(AnalyticsView()) == INSIGHTS_FALLBACK

    @pytest.mark.asyncio
    async def test_insights_empty(self, service, client):
        client.generate_text.side_effect = EmptyResponseError("empty")
        assert await service.generate_insights(AnalyticsView()) == INSIGHTS_EMPTY
