"""Voice recorder: microphone capture followed by a single transcription request.

States:
    IDLE --start()--> RECORDING --stop()--> FINALIZING --> IDLE

- start() acquires the microphone; failure raises DeviceAccessError and the
  recorder stays IDLE. start() outside IDLE is a no-op returning False.
- stop() always releases the microphone, wraps the chunks as WAV, hands the
  base64 payload to the transcriber and returns to IDLE whether or not the
  transcription succeeds.
- There is no auto-stop; recording lasts until stop() or cancel().
"""

import logging
import threading
from collections.abc import Awaitable, Callable
from enum import Enum

from linguist.audio.capture import AudioCapture, MicrophoneCapture
from linguist.audio.pcm import SAMPLE_WIDTH, to_base64, wav_bytes

logger = logging.getLogger(__name__)

WAV_MIME_TYPE = "audio/wav"

Transcriber = Callable[[str, str], Awaitable[str]]
CaptureFactory = Callable[[Callable[[bytes], None]], AudioCapture]


class RecorderState(str, Enum):
    IDLE = "idle"
    RECORDING = "recording"
    FINALIZING = "finalizing"


class VoiceRecorder:
    """Records one utterance at a time and transcribes it.

    Usage:
        recorder = VoiceRecorder(service.transcribe)
        recorder.start()
        ...
        text = await recorder.stop()
    """

    def __init__(
        self,
        transcribe: Transcriber,
        capture_factory: CaptureFactory = MicrophoneCapture,
    ):
        """
        Args:
            transcribe: Coroutine function (base64_payload, mime_type) -> text
            capture_factory: Builds the capture for a session given the chunk callback
        """
        self._transcribe = transcribe
        self._capture_factory = capture_factory
        self._capture: AudioCapture | None = None
        self._chunks: list[bytes] = []
        self._total_bytes = 0
        self._sample_rate = 16000
        self._state = RecorderState.IDLE
        self._lock = threading.Lock()

    @property
    def state(self) -> RecorderState:
        return self._state

    @property
    def is_recording(self) -> bool:
        return self._state is RecorderState.RECORDING

    @property
    def duration(self) -> float:
        """Seconds of audio captured in the current session."""
        if self._total_bytes == 0 or self._sample_rate <= 0:
            return 0.0
        return self._total_bytes / (self._sample_rate * SAMPLE_WIDTH)

    def start(self) -> bool:
        """
        Acquire the microphone and begin a session.

        Returns:
            True if a session started, False if one was already active.

        Raises:
            DeviceAccessError: If the microphone cannot be opened.
        """
        with self._lock:
            if self._state is not RecorderState.IDLE:
                logger.warning(f"Recorder busy ({self._state.value}), ignoring start")
                return False
            self._chunks = []
            self._total_bytes = 0
            # Claim the session before touching the device
            self._state = RecorderState.RECORDING

        try:
            capture = self._capture_factory(self.add_chunk)
            capture.start()
        except Exception:
            with self._lock:
                self._state = RecorderState.IDLE
            raise

        with self._lock:
            self._capture = capture
            self._sample_rate = capture.sample_rate
        logger.info(f"Recording started: {capture.source_name}")
        return True

    def add_chunk(self, audio_bytes: bytes) -> None:
        """Append a PCM chunk. Ignored outside RECORDING."""
        with self._lock:
            if self._state is not RecorderState.RECORDING:
                return
            self._chunks.append(audio_bytes)
            self._total_bytes += len(audio_bytes)

    def _release(self) -> bytes:
        """Stop the capture and take the accumulated audio."""
        with self._lock:
            capture, self._capture = self._capture, None
            self._state = RecorderState.FINALIZING
        try:
            if capture is not None:
                capture.stop()
        finally:
            with self._lock:
                audio = b"".join(self._chunks)
                self._chunks = []
        return audio

    async def stop(self) -> str:
        """
        Stop recording and transcribe the captured audio.

        Returns:
            Transcribed text, or "" when nothing was recorded.

        Raises:
            RuntimeError: If the recorder is not recording.
            RemoteCallError: If transcription fails (the recorder is IDLE again).
        """
        if self._state is not RecorderState.RECORDING:
            raise RuntimeError(f"Cannot stop recorder in state {self._state.value}")

        try:
            audio = self._release()
            if not audio:
                logger.warning("No audio recorded")
                return ""
            logger.info(f"Recording stopped: {self.duration:.1f}s, {len(audio)} bytes")
            payload = to_base64(wav_bytes(audio, self._sample_rate))
            return await self._transcribe(payload, WAV_MIME_TYPE)
        finally:
            with self._lock:
                self._state = RecorderState.IDLE
                self._total_bytes = 0

    def cancel(self) -> None:
        """Discard the current session without transcribing."""
        if self._state is not RecorderState.RECORDING:
            return
        try:
            self._release()
        finally:
            with self._lock:
                self._state = RecorderState.IDLE
                self._total_bytes = 0
        logger.info("Recording cancelled")

    def __repr__(self) -> str:
        return f"VoiceRecorder(state={self._state.value}, duration={self.duration:.1f}s)"
