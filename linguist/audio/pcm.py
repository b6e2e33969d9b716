"""PCM conversion between raw 16-bit bytes, float samples and WAV files."""

import base64
import io
import logging
import wave
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

SAMPLE_WIDTH = 2  # 16-bit = 2 bytes
PCM_SCALE = 32768.0


@dataclass
class AudioBuffer:
    """
    Decoded, playable audio.

    Attributes:
        samples: float32 array shaped (channels, frames), values in [-1, 1)
        sample_rate: Frames per second
    """

    samples: np.ndarray
    sample_rate: int

    @property
    def number_of_channels(self) -> int:
        return int(self.samples.shape[0])

    @property
    def length(self) -> int:
        """Number of frames per channel."""
        return int(self.samples.shape[1])

    @property
    def duration(self) -> float:
        """Duration in seconds."""
        if self.sample_rate <= 0:
            return 0.0
        return self.length / self.sample_rate

    def get_channel_data(self, channel: int) -> np.ndarray:
        return self.samples[channel]

    def interleaved(self) -> np.ndarray:
        """Frames with channels interleaved (L R L R ...), float32."""
        return np.ascontiguousarray(self.samples.T).reshape(-1).astype(np.float32)


def decode_audio(data: bytes, sample_rate: int, channel_count: int = 1) -> AudioBuffer:
    """
    De-interleave 16-bit little-endian signed PCM into per-channel float samples.

    Args:
        data: Raw PCM bytes
        sample_rate: Sample rate in Hz
        channel_count: Number of interleaved channels

    Returns:
        AudioBuffer normalized by 1/32768. A trailing partial frame is dropped.
    """
    if channel_count < 1:
        raise ValueError("channel_count must be at least 1")

    frame_bytes = SAMPLE_WIDTH * channel_count
    usable = len(data) - (len(data) % frame_bytes)
    if usable != len(data):
        logger.debug(f"Dropping {len(data) - usable} trailing bytes of partial frame")

    pcm = np.frombuffer(data[:usable], dtype="<i2")
    frames = pcm.reshape(-1, channel_count).T
    samples = frames.astype(np.float32) / PCM_SCALE
    return AudioBuffer(samples=samples, sample_rate=sample_rate)


def encode_pcm(samples: np.ndarray) -> bytes:
    """
    Inverse of decode_audio: float samples to interleaved 16-bit PCM.

    Args:
        samples: 1-D mono array or (channels, frames) array of floats in [-1, 1]
    """
    audio = np.asarray(samples, dtype=np.float64)
    if audio.ndim == 1:
        audio = audio[np.newaxis, :]
    interleaved = audio.T.reshape(-1)
    pcm = np.clip(np.round(interleaved * PCM_SCALE), -32768, 32767)
    return pcm.astype("<i2").tobytes()


def decode_base64_audio(data_b64: str, sample_rate: int, channel_count: int = 1) -> AudioBuffer:
    """Decode a base64 PCM payload returned by the speech model."""
    return decode_audio(base64.b64decode(data_b64), sample_rate, channel_count)


def wav_bytes(pcm: bytes, sample_rate: int, channels: int = 1) -> bytes:
    """Create a WAV file in memory from raw 16-bit PCM data."""
    wav_buffer = io.BytesIO()
    with wave.open(wav_buffer, "wb") as wav:
        wav.setnchannels(channels)
        wav.setsampwidth(SAMPLE_WIDTH)
        wav.setframerate(sample_rate)
        wav.writeframes(pcm)
    return wav_buffer.getvalue()


def to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
