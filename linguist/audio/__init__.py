"""Audio pipeline: microphone capture, PCM codec and playback."""

from .capture import CHUNK_DURATION_MS, AudioCapture, MicrophoneCapture, calculate_chunk_size
from .pcm import (
    PCM_SCALE,
    SAMPLE_WIDTH,
    AudioBuffer,
    decode_audio,
    decode_base64_audio,
    encode_pcm,
    to_base64,
    wav_bytes,
)
from .playback import play
from .recorder import WAV_MIME_TYPE, RecorderState, VoiceRecorder

__all__ = [
    "CHUNK_DURATION_MS",
    "PCM_SCALE",
    "SAMPLE_WIDTH",
    "WAV_MIME_TYPE",
    "AudioBuffer",
    "AudioCapture",
    "MicrophoneCapture",
    "RecorderState",
    "VoiceRecorder",
    "calculate_chunk_size",
    "decode_audio",
    "decode_base64_audio",
    "encode_pcm",
    "play",
    "to_base64",
    "wav_bytes",
]
