"""Microphone capture using PyAudio."""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from linguist.errors import DeviceAccessError

logger = logging.getLogger(__name__)

CHUNK_DURATION_MS = 100


def calculate_chunk_size(sample_rate: int, duration_ms: int = CHUNK_DURATION_MS) -> int:
    """Calculate chunk size in frames for given duration."""
    return int(sample_rate * duration_ms / 1000)


class AudioCapture(ABC):
    """Exclusive audio input source delivering 16-bit mono PCM chunks."""

    def __init__(self, callback: Callable[[bytes], None]):
        """
        Args:
            callback: Function called with each captured chunk (16-bit PCM, mono)
        """
        self.callback = callback
        self.running = False
        self.sample_rate = 16000

    @abstractmethod
    def start(self) -> None:
        """Open the device and start delivering chunks. Raises DeviceAccessError."""

    @abstractmethod
    def stop(self) -> None:
        """Release the device. Must be safe to call more than once."""

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return human-readable source name."""


class MicrophoneCapture(AudioCapture):
    """Capture mono audio from a microphone at the device's native rate."""

    def __init__(self, callback: Callable[[bytes], None], device_index: Optional[int] = None):
        """
        Args:
            callback: Function to call with captured audio data
            device_index: Specific input device index, or None for default
        """
        super().__init__(callback)
        self.device_index = device_index
        self.pyaudio_instance = None
        self.stream = None
        self._device_name = "Microphone"

    @property
    def source_name(self) -> str:
        return f"🎤 {self._device_name}"

    def start(self) -> None:
        try:
            import pyaudio
        except ImportError as e:
            raise DeviceAccessError(
                "Microphone support requires PyAudio (pip install 'linguist[audio]')"
            ) from e

        try:
            self.pyaudio_instance = pyaudio.PyAudio()

            if self.device_index is not None:
                device_info = self.pyaudio_instance.get_device_info_by_index(self.device_index)
            else:
                device_info = self.pyaudio_instance.get_default_input_device_info()

            if int(device_info.get("maxInputChannels", 0)) < 1:
                raise OSError(f"Device '{device_info.get('name')}' has no input channels")

            self._device_name = device_info["name"]
            self.sample_rate = int(device_info["defaultSampleRate"])

            logger.info(f"Microphone: {self._device_name} ({self.sample_rate}Hz, mono)")

            self.stream = self.pyaudio_instance.open(
                format=pyaudio.paInt16,
                channels=1,
                rate=self.sample_rate,
                input=True,
                input_device_index=self.device_index,
                frames_per_buffer=calculate_chunk_size(self.sample_rate),
                stream_callback=self._audio_callback,
            )
            self.stream.start_stream()
            self.running = True
            logger.info("Microphone capture started")

        except Exception as e:
            logger.error(f"Microphone start failed: {e}")
            self.stop()
            raise DeviceAccessError(
                "Could not access microphone. Please ensure permission is granted."
            ) from e

    def _audio_callback(self, in_data, frame_count, time_info, status):
        import pyaudio

        if not self.running:
            return (None, pyaudio.paComplete)

        try:
            self.callback(in_data)
        except Exception as e:
            logger.error(f"Mic callback error: {e}")

        return (None, pyaudio.paContinue)

    def stop(self) -> None:
        self.running = False

        if self.stream:
            try:
                self.stream.stop_stream()
                self.stream.close()
            except Exception as e:
                logger.debug(f"Error closing microphone stream: {e}")
            self.stream = None

        if self.pyaudio_instance:
            try:
                self.pyaudio_instance.terminate()
            except Exception as e:
                logger.debug(f"Error terminating PyAudio: {e}")
            self.pyaudio_instance = None

        logger.info("Microphone capture stopped")
