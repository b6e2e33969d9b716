"""Fire-and-forget audio playback.

Each call opens its own output stream on a daemon thread. Nothing prevents
overlap: a new play() sounds alongside any clip that is still playing.
"""

import logging
import threading

from linguist.audio.pcm import AudioBuffer

logger = logging.getLogger(__name__)


def _play_blocking(buffer: AudioBuffer) -> None:
    try:
        import pyaudio
    except ImportError:
        logger.error("Playback requires PyAudio (pip install 'linguist[audio]')")
        return

    pa = pyaudio.PyAudio()
    stream = None
    try:
        stream = pa.open(
            format=pyaudio.paFloat32,
            channels=buffer.number_of_channels,
            rate=buffer.sample_rate,
            output=True,
        )
        stream.write(buffer.interleaved().tobytes())
    except Exception as e:
        logger.error(f"Playback failed: {e}")
    finally:
        if stream is not None:
            stream.stop_stream()
            stream.close()
        pa.terminate()


def play(buffer: AudioBuffer) -> threading.Thread:
    """
    Start playing buffer in the background and return immediately.

    Returns:
        The daemon thread doing the playback (callers normally ignore it).
    """
    logger.info(
        f"Playing {buffer.duration:.1f}s of audio "
        f"({buffer.sample_rate}Hz, {buffer.number_of_channels}ch)"
    )
    thread = threading.Thread(target=_play_blocking, args=(buffer,), daemon=True)
    thread.start()
    return thread
