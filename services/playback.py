"""
Playback of streamed model audio.

The live session delivers the spoken reply as many short PCM chunks.
PlaybackQueue lines them up back to back on a sample clock so they play
without gaps, and reports when the last scheduled chunk has finished.
SpeakerOutput pulls from the queue inside the sound device callback.

The clock only advances as the output device reads samples, so start
times returned by schedule() are exact positions in the played stream.
"""

import logging
import threading
from collections import deque
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from services.media import pcm16_to_float

logger = logging.getLogger(__name__)


@dataclass
class _Chunk:
    samples: np.ndarray
    start_time: float
    offset: int = 0

    @property
    def remaining(self) -> int:
        return len(self.samples) - self.offset


class PlaybackQueue:
    """Gapless scheduler for streamed mono PCM16 audio."""

    def __init__(self, sample_rate: int = 24000, on_drained: Optional[Callable[[], None]] = None):
        self.sample_rate = sample_rate
        self.on_drained = on_drained
        self._chunks: deque[_Chunk] = deque()
        self._frames_played = 0
        self._next_start_time = 0.0
        self._lock = threading.Lock()

    @property
    def current_time(self) -> float:
        """Seconds of audio the output device has consumed so far."""
        with self._lock:
            return self._frames_played / self.sample_rate

    @property
    def next_start_time(self) -> float:
        with self._lock:
            return self._next_start_time

    @property
    def active_count(self) -> int:
        """Number of chunks scheduled and not yet fully played."""
        with self._lock:
            return len(self._chunks)

    def schedule(self, pcm: bytes) -> float:
        """
        Queue a PCM16 chunk right after everything already scheduled.

        Args:
            pcm: Mono little-endian int16 audio at sample_rate

        Returns:
            Start time of the chunk in seconds on the playback clock
        """
        samples = pcm16_to_float(pcm)
        with self._lock:
            now = self._frames_played / self.sample_rate
            start = max(self._next_start_time, now)
            self._next_start_time = start + len(samples) / self.sample_rate
            if len(samples):
                self._chunks.append(_Chunk(samples=samples, start_time=start))
        return start

    def read(self, frames: int) -> np.ndarray:
        """
        Pull the next block of samples for the output device.

        Missing samples are filled with silence. Fires on_drained when
        this read finishes the last scheduled chunk.
        """
        out = np.zeros(frames, dtype=np.float32)
        filled = 0
        drained = False

        with self._lock:
            while filled < frames and self._chunks:
                chunk = self._chunks[0]
                count = min(chunk.remaining, frames - filled)
                out[filled:filled + count] = chunk.samples[chunk.offset:chunk.offset + count]
                chunk.offset += count
                filled += count
                if chunk.remaining == 0:
                    self._chunks.popleft()
                    drained = not self._chunks
            self._frames_played += frames

        if drained and self.on_drained:
            self.on_drained()
        return out

    def clear(self) -> None:
        """Stop everything that is playing and reset the schedule."""
        with self._lock:
            dropped = len(self._chunks)
            self._chunks.clear()
            self._next_start_time = 0.0
        if dropped:
            logger.debug(f"Dropped {dropped} queued audio chunks")


class SpeakerOutput:
    """Plays a PlaybackQueue on the default output device."""

    def __init__(self, queue: PlaybackQueue, blocksize: int = 1024):
        self.queue = queue
        self.blocksize = blocksize
        self._stream = None

    def _callback(self, outdata, frames, time_info, status):
        if status:
            logger.debug(f"Output stream status: {status}")
        outdata[:, 0] = self.queue.read(frames)

    def start(self) -> None:
        import sounddevice as sd

        self._stream = sd.OutputStream(
            samplerate=self.queue.sample_rate,
            channels=1,
            dtype="float32",
            blocksize=self.blocksize,
            callback=self._callback,
        )
        self._stream.start()
        logger.info(f"Speaker output started at {self.queue.sample_rate} Hz")

    def stop(self) -> None:
        if self._stream is None:
            return
        try:
            self._stream.stop()
            self._stream.close()
        finally:
            self._stream = None
            self.queue.clear()
