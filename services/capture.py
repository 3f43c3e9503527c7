"""
Microphone and camera capture for the live kitchen session.

Both classes hold a device handle between start/open and stop/release.
The microphone pushes PCM16 chunks to a callback from the sound device
thread; the camera is polled for one JPEG frame at a time.
"""

import logging
from typing import Callable, Optional

from config.settings import Settings
from services.media import encode_jpeg_frame, float_to_pcm16

logger = logging.getLogger(__name__)


class DeviceUnavailableError(RuntimeError):
    """A microphone or camera could not be opened."""


class MicrophoneInput:
    """Streams the default input device as 16 kHz mono PCM16 chunks."""

    def __init__(self, settings: Settings, on_chunk: Callable[[bytes], None]):
        self.sample_rate = settings.input_sample_rate
        self.blocksize = settings.mic_chunk_frames
        self.on_chunk = on_chunk
        self._stream = None

    def _callback(self, indata, frames, time_info, status):
        if status:
            logger.debug(f"Input stream status: {status}")
        self.on_chunk(float_to_pcm16(indata[:, 0]))

    def start(self) -> None:
        import sounddevice as sd

        try:
            self._stream = sd.InputStream(
                samplerate=self.sample_rate,
                channels=1,
                dtype="float32",
                blocksize=self.blocksize,
                callback=self._callback,
            )
            self._stream.start()
        except sd.PortAudioError as e:
            self._stream = None
            raise DeviceUnavailableError(f"Microphone unavailable: {e}") from e
        logger.info(f"Microphone started at {self.sample_rate} Hz")

    def stop(self) -> None:
        if self._stream is None:
            return
        try:
            self._stream.stop()
            self._stream.close()
        finally:
            self._stream = None


class CameraInput:
    """Grabs downscaled JPEG frames from a local camera."""

    def __init__(self, settings: Settings):
        self.index = settings.camera_index
        self.width = settings.frame_width
        self.height = settings.frame_height
        self.quality = settings.frame_jpeg_quality
        self._capture = None

    def open(self) -> None:
        import cv2

        capture = cv2.VideoCapture(self.index)
        if not capture.isOpened():
            capture.release()
            raise DeviceUnavailableError(f"Camera {self.index} unavailable")
        self._capture = capture
        logger.info(f"Camera {self.index} opened")

    def read_jpeg(self) -> Optional[bytes]:
        """Capture one frame, or None when the camera has nothing to give."""
        if self._capture is None:
            return None
        ok, frame = self._capture.read()
        if not ok or frame is None:
            return None
        return encode_jpeg_frame(frame, self.width, self.height, self.quality)

    def release(self) -> None:
        if self._capture is None:
            return
        self._capture.release()
        self._capture = None
