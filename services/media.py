"""
Media helpers - PCM audio conversion, base64/data URLs and JPEG frames.

Audio on the live session is mono 16-bit little-endian PCM: 16 kHz from
the microphone, 24 kHz from the model. Sound devices work in float32
samples in [-1.0, 1.0], so every chunk crosses this module once in each
direction.
"""

import base64
import re
from typing import Optional

import numpy as np

PCM16_SCALE = 32768.0

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?:;[^,]*)?;base64,(?P<data>.*)$", re.DOTALL)


def float_to_pcm16(samples) -> bytes:
    """
    Encode float samples as little-endian int16 PCM.

    Samples are scaled by 32768 and clipped to the int16 range, so a
    full-scale +1.0 becomes 32767 instead of wrapping to -32768.
    """
    scaled = np.asarray(samples, dtype=np.float32).reshape(-1) * PCM16_SCALE
    return np.clip(scaled, -32768, 32767).astype("<i2").tobytes()


def pcm16_to_float(data: bytes) -> np.ndarray:
    """Decode little-endian int16 PCM to float32 samples; a trailing odd byte is dropped."""
    usable = len(data) - (len(data) % 2)
    pcm = np.frombuffer(data[:usable], dtype="<i2")
    return pcm.astype(np.float32) / PCM16_SCALE


def pcm16_duration(data: bytes, sample_rate: int) -> float:
    """Duration in seconds of a mono int16 PCM chunk."""
    return (len(data) // 2) / sample_rate


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def decode_base64(text: str) -> bytes:
    return base64.b64decode(text)


def to_data_url(data: bytes, mime_type: str) -> str:
    """Wrap raw bytes as a base64 data URL."""
    return f"data:{mime_type};base64,{encode_base64(data)}"


def parse_data_url(url: str) -> tuple[bytes, str]:
    """
    Split a base64 data URL into its bytes and MIME type.

    Raises:
        ValueError: If the string is not a base64 data URL
    """
    match = _DATA_URL_RE.match(url)
    if not match:
        raise ValueError("Not a base64 data URL")
    mime_type = match.group("mime") or "application/octet-stream"
    return decode_base64(match.group("data")), mime_type


def encode_jpeg_frame(
    frame: np.ndarray,
    width: int = 320,
    height: int = 240,
    quality: int = 50,
) -> Optional[bytes]:
    """
    Downscale a BGR camera frame and encode it as JPEG.

    Args:
        frame: OpenCV BGR image
        width: Target width in pixels
        height: Target height in pixels
        quality: JPEG quality (0-100)

    Returns:
        JPEG bytes, or None if encoding failed
    """
    import cv2

    resized = cv2.resize(frame, (width, height), interpolation=cv2.INTER_AREA)
    ok, buffer = cv2.imencode(".jpg", resized, [cv2.IMWRITE_JPEG_QUALITY, quality])
    if not ok:
        return None
    return buffer.tobytes()
