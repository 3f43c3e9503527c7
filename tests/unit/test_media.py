"""Tests for audio and image helpers."""

import numpy as np
import pytest

from services.media import (
    decode_base64,
    encode_base64,
    encode_jpeg_frame,
    float_to_pcm16,
    parse_data_url,
    pcm16_duration,
    pcm16_to_float,
    to_data_url,
)


class TestPcmEncoding:
    """Tests for float <-> PCM16 conversion."""

    def test_scales_by_32768(self):
        pcm = float_to_pcm16(np.array([0.0, 0.5, -0.5, -1.0], dtype=np.float32))
        values = np.frombuffer(pcm, dtype="<i2").tolist()

        assert values == [0, 16384, -16384, -32768]

    def test_full_scale_positive_is_clipped(self):
        pcm = float_to_pcm16([1.0, 1.5, -2.0])
        values = np.frombuffer(pcm, dtype="<i2").tolist()

        assert values == [32767, 32767, -32768]

    def test_two_bytes_per_sample(self):
        assert len(float_to_pcm16(np.zeros(4096, dtype=np.float32))) == 8192

    def test_decode_divides_by_32768(self):
        pcm = np.array([16384, -32768, 0], dtype="<i2").tobytes()

        samples = pcm16_to_float(pcm)

        assert samples.dtype == np.float32
        assert samples.tolist() == [0.5, -1.0, 0.0]

    def test_decode_ignores_trailing_odd_byte(self):
        pcm = np.array([100, 200], dtype="<i2").tobytes() + b"\x01"

        assert len(pcm16_to_float(pcm)) == 2

    def test_duration(self):
        one_second_at_24k = bytes(24000 * 2)

        assert pcm16_duration(one_second_at_24k, 24000) == pytest.approx(1.0)
        assert pcm16_duration(bytes(16000), 16000) == pytest.approx(0.5)


class TestDataUrls:
    """Tests for base64 and data URL helpers."""

    def test_base64(self):
        assert decode_base64(encode_base64(b"chef")) == b"chef"

    def test_to_data_url(self):
        assert to_data_url(b"abc", "image/png") == "data:image/png;base64,YWJj"

    def test_parse_data_url(self):
        data, mime = parse_data_url("data:image/jpeg;base64,YWJj")

        assert data == b"abc"
        assert mime == "image/jpeg"

    def test_parse_rejects_plain_text(self):
        with pytest.raises(ValueError):
            parse_data_url("https://example.com/pic.jpg")


class TestJpegFrames:
    """Tests for camera frame encoding."""

    def test_encodes_downscaled_jpeg(self):
        cv2 = pytest.importorskip("cv2")
        frame = np.full((480, 640, 3), 128, dtype=np.uint8)

        jpeg = encode_jpeg_frame(frame, 320, 240, 50)

        assert jpeg is not None
        assert jpeg[:2] == b"\xff\xd8"
        decoded = cv2.imdecode(np.frombuffer(jpeg, dtype=np.uint8), cv2.IMREAD_COLOR)
        assert decoded.shape == (240, 320, 3)
