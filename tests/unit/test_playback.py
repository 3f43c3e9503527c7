"""Tests for the gapless playback queue."""

import numpy as np
import pytest

from services.media import float_to_pcm16
from services.playback import PlaybackQueue

RATE = 1000


def chunk(samples: int, value: float = 0.25) -> bytes:
    return float_to_pcm16(np.full(samples, value, dtype=np.float32))


class TestScheduling:
    """Tests for start time bookkeeping."""

    def test_chunks_play_back_to_back(self):
        queue = PlaybackQueue(sample_rate=RATE)

        first = queue.schedule(chunk(500))
        second = queue.schedule(chunk(250))

        assert first == pytest.approx(0.0)
        assert second == pytest.approx(0.5)
        assert queue.next_start_time == pytest.approx(0.75)
        assert queue.active_count == 2

    def test_late_chunk_starts_now(self):
        queue = PlaybackQueue(sample_rate=RATE)
        queue.schedule(chunk(100))
        queue.read(300)  # 0.2 s of silence after the chunk ends

        start = queue.schedule(chunk(100))

        assert start == pytest.approx(0.3)
        assert queue.current_time == pytest.approx(0.3)


class TestReading:
    """Tests for pulling samples out of the queue."""

    def test_reads_across_chunk_boundaries(self):
        queue = PlaybackQueue(sample_rate=RATE)
        queue.schedule(chunk(3, 0.5))
        queue.schedule(chunk(3, -0.5))

        block = queue.read(4)

        assert block.tolist() == [0.5, 0.5, 0.5, -0.5]
        assert queue.active_count == 1

    def test_pads_with_silence(self):
        queue = PlaybackQueue(sample_rate=RATE)
        queue.schedule(chunk(2, 0.5))

        block = queue.read(5)

        assert block.tolist() == [0.5, 0.5, 0.0, 0.0, 0.0]

    def test_drained_fires_once_when_last_chunk_ends(self):
        calls = []
        queue = PlaybackQueue(sample_rate=RATE, on_drained=lambda: calls.append(True))
        queue.schedule(chunk(10))
        queue.schedule(chunk(10))

        queue.read(15)
        assert calls == []

        queue.read(10)
        assert calls == [True]

        queue.read(10)
        assert calls == [True]

    def test_empty_chunk_is_not_queued(self):
        queue = PlaybackQueue(sample_rate=RATE)

        queue.schedule(b"")

        assert queue.active_count == 0


class TestClear:
    """Tests for interruption handling."""

    def test_clear_drops_chunks_and_resets_schedule(self):
        calls = []
        queue = PlaybackQueue(sample_rate=RATE, on_drained=lambda: calls.append(True))
        queue.schedule(chunk(500))
        queue.schedule(chunk(500))
        queue.read(100)

        queue.clear()

        assert queue.active_count == 0
        assert queue.next_start_time == 0.0
        assert queue.read(10).tolist() == [0.0] * 10
        assert calls == []

    def test_schedule_after_clear_starts_at_current_time(self):
        queue = PlaybackQueue(sample_rate=RATE)
        queue.schedule(chunk(500))
        queue.read(200)
        queue.clear()

        assert queue.schedule(chunk(100)) == pytest.approx(0.2)
