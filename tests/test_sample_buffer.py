"""
Tests for bandscope/sample_buffer.py - rolling sample storage.
"""

import numpy as np
import pytest

from bandscope.sample_buffer import SampleBuffer

# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_starts_zeroed(self):
        assert SampleBuffer(4).samples().tolist() == [0.0, 0.0, 0.0, 0.0]

    def test_len_is_size(self):
        buf = SampleBuffer(16)
        assert len(buf) == 16
        assert buf.size == 16

    def test_zero_size(self):
        buf = SampleBuffer(0)
        assert len(buf) == 0
        assert buf.samples().shape == (0,)

    def test_negative_size_raises(self):
        with pytest.raises(ValueError, match="size must be non-negative"):
            SampleBuffer(-1)


# ---------------------------------------------------------------------------
# push
# ---------------------------------------------------------------------------


class TestPush:
    def test_partial_push_keeps_old_tail(self):
        buf = SampleBuffer(4)
        buf.push([1, 2])
        assert buf.samples().tolist() == [0.0, 0.0, 1.0, 2.0]

    def test_second_push_discards_oldest(self):
        buf = SampleBuffer(4)
        buf.push([1, 2])
        buf.push([3, 4, 5])
        assert buf.samples().tolist() == [2.0, 3.0, 4.0, 5.0]

    def test_push_exactly_size(self):
        buf = SampleBuffer(3)
        buf.push([7, 8, 9])
        assert buf.samples().tolist() == [7.0, 8.0, 9.0]

    def test_push_more_than_size_keeps_most_recent(self):
        buf = SampleBuffer(3)
        buf.push([1, 2, 3, 4, 5, 6])
        assert buf.samples().tolist() == [4.0, 5.0, 6.0]

    def test_push_empty_is_noop(self):
        buf = SampleBuffer(3)
        buf.push([1, 2, 3])
        buf.push([])
        assert buf.samples().tolist() == [1.0, 2.0, 3.0]

    def test_zero_size_push_is_noop(self):
        buf = SampleBuffer(0)
        buf.push([1, 2, 3])
        assert len(buf) == 0
        assert list(buf) == []

    def test_size_never_changes(self):
        buf = SampleBuffer(5)
        for chunk in ([1], [2, 3], list(range(20)), []):
            buf.push(chunk)
            assert len(buf) == 5
            assert buf.samples().shape == (5,)

    def test_accepts_numpy_input(self):
        buf = SampleBuffer(4)
        buf.push(np.array([0.5, -0.5], dtype=np.float32))
        assert buf.samples().tolist() == [0.0, 0.0, 0.5, -0.5]

    def test_accepts_generator(self):
        buf = SampleBuffer(3)
        buf.push(float(i) for i in range(5))
        assert buf.samples().tolist() == [2.0, 3.0, 4.0]


# ---------------------------------------------------------------------------
# Views and helpers
# ---------------------------------------------------------------------------


class TestViews:
    def test_samples_dtype_is_float32(self):
        assert SampleBuffer(4).samples().dtype == np.float32

    def test_samples_returns_copy(self):
        buf = SampleBuffer(2)
        snapshot = buf.samples()
        buf.push([1, 2])
        assert snapshot.tolist() == [0.0, 0.0]

    def test_iteration_oldest_first(self):
        buf = SampleBuffer(3)
        buf.push([1, 2, 3, 4])
        assert list(buf) == [2.0, 3.0, 4.0]

    def test_clear(self):
        buf = SampleBuffer(3)
        buf.push([1, 2, 3])
        buf.clear()
        assert buf.samples().tolist() == [0.0, 0.0, 0.0]
        assert len(buf) == 3

    def test_rms(self):
        buf = SampleBuffer(4)
        buf.push([1, -1, 1, -1])
        assert buf.rms() == pytest.approx(1.0)

    def test_rms_of_zeros(self):
        assert SampleBuffer(8).rms() == 0.0

    def test_rms_empty_buffer(self):
        assert SampleBuffer(0).rms() == 0.0
