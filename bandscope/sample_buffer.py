"""
bandscope/sample_buffer.py - Fixed-capacity rolling buffer for one channel.

The buffer always holds exactly ``size`` samples, oldest first. It starts
filled with zeros and every pushed sample evicts the oldest one, so the
contents are the most recent ``size`` samples seen so far.

Not thread-safe: a buffer has a single writer. Callers sharing one across
threads must serialize ``push`` themselves.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

import numpy as np

from bandscope.types import SAMPLE_DTYPE, Sample


class SampleBuffer:
    """Sliding window over the most recent ``size`` samples.

    Example:
        >>> buf = SampleBuffer(4)
        >>> buf.push([1, 2])
        >>> buf.samples().tolist()
        [0.0, 0.0, 1.0, 2.0]
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._size = size
        self._samples: deque[Sample] = deque([0.0] * size, maxlen=size)

    @property
    def size(self) -> int:
        """Fixed capacity of the buffer."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    def __repr__(self) -> str:
        return f"SampleBuffer(size={self._size})"

    def push(self, new: Iterable[Sample]) -> None:
        """Append samples in order, discarding one old sample per new one."""
        if self._size == 0:
            return
        # deque(maxlen=size) drops from the left as we extend on the right
        self._samples.extend(float(s) for s in new)

    def samples(self) -> np.ndarray:
        """Return a float32 copy of the contents, oldest sample first."""
        return np.fromiter(self._samples, dtype=SAMPLE_DTYPE, count=self._size)

    def clear(self) -> None:
        """Reset every slot to zero."""
        self._samples.extend([0.0] * self._size)

    def rms(self) -> float:
        """Root-mean-square level of the held samples (0.0 when empty)."""
        if self._size == 0:
            return 0.0
        values = self.samples().astype(np.float64)
        return float(np.sqrt(np.mean(values**2)))
