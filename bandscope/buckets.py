"""
bandscope/buckets.py - Linear partition of a frequency range into bands.

Buckets divide ``[lower_cutoff, upper_cutoff)`` into ``bucket_count``
equal-width, contiguous, non-overlapping bands. Every band is half-open:
a frequency sitting exactly on a boundary belongs to the band that starts
there, never to the one that ends there.

Invariants (checked at construction):
    0 <= lower_cutoff < upper_cutoff, both finite
    bucket_count >= 1
    bands[0][0] == lower_cutoff, bands[-1][1] == upper_cutoff
    bands[i][1] == bands[i + 1][0]
"""

from __future__ import annotations

import bisect
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from bandscope.errors import InvalidRange
from bandscope.types import Band, Frequency


@dataclass(frozen=True)
class Buckets:
    """Immutable, validated set of contiguous frequency bands.

    Example:
        >>> buckets = Buckets(20.0, 100.0, 4)
        >>> buckets.bands
        ((20.0, 40.0), (40.0, 60.0), (60.0, 80.0), (80.0, 100.0))
        >>> buckets.locate(40.0)
        1
    """

    lower: Frequency
    upper: Frequency
    bucket_count: int
    bands: tuple[Band, ...] = field(init=False, repr=False)
    _starts: tuple[Frequency, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        lower, upper, count = self.lower, self.upper, self.bucket_count

        if count <= 0:
            raise InvalidRange(lower, upper, count, "bucket_count must be >= 1")
        if not (math.isfinite(lower) and math.isfinite(upper)):
            raise InvalidRange(lower, upper, count, "cutoffs must be finite")
        if lower < 0 or upper < 0:
            raise InvalidRange(lower, upper, count, "cutoffs must be non-negative")
        if not lower < upper:
            raise InvalidRange(lower, upper, count, "lower_cutoff must be below upper_cutoff")

        # Band i ends where band i + 1 starts; the last end is pinned to upper
        # so float rounding cannot leave a gap at the top of the range.
        # Multiply before dividing so boundaries such as 2000.0 come out exact.
        starts = tuple(lower + (upper - lower) * i / count for i in range(count))
        ends = starts[1:] + (upper,)

        object.__setattr__(self, "bands", tuple(zip(starts, ends)))
        object.__setattr__(self, "_starts", starts)

    def __len__(self) -> int:
        return len(self.bands)

    @property
    def width(self) -> Frequency:
        """Nominal width of each band in Hz."""
        return (self.upper - self.lower) / self.bucket_count

    @property
    def lower_cutoff(self) -> Frequency | None:
        """Start of the first band, or None if there are no bands."""
        return self.bands[0][0] if self.bands else None

    @property
    def upper_cutoff(self) -> Frequency | None:
        """End of the last band, or None if there are no bands."""
        return self.bands[-1][1] if self.bands else None

    def locate(self, frequency: Frequency) -> int | None:
        """Return the index of the band containing ``frequency``.

        Uses start-inclusive, end-exclusive matching. Returns None for
        frequencies below ``lower_cutoff``, at or above ``upper_cutoff``,
        and for NaN.
        """
        # bisect_right puts a boundary frequency after the band that starts on it
        index = bisect.bisect_right(self._starts, frequency) - 1
        if index < 0:
            return None
        start, end = self.bands[index]
        if start <= frequency < end:
            return index
        return None

    def locate_many(self, frequencies: Sequence[Frequency] | np.ndarray) -> np.ndarray:
        """Vectorized ``locate()``.

        Returns:
            intp array with the band index for each frequency, -1 where
            ``locate()`` would return None.
        """
        freqs = np.asarray(frequencies, dtype=np.float64).reshape(-1)
        starts = np.asarray(self._starts, dtype=np.float64)
        ends = np.asarray([end for _, end in self.bands], dtype=np.float64)

        index = np.searchsorted(starts, freqs, side="right").astype(np.intp) - 1
        safe = np.clip(index, 0, None)
        inside = (index >= 0) & (freqs >= starts[safe]) & (freqs < ends[safe])
        return np.where(inside, index, -1).astype(np.intp)

    def centers(self) -> tuple[Frequency, ...]:
        """Midpoint of each band, in band order."""
        return tuple((start + end) / 2.0 for start, end in self.bands)
