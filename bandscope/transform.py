"""
bandscope/transform.py - Forward DFT capability used by the Analyzer.

The Analyzer only needs "forward complex DFT of a fixed length". That
contract is the ``Transform`` protocol; ``ScipyTransform`` satisfies it by
delegating to ``scipy.fft``, which keeps single precision for complex64
input and caches its own twiddle factors between calls.

Plans are immutable and shared: ``plan_forward()`` hands out one instance
per length, and copying a plan returns the same object. Each ``process()``
call allocates its own output, so a plan can serve many threads at once.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import numpy as np
from scipy import fft as scipy_fft

from bandscope.errors import InvalidTransformLength

logger = logging.getLogger(__name__)


@runtime_checkable
class Transform(Protocol):
    """Protocol for a reusable forward transform of fixed length."""

    @property
    def length(self) -> int:
        """Number of points the transform accepts and produces."""
        ...

    def process(self, buffer: np.ndarray) -> np.ndarray:
        """Return the forward DFT of ``buffer``.

        Args:
            buffer: 1-D complex array of exactly ``length`` values.
                Not modified.

        Returns:
            New 1-D complex array of ``length`` values.
        """
        ...


@dataclass(frozen=True)
class ScipyTransform:
    """Forward complex FFT backed by ``scipy.fft.fft``."""

    length: int

    def __post_init__(self) -> None:
        if self.length < 1:
            raise InvalidTransformLength(self.length)

    def process(self, buffer: np.ndarray) -> np.ndarray:
        if buffer.shape != (self.length,):
            raise ValueError(
                f"Transform of length {self.length} got buffer of shape {buffer.shape}"
            )
        return scipy_fft.fft(buffer)

    def __copy__(self) -> ScipyTransform:
        return self

    def __deepcopy__(self, memo: dict) -> ScipyTransform:
        return self


@functools.lru_cache(maxsize=32)
def plan_forward(length: int) -> ScipyTransform:
    """Return the shared forward transform plan for ``length`` points.

    Raises:
        InvalidTransformLength: If length < 1.
    """
    plan = ScipyTransform(length)
    logger.debug("Planned forward transform of length %d", length)
    return plan
