"""
bandscope/wave.py - Synthetic waveform generator for fixtures and demos.

``WaveGenerator`` is an infinite iterator of float32 samples. Iterating it
again starts over from sample 0, so the same generator always reproduces
the same sequence.

Sample n (phase = f * n / sample_rate, in cycles):
    sine      amplitude * sin(2 pi phase)
    square    amplitude * sign(sin(2 pi phase)), +amplitude at zero
    sawtooth  amplitude * (2 * frac(phase + 0.5) - 1)
    triangle  amplitude * (1 - 4 * |frac(phase + 0.25) - 0.5|)

Defaults (440 Hz, amplitude 0.25) are the reference tone used by the
spectrum regression tests.
"""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

import numpy as np

from bandscope.errors import InvalidSamplingRate
from bandscope.types import SAMPLE_DTYPE, Frequency

DEFAULT_FREQUENCY: Frequency = 440.0  # A4
DEFAULT_AMPLITUDE: float = 0.25


class WaveFunction(Enum):
    """Periodic wave shapes."""

    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"

    def value_at(self, phase: float) -> float:
        """Unit-amplitude value at ``phase`` cycles."""
        if self is WaveFunction.SINE:
            return math.sin(2.0 * math.pi * phase)
        if self is WaveFunction.SQUARE:
            return 1.0 if math.sin(2.0 * math.pi * phase) >= 0.0 else -1.0
        if self is WaveFunction.SAWTOOTH:
            return 2.0 * ((phase + 0.5) % 1.0) - 1.0
        return 1.0 - 4.0 * abs((phase + 0.25) % 1.0 - 0.5)


@dataclass(frozen=True)
class WaveGenerator:
    """Restartable, infinite sample sequence for a periodic wave.

    Example:
        >>> gen = WaveGenerator(WaveFunction.SINE, sample_rate=44100)
        >>> samples = gen.take(512)
    """

    function: WaveFunction = WaveFunction.SINE
    sample_rate: Frequency = 44100.0
    frequency: Frequency = DEFAULT_FREQUENCY
    amplitude: float = DEFAULT_AMPLITUDE

    def __post_init__(self) -> None:
        if not (self.sample_rate > 0 and math.isfinite(self.sample_rate)):
            raise InvalidSamplingRate(self.sample_rate)

    def __iter__(self) -> Iterator[float]:
        step = self.frequency / self.sample_rate
        for n in itertools.count():
            yield float(SAMPLE_DTYPE(self.amplitude * self.function.value_at(n * step)))

    def take(self, count: int) -> np.ndarray:
        """Return the first ``count`` samples as a float32 array."""
        return np.fromiter(itertools.islice(self, count), dtype=SAMPLE_DTYPE, count=count)
