"""
bandscope/analyzer.py - Power spectrum and band aggregation for one channel.

The Analyzer turns a buffer of samples into one value per visual bucket:

    samples
        |
        +- calculate_spectrum()   last N samples x window -> forward DFT -> |X|^2
        |       |
        +- bucketize_spectrum()   bins 1..N/2 -> band lookup -> mean per band
                |
                v
        one SignalStrength per bucket

Design:
    - The Analyzer is a frozen dataclass. It owns its Window and Buckets by
      value and shares its transform plan with every other analyzer of the
      same length (see bandscope/transform.py). Copies share the plan too.
    - Every call allocates its own scratch arrays, so one instance can be
      used from many threads without locking.
    - The spectrum is the raw, two-sided power spectrum: DC bin included,
      mirrored upper half included, no normalization by length or window
      energy. Values are relative power, not calibrated dB.
    - Bucketization uses the one-sided convention: bins 1..N/2 (integer
      division), skipping DC. Bands no bin falls into report 0.0.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

from bandscope.buckets import Buckets
from bandscope.errors import InvalidSamplingRate, InvalidTransformLength, NotEnoughSamples
from bandscope.sample_buffer import SampleBuffer
from bandscope.transform import Transform, plan_forward
from bandscope.types import COMPLEX_DTYPE, SAMPLE_DTYPE, Band, Frequency
from bandscope.window import Window

if TYPE_CHECKING:
    from bandscope.config import AnalyzerConfig

logger = logging.getLogger(__name__)


def _check_sampling_rate(sampling_rate: Frequency) -> None:
    # NaN fails the comparison as well
    if not (sampling_rate > 0 and math.isfinite(sampling_rate)):
        raise InvalidSamplingRate(sampling_rate)


@dataclass(frozen=True)
class Analyzer:
    """Immutable spectral analyzer configuration.

    Build one with ``Analyzer.new()`` or ``Analyzer.from_config()``; the
    factory validates inputs and clamps the upper cutoff to Nyquist before
    the Buckets are created.

    Attributes:
        transform: Shared forward transform plan. Its length is the
            number of samples analyzed per call.
        window: Window applied to the samples before the transform.
        buckets: Output frequency bands.
        sampling_rate: Sample rate of the analyzed audio in Hz.
        fft_bin_size: Hz between consecutive transform bins
            (``sampling_rate / transform_length``).

    Example:
        >>> analyzer = Analyzer.new(1024, 16, Window.HANN, 20.0, 10000.0, 44100.0)
        >>> levels = analyzer.analyze(samples)
        >>> len(levels)
        16
    """

    transform: Transform
    window: Window
    buckets: Buckets
    sampling_rate: Frequency
    fft_bin_size: Frequency = field(init=False)
    _window_coefficients: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _check_sampling_rate(self.sampling_rate)
        length = self.transform.length
        if length < 1:
            raise InvalidTransformLength(length)

        coefficients = self.window.coefficients(length).astype(SAMPLE_DTYPE)
        coefficients.flags.writeable = False

        object.__setattr__(self, "fft_bin_size", self.sampling_rate / length)
        object.__setattr__(self, "_window_coefficients", coefficients)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(
        cls,
        transform_length: int,
        bucket_count: int,
        window: Window | str,
        lower_cutoff: Frequency,
        upper_cutoff: Frequency,
        sampling_rate: Frequency,
    ) -> Analyzer:
        """Validate parameters and build an Analyzer.

        ``upper_cutoff`` is silently lowered to ``sampling_rate / 2`` when it
        exceeds Nyquist.

        Raises:
            InvalidSamplingRate: sampling_rate is not strictly positive.
            InvalidTransformLength: transform_length < 1.
            InvalidRange: Buckets rejected the cutoffs or bucket_count.
            ValueError: window names no known variant.
        """
        _check_sampling_rate(sampling_rate)
        if transform_length < 1:
            raise InvalidTransformLength(transform_length)

        nyquist = sampling_rate / 2.0
        if upper_cutoff > nyquist:
            logger.debug(
                "upper_cutoff %.1f Hz above Nyquist, clamped to %.1f Hz",
                upper_cutoff,
                nyquist,
            )
            upper_cutoff = nyquist

        buckets = Buckets(lower_cutoff, upper_cutoff, bucket_count)

        return cls(
            transform=plan_forward(transform_length),
            window=Window.parse(window),
            buckets=buckets,
            sampling_rate=sampling_rate,
        )

    @classmethod
    def from_config(cls, config: AnalyzerConfig) -> Analyzer:
        """Build an Analyzer from an AnalyzerConfig."""
        return cls.new(
            config.transform_length,
            config.bucket_count,
            config.window,
            config.lower_cutoff,
            config.upper_cutoff,
            config.sampling_rate,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def transform_length(self) -> int:
        return self.transform.length

    @property
    def bucket_count(self) -> int:
        return len(self.buckets)

    @property
    def bands(self) -> tuple[Band, ...]:
        return self.buckets.bands

    @property
    def lower_cutoff(self) -> Frequency | None:
        return self.buckets.lower_cutoff

    @property
    def upper_cutoff(self) -> Frequency | None:
        return self.buckets.upper_cutoff

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    def calculate_spectrum(self, samples: Any) -> np.ndarray:
        """Compute the power spectrum of the most recent samples.

        Args:
            samples: 1-D sequence of samples (list, numpy array or
                SampleBuffer), oldest first, recorded at ``sampling_rate``.
                Only the last ``transform_length`` values are used.

        Returns:
            float32 array of ``transform_length`` squared magnitudes.

        Raises:
            NotEnoughSamples: Fewer than ``transform_length`` samples given.
        """
        if isinstance(samples, SampleBuffer):
            samples = samples.samples()

        length = self.transform_length
        available = len(samples)
        if available < length:
            raise NotEnoughSamples(available, length)

        recent = np.asarray(samples, dtype=SAMPLE_DTYPE)
        if recent.ndim != 1:
            raise ValueError(f"samples must be 1-D, got shape {recent.shape}")
        recent = recent[available - length :]

        windowed = (recent * self._window_coefficients).astype(COMPLEX_DTYPE)
        output = self.transform.process(windowed)

        power = np.square(output.real) + np.square(output.imag)
        return power.astype(SAMPLE_DTYPE, copy=False)

    def bucketize_spectrum(self, spectrum: Any) -> np.ndarray:
        """Average spectrum bins into the configured frequency bands.

        Bins ``1..len(spectrum) // 2`` are mapped to ``i * fft_bin_size`` Hz
        and looked up in the buckets. Each band reports the mean of the bins
        that fall inside it, or 0.0 if none do.

        The spectrum length is taken as given; it is not checked against
        ``transform_length``.

        Returns:
            float32 array of ``bucket_count`` values in ascending band order.
        """
        values = np.asarray(spectrum, dtype=SAMPLE_DTYPE)
        indices = np.arange(1, values.shape[0] // 2 + 1)

        band_indices = self.buckets.locate_many(indices * self.fft_bin_size)
        mapped = band_indices >= 0

        count = self.bucket_count
        sums = np.bincount(
            band_indices[mapped], weights=values[indices[mapped]], minlength=count
        )
        counts = np.bincount(band_indices[mapped], minlength=count)

        means = np.zeros(count, dtype=np.float64)
        np.divide(sums, counts, out=means, where=counts > 0)
        return means.astype(SAMPLE_DTYPE)

    def analyze(self, samples: Any) -> np.ndarray:
        """Shorthand for ``bucketize_spectrum(calculate_spectrum(samples))``."""
        return self.bucketize_spectrum(self.calculate_spectrum(samples))
