"""
Shared fixtures for the test suite.

Centralizes the reference tone and analyzer factories so individual test
files don't repeat construction boilerplate.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest

from bandscope import Analyzer, WaveGenerator, Window

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SAMPLE_RATE: float = 44100.0
NUM_BUCKETS: int = 16

REFERENCE_SPECTRUM_16: tuple[float, ...] = (
    3.0186355,
    0.31955782,
    0.07949541,
    0.03741721,
    0.023034703,
    0.016638935,
    0.013468596,
    0.011947523,
    0.011491794,
    0.011947523,
    0.013468596,
    0.016638935,
    0.023034703,
    0.03741721,
    0.07949541,
    0.31955782,
)
"""Power spectrum of the first 16 samples of the default 440 Hz tone
(amplitude 0.25, 44.1 kHz), rectangle window."""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def generate_samples(length: int, **kwargs: object) -> np.ndarray:
    """First ``length`` samples of a WaveGenerator at SAMPLE_RATE."""
    return WaveGenerator(sample_rate=SAMPLE_RATE, **kwargs).take(length)  # type: ignore[arg-type]


@pytest.fixture()
def make_analyzer() -> Callable[..., Analyzer]:
    """Factory for analyzers over 20 Hz-10 kHz at 44.1 kHz.

    Any construction parameter can be overridden by keyword.
    """

    def _make(**overrides: object) -> Analyzer:
        params: dict[str, object] = {
            "transform_length": 512,
            "bucket_count": NUM_BUCKETS,
            "window": Window.RECTANGLE,
            "lower_cutoff": 20.0,
            "upper_cutoff": 10000.0,
            "sampling_rate": SAMPLE_RATE,
        }
        params.update(overrides)
        return Analyzer.new(**params)  # type: ignore[arg-type]

    return _make
