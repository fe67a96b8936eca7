"""
bandscope/types.py - Semantic type aliases shared across the pipeline.

Sequences of samples and signal strengths travel as 1-D numpy arrays.
The aliases document intent at API boundaries; they do not enforce it.
"""

from __future__ import annotations

import numpy as np

Sample = float
"""Raw amplitude of one audio sample, arbitrary input units."""

Frequency = float
"""Frequency in Hertz."""

SignalStrength = float
"""Non-negative power magnitude. Relative units, not calibrated dB."""

Band = tuple[Frequency, Frequency]
"""Half-open frequency interval ``[start, end)``."""

SAMPLE_DTYPE = np.float32
"""Storage dtype for samples and signal strengths (32-bit float)."""

COMPLEX_DTYPE = np.complex64
"""Transform input/output dtype matching SAMPLE_DTYPE precision."""
