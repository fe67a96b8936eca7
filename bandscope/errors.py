"""
bandscope/errors.py - Exceptions raised by the spectral-analysis pipeline.

Every error reflects a caller-supplied configuration or argument defect.
They are raised eagerly, before any scratch buffers are allocated, and
are deterministic for the same inputs. None of them are retryable.

All of them subclass ValueError so callers that already guard argument
validation with ``except ValueError`` keep working.
"""

from __future__ import annotations


class SpectrumError(ValueError):
    """Base class for all bandscope validation errors."""


class InvalidSamplingRate(SpectrumError):
    """Raised when a sampling rate is not strictly positive.

    Args:
        sampling_rate: The rejected value.
    """

    def __init__(self, sampling_rate: float) -> None:
        self.sampling_rate = sampling_rate
        super().__init__(f"sampling_rate must be > 0, got {sampling_rate!r}")


class InvalidRange(SpectrumError):
    """Raised when bucket construction parameters do not describe a usable range.

    Args:
        lower_cutoff: Requested lower bound in Hz.
        upper_cutoff: Requested upper bound in Hz.
        bucket_count: Requested number of buckets.
        reason: Which rule was violated.
    """

    def __init__(
        self,
        lower_cutoff: float,
        upper_cutoff: float,
        bucket_count: int,
        reason: str,
    ) -> None:
        self.lower_cutoff = lower_cutoff
        self.upper_cutoff = upper_cutoff
        self.bucket_count = bucket_count
        self.reason = reason
        super().__init__(
            f"Invalid bucket range [{lower_cutoff!r}, {upper_cutoff!r}) "
            f"with {bucket_count!r} buckets: {reason}"
        )


class NotEnoughSamples(SpectrumError):
    """Raised when fewer samples are supplied than the transform length."""

    def __init__(self, available: int, required: int) -> None:
        self.available = available
        self.required = required
        super().__init__(f"Need at least {required} samples, got {available}")


class InvalidTransformLength(SpectrumError):
    """Raised when a transform length is not a positive integer."""

    def __init__(self, transform_length: int) -> None:
        self.transform_length = transform_length
        super().__init__(f"transform_length must be >= 1, got {transform_length!r}")
