"""
bandscope/config.py - Analyzer configuration.

``AnalyzerConfig`` bundles the six construction parameters of an Analyzer
into one immutable value that can be defined once and reused. It checks
types and obvious shape errors up front; range rules that depend on more
than one field (Nyquist clamping, cutoff ordering) stay with the Analyzer
and Buckets so they are enforced in exactly one place.

Environment variables read by ``AnalyzerConfig.from_env()`` (a ``.env``
file in the working directory is loaded first):
    BANDSCOPE_TRANSFORM_LENGTH  default: 1024
    BANDSCOPE_BUCKET_COUNT      default: 16
    BANDSCOPE_WINDOW            default: hann
    BANDSCOPE_LOWER_CUTOFF      default: 20.0
    BANDSCOPE_UPPER_CUTOFF      default: 20000.0
    BANDSCOPE_SAMPLING_RATE     default: 44100.0
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from dotenv import load_dotenv

from bandscope.types import Frequency
from bandscope.window import Window

ENV_PREFIX = "BANDSCOPE_"


@dataclass(frozen=True)
class AnalyzerConfig:
    """
    Construction parameters for an Analyzer.

    Attributes:
        transform_length: Samples per transform. Larger gives finer
            frequency resolution (sampling_rate / transform_length Hz per
            bin) at the cost of latency.
        bucket_count: Number of output bands.
        window: Window function, as a Window or its name.
        lower_cutoff: Start of the first band in Hz.
        upper_cutoff: End of the last band in Hz. Clamped to Nyquist by
            the Analyzer.
        sampling_rate: Sample rate of the input audio in Hz.

    Example:
        >>> config = AnalyzerConfig(transform_length=2048, window="blackman")
        >>> analyzer = Analyzer.from_config(config)
    """

    transform_length: int = 1024
    bucket_count: int = 16
    window: Window = Window.HANN
    lower_cutoff: Frequency = 20.0
    upper_cutoff: Frequency = 20000.0
    sampling_rate: Frequency = 44100.0

    def __post_init__(self) -> None:
        """Normalize the window and validate integer fields."""
        object.__setattr__(self, "window", Window.parse(self.window))
        if self.transform_length <= 0:
            raise ValueError(
                f"transform_length must be positive, got {self.transform_length}"
            )
        if self.bucket_count <= 0:
            raise ValueError(f"bucket_count must be positive, got {self.bucket_count}")

    @property
    def fft_bin_size(self) -> Frequency:
        """Hz between consecutive transform bins."""
        return self.sampling_rate / self.transform_length

    def with_overrides(self, **changes: object) -> AnalyzerConfig:
        """Return a copy with the given fields replaced (None values ignored)."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        base: AnalyzerConfig | None = None,
    ) -> AnalyzerConfig:
        """Build a config from ``BANDSCOPE_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``. When given,
                no ``.env`` file is loaded.
            base: Values used for unset variables. Defaults to DEFAULT_CONFIG.

        Raises:
            ValueError: A variable is set but cannot be parsed.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ
        base = base or DEFAULT_CONFIG

        def _read(name: str, parse: Callable[[str], Any]) -> Any:
            raw = environ.get(ENV_PREFIX + name)
            if raw is None or raw.strip() == "":
                return None
            try:
                return parse(raw.strip())
            except ValueError as exc:
                raise ValueError(f"Invalid {ENV_PREFIX}{name}={raw!r}: {exc}") from exc

        return base.with_overrides(
            transform_length=_read("TRANSFORM_LENGTH", int),
            bucket_count=_read("BUCKET_COUNT", int),
            window=_read("WINDOW", Window.parse),
            lower_cutoff=_read("LOWER_CUTOFF", float),
            upper_cutoff=_read("UPPER_CUTOFF", float),
            sampling_rate=_read("SAMPLING_RATE", float),
        )


# Pre-defined configurations for common use cases

DEFAULT_CONFIG = AnalyzerConfig()
"""Default configuration: 1024-point Hann window, 16 bands over 20 Hz-20 kHz."""

VISUALIZER_CONFIG = AnalyzerConfig(transform_length=512, bucket_count=32, upper_cutoff=10000.0)
"""Short transform for low-latency bar displays."""

HIGH_RESOLUTION_CONFIG = AnalyzerConfig(
    transform_length=4096, bucket_count=64, window=Window.BLACKMAN_HARRIS
)
"""Long transform with a low-leakage window for detailed inspection."""
