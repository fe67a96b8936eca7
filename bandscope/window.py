"""
bandscope/window.py - Window functions applied before the forward transform.

A window tapers a finite sample buffer toward its edges so the transform
sees less of the discontinuity where the buffer wraps around. Each variant
is a pure function of the requested length.

Design:
    - ``Window`` is a closed Enum. Each member maps to a numpy/scipy window
      function; there is no subclassing and no mutable state.
    - ``coefficients()`` returns the symmetric window (first and last
      coefficients equal), as ``np.hanning`` and friends define it.
    - ``generate()`` walks the same array lazily and returns a fresh
      generator on every call, so the sequence restarts by calling it again.
    - A single-coefficient window is ``[1.0]`` for every variant.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import Enum

import numpy as np
from scipy.signal import windows as scipy_windows

# Spellings accepted by Window.parse() besides the canonical values
_ALIASES: dict[str, str] = {
    "rect": "rectangle",
    "rectangular": "rectangle",
    "boxcar": "rectangle",
    "hanning": "hann",
    "bartlett": "triangle",
    "triangular": "triangle",
}


def _blackman_harris(length: int) -> np.ndarray:
    return scipy_windows.blackmanharris(length, sym=True)


_WINDOW_FUNCTIONS: dict[str, Callable[[int], np.ndarray]] = {
    "rectangle": np.ones,
    "hann": np.hanning,
    "hamming": np.hamming,
    "blackman": np.blackman,
    "blackman_harris": _blackman_harris,
    "triangle": np.bartlett,
}


class Window(Enum):
    """Window function variants."""

    RECTANGLE = "rectangle"
    HANN = "hann"
    HAMMING = "hamming"
    BLACKMAN = "blackman"
    BLACKMAN_HARRIS = "blackman_harris"
    TRIANGLE = "triangle"

    @classmethod
    def parse(cls, name: str | Window) -> Window:
        """Resolve a window from a user-supplied name.

        Matching is case-insensitive; hyphens and spaces count as
        underscores, so ``"Blackman-Harris"`` resolves to BLACKMAN_HARRIS.

        Raises:
            ValueError: If the name matches no variant.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("-", "_").replace(" ", "_")
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            valid = sorted(w.value for w in cls)
            raise ValueError(f"Unknown window {name!r}, valid options: {valid}") from None

    def coefficients(self, length: int) -> np.ndarray:
        """Return ``length`` window coefficients as a float64 array."""
        if length <= 0:
            return np.zeros(0, dtype=np.float64)
        if length == 1:
            return np.ones(1, dtype=np.float64)
        return np.asarray(_WINDOW_FUNCTIONS[self.value](length), dtype=np.float64)

    def generate(self, length: int) -> Iterator[float]:
        """Yield ``length`` window coefficients in index order."""
        for value in self.coefficients(length):
            yield float(value)

    @property
    def is_tapered(self) -> bool:
        """True for every variant except RECTANGLE."""
        return self is not Window.RECTANGLE
