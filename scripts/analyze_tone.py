"""CLI script: run a synthetic tone through the analyzer and print band levels.

Usage:
    # 440 Hz sine with the configured defaults (env / .env / built-ins):
    python scripts/analyze_tone.py

    # 1 kHz square wave, 8 bands up to 5 kHz, rectangular window:
    python scripts/analyze_tone.py --wave square --frequency 1000 \\
        --buckets 8 --upper 5000 --window rectangle

Output:
    One line per band: ``[start, end): value``.

Environment variables read:
    BANDSCOPE_*  - see bandscope/config.py. Command-line flags win.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
sys.path.insert(0, str(Path(__file__).parent.parent))

from bandscope import (  # noqa: E402
    Analyzer,
    AnalyzerConfig,
    SampleBuffer,
    WaveFunction,
    WaveGenerator,
)

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Analyze a synthetic tone and print per-band signal strength."
    )
    parser.add_argument(
        "--wave",
        choices=[w.value for w in WaveFunction],
        default=WaveFunction.SINE.value,
        help="Wave shape of the test tone (default: sine).",
    )
    parser.add_argument("--frequency", type=float, default=440.0, help="Tone frequency in Hz.")
    parser.add_argument("--amplitude", type=float, default=0.25, help="Peak amplitude.")
    parser.add_argument("--window", default=None, help="Window function name.")
    parser.add_argument("--buckets", type=int, default=None, metavar="N", help="Band count.")
    parser.add_argument(
        "--transform-length", type=int, default=None, metavar="N", help="Samples per transform."
    )
    parser.add_argument("--sampling-rate", type=float, default=None, metavar="HZ")
    parser.add_argument("--lower", type=float, default=None, metavar="HZ", help="Lower cutoff.")
    parser.add_argument("--upper", type=float, default=None, metavar="HZ", help="Upper cutoff.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = AnalyzerConfig.from_env().with_overrides(
            transform_length=args.transform_length,
            bucket_count=args.buckets,
            window=args.window,
            lower_cutoff=args.lower,
            upper_cutoff=args.upper,
            sampling_rate=args.sampling_rate,
        )
        analyzer = Analyzer.from_config(config)
        generator = WaveGenerator(
            WaveFunction(args.wave),
            sample_rate=config.sampling_rate,
            frequency=args.frequency,
            amplitude=args.amplitude,
        )
    except ValueError as exc:  # SpectrumError included
        logger.error("Invalid configuration: %s", exc)
        return 2

    logger.info(
        "%d-point %s transform, %.2f Hz per bin, %d bands",
        analyzer.transform_length,
        analyzer.window.value,
        analyzer.fft_bin_size,
        analyzer.bucket_count,
    )

    buffer = SampleBuffer(analyzer.transform_length)
    buffer.push(generator.take(analyzer.transform_length))
    logger.info("Buffer RMS: %.4f", buffer.rms())

    levels = analyzer.analyze(buffer)
    for (start, end), level in zip(analyzer.bands, levels):
        print(f"[{start:9.1f}, {end:9.1f}): {level:.6g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
