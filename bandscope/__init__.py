"""
bandscope - Spectrum-analyzer band energies from a rolling audio buffer.

Pipeline:
    SampleBuffer -> Analyzer.calculate_spectrum -> Analyzer.bucketize_spectrum

Public API:
    Analysis:   Analyzer, Buckets, Window, SampleBuffer
    Transform:  Transform, ScipyTransform, plan_forward
    Config:     AnalyzerConfig, DEFAULT_CONFIG
    Fixtures:   WaveGenerator, WaveFunction
    Errors:     SpectrumError, InvalidSamplingRate, InvalidRange,
                NotEnoughSamples, InvalidTransformLength
"""

from bandscope.analyzer import Analyzer
from bandscope.buckets import Buckets
from bandscope.config import DEFAULT_CONFIG, AnalyzerConfig
from bandscope.errors import (
    InvalidRange,
    InvalidSamplingRate,
    InvalidTransformLength,
    NotEnoughSamples,
    SpectrumError,
)
from bandscope.sample_buffer import SampleBuffer
from bandscope.transform import ScipyTransform, Transform, plan_forward
from bandscope.wave import WaveFunction, WaveGenerator
from bandscope.window import Window

__all__ = [
    "Analyzer",
    "AnalyzerConfig",
    "Buckets",
    "DEFAULT_CONFIG",
    "InvalidRange",
    "InvalidSamplingRate",
    "InvalidTransformLength",
    "NotEnoughSamples",
    "SampleBuffer",
    "ScipyTransform",
    "SpectrumError",
    "Transform",
    "WaveFunction",
    "WaveGenerator",
    "Window",
    "plan_forward",
]
