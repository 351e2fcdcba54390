from __future__ import annotations
import math
from typing import Iterator
import numpy as np
from ..config import SAMPLE_RATE

TWO_PI = np.float32(2.0 * np.pi)


class SineOscillator:
    """
    Phase-accumulating sine oscillator.

    Each process() call returns amplitude * sin(phase) and then advances the
    phase by 2*pi*frequency/sample_rate. Phase and product are float32; the sine
    itself comes from libm via math.sin and is rounded back to float32, so
    the stream does not depend on which SIMD path numpy selects.

    Frequency is assumed to be below sample_rate / 2 and amplitude within
    [0, 1]; neither is checked.
    """
    __slots__ = ("_freq", "_amp", "_sr", "_phase", "_step")

    def __init__(self, frequency: float, amplitude: float, sample_rate: int = SAMPLE_RATE):
        self._freq = np.float32(frequency)
        self._amp = np.float32(amplitude)
        self._sr = int(sample_rate)
        self._phase = np.float32(0.0)
        self._step = np.float32(TWO_PI * self._freq / np.float32(self._sr))

    @property
    def frequency(self) -> float: return float(self._freq)
    @property
    def amplitude(self) -> float: return float(self._amp)
    @property
    def sample_rate(self) -> int: return self._sr
    @property
    def phase(self) -> float: return float(self._phase)
    @property
    def phase_increment(self) -> float: return float(self._step)

    def process(self) -> float:
        sample = self._amp * np.float32(math.sin(float(self._phase)))
        self._phase = np.float32(self._phase + self._step)
        # step < 2*pi for audio-rate tones, so one subtraction is enough
        if self._phase >= TWO_PI:
            self._phase = np.float32(self._phase - TWO_PI)
        return float(sample)

    def take(self, n: int) -> np.ndarray:
        """Pull the next n samples as a float32 array."""
        if n < 0:
            raise ValueError(f"sample count must be >= 0, got {n}")
        out = np.empty(n, dtype=np.float32)
        for i in range(n):
            out[i] = self.process()
        return out

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self.process()
