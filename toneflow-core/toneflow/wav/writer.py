"""
Buffered 16-bit mono PCM WAV writer.

Samples are quantized as they are added and kept in an int16 buffer; the
header is derived from the final buffer length when the file is written.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Union

import numpy as np

from ..config import BIT_DEPTH, RESERVE_SECONDS, SAMPLE_RATE, WRITE_CHUNK_SIZE
from ..errors import WavIOError, WriterFinalizedError
from .header import WavHeader

_log = logging.getLogger("toneflow.wav")

PathLike = Union[str, "os.PathLike[str]"]

MAX_AMPLITUDE = 2 ** (BIT_DEPTH - 1) - 1  # 32767; -1.0 maps to -32767, not -32768
_WRAP = 1 << BIT_DEPTH
_HALF = 1 << (BIT_DEPTH - 1)


def quantize(sample: float) -> int:
    """
    Scale a float sample by MAX_AMPLITUDE and truncate toward zero.

    Out-of-range input is not clamped: the result wraps around like a
    two's-complement int16 cast (1.5 -> -16386). NaN and inf have no
    integer value and raise ValueError or OverflowError; the oscillator
    never produces them.
    """
    v = int(float(sample) * MAX_AMPLITUDE)
    return ((v + _HALF) % _WRAP) - _HALF


class WavWriter:
    def __init__(self, reserve: int = SAMPLE_RATE * RESERVE_SECONDS):
        self._buf = np.empty(max(int(reserve), 1), dtype="<i2")
        self._n = 0
        self._finalized = False

    def __len__(self) -> int:
        return self._n

    @property
    def sample_count(self) -> int:
        return self._n

    @property
    def data_size(self) -> int:
        return self._n * self._buf.itemsize

    @property
    def finalized(self) -> bool:
        return self._finalized

    def add_sample(self, sample: float) -> None:
        if self._finalized:
            raise WriterFinalizedError("writer already written to disk; create a new WavWriter")
        if self._n == len(self._buf):
            self._buf = np.resize(self._buf, 2 * len(self._buf))
        self._buf[self._n] = quantize(sample)
        self._n += 1

    def extend(self, samples: Iterable[float]) -> None:
        for s in samples:
            self.add_sample(s)

    def samples(self) -> np.ndarray:
        """Copy of the quantized samples in insertion order."""
        return self._buf[: self._n].copy()

    def header(self) -> WavHeader:
        return WavHeader.for_samples(self._n)

    def write_to_file(self, path: PathLike) -> None:
        """
        Write header and samples to path.

        Raises WavIOError if the destination cannot be opened, written or
        closed. A failed write leaves whatever bytes reached the disk; the
        file must then be treated as invalid.
        """
        filename = os.fspath(path)
        header = self.header().to_bytes()
        data = memoryview(self._buf[: self._n].tobytes())
        try:
            f = open(filename, "wb")
        except OSError as e:
            raise WavIOError(f"Could not open file: {filename}", filename) from e
        try:
            with f:
                f.write(header)
                for off in range(0, len(data), WRITE_CHUNK_SIZE):
                    f.write(data[off:off + WRITE_CHUNK_SIZE])
        except OSError as e:
            raise WavIOError(f"Could not write file: {filename} ({e})", filename) from e
        self._finalized = True
        _log.debug(f"wrote {len(header) + len(data)} bytes ({self._n} samples) to {filename}")
