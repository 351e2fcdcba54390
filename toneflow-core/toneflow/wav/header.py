from __future__ import annotations
import struct
from dataclasses import dataclass
from typing import List, Tuple
from ..config import (
    AUDIO_FORMAT_PCM, BIT_DEPTH, FMT_CHUNK_SIZE, HEADER_SIZE, NUM_CHANNELS, SAMPLE_RATE,
)

# (attribute, struct code) in on-disk order; tags are 4 raw bytes
_LAYOUT: List[Tuple[str, str]] = [
    ("riff_id", "4s"),
    ("chunk_size", "<I"),
    ("wave_id", "4s"),
    ("fmt_id", "4s"),
    ("fmt_size", "<I"),
    ("audio_format", "<H"),
    ("num_channels", "<H"),
    ("sample_rate", "<I"),
    ("byte_rate", "<I"),
    ("block_align", "<H"),
    ("bits_per_sample", "<H"),
    ("data_id", "4s"),
    ("data_size", "<I"),
]


@dataclass(frozen=True)
class WavHeader:
    """
    The 44-byte RIFF/WAVE header of a PCM file.

    Build one with for_samples(); it is computed from the final sample count
    at write time and never updated incrementally.
    """
    chunk_size: int
    data_size: int
    fmt_size: int = FMT_CHUNK_SIZE
    audio_format: int = AUDIO_FORMAT_PCM
    num_channels: int = NUM_CHANNELS
    sample_rate: int = SAMPLE_RATE
    byte_rate: int = SAMPLE_RATE * NUM_CHANNELS * (BIT_DEPTH // 8)
    block_align: int = NUM_CHANNELS * (BIT_DEPTH // 8)
    bits_per_sample: int = BIT_DEPTH
    riff_id: bytes = b"RIFF"
    wave_id: bytes = b"WAVE"
    fmt_id: bytes = b"fmt "
    data_id: bytes = b"data"

    @classmethod
    def for_samples(cls, sample_count: int) -> "WavHeader":
        if sample_count < 0:
            raise ValueError(f"sample count must be >= 0, got {sample_count}")
        block_align = NUM_CHANNELS * (BIT_DEPTH // 8)
        data_size = sample_count * block_align
        return cls(
            chunk_size=HEADER_SIZE + data_size - 8,
            data_size=data_size,
            sample_rate=SAMPLE_RATE,
            byte_rate=SAMPLE_RATE * block_align,
            block_align=block_align,
        )

    def to_bytes(self) -> bytes:
        """Encode each field in order, little-endian, without padding."""
        parts = []
        for name, code in _LAYOUT:
            value = getattr(self, name)
            if code == "4s" and len(value) != 4:
                raise ValueError(f"chunk tag {name}={value!r} must be exactly 4 bytes")
            try:
                parts.append(struct.pack(code, value))
            except struct.error as e:
                raise ValueError(f"header field {name}={value!r} does not fit {code}: {e}") from e
        out = b"".join(parts)
        if len(out) != HEADER_SIZE:
            raise ValueError(f"header encoded to {len(out)} bytes, expected {HEADER_SIZE}")
        return out
