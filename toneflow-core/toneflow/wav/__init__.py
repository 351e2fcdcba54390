from __future__ import annotations
from .header import WavHeader
from .writer import WavWriter, quantize, MAX_AMPLITUDE
__all__ = ["WavHeader", "WavWriter", "quantize", "MAX_AMPLITUDE"]
