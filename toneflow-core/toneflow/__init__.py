from __future__ import annotations
from .dsp.oscillator import SineOscillator
from .wav.header import WavHeader
from .wav.writer import WavWriter
from .render import render_tone
from .errors import ToneflowError, WavIOError, WriterFinalizedError
__all__ = ["SineOscillator", "WavHeader", "WavWriter", "render_tone", "ToneflowError", "WavIOError", "WriterFinalizedError"]
