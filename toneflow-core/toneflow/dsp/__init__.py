from __future__ import annotations
from .oscillator import SineOscillator
__all__ = ["SineOscillator"]
