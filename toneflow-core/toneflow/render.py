from __future__ import annotations
import os
from typing import Union
from .config import AMPLITUDE, DURATION_SECONDS, FREQUENCY_HZ, SAMPLE_RATE
from .dsp.oscillator import SineOscillator
from .wav.writer import WavWriter


def render_tone(
    path: Union[str, "os.PathLike[str]"],
    duration_s: float = DURATION_SECONDS,
    frequency: float = FREQUENCY_HZ,
    amplitude: float = AMPLITUDE,
) -> int:
    """
    Render a sine tone to a WAV file at path and return the sample count.

    Same arguments always produce byte-identical files.
    """
    n = int(SAMPLE_RATE * duration_s)
    osc = SineOscillator(frequency, amplitude)
    writer = WavWriter()
    for _ in range(n):
        writer.add_sample(osc.process())
    writer.write_to_file(path)
    return n
