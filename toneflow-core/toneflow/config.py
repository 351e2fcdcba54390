from __future__ import annotations

"""
Fixed format and run constants for toneflow.

There is no runtime configuration: the output format is always
44.1 kHz / 16-bit / mono PCM and the CLI always renders the same tone.
"""

# Output format
SAMPLE_RATE = 44100          # samples per second
BIT_DEPTH = 16               # bits per sample
NUM_CHANNELS = 1             # mono
AUDIO_FORMAT_PCM = 1         # WAVE_FORMAT_PCM

# RIFF/WAVE layout
FMT_CHUNK_SIZE = 16          # size of the "fmt " sub-chunk body for PCM
HEADER_SIZE = 44             # RIFF + fmt + data chunk headers

# Writer
WRITE_CHUNK_SIZE = 8192      # bytes per file write call
RESERVE_SECONDS = 5          # initial buffer capacity, in seconds of audio

# Tone rendered by the CLI
DURATION_SECONDS = 2
FREQUENCY_HZ = 440.0         # A4
AMPLITUDE = 0.5
OUTPUT_PATH = "audio.wav"
