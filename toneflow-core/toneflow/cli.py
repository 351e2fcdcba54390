from __future__ import annotations

"""
toneflow CLI

Renders a 2 second, 440 Hz sine tone at half amplitude to ./audio.wav
(44.1 kHz, 16-bit, mono PCM). Command-line arguments are ignored.

Exit codes:
- 0 on success
- 1 on any failure, with a single "Error: ..." line on stderr
"""

import logging
import sys
from typing import List, Optional

from .config import AMPLITUDE, DURATION_SECONDS, FREQUENCY_HZ, OUTPUT_PATH
from .errors import ToneflowError
from .render import render_tone

_log = logging.getLogger("toneflow.cli")
if not _log.handlers:
    h = logging.StreamHandler()
    h.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    _log.addHandler(h)
    _log.setLevel(logging.INFO)


def _fail(msg: str) -> int:
    print(f"Error: {msg}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    # argv is accepted for entry-point symmetry and ignored
    try:
        n = render_tone(OUTPUT_PATH, DURATION_SECONDS, FREQUENCY_HZ, AMPLITUDE)
    except (ToneflowError, OSError) as e:
        return _fail(str(e))
    _log.debug(f"wrote {n} samples to {OUTPUT_PATH}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
