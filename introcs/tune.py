"""Synthesize notes with harmonics and print their samples."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

SPS = 44100
CONCERT_A_HZ = 440.0
NOTES_ON_SCALE = 12.0


def superpose(
    a: Sequence[float], b: Sequence[float], a_weight: float, b_weight: float
) -> list[float]:
    """Return the weighted sum of two equally long sample sequences."""
    return [x * a_weight + y * b_weight for x, y in zip(a, b, strict=True)]


def tone(hz: float, duration: float) -> list[float]:
    """Return a sine wave of frequency ``hz`` lasting ``duration`` seconds."""
    count = int(SPS * duration) + 1
    return [math.sin(2.0 * math.pi * i * hz / SPS) for i in range(count)]


def note(pitch: int, duration: float) -> list[float]:
    """Return a note ``pitch`` half-steps from concert A, with octave harmonics."""
    hz = CONCERT_A_HZ * 2.0 ** (pitch / NOTES_ON_SCALE)
    harmonics = superpose(tone(2 * hz, duration), tone(hz / 2, duration), 0.5, 0.5)
    return superpose(tone(hz, duration), harmonics, 0.5, 0.5)


def read_notes(stream: TextIO) -> Iterator[tuple[int, float]]:
    """Yield (pitch, duration) pairs from whitespace-separated text."""
    tokens = iter(stream.read().split())
    for pitch_token in tokens:
        duration_token = next(tokens, None)
        if duration_token is None:
            raise ValueError(f"pitch {pitch_token!r} has no duration")
        yield int(pitch_token), float(duration_token)


def main(argv: Sequence[str] | None = None) -> int:
    """Read notes from standard input and print every sample."""
    out = sys.stdout
    for pitch, duration in read_notes(sys.stdin):
        out.write("".join(f"{sample:.6f}\n" for sample in note(pitch, duration)))
    return 0