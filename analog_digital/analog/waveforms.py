"""Waveform shape generators.

Every generator maps a row y to the column x where the wave crosses it.
y is scaled into radians so the shape repeats over the screen height
(radian_offset sets how many cycles fit), and the -1..1 amplitude is
mapped back onto 0..width-1.
"""

import math
from enum import Enum

_MASK32 = 0xFFFFFFFF


class Waveform(Enum):
    SINE = "sine"
    TRIANGLE = "triangle"
    SAWTOOTH = "sawtooth"
    SHARK_FIN = "shark_fin"
    SQUARE = "square"
    NOISE = "noise"


def _to_x(amplitude: float, width: int) -> int:
    return math.floor((amplitude + 1) / 2 * (width - 1) + 0.5)


def _phase(y: int, radian_offset: float, height: int) -> float:
    return y / height * radian_offset


def sine_wave(y: int, radian_offset: float, width: int, height: int) -> int:
    return _to_x(math.sin(_phase(y, radian_offset, height)), width)


def triangle_wave(y: int, radian_offset: float, width: int, height: int) -> int:
    # asin(sin(p)) folds the sine into straight ramps
    folded = math.asin(math.sin(_phase(y, radian_offset, height)))
    return _to_x(2 * folded / math.pi, width)


def sawtooth_wave(y: int, radian_offset: float, width: int, height: int) -> int:
    cycles = _phase(y, radian_offset, height) / (2 * math.pi)
    return _to_x(2.0 * (cycles - math.floor(cycles + 0.5)), width)


def shark_fin_wave(y: int, radian_offset: float, width: int, height: int) -> int:
    """Fast linear rise over 18% of the period, slow cosine fall after."""
    phase = math.fmod(_phase(y, radian_offset, height), 2 * math.pi) / (2 * math.pi)
    if phase < 0:
        phase += 1.0
    if phase < 0.18:
        level = phase / 0.18
    else:
        fall = (phase - 0.18) / 0.82
        level = math.cos(fall * math.pi) * 0.5 + 0.5
    return _to_x(level * 2.0 - 1.0, width)


def square_wave(y: int, radian_offset: float, width: int, height: int) -> int:
    level = 1.0 if math.sin(_phase(y, radian_offset, height)) >= 0 else -1.0
    return _to_x(level, width)


def noise_hash(segment: int, radian_offset: float) -> int:
    """Reproducible 32-bit pseudo-random value for a control point."""
    seed = ((segment + 1) * 2654435761) & _MASK32
    seed ^= (int(radian_offset * 100) * 2246822519) & _MASK32
    seed ^= seed >> 16
    seed = (seed * 0x45D9F3B) & _MASK32
    seed ^= seed >> 16
    return seed


def noise_wave(y: int, radian_offset: float, width: int, height: int) -> int:
    """Cosine-interpolated random control points, one per segment."""
    period = max(2.0, (2 * math.pi * height) / radian_offset)
    segment = math.floor(y / period)
    t = (y - segment * period) / period
    smooth = (1.0 - math.cos(t * math.pi)) / 2.0
    x0 = noise_hash(segment, radian_offset) % width
    x1 = noise_hash(segment + 1, radian_offset) % width
    return x0 + int(smooth * (x1 - x0))


GENERATORS = {
    Waveform.SINE: sine_wave,
    Waveform.TRIANGLE: triangle_wave,
    Waveform.SAWTOOTH: sawtooth_wave,
    Waveform.SHARK_FIN: shark_fin_wave,
    Waveform.SQUARE: square_wave,
    Waveform.NOISE: noise_wave,
}
