"""Coprime step sizes near an irrational fraction of a ring size."""

from __future__ import annotations

import math
import struct


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


GOLDEN_RATIO = _f32(_f32(1.0 + _f32(math.sqrt(5.0))) / 2.0)


def irrational_coprime(n: int, irrational: float = GOLDEN_RATIO) -> int:
    """Return a number coprime to ``n`` closest to ``frac(irrational) * n``.

    Candidates below the target are tried before those above it at each
    distance; candidates above the target must stay below ``n``.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    fraction = _f32(math.fmod(_f32(irrational), 1.0))
    target = int(_f32(_f32(fraction * _f32(float(n))) + 0.5))

    offset = 0
    while True:
        if offset < target:
            candidate = target - offset
            if math.gcd(candidate, n) == 1:
                return candidate
        candidate = target + offset + 1
        if candidate < n and math.gcd(candidate, n) == 1:
            return candidate
        offset += 1