"""Kritzinger low discrepancy sequence.

Each new point y minimises F(y) = (N+1) y^2 - y - 2 * sum(max(x, y)) over the
N existing points x. Between consecutive sorted points F is a quadratic, so
its minimum in each region is found analytically and the best one is kept.
"""

from __future__ import annotations

import bisect
import math
import struct


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class KritzingerSequence:
    """A growing Kritzinger sequence, kept in insertion and sorted order."""

    def __init__(self) -> None:
        self.points: list[float] = []
        self.sorted_points: list[float] = []

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def _region_constant(self, segment: int) -> float:
        c = 0.0
        for x in self.sorted_points[segment:]:
            c = _f32(c - _f32(2.0 * x))
        return c

    def add_point(self) -> float:
        """Append and return the next point of the sequence."""
        n = len(self.sorted_points)
        a = _f32(float(n + 1))
        best_y = 0.0
        best_score = math.inf

        for segment in range(n + 1):
            b = _f32(-1.0 - 2.0 * segment)
            low = self.sorted_points[segment - 1] if segment > 0 else 0.0
            high = self.sorted_points[segment] if segment < n else 1.0

            y = _f32(-b / _f32(2.0 * a))
            if y <= low or y >= high:
                continue
            c = self._region_constant(segment)
            score = _f32(_f32(_f32(_f32(a * y) * y) + _f32(b * y)) + c)
            if score < best_score:
                best_score = score
                best_y = y

        self.points.append(best_y)
        bisect.insort(self.sorted_points, best_y)
        return best_y


def kritzinger_points(count: int) -> list[float]:
    """Return the first ``count`` points of the Kritzinger sequence."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    sequence = KritzingerSequence()
    for _ in range(count):
        sequence.add_point()
    return list(sequence.points)