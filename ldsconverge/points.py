"""Point set generators on the unit interval, all in single precision."""

from __future__ import annotations

import enum
import math
import struct
from collections.abc import Callable
from functools import lru_cache

from ldsconverge.coprime import GOLDEN_RATIO, irrational_coprime
from ldsconverge.kritzinger import kritzinger_points
from ldsconverge.pcg import Pcg32
from ldsconverge.thue_morse import thue_morse

RANDOM_SEED = 0x1337BEEF

_UINT32_MAX_F32 = 4294967296.0  # 4294967295 rounded to single precision

PermuteFn = Callable[[int, int, int], int]

_PERMUTATION_60 = (
    0, 15, 30, 40, 2, 48, 20, 35, 8, 52, 23, 43, 12, 26, 55, 4, 32, 45, 17, 37,
    6, 50, 28, 10, 57, 21, 41, 13, 33, 54, 1, 25, 46, 18, 38, 5, 49, 29, 9, 58,
    22, 42, 14, 34, 53, 3, 27, 47, 16, 36, 7, 51, 19, 44, 31, 11, 56, 24, 39, 59,
)

_PERMUTATION_84 = (
    0, 22, 64, 32, 50, 76, 10, 38, 56, 18, 72, 45, 6, 28, 59, 79, 41, 13, 67, 25, 54,
    2, 36, 70, 16, 48, 81, 30, 61, 8, 43, 74, 20, 52, 4, 34, 66, 15, 46, 77, 26, 11, 62,
    39, 82, 57, 23, 69, 33, 3, 51, 19, 73, 42, 7, 60, 29, 80, 47, 14, 65, 35, 1, 53, 24,
    68, 12, 40, 78, 58, 27, 5, 44, 71, 17, 55, 37, 83, 21, 49, 75, 9, 31, 63,
)


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _fmod1(value: float) -> float:
    return _f32(math.fmod(_f32(value), 1.0))


def _check_count(num_points: int) -> None:
    if num_points < 0:
        raise ValueError(f"num_points must be non-negative, got {num_points}")


class SequenceOffset(enum.Enum):
    """Offset applied to a whole regular point set."""

    NONE = "none"
    HALF_BUCKET = "half_bucket"
    RANDOM = "random"


class PointOffset(enum.Enum):
    """Offset applied to each point of a regular point set."""

    NONE = "none"
    STRATIFY = "stratify"


class Ordering(enum.Enum):
    """Order in which the cells of a regular point set are visited."""

    SEQUENTIAL = "sequential"
    SHUFFLE_WHITE = "shuffle_white"
    SHUFFLE_GOLDEN_RATIO = "shuffle_golden_ratio"


def make_rng(sequence: int = 0) -> Pcg32:
    """Return the deterministic generator for the given stream."""
    return Pcg32(RANDOM_SEED, sequence)


def random_float01(rng) -> float:
    """Return a single precision value in [0, 1] drawn from ``rng``."""
    return _f32(_f32(float(rng.next_uint32())) / _UINT32_MAX_F32)


def white_noise(num_points: int, sequence: int) -> list[float]:
    """Return independent uniform random points."""
    _check_count(num_points)
    rng = make_rng(sequence)
    return [random_float01(rng) for _ in range(num_points)]


def _shuffled_indices(count: int, rng: Pcg32) -> list[int]:
    indices = list(range(count))
    for i in reversed(range(1, count)):
        j = rng.bounded(i + 1)
        indices[i], indices[j] = indices[j], indices[i]
    return indices


def regular(
    num_points: int,
    sequence: int,
    sequence_offset: SequenceOffset,
    ordering: Ordering,
    point_offset: PointOffset,
) -> list[float]:
    """Return a regular grid of points, optionally offset, jittered and reordered."""
    _check_count(num_points)
    if num_points == 0:
        return []
    rng = make_rng(sequence)
    n = _f32(float(num_points))

    if ordering is Ordering.SHUFFLE_WHITE:
        locations = _shuffled_indices(num_points, rng)
    elif ordering is Ordering.SHUFFLE_GOLDEN_RATIO:
        gr_step = irrational_coprime(num_points)
        locations = [(i * gr_step) % num_points for i in range(num_points)]
    else:
        locations = list(range(num_points))

    if sequence_offset is SequenceOffset.HALF_BUCKET:
        offset = _f32(0.5 / n)
    elif sequence_offset is SequenceOffset.RANDOM:
        offset = random_float01(rng)
    else:
        offset = 0.0

    points = []
    for location in locations:
        if point_offset is PointOffset.STRATIFY:
            jitter = _f32(random_float01(rng) / n)
        else:
            jitter = 0.0
        cell = _f32(_f32(float(location)) / n)
        points.append(_fmod1(_f32(offset + jitter) + cell))
    return points


def regular_repeat(
    num_points: int,
    sequence: int,
    sequence_offset: SequenceOffset,
    ordering: Ordering,
    point_offset: PointOffset,
    repeat_count: int,
) -> list[float]:
    """Return ``repeat_count`` regular point sets whose sizes add to ``num_points``."""
    _check_count(num_points)
    if repeat_count < 1:
        raise ValueError(f"repeat_count must be positive, got {repeat_count}")
    points: list[float] = []
    for iteration in range(repeat_count):
        start = iteration * num_points // repeat_count
        end = (iteration + 1) * num_points // repeat_count
        points.extend(
            regular(
                end - start,
                sequence * repeat_count + iteration,
                sequence_offset,
                ordering,
                point_offset,
            )
        )
    return points


def van_der_corput(index: int, base: int, permute: PermuteFn | None = None) -> float:
    """Return the radical inverse of ``index`` in ``base`` (at most 16 digits).

    ``permute(index, digit_position, remainder)`` may scramble each digit.
    """
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    fbase = _f32(float(base))
    result = 0.0
    f = _f32(1.0 / fbase)
    i = _f32(float(index))
    for position in range(16):
        if i <= 0.0:
            break
        remainder = int(math.fmod(i, fbase))
        if permute is not None:
            remainder = permute(index, position, remainder)
        digit = _f32(math.fmod(float(remainder), fbase))
        result = _f32(result + _f32(f * digit))
        i = _f32(math.floor(_f32(i / fbase)))
        f = _f32(f / fbase)
    return result


def _offset_for(sequence: int, random_offset: bool) -> float:
    return random_float01(make_rng(sequence)) if random_offset else 0.0


def _radical_inverse_points(
    num_points: int,
    sequence: int,
    base: int,
    random_offset: bool,
    permute: PermuteFn | None = None,
    index_map: Callable[[int], int] = lambda index: index,
) -> list[float]:
    _check_count(num_points)
    offset = _offset_for(sequence, random_offset)
    return [
        _fmod1(offset + van_der_corput(index_map(i), base, permute))
        for i in range(num_points)
    ]


def vdc_points(num_points: int, sequence: int, base: int, random_offset: bool) -> list[float]:
    """Return the van der Corput sequence in ``base``, optionally randomly offset."""
    return _radical_inverse_points(num_points, sequence, base, random_offset)


def ostromoukhov60(num_points: int, sequence: int, random_offset: bool) -> list[float]:
    """Return the base 60 van der Corput sequence with a digit permutation."""
    return _radical_inverse_points(
        num_points, sequence, 60, random_offset,
        lambda index, position, remainder: _PERMUTATION_60[remainder],
    )


def ostromoukhov84(num_points: int, sequence: int, random_offset: bool) -> list[float]:
    """Return the base 84 van der Corput sequence with a digit permutation."""
    return _radical_inverse_points(
        num_points, sequence, 84, random_offset,
        lambda index, position, remainder: _PERMUTATION_84[remainder],
    )


def vdc_thue_morse(num_points: int, sequence: int, base: int, random_offset: bool) -> list[float]:
    """Return the van der Corput sequence with each group of ``base`` indices
    reordered by the Thue-Morse sequence."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")

    def index_map(index: int) -> int:
        return (index // base) * base + thue_morse(index, base)

    return _radical_inverse_points(
        num_points, sequence, base, random_offset, index_map=index_map
    )


@lru_cache(maxsize=8)
def _cached_kritzinger(count: int) -> tuple[float, ...]:
    return tuple(kritzinger_points(count))


def kritzinger(num_points: int, sequence: int, random_offset: bool) -> list[float]:
    """Return the Kritzinger sequence, optionally randomly offset."""
    _check_count(num_points)
    points = list(_cached_kritzinger(num_points))
    if random_offset:
        offset = random_float01(make_rng(sequence))
        points = [_fmod1(p + offset) for p in points]
    return points


def golden_ratio(num_points: int, sequence: int, random_offset: bool) -> list[float]:
    """Return the golden ratio additive recurrence, optionally randomly offset."""
    _check_count(num_points)
    value = _offset_for(sequence, random_offset)
    points = []
    for _ in range(num_points):
        points.append(value)
        value = _fmod1(value + GOLDEN_RATIO)
    return points