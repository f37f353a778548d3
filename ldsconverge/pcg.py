"""Minimal PCG32 random number generator (XSH-RR output, 64-bit state)."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1
_MULTIPLIER = 6364136223846793005


class Pcg32:
    """A PCG32 generator seeded with a state initializer and a stream id."""

    __slots__ = ("state", "inc")

    def __init__(self, initstate: int, initseq: int) -> None:
        self.state = 0
        # The increment selects the stream and must always be odd.
        self.inc = ((initseq << 1) | 1) & _MASK64
        self.next_uint32()
        self.state = (self.state + initstate) & _MASK64
        self.next_uint32()

    def next_uint32(self) -> int:
        """Return a uniformly distributed 32-bit unsigned integer."""
        old = self.state
        self.state = (old * _MULTIPLIER + self.inc) & _MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & _MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & _MASK32

    def bounded(self, bound: int) -> int:
        """Return a uniformly distributed integer r with 0 <= r < bound."""
        if not 1 <= bound <= _MASK32:
            raise ValueError(f"bound must be in [1, 2**32), got {bound}")
        # Reject the low values that would bias the modulus.
        threshold = ((1 << 32) - bound) % bound
        while True:
            r = self.next_uint32()
            if r >= threshold:
                return r % bound

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next_uint32()