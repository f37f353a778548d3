"""Generalised Thue-Morse sequence."""

from __future__ import annotations


def thue_morse(index: int, base: int) -> int:
    """Return the Thue-Morse value at ``index`` in the given base.

    The index is written in ``base``, its digits are summed and the sum is
    reduced modulo ``base``. In base 2 the sequence starts 0 1 1 0 1 0 0 1.
    """
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")
    total = 0
    while index:
        index, digit = divmod(index, base)
        total += digit
    return total % base