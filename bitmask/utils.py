from typing import Iterator


def full_mask(width: int) -> int:
    """All ones in the low `width` bits."""
    return (1 << width) - 1


def to_unsigned(mask: int, width: int) -> int:
    """
    Reinterpret `mask` as an unsigned `width`-bit value.

    Negative values are read as two's complement and bits at or above
    `width` are dropped, matching a cast to a native unsigned integer.
    """
    return mask & full_mask(width)


def iter_set_bits(word: int) -> Iterator[int]:
    """Yield positions of set bits in a non-negative word, lowest first."""
    bit = 0
    while word:
        if word & 1:
            yield bit
        word >>= 1
        bit += 1
