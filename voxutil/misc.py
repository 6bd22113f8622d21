"""Assorted numeric, random and byte helpers."""

from __future__ import annotations

import random
from typing import Iterable, Sequence

EPSILON = 1e-5


def sgn(val) -> int:
    """Return -1, 0 or 1 according to the sign of ``val``."""
    return (0 < val) - (val < 0)


def sqr(x):
    """Return ``x`` squared."""
    return x * x


def rand_range(low: int, high: int, rng: random.Random) -> int:
    """Return a random integer from ``[low, high)``."""
    if high <= low:
        raise ValueError(f"empty range [{low}, {high})")
    return rng.randint(low, high - 1)


def random_bool(rng: random.Random) -> bool:
    """Return a random boolean."""
    return bool(rand_range(0, 2, rng))


def frand(rng: random.Random) -> float:
    """Return a random float from ``[0, 1)``."""
    return rng.random()


def random_sample(container: Sequence, rng: random.Random):
    """Return a uniformly chosen element of ``container``."""
    return container[rand_range(0, len(container), rng)]


def endian_swap(data: bytes) -> bytes:
    """Return ``data`` with its byte order reversed."""
    return bytes(reversed(data))


def contains(container: Iterable, val) -> bool:
    """Return True if some element of ``container`` equals ``val``."""
    return any(item == val for item in container)


def memcpy_stride(src: bytes, elem_size: int, num_elements: int, ofs: int, stride: int) -> bytes:
    """Gather ``num_elements`` chunks of ``elem_size`` bytes starting at ``ofs`` every ``stride`` bytes."""
    if num_elements > 0:
        last_end = ofs + (num_elements - 1) * stride + elem_size
        if ofs < 0 or last_end > len(src):
            raise ValueError("strided copy reaches outside the source buffer")
    starts = (ofs + i * stride for i in range(num_elements))
    return b"".join(src[start:start + elem_size] for start in starts)


def triangular_number(n):
    """Return ``n * (n + 1) / 2``."""
    return n * (n + 1) // 2