"""Classic improved Perlin noise with octave helpers."""

from __future__ import annotations

import math
import random
from typing import Sequence, Union

DEFAULT_SEED = 1

SeedLike = Union[int, random.Random]


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def _grad(hash_value: int, x: float, y: float, z: float) -> float:
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (u if (h & 1) == 0 else -u) + (v if (h & 2) == 0 else -v)


def _weight(octaves: int) -> float:
    amp = 1.0
    value = 0.0
    for _ in range(octaves):
        value += amp
        amp /= 2
    return value


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def _divide(value: float, weight: float) -> float:
    if weight == 0:
        return math.nan
    return value / weight


class PerlinNoise:
    """Seeded Perlin noise generator over one, two or three dimensions."""

    def __init__(self, seed: SeedLike = DEFAULT_SEED):
        self._p: list[int] = []
        self.reseed(seed)

    def reseed(self, seed: SeedLike) -> None:
        """Rebuild the permutation table from an integer seed or a Random instance."""
        rng = seed if isinstance(seed, random.Random) else random.Random(int(seed) & 0xFFFFFFFF)
        perm = list(range(256))
        rng.shuffle(perm)
        self._p = perm + perm

    # Noise in [-1, 1]

    def noise1d(self, x: float) -> float:
        return self.noise3d(x, 0.0, 0.0)

    def noise2d(self, x: float, y: float) -> float:
        return self.noise3d(x, y, 0.0)

    def noise3d(self, x: float, y: float, z: float) -> float:
        p = self._p
        fx, fy, fz = math.floor(x), math.floor(y), math.floor(z)
        xi, yi, zi = int(fx) & 255, int(fy) & 255, int(fz) & 255
        x -= fx
        y -= fy
        z -= fz

        u, v, w = _fade(x), _fade(y), _fade(z)

        a = p[xi] + yi
        aa = p[a] + zi
        ab = p[a + 1] + zi
        b = p[xi + 1] + yi
        ba = p[b] + zi
        bb = p[b + 1] + zi

        return _lerp(
            w,
            _lerp(
                v,
                _lerp(u, _grad(p[aa], x, y, z), _grad(p[ba], x - 1, y, z)),
                _lerp(u, _grad(p[ab], x, y - 1, z), _grad(p[bb], x - 1, y - 1, z)),
            ),
            _lerp(
                v,
                _lerp(u, _grad(p[aa + 1], x, y, z - 1), _grad(p[ba + 1], x - 1, y, z - 1)),
                _lerp(u, _grad(p[ab + 1], x, y - 1, z - 1), _grad(p[bb + 1], x - 1, y - 1, z - 1)),
            ),
        )

    # Noise in [0, 1]

    def noise1d_01(self, x: float) -> float:
        return self.noise1d(x) * 0.5 + 0.5

    def noise2d_01(self, x: float, y: float) -> float:
        return self.noise2d(x, y) * 0.5 + 0.5

    def noise3d_01(self, x: float, y: float, z: float) -> float:
        return self.noise3d(x, y, z) * 0.5 + 0.5

    # Accumulated octave noise (unnormalized)

    def accumulated_octave_noise1d(self, x: float, octaves: int) -> float:
        result, amp = 0.0, 1.0
        for _ in range(octaves):
            result += self.noise1d(x) * amp
            x *= 2
            amp /= 2
        return result

    def accumulated_octave_noise2d(self, x: float, y: float, octaves: int) -> float:
        result, amp = 0.0, 1.0
        for _ in range(octaves):
            result += self.noise2d(x, y) * amp
            x *= 2
            y *= 2
            amp /= 2
        return result

    def accumulated_octave_noise3d(self, x: float, y: float, z: float, octaves: int) -> float:
        result, amp = 0.0, 1.0
        for _ in range(octaves):
            result += self.noise3d(x, y, z) * amp
            x *= 2
            y *= 2
            z *= 2
            amp /= 2
        return result

    # Normalized octave noise in [-1, 1]

    def normalized_octave_noise1d(self, x: float, octaves: int) -> float:
        return _divide(self.accumulated_octave_noise1d(x, octaves), _weight(octaves))

    def normalized_octave_noise2d(self, x: float, y: float, octaves: int) -> float:
        return _divide(self.accumulated_octave_noise2d(x, y, octaves), _weight(octaves))

    def normalized_octave_noise3d(self, x: float, y: float, z: float, octaves: int) -> float:
        return _divide(self.accumulated_octave_noise3d(x, y, z, octaves), _weight(octaves))

    # Accumulated octave noise clamped to [0, 1]

    def accumulated_octave_noise1d_01(self, x: float, octaves: int) -> float:
        return _clamp01(self.accumulated_octave_noise1d(x, octaves) * 0.5 + 0.5)

    def accumulated_octave_noise2d_01(self, x: float, y: float, octaves: int) -> float:
        return _clamp01(self.accumulated_octave_noise2d(x, y, octaves) * 0.5 + 0.5)

    def accumulated_octave_noise3d_01(self, x: float, y: float, z: float, octaves: int) -> float:
        return _clamp01(self.accumulated_octave_noise3d(x, y, z, octaves) * 0.5 + 0.5)

    # Normalized octave noise in [0, 1]

    def normalized_octave_noise1d_01(self, x: float, octaves: int) -> float:
        return self.normalized_octave_noise1d(x, octaves) * 0.5 + 0.5

    def normalized_octave_noise2d_01(self, x: float, y: float, octaves: int) -> float:
        return self.normalized_octave_noise2d(x, y, octaves) * 0.5 + 0.5

    def normalized_octave_noise3d_01(self, x: float, y: float, z: float, octaves: int) -> float:
        return self.normalized_octave_noise3d(x, y, z, octaves) * 0.5 + 0.5

    # Serialization

    def serialize(self) -> list[int]:
        """Return the 256-entry permutation table."""
        return self._p[:256]

    def deserialize(self, state: Sequence[int]) -> None:
        """Load a 256-entry permutation table of byte values."""
        table = [int(v) for v in state]
        if len(table) != 256:
            raise ValueError(f"expected 256 entries, got {len(table)}")
        if any(not 0 <= v <= 255 for v in table):
            raise ValueError("permutation entries must be bytes")
        self._p = table + table