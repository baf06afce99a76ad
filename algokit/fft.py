"""Complex FFT and exact polynomial multiplication modulo an integer."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence

DEFAULT_MOD = 10**9 + 7


def _bit_reverse(a: list[complex]) -> None:
    n = len(a)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j |= bit
        if i < j:
            a[i], a[j] = a[j], a[i]


def fft(values: Sequence[complex], invert: bool = False) -> list[complex]:
    """Discrete Fourier transform of ``values``; the length must be a power of two.

    With ``invert`` the inverse transform is computed, including the ``1/n`` scaling.
    """
    a = [complex(v) for v in values]
    n = len(a)
    if n == 0 or n & (n - 1):
        raise ValueError(f"length must be a positive power of two, got {n}")
    _bit_reverse(a)
    sign = -1.0 if invert else 1.0
    roots = [cmath.rect(1.0, sign * 2.0 * math.pi * k / n) for k in range(n // 2)]
    length = 2
    while length <= n:
        half = length // 2
        step = n // length
        for start in range(0, n, length):
            for j in range(half):
                u = a[start + j]
                v = a[start + j + half] * roots[j * step]
                a[start + j] = u + v
                a[start + j + half] = u - v
        length <<= 1
    if invert:
        a = [x / n for x in a]
    return a


def multiply_mod(a: Sequence[int], b: Sequence[int], mod: int = DEFAULT_MOD) -> list[int]:
    """Product of the polynomials ``a`` and ``b`` with coefficients reduced modulo ``mod``.

    Each coefficient is split around the square root of ``mod`` so that the
    floating-point transforms stay precise; four transforms are used in all.
    """
    if not a or not b:
        raise ValueError("polynomials must have at least one coefficient")
    if mod < 1:
        raise ValueError(f"modulus must be positive, got {mod}")
    left = [x % mod for x in a]
    right = [x % mod for x in b]
    final_size = len(left) + len(right) - 1
    n = 1 << (final_size - 1).bit_length()
    split = math.isqrt(mod) + 10

    p = [complex(x % split, x // split) for x in left] + [0j] * (n - len(left))
    q = [complex(x % split, x // split) for x in right] + [0j] * (n - len(right))
    fp = fft(p)
    fq = fft(q)

    mixed_p: list[complex] = []
    mixed_q: list[complex] = []
    for i in range(n):
        x = fp[i]
        y = fp[-i % n].conjugate()
        a_low = (x + y) * 0.5
        a_high = (x - y) * -0.5j
        x = fq[i]
        y = fq[-i % n].conjugate()
        b_low = (x + y) * 0.5
        b_high = (x - y) * -0.5j
        mixed_p.append(a_low * b_low + a_high * b_high * 1j)
        mixed_q.append(a_low * b_high + a_high * b_low)

    rp = fft(mixed_p, True)
    rq = fft(mixed_q, True)
    result = []
    for cp, cq in zip(rp[:final_size], rq[:final_size]):
        low = round(cp.real)
        high = round(cp.imag) % mod
        middle = round(cq.real)
        result.append((low + ((high * split + middle) % mod) * split) % mod)
    return result