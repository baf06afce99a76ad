"""Polynomial convolution and power-series inverse modulo a prime."""

from __future__ import annotations

from collections.abc import Sequence

from algokit.fft import multiply_mod

MOD = 998244353


def convolution(a: Sequence[int], b: Sequence[int], mod: int = MOD) -> list[int]:
    """Product of ``a`` and ``b`` modulo ``mod``; empty if either is empty."""
    if not a or not b:
        return []
    return multiply_mod(a, b, mod)


def _add(a: list[int], b: list[int], mod: int) -> list[int]:
    longer, shorter = (a, b) if len(a) >= len(b) else (b, a)
    result = list(longer)
    for i, value in enumerate(shorter):
        result[i] = (result[i] + value) % mod
    return result


def _resize(values: list[int], size: int) -> list[int]:
    return values[:size] + [0] * (size - len(values))


def poly_inverse(h: Sequence[int], length: int, mod: int = MOD) -> list[int]:
    """Power series ``g`` with ``h * g == 1`` modulo ``x**n``.

    ``n`` is the smallest power of two not below ``length`` and the result has
    ``n`` coefficients. ``mod`` must be prime and ``h[0]`` non-zero modulo it.
    """
    n = 1
    while n < length:
        n *= 2
    coeffs = [c % mod for c in h]
    if not coeffs or coeffs[0] == 0:
        raise ValueError("constant term must be invertible")
    coeffs += [0] * (n - len(coeffs))

    ans = [pow(coeffs[0], mod - 2, mod)]
    size = 2
    while size <= n:
        half = size // 2
        low = coeffs[:half]
        high = coeffs[half:size]
        carry = _resize(convolution(ans, low, mod), half + 1)[half:]
        correction = _resize(_add(carry, convolution(ans, high, mod), mod), half)
        step = _resize(convolution(ans, correction, mod), half)
        ans.extend((-x) % mod for x in step)
        size *= 2
    return ans