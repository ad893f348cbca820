"""Classic hashing functions and a pair-counting helper."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

_INT32_MOD = 1 << 32
_INT32_MAX = (1 << 31) - 1


def _to_int32(value: int) -> int:
    value %= _INT32_MOD
    return value - _INT32_MOD if value > _INT32_MAX else value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def fold_shift(key: int, address_size: int) -> int:
    """Add the key's decimal digits in groups of ``address_size`` and keep that many digits."""
    if address_size < 1:
        raise ValueError("address_size must be positive")
    digits = str(key)
    total = sum(
        int(digits[start:start + address_size])
        for start in range(0, len(digits), address_size)
    )
    return _trunc_mod(total, 10**address_size)


def rotation(key: int, address_size: int) -> int:
    """Move the key's last digit to the front, then fold-shift it."""
    digits = str(key)
    rotated = int(digits[-1] + digits[:-1])
    return fold_shift(rotated, address_size)


def mid_square(seed: int) -> int:
    """Middle four digits of the square, dropping the last two.

    The square is taken as a 32-bit signed integer.
    """
    square = _to_int32(seed * seed)
    return _trunc_mod(_trunc_div(square, 100), 10000)


def modulo_division(seed: int, mod: int) -> int:
    """Remainder of ``seed / mod``, carrying the sign of ``seed``."""
    if mod == 0:
        raise ZeroDivisionError("modulo by zero")
    return _trunc_mod(seed, mod)


def digit_extraction(seed: int, extract_digits: Sequence[int]) -> int:
    """Join the digits of ``seed`` found at the given 1-based positions."""
    if seed <= 0:
        raise ValueError("seed must be positive")
    digits = str(seed)
    picked = []
    for position in extract_digits:
        if not 1 <= position <= len(digits):
            raise ValueError(f"digit position {position} outside 1..{len(digits)}")
        picked.append(digits[position - 1])
    return int("".join(picked)) if picked else 0


def pair_matching(nums: Iterable[int], target: int) -> int:
    """Greatest number of disjoint pairs found greedily that sum to ``target``."""
    values = list(nums)
    freq = Counter(values)
    pairs = 0
    for num in values:
        complement = target - num
        if freq[num] > 0 and freq[complement] > 0:
            if num == complement and freq[num] < 2:
                continue
            pairs += 1
            freq[num] -= 1
            freq[complement] -= 1
    return pairs