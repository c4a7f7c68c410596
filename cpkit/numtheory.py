"""Number-theory helpers: gcd, modular arithmetic, sieves and totients."""

from __future__ import annotations

import random
from typing import Sequence

__all__ = [
    "MOD",
    "MOD1",
    "gcd",
    "expo",
    "extended_gcd",
    "mod_inverse",
    "mod_inverse_prime",
    "combination",
    "case_label",
    "sieve",
    "mod_add",
    "mod_mul",
    "mod_sub",
    "mod_div",
    "phi",
    "random_in_range",
    "parse_int",
]

MOD = 1000000007
MOD1 = 998244353

_rng = random.Random()


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    if b > a:
        a, b = b, a
    while b:
        a, b = b, a % b
    return a


def expo(a: int, b: int, mod: int) -> int:
    """``a`` to the power ``b`` modulo ``mod`` by repeated squaring."""
    result = 1
    while b > 0:
        if b & 1:
            result = result * a % mod
        a = a * a % mod
        b >>= 1
    return result


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(x, y, g)`` with ``a*x + b*y == g == gcd(a, b)``."""
    if b == 0:
        return 1, 0, a
    x, y, g = extended_gcd(b, a % b)
    return y, x - y * (a // b), g


def mod_inverse(a: int, b: int) -> int:
    """Bezout coefficient of ``a`` modulo ``b``; may be negative.

    Works for any modulus coprime to ``a``, prime or not.
    """
    return extended_gcd(a, b)[0]


def mod_inverse_prime(a: int, b: int) -> int:
    """Inverse of ``a`` modulo the prime ``b`` via Fermat's little theorem."""
    return expo(a, b - 2, b)


def combination(n: int, r: int, m: int, fact: Sequence[int], ifact: Sequence[int]) -> int:
    """``n`` choose ``r`` modulo ``m`` from precomputed factorials and their inverses."""
    return fact[n] * ifact[n - r] % m * ifact[r] % m


def case_label(t: int) -> str:
    """Prefix for the answer to test case ``t``."""
    return f"Case #{t}: "


def sieve(n: int) -> list[int]:
    """All primes up to and including ``n``."""
    if n < 2:
        return []
    composite = bytearray(n + 1)
    primes = []
    for i in range(2, n + 1):
        if not composite[i]:
            primes.append(i)
            composite[2 * i :: i] = bytes(len(range(2 * i, n + 1, i)))
            for j in range(2 * i, n + 1, i):
                composite[j] = 1
    return primes


def mod_add(a: int, b: int, m: int) -> int:
    """``(a + b) mod m`` in ``[0, m)``."""
    return (a % m + b % m) % m


def mod_mul(a: int, b: int, m: int) -> int:
    """``(a * b) mod m`` in ``[0, m)``."""
    return (a % m) * (b % m) % m


def mod_sub(a: int, b: int, m: int) -> int:
    """``(a - b) mod m`` in ``[0, m)``."""
    return (a % m - b % m) % m


def mod_div(a: int, b: int, m: int) -> int:
    """``a / b`` modulo the prime ``m``."""
    return mod_mul(a % m, mod_inverse_prime(b % m, m), m) % m


def phi(n: int) -> int:
    """Euler's totient of ``n`` by trial division."""
    number = n
    if n % 2 == 0:
        number //= 2
        while n % 2 == 0:
            n //= 2
    i = 3
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            number = number // i * (i - 1)
        i += 2
    if n > 1:
        number = number // n * (n - 1)
    return number


def random_in_range(low: int, high: int) -> int:
    """Uniform random integer in ``[low, high]``."""
    if low > high:
        raise ValueError(f"empty range [{low}, {high}]")
    return _rng.randint(low, high)


def parse_int(text: str) -> int:
    """Read the first run of digits in ``text``.

    Any ``-`` seen before the digits makes the result negative.
    """
    sign = 1
    pos = 0
    length = len(text)
    while pos < length and not text[pos].isdigit():
        if text[pos] == "-":
            sign = -1
        pos += 1
    if pos == length:
        raise ValueError(f"no digits in {text!r}")
    end = pos
    while end < length and "0" <= text[end] <= "9":
        end += 1
    return sign * int(text[pos:end])