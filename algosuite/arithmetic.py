"""Integer arithmetic and small number-theory helpers."""

from __future__ import annotations

MOD = 10**9 + 7


def number_of_steps(num: int) -> int:
    """Count halving (when even) or decrement (when odd) steps to reach zero."""
    if num < 0:
        raise ValueError("num must be non-negative")
    if num == 0:
        return 0
    return num.bit_length() + bin(num).count("1") - 1


def concatenated_binary(n: int) -> int:
    """Return the binary concatenation of 1..n as an integer modulo 10**9 + 7."""
    result = 0
    for i in range(1, n + 1):
        result = ((result << i.bit_length()) + i) % MOD
    return result


def hamming_weight(n: int) -> int:
    """Return the number of set bits among the lowest 32 bits of ``n``."""
    return bin(n & 0xFFFFFFFF).count("1")


def add(num1: int, num2: int) -> int:
    """Return the sum of two integers."""
    return num1 + num2


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def _is_power_of(n: int, base: int) -> bool:
    if n <= 0:
        return False
    while n % base == 0:
        n //= base
    return n == 1


def is_power_of_three(n: int) -> bool:
    """Return True if ``n`` is a positive power of three."""
    return _is_power_of(n, 3)


def is_power_of_four(n: int) -> bool:
    """Return True if ``n`` is a positive power of four."""
    return _is_power_of(n, 4)


def fib(n: int) -> int:
    """Return the n-th Fibonacci number; non-positive ``n`` gives 0."""
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking 1 or 2 at a time."""
    if n < 0:
        raise ValueError("n must be non-negative")
    a, b = 1, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def mirror_reflection(p: int, q: int) -> int:
    """Return the receptor (0, 1 or 2) a laser first meets in a square mirror room."""
    if p <= 0:
        raise ValueError("p must be positive")
    while p % 2 == 0 and q % 2 == 0:
        p //= 2
        q //= 2
    if p % 2 == 0:
        return 2
    if q % 2 == 0:
        return 0
    return 1