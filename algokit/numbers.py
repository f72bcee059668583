"""Small number-theory and recursion classics."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence


def collatz_sequence(n: int) -> list[int]:
    """Return the Collatz sequence from ``n`` down to 1, both included."""
    if n < 1:
        raise ValueError("the Collatz sequence needs a positive start")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative ``n``."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting from fibonacci(1) == 1."""
    if n < 1:
        raise ValueError("Fibonacci positions start at 1")
    a, b = 1, 1
    for _ in range(n - 2):
        a, b = b, a + b
    return b if n > 1 else a


def gcd(x: int, y: int) -> int:
    """Return the greatest common divisor of ``x`` and ``y`` by Euclid's method."""
    while y != 0:
        x, y = y, x % y
    return x


def is_prime(x: int) -> bool:
    """Return whether ``x`` is a prime number."""
    if x < 2:
        return False
    return all(x % i for i in range(2, math.isqrt(x) + 1))


def catalan(n: int) -> int:
    """Return the ``n``-th Catalan number, (2n)! / ((n+1)! n!)."""
    if n < 0:
        raise ValueError("Catalan numbers are defined for n >= 0")
    return factorial(2 * n) // (factorial(n + 1) * factorial(n))


def factorial_trailing_zeroes(n: int) -> int:
    """Return how many zeroes ``n!`` ends with."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    count, power = 0, 5
    while n // power:
        count += n // power
        power *= 5
    return count


def _digits(n: int) -> list[int]:
    return [int(ch) for ch in str(abs(n))]


def is_armstrong(n: int) -> bool:
    """Return whether ``n`` equals the sum of the cubes of its digits."""
    sign = -1 if n < 0 else 1
    return sign * sum(d**3 for d in _digits(n)) == n


def is_palindrome(n: int) -> bool:
    """Return whether the digits of ``n`` read the same in both directions."""
    text = str(abs(n))
    return text == text[::-1]


def is_strong_number(n: int) -> bool:
    """Return whether ``n`` equals the sum of the factorials of its digits."""
    if n <= 0:
        return n == 0
    return sum(factorial(d) for d in _digits(n)) == n


def count_ways(amount: int, coins: Sequence[int]) -> int:
    """Return how many combinations of ``coins`` (each usable repeatedly) make ``amount``."""
    if any(c <= 0 for c in coins):
        raise ValueError("coin values must be positive")
    if amount < 0:
        return 0
    ways = [1] + [0] * amount
    for coin in coins:
        for value in range(coin, amount + 1):
            ways[value] += ways[value - coin]
    return ways[amount]


def hanoi_moves(
    disks: int, source: str = "A", target: str = "B", spare: str = "C"
) -> Iterator[tuple[int, str, str]]:
    """Yield the moves ``(disk, from_peg, to_peg)`` solving the Tower of Hanoi."""
    if disks < 0:
        raise ValueError("the number of disks cannot be negative")
    if disks == 0:
        return
    yield from hanoi_moves(disks - 1, source, spare, target)
    yield disks, source, target
    yield from hanoi_moves(disks - 1, spare, target, source)