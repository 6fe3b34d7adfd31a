"""Arithmetic Operations: prime test, Fibonacci, and GCD-based HCF/LCM.

Invariants:
    - is_prime(n) is False for n < 2; trial division up to sqrt(n)
    - fibonacci(n) returns exactly n terms starting 0, 1, 1, 2, ...
    - hcf/lcm reduce pairwise left-to-right; a single element is returned unchanged
    - lcm(0, 0) is 0 (gcd of zero pair is zero)
    - "a mod b" truncates toward zero, so gcd(6, -4) == 2 and gcd(-6, 4) == -2
    - gcd is iterative; consecutive Fibonacci inputs need one step per term
    - Inputs are already validated by the caller; these functions never
      inspect JSON types
"""

from functools import reduce


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def fibonacci(n: int) -> list[int]:
    """First n Fibonacci numbers."""
    result = []
    a, b = 0, 1
    for _ in range(n):
        result.append(a)
        a, b = b, a + b
    return result


def _truncated_mod(a: int, b: int) -> int:
    """Remainder of truncating division: takes the sign of the dividend."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def gcd(a: int, b: int) -> int:
    """Euclid: gcd(a, 0) = a, gcd(a, b) = gcd(b, a mod b)."""
    while b != 0:
        a, b = b, _truncated_mod(a, b)
    return a


def _lcm_pair(a: int, b: int) -> int:
    divisor = gcd(a, b)
    if divisor == 0:
        return 0
    return a * b // divisor


def hcf(values: list[int]) -> int:
    """Highest common factor of a non-empty list."""
    return reduce(gcd, values)


def lcm(values: list[int]) -> int:
    """Least common multiple of a non-empty list."""
    return reduce(_lcm_pair, values)


def filter_primes(values: list[int]) -> list[int]:
    """Keep primes in original order, duplicates included."""
    return [n for n in values if is_prime(n)]
