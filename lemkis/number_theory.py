"""Elementary number-theoretic functions."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import combinations


def are_coprime(numbers: Iterable[int]) -> bool:
    """Return True when every pair of the numbers is coprime."""
    return all(math.gcd(a, b) == 1 for a, b in combinations(list(numbers), 2))


def modular_pow(num: int, exponent: int, mod: int) -> int:
    """Return num ** exponent modulo mod by repeated squaring."""
    if mod < 1:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if mod == 1:
        return 0
    result = 1
    num %= mod
    while exponent > 0:
        if exponent % 2 == 1:
            result = (result * num) % mod
        num = (num * num) % mod
        exponent //= 2
    return result


def sieve_of_eratosthenes(up_to: int) -> list[int]:
    """Return the primes smaller than up_to."""
    if up_to < 3:
        return []
    is_prime = bytearray([1]) * up_to
    for i in range(2, math.isqrt(up_to - 1) + 1):
        if is_prime[i]:
            is_prime[i * i :: i] = bytes(len(range(i * i, up_to, i)))
    return [i for i in range(2, up_to) if is_prime[i]]


def decompose(value: int) -> list[tuple[int, int]]:
    """Return the prime factorisation of value as (prime, exponent) pairs."""
    factors = []
    i = 2
    while i <= value // i:
        count = 0
        while value % i == 0:
            count += 1
            value //= i
        if count:
            factors.append((i, count))
        i += 1
    if value > 1:
        factors.append((value, 1))
    return factors


def euler_totient(value: int) -> int:
    """Return the number of integers in 1..value coprime to value."""
    return sum(1 for i in range(1, value + 1) if math.gcd(i, value) == 1)


def largest_power_of_prime_dividing_factorial(value: int, prime: int) -> int:
    """Return the largest pow such that prime ** pow divides value."""
    if prime < 2:
        raise ValueError("prime must be at least 2")
    if value == 0:
        raise ValueError("every power divides zero")
    power = 0
    while value % prime == 0:
        power += 1
        value //= prime
    return power