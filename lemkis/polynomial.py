"""Polynomials with one variable: arithmetic, division, evaluation and gcd."""

from __future__ import annotations

from fractions import Fraction
from functools import reduce
from typing import Any


def _divide(a: Any, b: Any) -> Any:
    """Divide exactly, keeping ints when the division has no remainder."""
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    return a / b


def _format_coefficient(value: Any) -> str:
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return format(value, "g")
    return str(value)


def _divisors(n: int) -> list[int]:
    return [i for i in range(1, n + 1) if n % i == 0]


class Polynomial:
    """A polynomial whose coefficients are stored lowest power first.

    Trailing zero coefficients are dropped, so `degree` is the index of the
    leading non-zero coefficient (0 for constants and the zero polynomial).
    When `degree` is given, only the first degree + 1 coefficients are used.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, coefficients: Any, degree: int | None = None) -> None:
        coeffs = list(coefficients)
        if degree is not None:
            if degree < 0:
                raise ValueError("degree must be non-negative")
            coeffs = coeffs[: degree + 1] + [0] * (degree + 1 - len(coeffs))
        while len(coeffs) > 1 and coeffs[-1] == 0:
            coeffs.pop()
        if not coeffs:
            coeffs = [0]
        self.coefficients = coeffs
        self.degree = len(coeffs) - 1

    def _is_zero(self) -> bool:
        return self.degree == 0 and self.coefficients[0] == 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Polynomial):
            return self.coefficients == other.coefficients
        return NotImplemented

    def __repr__(self) -> str:
        return f"Polynomial({self.coefficients!r})"

    def __neg__(self) -> Polynomial:
        return Polynomial([-c for c in self.coefficients])

    def __add__(self, other: Polynomial) -> Polynomial:
        size = max(len(self.coefficients), len(other.coefficients))
        padded_self = self.coefficients + [0] * (size - len(self.coefficients))
        padded_other = other.coefficients + [0] * (size - len(other.coefficients))
        return Polynomial([a + b for a, b in zip(padded_self, padded_other)])

    def __sub__(self, other: Polynomial) -> Polynomial:
        return self + (-other)

    def __mul__(self, other: Polynomial) -> Polynomial:
        product: list[Any] = [0] * (self.degree + other.degree + 1)
        for i, a in enumerate(self.coefficients):
            for j, b in enumerate(other.coefficients):
                product[i + j] += a * b
        return Polynomial(product)

    def _long_division(self, other: Polynomial) -> tuple[Polynomial, Polynomial]:
        if other._is_zero():
            raise ValueError("Division by zero polynomial")
        if other.degree > self.degree:
            raise ValueError("Division by invalid polynomial")
        remainder = list(self.coefficients)
        lead = other.coefficients[-1]
        quotient: list[Any] = [0] * (self.degree - other.degree + 1)
        for shift in reversed(range(len(quotient))):
            factor = _divide(remainder[shift + other.degree], lead)
            quotient[shift] = factor
            for j, c in enumerate(other.coefficients):
                remainder[shift + j] -= factor * c
        return Polynomial(quotient), Polynomial(remainder[: other.degree] or [0])

    def __truediv__(self, other: Polynomial) -> Polynomial:
        return self._long_division(other)[0]

    def __mod__(self, other: Polynomial) -> Polynomial:
        return self._long_division(other)[1]

    def __call__(self, value: Any) -> Any:
        return reduce(
            lambda acc, c: acc * value + c, reversed(self.coefficients), 0
        )

    def __str__(self) -> str:
        terms = [
            f"{_format_coefficient(self.coefficients[i])}x^{i}"
            for i in range(self.degree, 0, -1)
        ]
        terms.append(_format_coefficient(self.coefficients[0]))
        return " + ".join(terms)


def divide(p: Polynomial, q: Polynomial) -> tuple[Polynomial, Polynomial]:
    """Return (quotient, remainder) of p divided by q."""
    return p._long_division(q)


def root_rational_candidates(p: Polynomial) -> set[Fraction]:
    """Return the positive candidates a/b for rational roots of p.

    a runs over divisors of the constant term and b over divisors of the
    leading coefficient; both coefficients must be integral.
    """
    leading = p.coefficients[-1]
    constant = p.coefficients[0]
    if int(leading) != leading or int(constant) != constant:
        raise ValueError("rational root candidates need integral coefficients")
    leading_divisors = _divisors(abs(int(leading)))
    return {
        Fraction(a, b)
        for a in _divisors(abs(int(constant)))
        for b in leading_divisors
    }


def gcd(p: Polynomial, q: Polynomial) -> tuple[Polynomial, list[int]]:
    """Run the Euclidean algorithm while q has lower degree than p.

    Returns the last divisor and the degrees of the divisors, step by step.
    """
    steps: list[int] = []
    while not q._is_zero() and q.degree < p.degree:
        _, remainder = divide(p, q)
        p, q = q, remainder
        steps.append(p.degree)
    return p, steps