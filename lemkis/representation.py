"""Positional expansions of non-negative fractions, with repeating periods.

An expansion is written whole.fractional(period). For example, 32/15 in
base 10 is 2.1(3).
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from fractions import Fraction
from numbers import Rational

_DIGITS = string.digits + string.ascii_lowercase


@dataclass(frozen=True)
class Expansion:
    """The digits of a fraction: whole part, non-repeating part and period."""

    whole: str = ""
    fractional: str = ""
    period: str = ""

    def __str__(self) -> str:
        return f"{self.whole}.{self.fractional}({self.period})"


def _check_base(base: int) -> None:
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, not {base}")


def _to_base(value: int, base: int) -> str:
    """Write a non-negative integer in base, with lower-case letters."""
    if value == 0:
        return "0"
    digits = []
    while value:
        value, digit = divmod(value, base)
        digits.append(_DIGITS[digit])
    return "".join(reversed(digits))


def _parse(text: str, base: int) -> int:
    """Read digits in base (either letter case); an empty string is 0."""
    value = 0
    for char in text:
        digit = _DIGITS.find(char.lower())
        if digit < 0 or digit >= base:
            raise ValueError(f"{char!r} is not a digit in base {base}")
        value = value * base + digit
    return value


def expand(fraction: Rational | int, base: int = 10) -> Expansion:
    """Expand a non-negative fraction in base.

    The whole part uses lower-case letters for digits above nine, the
    digits after the point use upper-case letters. A terminating expansion
    has an empty period.
    """
    _check_base(base)
    value = Fraction(fraction)
    if value < 0:
        raise ValueError("only non-negative fractions can be expanded")
    denominator = value.denominator
    whole, remainder = divmod(value.numerator, denominator)
    digits: list[str] = []
    seen: dict[int, int] = {}
    while remainder and remainder not in seen:
        seen[remainder] = len(digits)
        digit, remainder = divmod(remainder * base, denominator)
        digits.append(_DIGITS[digit].upper())
    text = "".join(digits)
    if remainder:
        start = seen[remainder]
        return Expansion(_to_base(whole, base), text[:start], text[start:])
    return Expansion(_to_base(whole, base), text, "")


def dexpand(expansion: Expansion, base: int = 10) -> Fraction:
    """Return the fraction an expansion in base stands for.

    With F digits before the period and P digits in it, the period adds
    period / (base**F * (base**P - 1)). An empty period adds nothing.
    """
    _check_base(base)
    shift = base ** len(expansion.fractional)
    result = Fraction(_parse(expansion.whole, base))
    result += Fraction(_parse(expansion.fractional, base), shift)
    if expansion.period:
        repeat = base ** len(expansion.period) - 1
        result += Fraction(_parse(expansion.period, base), shift * repeat)
    return result