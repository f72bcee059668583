"""Conversions between number bases."""

from __future__ import annotations

import string
from functools import reduce

_DIGITS = string.digits + string.ascii_uppercase


def _to_base(num: int, base: int) -> str:
    if num == 0:
        return "0"
    sign = "-" if num < 0 else ""
    num = abs(num)
    digits = []
    while num:
        num, remainder = divmod(num, base)
        digits.append(_DIGITS[remainder])
    return sign + "".join(reversed(digits))


def decimal_to_hexadecimal(num: int) -> str:
    """Return ``num`` written in upper-case hexadecimal."""
    return _to_base(num, 16)


def decimal_to_octal(num: int) -> str:
    """Return ``num`` written in octal."""
    return _to_base(num, 8)


def _digit_value(ch: str) -> int | None:
    if ch in string.digits:
        return ord(ch) - ord("0")
    if ch in string.ascii_uppercase:
        return ord(ch) - ord("A") + 10
    if ch in string.ascii_lowercase:
        return ord(ch) - ord("a") + 10
    return None


def to_decimal(number: str, base: int) -> int:
    """Interpret ``number`` as digits in ``base`` (2 to 36) and return its value.

    Letters of either case stand for digits from ten upwards.
    """
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")
    values = []
    for ch in number:
        value = _digit_value(ch)
        if value is None or value >= base:
            raise ValueError(f"invalid number {number!r} for base {base}")
        values.append(value)
    return reduce(lambda acc, d: acc * base + d, values, 0)


def _binary_digits(binary: int | str) -> int:
    """Validate a number written with binary digits and return it as an int."""
    text = str(binary).strip()
    if not text or set(text) - {"0", "1"}:
        raise ValueError(f"not a binary number: {binary!r}")
    return int(text)


def binary_to_decimal(binary: int | str) -> int:
    """Return the value of a number whose decimal digits are binary digits."""
    return int(str(_binary_digits(binary)), 2)


def binary_to_hexadecimal(binary: int | str) -> str:
    """Return the upper-case hexadecimal form of a binary-digit number."""
    return format(binary_to_decimal(binary), "X")


def three_digits(n: int) -> int:
    """Return the last three decimal digits of ``n``, keeping its sign."""
    if n >= 0:
        return n % 1000
    return -((-n) % 1000)


def binary_to_octal(binary: int | str) -> int:
    """Return the octal form of a binary-digit number, as an int of octal digits.

    Groups of three binary digits are converted from the right.
    """
    remaining = _binary_digits(binary)
    result, place = 0, 1
    while remaining > 0:
        group = three_digits(remaining)
        remaining //= 1000
        result += binary_to_decimal(group) * place
        place *= 10
    return result