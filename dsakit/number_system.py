"""Number-system conversions and bit tricks on integers."""

from __future__ import annotations

from itertools import zip_longest

_MASK32 = 0xFFFFFFFF
_SIGN32 = 0x80000000
_HEX_DIGITS = "0123456789ABCDEF"


def _to_signed32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & _SIGN32 else value


def add_without_plus(a: int, b: int) -> int:
    """Add two 32-bit signed integers using only bitwise operations."""
    a &= _MASK32
    b &= _MASK32
    while b:
        a, b = a ^ b, ((a & b) << 1) & _MASK32
    return _to_signed32(a)


def add_binary(a: str, b: str) -> str:
    """Add two binary strings and return the binary sum."""
    for text in (a, b):
        if set(text) - {"0", "1"}:
            raise ValueError(f"not a binary string: {text!r}")
    bits = []
    carry = 0
    for left, right in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, bit = divmod(carry + int(left) + int(right), 2)
        bits.append(str(bit))
    if carry:
        bits.append("1")
    return "".join(reversed(bits))


def _digits_in_base(n: int, base: int) -> int:
    result = 0
    place = 1
    while n > 0:
        n, digit = divmod(n, 10)
        if digit >= base:
            raise ValueError(f"digit {digit} is not valid in base {base}")
        result += digit * place
        place *= base
    return result


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as a binary number."""
    return _digits_in_base(n, 2)


def decimal_to_binary(n: int) -> int:
    """Return an integer whose decimal digits spell ``n`` in binary."""
    if n < 0:
        raise ValueError("n must not be negative")
    return int(format(n, "b"))


def hex_to_decimal(text: str) -> int:
    """Convert a hexadecimal string to its integer value."""
    result = 0
    for char in text:
        digit = _HEX_DIGITS.find(char.upper())
        if digit < 0:
            raise ValueError(f"not a hexadecimal digit: {char!r}")
        result = result * 16 + digit
    return result


def count_set_bits(n: int) -> int:
    """Count the one bits of ``n`` taken as a 32-bit integer."""
    return bin(n & _MASK32).count("1")


def octal_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as an octal number."""
    return _digits_in_base(n, 8)