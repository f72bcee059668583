"""Simple non-cryptographic string hashes: sdbm, djb2, xor8 and Adler-32.

Arithmetic follows fixed-width machine integers. Characters are signed 8-bit
values, sdbm and djb2 wrap to a signed 64-bit result, xor8 yields a signed
8-bit value and Adler-32 a signed 32-bit value.
"""

from __future__ import annotations

MOD_ADLER = 65521


def _signed(value: int, bits: int) -> int:
    """Wrap ``value`` into a two's-complement integer of ``bits`` width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _chars(s: str | bytes) -> list[int]:
    """Return the input as a list of signed 8-bit character codes."""
    data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
    return [_signed(b, 8) for b in data]


def sdbm(s: str | bytes) -> int:
    """Return the sdbm hash of ``s`` as a signed 64-bit integer."""
    h = 0
    for c in _chars(s):
        h = _signed(c + (h << 6) + (h << 16) - h, 64)
    return h


def djb2(s: str | bytes) -> int:
    """Return the djb2 hash of ``s`` as a signed 64-bit integer."""
    h = 5381
    for c in _chars(s):
        h = _signed((h << 5) + h + c, 64)
    return h


def xor8(s: str | bytes) -> int:
    """Return the 8-bit checksum of ``s`` as a signed 8-bit integer."""
    h = 0
    for c in _chars(s):
        h = (h + c) & 0xFF
    return _signed(((h ^ 0xFF) + 1) & 0xFF, 8)


def adler_32(s: str | bytes) -> int:
    """Return the Adler-32 checksum of ``s`` as a signed 32-bit integer."""
    a, b = 1, 0
    for c in _chars(s):
        a = (a + c) % MOD_ADLER
        b = (b + a) % MOD_ADLER
    return _signed((b << 16) | a, 32)