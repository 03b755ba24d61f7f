"""Conversion of ``U+XXXX`` style code notations into code points."""

from __future__ import annotations

import re

_CODE_RE = re.compile(r"U+(.+)")
_HEX_RE = re.compile(r"[+-]?[0-9A-Fa-f]+")

_INT64_MAX = (1 << 63) - 1


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def unicode_to_rune(code: str) -> int:
    """Return the code point written in ``code`` (e.g. ``"U+5988"``), or 0.

    The text after the first run of ``U`` characters is read as a
    hexadecimal number with an optional sign.  Anything that cannot be
    read, and any value that is not positive, gives 0.  Values beyond the
    signed 64-bit range saturate, and the result is wrapped to 32 bits.
    """
    match = _CODE_RE.search(code)
    if match is None:
        return 0
    digits = match.group(1)
    if not _HEX_RE.fullmatch(digits):
        return 0
    number = int(digits, 16)
    if number > _INT64_MAX:
        number = _INT64_MAX
    if number > 0:
        return _to_int32(number)
    return 0