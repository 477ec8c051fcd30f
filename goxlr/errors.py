"""Errors raised while reading and saving profiles."""

from __future__ import annotations

import math
import struct
import zipfile


class ParseError(ValueError):
    """A profile, or one section of it, could not be read."""

    def __init__(self, detail: str, section: str | None = None) -> None:
        self.detail = detail
        self.section = section
        message = f"Invalid {section}: {detail}" if section else detail
        super().__init__(message)


class SaveError(Exception):
    """A profile could not be written; ``cause`` holds the underlying error."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        if isinstance(cause, (zipfile.BadZipFile, zipfile.LargeZipFile)):
            message = f"Profile zip error: {cause}"
        elif isinstance(cause, OSError):
            message = f"IO error: {cause}"
        else:
            message = f"XML Writing Error {cause}"
        super().__init__(message)


def _parse_f32(value: str, section: str) -> float:
    """Read a single-precision float the way profile files store them."""
    if value != value.strip() or "_" in value:
        raise ParseError(f"Expected float: invalid float literal {value!r}", section)
    try:
        number = float(value)
    except ValueError as exc:
        raise ParseError(f"Expected float: {exc}", section) from exc
    if math.isnan(number) or math.isinf(number):
        return number
    try:
        return struct.unpack("<f", struct.pack("<f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def _parse_uint(value: str, bits: int, section: str) -> int:
    """Read an unsigned decimal integer that must fit in ``bits`` bits."""
    digits = value[1:] if value.startswith("+") else value
    if not digits or not digits.isascii() or not digits.isdigit():
        raise ParseError(f"Expected int: invalid digit in {value!r}", section)
    number = int(digits)
    if number >= 1 << bits:
        raise ParseError(f"Expected int: number too large in {value!r}", section)
    return number


def _saturate(number: float, low: int, high: int) -> int:
    """Truncate toward zero and clamp into ``low..high``; NaN becomes zero."""
    if math.isnan(number):
        return 0
    if number <= low:
        return low
    if number >= high:
        return high
    return int(number)


def _to_i8(number: float) -> int:
    return _saturate(number, -0x80, 0x7F)


def _to_u8(number: float) -> int:
    return _saturate(number, 0, 0xFF)