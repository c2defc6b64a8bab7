"""Small stateless string helpers shared across dofpath."""

from __future__ import annotations

import os
import re
from typing import Any

_HEX_RE = re.compile(r"[0-9a-fA-F]+")
_DECIMAL_RE = re.compile(r"\s*([+-]?)([0-9]+)\s*")
_EMAIL_RE = re.compile(r"\w+([-+.]\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*")

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINT32_MAX = 2**32 - 1

_CONTROL_CHARS = frozenset(chr(code) for code in range(32))
_WINDOWS_INVALID_PATH_CHARS = _CONTROL_CHARS | frozenset('"<>|')
_WINDOWS_INVALID_FILE_NAME_CHARS = _WINDOWS_INVALID_PATH_CHARS | frozenset(':*?\\/')
_POSIX_INVALID_PATH_CHARS = frozenset("\0")
_POSIX_INVALID_FILE_NAME_CHARS = frozenset("\0/")


def _is_windows(windows: bool | None) -> bool:
    return os.name == "nt" if windows is None else windows


def invalid_path_chars(windows: bool | None = None) -> frozenset[str]:
    """Characters that may not appear anywhere in a path on the given platform."""
    return _WINDOWS_INVALID_PATH_CHARS if _is_windows(windows) else _POSIX_INVALID_PATH_CHARS


def invalid_file_name_chars(windows: bool | None = None) -> frozenset[str]:
    """Characters that may not appear in a single file name on the given platform."""
    return _WINDOWS_INVALID_FILE_NAME_CHARS if _is_windows(windows) else _POSIX_INVALID_FILE_NAME_CHARS


def _parse_hex(s: str) -> int:
    digits = s.strip()
    if not _HEX_RE.fullmatch(digits):
        raise ValueError(f"Not a hex number: {s!r}")
    return int(digits, 16)


def hex_to_int(s: str) -> int:
    """Parse a hex number as a 32-bit signed integer.

    Eight digits use two's complement, so ``"FFFFFFFF"`` is -1. Values wider
    than 32 bits raise :class:`OverflowError`.
    """
    value = _parse_hex(s)
    if value > _UINT32_MAX:
        raise OverflowError(f"Hex number {s!r} does not fit in 32 bits")
    return value - 2**32 if value > _INT32_MAX else value


def hex_to_byte(s: str) -> int:
    """Parse a hex number in the range 0..255."""
    value = _parse_hex(s)
    if value > 0xFF:
        raise OverflowError(f"Hex number {s!r} does not fit in a byte")
    return value


def is_hex_string(s: str | None, start: int = 0, length: int | None = None) -> bool:
    """Return whether ``s[start:start + length]`` consists of hex digits only.

    Blank strings and ranges running past the end of ``s`` are not hex.
    """
    if s is None or not s.strip():
        return False
    if length is None:
        length = len(s) - start
    if start < 0 or length < 0:
        raise IndexError("start and length must not be negative")
    if start + length > len(s):
        return False
    return _HEX_RE.fullmatch(s[start:start + length]) is not None


def to_byte_array(s: str) -> bytes:
    """UTF-8 encoded bytes of ``s``."""
    return s.encode("utf-8")


def get_bytes(s: str) -> bytes:
    """Raw UTF-16 code units of ``s``, little endian, two bytes each."""
    return s.encode("utf-16-le", "surrogatepass")


def left(s: str, length: int) -> str:
    """The leftmost ``length`` characters."""
    if length < 0 or length > len(s):
        raise IndexError(f"length {length} out of range for string of length {len(s)}")
    return s[:length]


def right(s: str, length: int) -> str:
    """The rightmost ``length`` characters."""
    if length < 0 or length > len(s):
        raise IndexError(f"length {length} out of range for string of length {len(s)}")
    return s[len(s) - length:]


def mid(s: str, start: int, length: int) -> str:
    """``length`` characters starting at ``start``; empty when ``start == len(s)``."""
    if start < 0 or length < 0 or start + length > len(s):
        raise IndexError(f"range ({start}, {length}) out of range for string of length {len(s)}")
    return s[start:start + length]


def _parse_decimal(s: str | None, low: int, high: int) -> int | None:
    if s is None:
        return None
    match = _DECIMAL_RE.fullmatch(s)
    if match is None:
        return None
    sign, digits = match.groups()
    value = int(digits)
    if sign == "-":
        value = -value
    if value < low or value > high:
        return None
    return value


def to_integer(s: str | None) -> int:
    """32-bit signed value of ``s``, or 0 when it cannot be parsed."""
    value = _parse_decimal(s, _INT32_MIN, _INT32_MAX)
    return 0 if value is None else value


def to_uint(s: str | None) -> int:
    """32-bit unsigned value of ``s``, or 0 when it cannot be parsed."""
    value = _parse_decimal(s, 0, _UINT32_MAX)
    return 0 if value is None else value


def is_integer(s: str | None) -> bool:
    if is_null_or_whitespace(s):
        return False
    return _parse_decimal(s, _INT32_MIN, _INT32_MAX) is not None


def is_uint(s: str | None) -> bool:
    if is_null_or_whitespace(s):
        return False
    return _parse_decimal(s, 0, _UINT32_MAX) is not None


def is_null_or_empty(s: str | None) -> bool:
    return not s


def is_null_or_whitespace(s: str | None) -> bool:
    return s is None or not s.strip()


def build(fmt: str | None, *args: Any) -> str:
    """Format ``fmt`` with positional ``{0}``-style placeholders."""
    if fmt is None:
        return ""
    return fmt.format(*args)


def is_email(s: str) -> bool:
    """Structural e-mail check only; domains and mailboxes are not verified."""
    return _EMAIL_RE.search(s) is not None


def replace(original: str, old: str, new: str, *, ignore_case: bool = False) -> str:
    """Replace every non-overlapping occurrence of ``old`` with ``new``."""
    if not old:
        raise ValueError("old must be a non-empty string")
    if not ignore_case:
        return original.replace(old, new)
    return re.sub(re.escape(old), lambda _match: new, original, flags=re.IGNORECASE)


__all__ = [
    "build",
    "get_bytes",
    "hex_to_byte",
    "hex_to_int",
    "invalid_file_name_chars",
    "invalid_path_chars",
    "is_email",
    "is_hex_string",
    "is_integer",
    "is_null_or_empty",
    "is_null_or_whitespace",
    "is_uint",
    "left",
    "mid",
    "replace",
    "right",
    "to_byte_array",
    "to_integer",
    "to_uint",
]
