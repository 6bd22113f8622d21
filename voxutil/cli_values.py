"""Value-level helpers for command-line parsing.

Covers value representation, number parsing in several notations and the
classification of command-line tokens into positional and optional names.
"""

from __future__ import annotations

import math
import re
from enum import IntFlag
from typing import Iterable

REPR_MAX_CONTAINER_SIZE = 5

_C_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)
_DEC_FLOAT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_FLOAT = re.compile(
    r"[+-]?(?:inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?)", re.IGNORECASE
)
_DECIMAL_LITERAL = re.compile(
    r"(?:0|[1-9][0-9]*)"
    r"|[0-9]+\.[0-9]*(?:[eE][+-]?[0-9]+)?"
    r"|[0-9]+[eE][+-]?[0-9]+"
    r"|\.[0-9]+(?:[eE][+-]?[0-9]+)?"
)


class CharsFormat(IntFlag):
    """Accepted notations for floating point values."""

    SCIENTIFIC = 0x1
    FIXED = 0x2
    HEX = 0x4
    GENERAL = FIXED | SCIENTIFIC


class DefaultArguments(IntFlag):
    """Which built-in options a parser adds on its own."""

    NONE = 0
    HELP = 1
    VERSION = 2
    ALL = HELP | VERSION


def _is_container(val) -> bool:
    if isinstance(val, (str, bytes, bytearray)):
        return False
    return hasattr(val, "__iter__") and hasattr(val, "__len__")


def repr_value(val) -> str:
    """Return the display form of a value as shown in help output."""
    if isinstance(val, bool):
        return "true" if val else "false"
    if isinstance(val, str):
        return f'"{val}"'
    if _is_container(val):
        items = list(val)
        size = len(items)
        out = "{"
        if size > 1:
            shown = items[1:min(size, REPR_MAX_CONTAINER_SIZE) - 1]
            out += repr_value(items[0])
            out += "".join(" " + repr_value(v) for v in shown)
            out += " " if size <= REPR_MAX_CONTAINER_SIZE else "..."
        if size > 0:
            out += repr_value(items[-1])
        return out + "}"
    if isinstance(val, float):
        return format(val, "g")
    return str(val)


def consume_hex_prefix(s: str) -> tuple[bool, str]:
    """Strip a leading ``0x``/``0X``; return whether it was there and the rest."""
    if s.startswith(("0x", "0X")):
        return True, s[2:]
    return False, s


def _from_chars(s: str, base: int) -> int:
    digits = re.escape(_DIGITS[:base]) + re.escape(_DIGITS[10:base].upper())
    match = re.match(f"-?[{digits}]+", s)
    if match is None:
        raise ValueError("pattern not found")
    if match.end() != len(s):
        raise ValueError("pattern does not match to the end")
    return int(match.group(0), base)


def parse_integer(s: str, base: int = 0) -> int:
    """Parse a whole string as an integer.

    ``base`` 0 picks the base from the prefix (``0x`` hex, ``0`` octal,
    otherwise decimal); ``base`` 16 requires the ``0x`` prefix. Raises
    ValueError when the text is not a number of that base.
    """
    if base == 0:
        is_hex, rest = consume_hex_prefix(s)
        if is_hex:
            return _from_chars(rest, 16)
        if s.startswith("0"):
            return _from_chars(s, 8)
        return _from_chars(s, 10)
    if base == 16:
        is_hex, rest = consume_hex_prefix(s)
        if not is_hex:
            raise ValueError("pattern not found")
        return _from_chars(rest, 16)
    if not 2 <= base <= 36:
        raise ValueError(f"invalid base: {base}")
    return _from_chars(s, base)


def _mantissa_nonzero(text: str, exponent_chars: str) -> bool:
    mantissa = re.split(f"[{exponent_chars}]", text, maxsplit=1)[0]
    if mantissa.lstrip("+-").lower().startswith("0x"):
        mantissa = mantissa.lstrip("+-")[2:]
    return any(c not in "0.+-" for c in mantissa)


def _strtod(s: str) -> float:
    if not s or s[0] in _C_SPACE or s[0] == "+":
        raise ValueError("pattern not found")

    candidates = [
        (m.end(), kind, m.group(0))
        for kind, pattern in (("hex", _HEX_FLOAT), ("dec", _DEC_FLOAT), ("special", _SPECIAL_FLOAT))
        if (m := pattern.match(s)) is not None
    ]
    if not candidates:
        raise ValueError("pattern does not match to the end")
    end, kind, text = max(candidates, key=lambda c: c[0])
    if end != len(s):
        raise ValueError("pattern does not match to the end")

    if kind == "special":
        return float(re.sub(r"\(.*\)$", "", text))
    if kind == "hex":
        try:
            value = float.fromhex(text)
        except OverflowError:
            raise OverflowError("not representable") from None
        if value == 0.0 and _mantissa_nonzero(text, "pP"):
            raise OverflowError("not representable")
        return value
    value = float(text)
    if math.isinf(value) or (value == 0.0 and _mantissa_nonzero(text, "eE")):
        raise OverflowError("not representable")
    return value


def parse_float(s: str, fmt: CharsFormat = CharsFormat.GENERAL) -> float:
    """Parse a whole string as a float in the notation ``fmt`` allows.

    Raises ValueError for text of the wrong form and OverflowError for a
    value that a double cannot represent.
    """
    fmt = CharsFormat(fmt)
    is_hex, _ = consume_hex_prefix(s)
    if fmt == CharsFormat.HEX:
        if not is_hex:
            raise ValueError("chars_format::hex parses hexfloat")
        return _strtod(s)
    if fmt == CharsFormat.SCIENTIFIC:
        if is_hex:
            raise ValueError("chars_format::scientific does not parse hexfloat")
        if not any(c in "eE" for c in s):
            raise ValueError("chars_format::scientific requires exponent part")
        return _strtod(s)
    if fmt == CharsFormat.FIXED:
        if is_hex:
            raise ValueError("chars_format::fixed does not parse hexfloat")
        if any(c in "eE" for c in s):
            raise ValueError("chars_format::fixed does not parse exponent part")
        return _strtod(s)
    if fmt == CharsFormat.GENERAL:
        if is_hex:
            raise ValueError("chars_format::general does not parse hexfloat")
        return _strtod(s)
    raise ValueError(f"unsupported format: {fmt!r}")


def is_decimal_literal(s: str) -> bool:
    """Return True if ``s`` is an unsigned decimal integer or float literal."""
    return _DECIMAL_LITERAL.fullmatch(s) is not None


def is_positional(name: str) -> bool:
    """Return True for tokens that are values rather than option names.

    Empty strings, a lone ``-``, negative numbers and anything not starting
    with ``-`` are positional.
    """
    if not name or name[0] != "-":
        return True
    rest = name[1:]
    if not rest:
        return True
    return is_decimal_literal(rest)


def is_optional(name: str) -> bool:
    """Return True for option names such as ``-v`` or ``--verbose``."""
    return not is_positional(name)


def _names_are_optional(names: Iterable[str]) -> bool:
    return any(is_optional(n) for n in names)