"""printf-style formatting of integers and strings, hex dumps and size strings."""

import re
from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Iterator, List, Optional, Tuple, Union

from klib.arithmetic import UINT64_MAX, UINTPTR_MAX, to_signed, to_unsigned
from klib.ctype import isprint
from klib.rounding import round_down

PRId8, PRIi8, PRIo8, PRIu8, PRIx8, PRIX8 = "hhd", "hhi", "hho", "hhu", "hhx", "hhX"
PRId16, PRIi16, PRIo16, PRIu16, PRIx16, PRIX16 = "hd", "hi", "ho", "hu", "hx", "hX"
PRId32, PRIi32, PRIo32, PRIu32, PRIx32, PRIX32 = "d", "i", "o", "u", "x", "X"
PRId64, PRIi64, PRIo64, PRIu64, PRIx64, PRIX64 = "lld", "lli", "llo", "llu", "llx", "llX"
PRIdMAX, PRIiMAX, PRIoMAX, PRIuMAX, PRIxMAX, PRIXMAX = "jd", "ji", "jo", "ju", "jx", "jX"
PRIdPTR, PRIiPTR, PRIoPTR, PRIuPTR, PRIxPTR, PRIXPTR = "td", "ti", "to", "tu", "tx", "tX"

# Longest run of digits, commas and precision zeros a conversion may render.
_DIGIT_LIMIT = 63

_HEX_PER_LINE = 16


class _Flag(IntFlag):
    MINUS = 1 << 0
    PLUS = 1 << 1
    SPACE = 1 << 2
    POUND = 1 << 3
    ZERO = 1 << 4
    GROUP = 1 << 5


_FLAG_CHARS = {
    "-": _Flag.MINUS,
    "+": _Flag.PLUS,
    " ": _Flag.SPACE,
    "#": _Flag.POUND,
    "0": _Flag.ZERO,
    "'": _Flag.GROUP,
}

# Width in bits of the argument read for each length modifier.
_LENGTH_BITS = {"hh": 8, "h": 16, "": 32, "j": 64, "l": 32, "ll": 64, "t": 32, "z": 32}


@dataclass(frozen=True)
class _Base:
    base: int
    digits: str
    x: str
    group: int


_BASE_D = _Base(10, "0123456789", "", 3)
_BASE_O = _Base(8, "01234567", "", 3)
_BASE_X = _Base(16, "0123456789abcdef", "x", 4)
_BASE_UPPER_X = _Base(16, "0123456789ABCDEF", "X", 4)

_UNSIGNED_BASES = {"o": _BASE_O, "u": _BASE_D, "x": _BASE_X, "X": _BASE_UPPER_X}

_CONVERSION = re.compile(
    r"%(?:(?P<percent>%)|"
    r"(?P<flags>[-+ #0']*)"
    r"(?P<width>\*|\d*)"
    r"(?:\.(?P<precision>\*|\d*))?"
    r"(?P<length>hh|h|j|ll|l|t|z)?"
    r"(?P<conv>.)?)",
    re.DOTALL,
)


@dataclass
class _Spec:
    flags: _Flag
    width: int
    precision: int
    length: str


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _int_arg(args: Iterator[Any]) -> int:
    value = _next_arg(args)
    if not isinstance(value, int):
        raise TypeError(f"integer argument expected, got {type(value).__name__}")
    return value


def _parse_spec(match: "re.Match[str]", args: Iterator[Any]) -> _Spec:
    flags = _Flag(0)
    for ch in match.group("flags"):
        flags |= _FLAG_CHARS[ch]
    if flags & _Flag.MINUS:
        flags &= ~_Flag.ZERO
    if flags & _Flag.PLUS:
        flags &= ~_Flag.SPACE

    width_text = match.group("width")
    if width_text == "*":
        width = to_signed(_int_arg(args), 32)
    else:
        width = int(width_text) if width_text else 0
    if width < 0:
        width = -width
        flags |= _Flag.MINUS

    precision_text = match.group("precision")
    if precision_text is None:
        precision = -1
    elif precision_text == "*":
        precision = to_signed(_int_arg(args), 32)
    else:
        precision = int(precision_text) if precision_text else 0
    if precision < 0:
        precision = -1
    if precision >= 0:
        flags &= ~_Flag.ZERO

    return _Spec(flags, width, precision, match.group("length") or "")


def _format_integer(value: int, is_signed: bool, negative: bool, base: _Base, spec: _Spec) -> str:
    flags = spec.flags
    sign = ""
    if is_signed:
        if flags & _Flag.PLUS:
            sign = "-" if negative else "+"
        elif flags & _Flag.SPACE:
            sign = "-" if negative else " "
        elif negative:
            sign = "-"

    x = base.x if (flags & _Flag.POUND) and value else ""

    # Digits are collected least significant first.
    digits: List[str] = []
    digit_cnt = 0
    while value > 0:
        if (flags & _Flag.GROUP) and digit_cnt > 0 and digit_cnt % base.group == 0:
            digits.append(",")
        value, digit = divmod(value, base.base)
        digits.append(base.digits[digit])
        digit_cnt += 1

    precision = 1 if spec.precision < 0 else spec.precision
    while len(digits) < precision and len(digits) < _DIGIT_LIMIT:
        digits.append("0")
    if (flags & _Flag.POUND) and base.base == 8 and (not digits or digits[-1] != "0"):
        digits.append("0")

    body = "".join(reversed(digits))
    pad_cnt = max(0, spec.width - len(body) - (2 if x else 0) - (1 if sign else 0))

    parts = []
    if not flags & (_Flag.MINUS | _Flag.ZERO):
        parts.append(" " * pad_cnt)
    parts.append(sign)
    if x:
        parts.append("0" + x)
    if flags & _Flag.ZERO:
        parts.append("0" * pad_cnt)
    parts.append(body)
    if flags & _Flag.MINUS:
        parts.append(" " * pad_cnt)
    return "".join(parts)


def _format_string(text: str, spec: _Spec) -> str:
    pad = " " * max(0, spec.width - len(text))
    return text + pad if spec.flags & _Flag.MINUS else pad + text


def _convert(conv: str, spec: _Spec, args: Iterator[Any]) -> str:
    bits = _LENGTH_BITS[spec.length]

    if conv in "di":
        value = to_signed(_int_arg(args), bits)
        return _format_integer(abs(value), True, value < 0, _BASE_D, spec)

    if conv in _UNSIGNED_BASES:
        value = to_unsigned(_int_arg(args), bits)
        return _format_integer(value, False, False, _UNSIGNED_BASES[conv], spec)

    if conv == "c":
        arg = _next_arg(args)
        if isinstance(arg, str):
            if len(arg) != 1:
                raise TypeError("%c requires an int or a single character")
            ch = arg
        elif isinstance(arg, int):
            ch = chr(to_unsigned(arg, 8))
        else:
            raise TypeError(f"%c requires an int or a single character, got {type(arg).__name__}")
        return _format_string(ch, spec)

    if conv == "s":
        arg = _next_arg(args)
        if arg is None:
            arg = "(null)"
        elif not isinstance(arg, str):
            raise TypeError(f"%s requires a string, got {type(arg).__name__}")
        text = arg.split("\0", 1)[0]
        if spec.precision >= 0:
            text = text[: spec.precision]
        return _format_string(text, spec)

    if conv == "p":
        arg = _next_arg(args)
        if arg is None:
            arg = 0
        elif not isinstance(arg, int):
            raise TypeError(f"%p requires an int address, got {type(arg).__name__}")
        spec.flags = _Flag.POUND
        return _format_integer(to_unsigned(arg, 32), False, False, _BASE_X, spec)

    if conv in "feEgGn":
        return f"<<no %{conv} in kernel>>"

    return f"<<no %{conv} conversion>>"


def kformat(fmt: str, *args: Any) -> str:
    """Format ARGS according to FMT and return the resulting string.

    Supports the d, i, o, u, x, X, c, s and p conversions with the
    flags -, +, space, #, 0 and ', field width and precision (either
    may be '*'), and the length modifiers hh, h, j, l, ll, t and z.
    Floating-point conversions and %n are rendered as a notice and
    consume no argument.
    """
    remaining = iter(args)
    out: List[str] = []
    pos = 0
    for match in _CONVERSION.finditer(fmt):
        out.append(fmt[pos : match.start()])
        pos = match.end()
        if match.group("percent"):
            out.append("%")
            continue
        spec = _parse_spec(match, remaining)
        conv = match.group("conv")
        if conv is None:
            raise ValueError("incomplete conversion at end of format string")
        out.append(_convert(conv, spec, remaining))
    out.append(fmt[pos:])
    return "".join(out)


def snprintf(buf_size: int, fmt: str, *args: Any) -> Tuple[str, int]:
    """Format as kformat() into a buffer of BUF_SIZE characters.

    Returns the text that fits (at most BUF_SIZE - 1 characters, leaving
    room for a terminator) and the length the full output would have.
    """
    if buf_size < 0:
        raise ValueError(f"buf_size must be non-negative, got {buf_size}")
    full = kformat(fmt, *args)
    stored = full[: buf_size - 1] if buf_size > 0 else ""
    return stored, len(full)


def hex_dump(ofs: int, data: Union[bytes, bytearray, memoryview], ascii: bool = False) -> str:
    """Render DATA as hex bytes, 16 per line, with offsets starting at OFS.

    When ASCII is true, the printable characters are shown alongside,
    with other bytes as '.'.
    """
    if not 0 <= ofs <= UINTPTR_MAX:
        raise ValueError(f"ofs out of range: {ofs}")
    buf = bytes(data)
    lines: List[str] = []
    pos = 0
    while pos < len(buf):
        start = ofs % _HEX_PER_LINE
        n = min(_HEX_PER_LINE - start, len(buf) - pos)
        end = start + n
        chunk = buf[pos : pos + n]

        parts = [f"{round_down(ofs, _HEX_PER_LINE):08x}  ", "   " * start]
        for i, byte in enumerate(chunk, start):
            parts.append(f"{byte:02x}{'-' if i == _HEX_PER_LINE // 2 - 1 else ' '}")
        if ascii:
            parts.append("   " * (_HEX_PER_LINE - end))
            parts.append("|" + " " * start)
            parts.extend(chr(byte) if isprint(byte) else "." for byte in chunk)
            parts.append(" " * (_HEX_PER_LINE - end) + "|")
        parts.append("\n")
        lines.append("".join(parts))

        ofs = (ofs + n) & UINTPTR_MAX
        pos += n
    return "".join(lines)


def human_readable_size(size: int) -> str:
    """Describe SIZE bytes in a human-readable form, e.g. "256 kB"."""
    if not 0 <= size <= UINT64_MAX:
        raise ValueError(f"size out of range: {size}")
    if size == 1:
        return "1 byte"
    factors = ("bytes", "kB", "MB", "GB", "TB")
    unit: Optional[str] = None
    for unit in factors[:-1]:
        if size < 1024:
            break
        size //= 1024
    else:
        unit = factors[-1]
    return f"{size} {unit}"