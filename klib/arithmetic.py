"""Fixed-width integer limits and 64-bit division with C semantics."""

CHAR_BIT = 8

SCHAR_MAX = 127
SCHAR_MIN = -SCHAR_MAX - 1
UCHAR_MAX = 255
CHAR_MIN = SCHAR_MIN
CHAR_MAX = SCHAR_MAX

SHRT_MAX = 32767
SHRT_MIN = -SHRT_MAX - 1
USHRT_MAX = 65535

INT_MAX = 2147483647
INT_MIN = -INT_MAX - 1
UINT_MAX = 4294967295

LONG_MAX = 2147483647
LONG_MIN = -LONG_MAX - 1
ULONG_MAX = 4294967295

LLONG_MAX = 9223372036854775807
LLONG_MIN = -LLONG_MAX - 1
ULLONG_MAX = 18446744073709551615

INT8_MAX = 127
INT8_MIN = -INT8_MAX - 1
INT16_MAX = 32767
INT16_MIN = -INT16_MAX - 1
INT32_MAX = 2147483647
INT32_MIN = -INT32_MAX - 1
INT64_MAX = 9223372036854775807
INT64_MIN = -INT64_MAX - 1

UINT8_MAX = 255
UINT16_MAX = 65535
UINT32_MAX = 4294967295
UINT64_MAX = 18446744073709551615

INTPTR_MIN = INT32_MIN
INTPTR_MAX = INT32_MAX
UINTPTR_MAX = UINT32_MAX

INTMAX_MIN = INT64_MIN
INTMAX_MAX = INT64_MAX
UINTMAX_MAX = UINT64_MAX

PTRDIFF_MIN = INT32_MIN
PTRDIFF_MAX = INT32_MAX

SIZE_MAX = UINT32_MAX


def to_unsigned(value: int, bits: int) -> int:
    """Reduce VALUE to an unsigned integer of BITS width, wrapping around."""
    return value & ((1 << bits) - 1)


def to_signed(value: int, bits: int) -> int:
    """Reduce VALUE to a two's-complement integer of BITS width."""
    value = to_unsigned(value, bits)
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} out of range [{low}, {high}]: {value}")


def nlz(x: int) -> int:
    """Return the number of leading zero bits in the nonzero 32-bit X."""
    _check_range("x", x, 1, UINT32_MAX)
    return 32 - x.bit_length()


def udiv64(n: int, d: int) -> int:
    """Divide unsigned 64-bit N by unsigned 64-bit D and return the quotient."""
    _check_range("n", n, 0, UINT64_MAX)
    _check_range("d", d, 0, UINT64_MAX)
    if d == 0:
        raise ZeroDivisionError("division by zero")
    return n // d


def umod64(n: int, d: int) -> int:
    """Return the remainder of unsigned 64-bit N divided by D.

    The result is delivered in 32 bits, so a remainder that does not fit
    is truncated to its low 32 bits.
    """
    return to_unsigned(n - d * udiv64(n, d), 32)


def sdiv64(n: int, d: int) -> int:
    """Divide signed 64-bit N by signed 64-bit D, truncating toward zero."""
    _check_range("n", n, INT64_MIN, INT64_MAX)
    _check_range("d", d, INT64_MIN, INT64_MAX)
    if d == 0:
        raise ZeroDivisionError("division by zero")
    q_abs = abs(n) // abs(d)
    quotient = q_abs if (n < 0) == (d < 0) else -q_abs
    return to_signed(quotient, 64)


def smod64(n: int, d: int) -> int:
    """Return the remainder of signed 64-bit N divided by D.

    The remainder carries the sign of N and is delivered in 32 bits,
    so a remainder that does not fit is truncated.
    """
    return to_signed(n - d * sdiv64(n, d), 32)