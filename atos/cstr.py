"""String helpers with the semantics of the system's C string library.

Numbers are 32-bit: unsigned results wrap modulo 2**32, signed inputs must
fit in a signed 32-bit integer.  Case conversion touches ASCII letters only.
"""

from itertools import takewhile

U32_MASK = 0xFFFFFFFF
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
U32_MAX = U32_MASK

_DECIMAL_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_BINARY_DIGITS = frozenset("01")

_UPPER_TABLE = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_LOWER_TABLE = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _parse_leading(text, digits, base):
    result = 0
    for ch in takewhile(digits.__contains__, text):
        result = (result * base + int(ch, base)) & U32_MASK
    return result


def atoi(text):
    """Parse the leading decimal digits of ``text``; 0 if there are none."""
    return _parse_leading(text, _DECIMAL_DIGITS, 10)


def atoi_hex(text):
    """Parse the leading hexadecimal digits of ``text`` (no ``0x`` prefix)."""
    return _parse_leading(text, _HEX_DIGITS, 16)


def atoi_bin(text):
    """Parse the leading binary digits of ``text``."""
    return _parse_leading(text, _BINARY_DIGITS, 2)


def _format_unsigned(value, base):
    if base == 2:
        return format(value, "032b")
    if base == 10:
        return str(value)
    if base == 16:
        # A single hex digit is padded so that a byte always shows two.
        return format(value, "X").rjust(2, "0")
    raise ValueError(f"unsupported base: {base}")


def itoa(value, base):
    """Format a signed 32-bit integer in base 2, 10 or 16.

    Zero is always ``"0"``.  Base 2 gives all 32 bits and base 16 the
    two's complement of negative values; base 10 keeps the sign.
    """
    if not I32_MIN <= value <= I32_MAX:
        raise ValueError(f"value out of signed 32-bit range: {value}")
    if value == 0:
        return "0"
    if base == 10:
        return str(value)
    return _format_unsigned(value & U32_MASK, base)


def itoa_u(value, base):
    """Format an unsigned 32-bit integer in base 2, 10 or 16."""
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"value out of unsigned 32-bit range: {value}")
    if value == 0:
        return "0"
    return _format_unsigned(value, base)


def first_index_of(text, char):
    """Index of the first ``char`` in ``text``, or -1 when absent."""
    for index, ch in enumerate(text):
        if ch == char:
            return index
    return -1


def starts_equal(first, second, n):
    """True when the first ``n`` characters of both strings are equal."""
    return first[:n] == second[:n]


def strnconcat(dest, dest_pos, src, max_len):
    """Write ``src`` into ``dest`` from ``dest_pos`` keeping at most ``max_len`` characters.

    Whatever followed ``dest_pos`` in ``dest`` is replaced.  When
    ``dest_pos`` is not below ``max_len`` the destination is returned
    unchanged.
    """
    if dest_pos >= max_len:
        return dest
    if dest_pos > len(dest):
        raise ValueError("dest_pos lies beyond the end of dest")
    return dest[:dest_pos] + src[: max_len - dest_pos]


def to_upper(text):
    """Upper-case the ASCII letters of ``text``."""
    return text.translate(_UPPER_TABLE)


def to_lower(text):
    """Lower-case the ASCII letters of ``text``."""
    return text.translate(_LOWER_TABLE)